"""Payment receipt (comprovante) value object and its validation rules."""

import base64
from dataclasses import dataclass

from indicacoes.domain.financeiro.exceptions import ComprovanteInvalidoException

TIPOS_PERMITIDOS = frozenset({"image/jpeg", "image/png", "image/webp", "application/pdf"})
TAMANHO_MAXIMO = 5 * 1024 * 1024  # 5MB


@dataclass(frozen=True)
class Comprovante:
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_uri(self) -> str:
        payload = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{payload}"


def validar_comprovante(comprovante: Comprovante) -> None:
    """Raise ComprovanteInvalidoException naming the first rule the file breaks."""
    if comprovante.content_type not in TIPOS_PERMITIDOS:
        raise ComprovanteInvalidoException("Formato de arquivo inválido")
    if comprovante.size > TAMANHO_MAXIMO:
        raise ComprovanteInvalidoException("Arquivo deve ter no máximo 5MB")


def decode_data_uri(data_uri: str) -> tuple[str, bytes]:
    """Split a ``data:<mime>;base64,<payload>`` string into mime type and bytes."""
    header, _, payload = data_uri.partition(",")
    if not header.startswith("data:") or not header.endswith(";base64"):
        raise ValueError("Not a base64 data URI")
    mime = header[len("data:"):-len(";base64")]
    return mime, base64.b64decode(payload)
