"""
Closed value sets shared by models, services and the web layer.
"""

from enum import Enum


class LeadStatus(str, Enum):
    """Status of a lead across the operational and financial lifecycles."""

    PENDENTE = "Pendente"
    SENDO_ATENDIDO = "Sendo Atendido"
    FINALIZADO = "Finalizado"
    SEM_SUCESSO = "Sem Sucesso"
    AGUARDANDO_PAGAMENTO = "Aguardando Pagamento"
    PAGO = "Pago"
    CANCELADO = "Cancelado"

    def __str__(self) -> str:
        return self.value


class Cargo(str, Enum):
    """Job role of a staff user."""

    VENDEDOR_INTERNO = "Vendedor Interno"
    VENDEDOR_EXTERNO = "Vendedor Externo"
    FINANCEIRO = "Financeiro"
    ADMIN = "Admin"

    def __str__(self) -> str:
        return self.value


class PixType(str, Enum):
    CPF = "CPF"
    CNPJ = "CNPJ"
    EMAIL = "Email"
    TELEFONE = "Telefone"
    CHAVE_ALEATORIA = "Chave Aleatória"

    def __str__(self) -> str:
        return self.value


def enum_values(enum_cls: type[Enum]) -> list[str]:
    """Values persisted for an enum column."""
    return [member.value for member in enum_cls]
