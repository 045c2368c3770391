from indicacoes.domain.identity.exceptions import (
    CredenciaisInvalidasException,
    EmailAusenteException,
    EmailNaoVerificadoException,
    IdentityException,
)

__all__ = [
    "CredenciaisInvalidasException",
    "EmailAusenteException",
    "EmailNaoVerificadoException",
    "IdentityException",
]
