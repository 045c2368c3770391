from indicacoes.application.services.financeiro_service import FinanceiroService, StatusAtualizado
from indicacoes.application.services.identity_service import IdentityService
from indicacoes.application.services.session_service import (
    NewSession,
    SessionService,
    SessionValidation,
    UserClaims,
)

__all__ = [
    "FinanceiroService",
    "IdentityService",
    "NewSession",
    "SessionService",
    "SessionValidation",
    "StatusAtualizado",
    "UserClaims",
]
