"""
Database models.

Importing this package registers every table on ``Base.metadata``.
"""

from indicacoes.models.lead import Lead, LeadComprovante
from indicacoes.models.user import User, UserSession

__all__ = [
    "Lead",
    "LeadComprovante",
    "User",
    "UserSession",
]
