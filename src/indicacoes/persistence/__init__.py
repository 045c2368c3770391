from indicacoes.persistence.repo import LeadRepository, UserRepository

__all__ = [
    "LeadRepository",
    "UserRepository",
]
