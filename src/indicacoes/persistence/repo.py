"""
Indicações Repository

Queries and writes for users, sessions, leads and receipts.
Methods never commit; the calling service owns the transaction.
"""

from datetime import datetime
from uuid import uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from indicacoes.domain.enums import Cargo, LeadStatus
from indicacoes.models import Lead, LeadComprovante, User, UserSession


class UserRepository:
    """Repository for users and their sessions."""

    def __init__(self, db: Session):
        self.db = db

    # =========================================================================
    # Users
    # =========================================================================

    def get_by_id(self, user_id: str) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def get_by_email(self, email: str) -> User | None:
        """First user registered with this email (there may be several)."""
        return self.db.query(User).filter(User.email == email).order_by(User.created_at).first()

    def list_by_email(self, email: str) -> list[User]:
        """Every user registered with this email, ignoring letter case."""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.lower())
            .order_by(User.created_at)
            .all()
        )

    def email_is_used(self, email: str) -> bool:
        return self.db.query(User.id).filter(User.email == email).first() is not None

    def get_by_provider(self, email: str, provider: str, provider_user_id: str) -> User | None:
        """User matching email and external identity."""
        return (
            self.db.query(User)
            .filter(
                User.email == email,
                User.provider == provider,
                User.provider_user_id == provider_user_id,
            )
            .first()
        )

    def create_user(
        self,
        user_id: str,
        name: str,
        email: str,
        job: Cargo = Cargo.VENDEDOR_EXTERNO,
        promo_code: str | None = None,
        password: str | None = None,
        last_name: str | None = None,
        provider: str | None = None,
        provider_user_id: str | None = None,
        avatar_url: str | None = None,
    ) -> User:
        user = User(
            id=user_id,
            name=name,
            last_name=last_name,
            email=email,
            password=password,
            job=job,
            promo_code=promo_code,
            provider=provider,
            provider_user_id=provider_user_id,
            avatar_url=avatar_url,
            bonus_indicacao=0,
            status=True,
        )
        self.db.add(user)
        return user

    def decrement_bonus(self, user_id: str) -> User | None:
        """Take one referral bonus from a user, never going below zero."""
        user = self.get_by_id(user_id)
        if user is None:
            return None
        user.bonus_indicacao = max(0, (user.bonus_indicacao or 0) - 1)
        return user

    # =========================================================================
    # Sessions
    # =========================================================================

    def get_session(self, session_id: str) -> UserSession | None:
        return self.db.query(UserSession).filter(UserSession.id == session_id).first()

    def create_session(self, session_id: str, user_id: str, expires_at: datetime) -> UserSession:
        session = UserSession(id=session_id, user_id=user_id, expires_at=expires_at)
        self.db.add(session)
        return session

    def delete_session(self, session_id: str) -> int:
        return self.db.query(UserSession).filter(UserSession.id == session_id).delete()

    def delete_expired_sessions(self, now: datetime) -> int:
        return self.db.query(UserSession).filter(UserSession.expires_at <= now).delete()


class LeadRepository:
    """Repository for leads and payment receipts."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, lead_id: str) -> Lead | None:
        return self.db.query(Lead).filter(Lead.id == lead_id).first()

    def list_by_status(self, status: LeadStatus) -> list[Lead]:
        """Every lead in a status, newest first."""
        return (
            self.db.query(Lead)
            .filter(Lead.status == status)
            .order_by(Lead.created_at.desc())
            .all()
        )

    def add_comprovante(self, lead_id: str, comprovante: str) -> LeadComprovante:
        row = LeadComprovante(id=str(uuid4()), leads_id=lead_id, comprovante=comprovante)
        self.db.add(row)
        return row

    def get_comprovante(self, lead_id: str) -> str | None:
        row = (
            self.db.query(LeadComprovante.comprovante)
            .filter(LeadComprovante.leads_id == lead_id)
            .first()
        )
        return row[0] if row else None

    def count_comprovantes(self, lead_id: str) -> int:
        return self.db.query(LeadComprovante).filter(LeadComprovante.leads_id == lead_id).count()
