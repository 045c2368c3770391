"""
Session Service

Database-backed login sessions. The cookie carries a signed token whose
subject is the session id; the session row decides whether it is still valid.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from sqlalchemy.orm import Session

from indicacoes.core.config import get_settings
from indicacoes.core.security import (
    create_session_token,
    decode_session_token,
    generate_id,
    get_password_hash,
    utcnow,
    verify_password,
)
from indicacoes.domain.enums import Cargo
from indicacoes.domain.identity import CredenciaisInvalidasException
from indicacoes.models import User, UserSession
from indicacoes.persistence.repo import UserRepository

logger = logging.getLogger(__name__)

SESSION_ID_LENGTH = 40


@dataclass
class UserClaims:
    """Logged-in user as seen by request handlers."""

    id: str
    name: str
    email: str
    cargo: str

    @classmethod
    def from_user(cls, user: User) -> "UserClaims":
        return cls(id=user.id, name=user.name, email=user.email, cargo=str(user.job))


@dataclass
class NewSession:
    session_id: str
    token: str
    expires_at: datetime


@dataclass
class SessionValidation:
    session: UserSession | None = None
    user: User | None = None
    # True when the expiry was pushed forward and the cookie must be re-sent
    fresh: bool = False


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SessionService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)
        self.lifetime = timedelta(days=get_settings().SESSION_EXPIRE_DAYS)

    def create_session(self, user_id: str) -> NewSession:
        """Create and commit a session for ``user_id``."""
        session_id = generate_id(SESSION_ID_LENGTH)
        expires_at = utcnow() + self.lifetime
        self.repo.create_session(session_id, user_id, expires_at)
        self.db.commit()

        logger.info("Session created", extra={"user_id": user_id})
        return NewSession(
            session_id=session_id,
            token=create_session_token(session_id),
            expires_at=expires_at,
        )

    def validate_token(self, token: str | None) -> SessionValidation:
        """
        Resolve a cookie value to its session and user.

        Expired sessions are deleted. A session used during the second half of
        its lifetime is extended to a full lifetime again.
        """
        if not token:
            return SessionValidation()

        session_id = decode_session_token(token)
        if not session_id:
            return SessionValidation()

        session = self.repo.get_session(session_id)
        if session is None:
            return SessionValidation()

        now = utcnow()
        expires_at = _as_utc(session.expires_at)
        if expires_at <= now:
            self.repo.delete_session(session_id)
            self.db.commit()
            return SessionValidation()

        user = self.repo.get_by_id(session.user_id)
        if user is None or not user.status:
            return SessionValidation()

        fresh = False
        if expires_at - now < self.lifetime / 2:
            session.expires_at = now + self.lifetime
            self.db.commit()
            fresh = True

        return SessionValidation(session=session, user=user, fresh=fresh)

    def invalidate(self, token: str | None) -> None:
        session_id = decode_session_token(token) if token else None
        if not session_id:
            return
        self.repo.delete_session(session_id)
        self.db.commit()

    def login_with_password(self, email: str, password: str) -> NewSession:
        """
        Start a session for an email/password pair.

        Raises:
            CredenciaisInvalidasException: unknown email, wrong password,
                OAuth-only account or disabled account.
        """
        user = self.repo.get_by_email(email)
        if user is None or not user.password or not user.status:
            raise CredenciaisInvalidasException()
        if not verify_password(password, user.password):
            raise CredenciaisInvalidasException()
        return self.create_session(user.id)

    def create_staff_user(
        self,
        email: str,
        name: str,
        password: str,
        cargo: Cargo,
        last_name: str | None = None,
    ) -> User:
        """Create a password-based staff account with a fresh promo code."""
        user = self.repo.create_user(
            user_id=generate_id(15),
            name=name,
            last_name=last_name,
            email=email,
            password=get_password_hash(password),
            job=cargo,
            promo_code=generate_id(8),
        )
        self.db.commit()
        return user
