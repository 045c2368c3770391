import secrets
import string
from datetime import datetime, timezone

import bcrypt
from jose import JWTError, jwt

from indicacoes.core.config import get_settings

_ID_ALPHABET = string.ascii_lowercase + string.digits


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a bcrypt hash."""
    if isinstance(hashed_password, str):
        hashed_password = hashed_password.encode("utf-8")

    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password,
    )


def get_password_hash(password: str) -> str:
    """Generate a bcrypt hash for a password."""
    salt = bcrypt.gensalt(rounds=12)
    hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
    return hashed.decode("utf-8")


def generate_id(length: int) -> str:
    """Random identifier made of lowercase letters and digits."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def create_session_token(session_id: str) -> str:
    """
    Sign a session id into the value stored in the session cookie.

    No "exp" claim: expiry lives on the session row so it can be extended.
    """
    settings = get_settings()
    to_encode = {"sub": session_id}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str) -> str | None:
    """Return the session id carried by a cookie value, or None if it is invalid."""
    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    return payload.get("sub")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
