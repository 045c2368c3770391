"""Web-specific dependencies for cookie-based authentication."""

from typing import Optional

from fastapi import Depends, Request, Response
from sqlalchemy.orm import Session

from indicacoes.application.services.session_service import SessionService, UserClaims
from indicacoes.core.config import get_settings
from indicacoes.core.database import get_db
from indicacoes.providers.discord import DiscordOAuthProvider


def set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        token,
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 60 * 60,
        httponly=True,
        samesite="lax",
        secure=settings.COOKIE_SECURE,
        path="/",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(get_settings().SESSION_COOKIE_NAME, path="/")


async def get_optional_web_user(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
) -> Optional[UserClaims]:
    """
    Get current user from the session cookie if present and valid.
    Returns None if not authenticated (doesn't raise exception).
    """
    token = request.cookies.get(get_settings().SESSION_COOKIE_NAME)
    if not token:
        return None

    result = SessionService(db).validate_token(token)
    if result.user is None:
        return None

    if result.fresh:
        set_session_cookie(response, token)

    return UserClaims.from_user(result.user)


async def get_discord_provider():
    """Discord OAuth client, closed after the request."""
    provider = DiscordOAuthProvider.from_settings()
    try:
        yield provider
    finally:
        await provider.close()
