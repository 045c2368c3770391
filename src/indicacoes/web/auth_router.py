"""Login routes: Discord OAuth and email/password sessions."""

import logging
import secrets
from typing import Optional

from fastapi import APIRouter, Cookie, Depends, Form, Query, Request
from fastapi.responses import JSONResponse, RedirectResponse, Response
from sqlalchemy.orm import Session

from indicacoes.application.services.identity_service import IdentityService
from indicacoes.application.services.session_service import SessionService
from indicacoes.core.config import get_settings
from indicacoes.core.database import get_db
from indicacoes.domain.identity import IdentityException
from indicacoes.providers.base import OAuth2RequestError
from indicacoes.providers.discord import DiscordOAuthProvider
from indicacoes.web.deps import clear_session_cookie, get_discord_provider, set_session_cookie

logger = logging.getLogger(__name__)

DISCORD_STATE_COOKIE = "discord_oauth_state"

auth_router = APIRouter()


def _state_matches(state: Optional[str], stored_state: Optional[str]) -> bool:
    if not state or not stored_state:
        return False
    return secrets.compare_digest(state.encode(), stored_state.encode())


@auth_router.get("/login/discord")
async def discord_login(provider: DiscordOAuthProvider = Depends(get_discord_provider)):
    """Redirect to Discord's consent screen."""
    state = secrets.token_urlsafe(24)
    response = RedirectResponse(url=provider.create_authorization_url(state), status_code=302)
    response.set_cookie(
        DISCORD_STATE_COOKIE,
        state,
        max_age=60 * 10,
        httponly=True,
        samesite="lax",
        secure=get_settings().COOKIE_SECURE,
        path="/",
    )
    return response


@auth_router.get("/login/discord/callback")
async def discord_callback(
    code: Optional[str] = Query(None),
    state: Optional[str] = Query(None),
    stored_state: Optional[str] = Cookie(None, alias=DISCORD_STATE_COOKIE),
    db: Session = Depends(get_db),
    provider: DiscordOAuthProvider = Depends(get_discord_provider),
):
    """
    Finish the Discord login.

    Flow:
    1. Require code and a state matching the state cookie
    2. Exchange the code and fetch the Discord profile
    3. Find or create the local user
    4. Start a session and redirect home
    """
    if not code or not _state_matches(state, stored_state):
        return Response("Invalid OAuth state or code verifier", status_code=400)

    try:
        user_id = await IdentityService(db, provider).authenticate_discord(code)
        new_session = SessionService(db).create_session(user_id)
    except IdentityException as e:
        logger.warning(f"Discord login refused: {e.message}")
        return Response(e.message, status_code=e.status_code)
    except OAuth2RequestError as e:
        logger.warning(f"Discord OAuth error: {e}", extra={"code": e.code})
        return Response(status_code=400)
    except Exception as e:
        logger.error(f"Error during Discord login: {e}", exc_info=True)
        return Response(status_code=500)

    response = RedirectResponse(url="/", status_code=302)
    set_session_cookie(response, new_session.token)
    response.delete_cookie(DISCORD_STATE_COOKIE, path="/")
    return response


@auth_router.post("/login")
async def password_login(
    email: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    """Start a session with email and password."""
    try:
        new_session = SessionService(db).login_with_password(email.strip().lower(), password)
    except IdentityException as e:
        return JSONResponse({"success": False, "message": e.message}, status_code=e.status_code)

    response = RedirectResponse(url="/", status_code=303)
    set_session_cookie(response, new_session.token)
    return response


@auth_router.post("/logout")
async def logout(request: Request, db: Session = Depends(get_db)):
    """End the current session."""
    SessionService(db).invalidate(request.cookies.get(get_settings().SESSION_COOKIE_NAME))
    response = RedirectResponse(url="/login", status_code=303)
    clear_session_cookie(response)
    return response
