"""
Discord OAuth Provider

Authorization-code flow against Discord: builds the authorize URL, exchanges
the code for tokens and fetches the logged-in user's profile.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from indicacoes.core.config import get_settings
from indicacoes.providers.base import OAuth2RequestError, OAuthTokens, ProviderError

logger = logging.getLogger(__name__)

DISCORD_API_BASE_URL = "https://discord.com/api"
DISCORD_AUTHORIZE_URL = "https://discord.com/oauth2/authorize"
DISCORD_TOKEN_URL = f"{DISCORD_API_BASE_URL}/oauth2/token"
DISCORD_CDN_URL = "https://cdn.discordapp.com"


@dataclass
class DiscordUser:
    """Subset of the /users/@me payload we rely on."""

    id: str
    username: str
    email: str | None = None
    verified: bool = False
    avatar: str | None = None
    global_name: str | None = None
    locale: str | None = None
    raw_payload: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "DiscordUser":
        return cls(
            id=str(data["id"]),
            username=data.get("username", ""),
            email=data.get("email") or None,
            verified=bool(data.get("verified", False)),
            avatar=data.get("avatar"),
            global_name=data.get("global_name"),
            locale=data.get("locale"),
            raw_payload=data,
        )

    @property
    def avatar_url(self) -> str | None:
        if not self.avatar:
            return None
        return f"{DISCORD_CDN_URL}/avatars/{self.id}/{self.avatar}.png"


class DiscordOAuthProvider:
    """Discord OAuth 2.0 client."""

    name = "discord"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_settings(cls) -> "DiscordOAuthProvider":
        settings = get_settings()
        return cls(
            client_id=settings.DISCORD_CLIENT_ID,
            client_secret=settings.DISCORD_CLIENT_SECRET,
            redirect_uri=settings.DISCORD_REDIRECT_URI,
            timeout=settings.HTTP_TIMEOUT,
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    def create_authorization_url(self, state: str, scopes: tuple[str, ...] = ("identify", "email")) -> str:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": " ".join(scopes),
            "state": state,
        }
        return str(httpx.URL(DISCORD_AUTHORIZE_URL, params=params))

    async def validate_authorization_code(self, code: str) -> OAuthTokens:
        """
        Exchange an authorization code for tokens.

        Raises:
            OAuth2RequestError: Discord rejected the code (error body from the token endpoint).
            ProviderError: transport failure or unexpected response.
        """
        client = await self._get_client()
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }

        try:
            response = await client.post(
                DISCORD_TOKEN_URL,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.RequestError as e:
            logger.error(f"Discord token request failed: {e}")
            raise ProviderError(message=f"HTTP request failed: {e}", code="HTTP_ERROR", retryable=True)

        response_data = self._json(response)

        if "error" in response_data:
            raise OAuth2RequestError(
                message=response_data.get("error_description") or response_data["error"],
                code=str(response_data["error"]),
                details=response_data,
            )
        if response.status_code >= 400 or "access_token" not in response_data:
            raise ProviderError(
                message="Unexpected token response",
                code=str(response.status_code),
                details=response_data,
                retryable=response.status_code >= 500,
            )

        return OAuthTokens(
            access_token=response_data["access_token"],
            token_type=response_data.get("token_type", "Bearer"),
            expires_in=response_data.get("expires_in"),
            refresh_token=response_data.get("refresh_token"),
            scope=response_data.get("scope"),
            raw_response=response_data,
        )

    async def get_user(self, access_token: str) -> DiscordUser:
        """Fetch the profile of the user owning ``access_token``."""
        client = await self._get_client()

        try:
            response = await client.get(
                f"{DISCORD_API_BASE_URL}/users/@me",
                headers={"Authorization": f"Bearer {access_token}"},
            )
        except httpx.RequestError as e:
            logger.error(f"Discord profile request failed: {e}")
            raise ProviderError(message=f"HTTP request failed: {e}", code="HTTP_ERROR", retryable=True)

        response_data = self._json(response)

        if response.status_code >= 400:
            raise ProviderError(
                message=response_data.get("message", "Unknown error"),
                code=str(response_data.get("code", response.status_code)),
                details=response_data,
                retryable=response.status_code >= 500,
            )

        return DiscordUser.from_api(response_data)

    @staticmethod
    def _json(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            raise ProviderError(
                message="Invalid JSON from Discord",
                code=str(response.status_code),
                retryable=response.status_code >= 500,
            )
        if not isinstance(data, dict):
            raise ProviderError(message="Unexpected payload from Discord", code=str(response.status_code))
        return data
