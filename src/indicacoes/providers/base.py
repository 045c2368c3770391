"""
Identity provider base types.
"""

from dataclasses import dataclass, field
from typing import Any


class ProviderError(Exception):
    """Error talking to an identity provider."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ):
        super().__init__(message)
        self.code = code
        self.details = details or {}
        self.retryable = retryable


class OAuth2RequestError(ProviderError):
    """The token endpoint answered with an OAuth 2.0 error (invalid_grant, ...)."""


@dataclass
class OAuthTokens:
    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    refresh_token: str | None = None
    scope: str | None = None
    raw_response: dict[str, Any] = field(default_factory=dict)
