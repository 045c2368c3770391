"""
Identity Providers

OAuth clients used to log staff users in.
"""

from indicacoes.providers.base import OAuth2RequestError, OAuthTokens, ProviderError
from indicacoes.providers.discord import DiscordOAuthProvider, DiscordUser

__all__ = [
    "DiscordOAuthProvider",
    "DiscordUser",
    "OAuth2RequestError",
    "OAuthTokens",
    "ProviderError",
]
