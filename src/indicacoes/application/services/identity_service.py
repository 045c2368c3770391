"""
Identity Service

Maps an external (Discord) identity to a local user, creating the user when
the email/provider pair is not known yet.
"""

import logging

from sqlalchemy.orm import Session

from indicacoes.core.security import generate_id
from indicacoes.domain.enums import Cargo
from indicacoes.domain.identity import EmailAusenteException, EmailNaoVerificadoException
from indicacoes.persistence.repo import UserRepository
from indicacoes.providers.discord import DiscordOAuthProvider, DiscordUser

logger = logging.getLogger(__name__)


class IdentityService:
    def __init__(self, db: Session, provider: DiscordOAuthProvider | None = None):
        self.db = db
        self.provider = provider
        self.repo = UserRepository(db)

    async def authenticate_discord(self, code: str) -> str:
        """
        Run the code exchange and profile fetch, then resolve the local user id.

        Raises:
            OAuth2RequestError: Discord rejected the authorization code.
            ProviderError: other failures talking to Discord.
            IdentityException: profile without a usable email.
        """
        tokens = await self.provider.validate_authorization_code(code)
        discord_user = await self.provider.get_user(tokens.access_token)
        return self.resolve_discord_user(discord_user)

    def resolve_discord_user(self, discord_user: DiscordUser) -> str:
        """
        Return the id of the local user for a Discord profile.

        The email must be present and verified; nothing is written otherwise.
        A new user is created when the email is unknown, or when it is known
        but not linked to this Discord account.
        """
        if not discord_user.email:
            raise EmailAusenteException()

        if not discord_user.verified:
            raise EmailNaoVerificadoException()

        if self.repo.email_is_used(discord_user.email):
            existing = self.repo.get_by_provider(
                email=discord_user.email,
                provider=DiscordOAuthProvider.name,
                provider_user_id=discord_user.id,
            )
            if existing is not None:
                return existing.id

            # Email registered through another login method
            return self._create_user(discord_user, promo_code=generate_id(8))

        return self._create_user(discord_user, promo_code=generate_id(15))

    def _create_user(self, discord_user: DiscordUser, promo_code: str) -> str:
        user_id = discord_user.email + generate_id(10)
        self.repo.create_user(
            user_id=user_id,
            name=discord_user.username,
            email=discord_user.email,
            job=Cargo.VENDEDOR_EXTERNO,
            promo_code=promo_code,
            provider=DiscordOAuthProvider.name,
            provider_user_id=discord_user.id,
            avatar_url=discord_user.avatar_url,
        )
        self.db.commit()

        logger.info(
            "User registered through Discord",
            extra={"user_id": user_id, "discord_id": discord_user.id},
        )
        return user_id
