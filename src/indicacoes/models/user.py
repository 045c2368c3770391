"""User and session models."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from indicacoes.core.database import Base
from indicacoes.domain.enums import Cargo, PixType
from indicacoes.models.base import TimestampMixin, enum_column_type


class User(Base, TimestampMixin):
    """
    Staff user: internal and external salespeople, financial team and admins.

    Users created through Discord login carry provider + provider_user_id and
    have no password.
    """

    __tablename__ = "user"

    id = Column(Text, primary_key=True)
    name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=False)
    password = Column(String(255), nullable=True)  # bcrypt hash
    job = Column(enum_column_type(Cargo, "user_job"), nullable=False, default=Cargo.VENDEDOR_EXTERNO)

    cpf = Column(String(11), unique=True, nullable=True)
    telefone = Column(String(11), nullable=True)
    promo_code = Column(String(15), unique=True, nullable=True)
    pix_type = Column(enum_column_type(PixType, "user_pix_type"), nullable=True)
    pix_code = Column(Text, unique=True, nullable=True)
    bonus_indicacao = Column(Integer, nullable=False, default=0)

    # Endereço
    cep = Column(String(8), nullable=True)
    rua = Column(String(256), nullable=True)
    numero_casa = Column(Integer, nullable=True)
    complemento = Column(String(256), nullable=True)
    bairro = Column(String(256), nullable=True)
    cidade = Column(String(256), nullable=True)
    estado = Column(String(2), nullable=True)

    status = Column(Boolean, nullable=False, default=True)  # account enabled

    # OAuth
    provider = Column(String(50), nullable=True)
    provider_user_id = Column(String(100), nullable=True)
    avatar_url = Column(Text, nullable=True)

    __table_args__ = (
        Index("idx_user_email", "email"),
        Index("idx_user_provider", "provider", "provider_user_id"),
    )


class UserSession(Base):
    """Login session referenced by the session cookie."""

    __tablename__ = "session"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, ForeignKey("user.id"), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
