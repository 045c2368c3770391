"""Lead and receipt models."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, String, Text

from indicacoes.core.database import Base
from indicacoes.domain.enums import LeadStatus
from indicacoes.models.base import TimestampMixin, enum_column_type


class Lead(Base, TimestampMixin):
    """
    Referral submission.

    Leads are created by the ingestion flow in status Pendente. Every
    transition fills its own timestamp and never clears the others, so the
    history of a lead can be read from which timestamps are set.
    """

    __tablename__ = "leads"

    id = Column(Text, primary_key=True)
    full_name = Column(String(255), nullable=False)
    cpf_cnpj = Column(String(14), unique=True, nullable=False)
    status = Column(
        enum_column_type(LeadStatus, "leads_status"),
        nullable=False,
        default=LeadStatus.PENDENTE,
    )
    promo_code = Column(String(15), nullable=True)
    user_id_promo_code = Column(Text, ForeignKey("user.id"), nullable=True)  # referrer

    attended_at = Column(DateTime(timezone=True), nullable=True)
    pago_por = Column(String(255), nullable=True)
    pago_em = Column(DateTime(timezone=True), nullable=True)
    aguardando_pagamento_em = Column(DateTime(timezone=True), nullable=True)
    cancelado_em = Column(DateTime(timezone=True), nullable=True)

    __table_args__ = (
        Index("idx_leads_status_created", "status", "created_at"),
    )


class LeadComprovante(Base):
    """Payment receipt stored as a base64 data URI."""

    __tablename__ = "leads_comprovante"

    id = Column(Text, primary_key=True)
    leads_id = Column(Text, ForeignKey("leads.id"), nullable=False, index=True)
    comprovante = Column(Text, nullable=False)
