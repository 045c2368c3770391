"""
API Payload Models

Pydantic models for the JSON bodies returned by the web layer.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from indicacoes.domain.enums import LeadStatus


class ActionSuccess(BaseModel):
    success: bool = True
    message: str
    newStatus: str


class ActionFailure(BaseModel):
    success: bool = False
    message: str


class LeadOut(BaseModel):
    """Lead as listed in the financial views."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str = Field(..., serialization_alias="fullName")
    cpf_cnpj: str = Field(..., serialization_alias="cpfCnpj")
    status: LeadStatus
    promo_code: str | None = Field(None, serialization_alias="promoCode")
    user_id_promo_code: str | None = Field(None, serialization_alias="userIdPromoCode")
    created_at: datetime | None = Field(None, serialization_alias="createdAt")
    pago_por: str | None = Field(None, serialization_alias="pagoPor")
    pago_em: datetime | None = Field(None, serialization_alias="pagoEm")
    aguardando_pagamento_em: datetime | None = Field(None, serialization_alias="aguardandoPagamentoEm")
    cancelado_em: datetime | None = Field(None, serialization_alias="canceladoEm")


class ComprovanteOut(BaseModel):
    comprovante: str


class StatusOptionOut(BaseModel):
    value: str
    label: str
