"""
Financeiro Service

Financial status transitions of leads: Aguardando Pagamento, Pago and Cancelado.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from indicacoes.application.services.session_service import UserClaims
from indicacoes.core.security import utcnow
from indicacoes.domain.enums import LeadStatus
from indicacoes.domain.financeiro import (
    AtualizacaoStatusException,
    Comprovante,
    ComprovanteNaoEncontradoException,
    ComprovanteObrigatorioException,
    LeadNaoEncontradoException,
    NaoAutorizadoException,
    parse_status_financeiro,
    validar_comprovante,
)
from indicacoes.models import Lead
from indicacoes.persistence.repo import LeadRepository, UserRepository

logger = logging.getLogger(__name__)


@dataclass
class StatusAtualizado:
    new_status: LeadStatus
    message: str


class FinanceiroService:
    def __init__(self, db: Session):
        self.db = db
        self.lead_repo = LeadRepository(db)
        self.user_repo = UserRepository(db)

    def atualizar_status(
        self,
        user: UserClaims | None,
        lead_id: str,
        status: str | None,
        comprovante: Comprovante | None = None,
    ) -> StatusAtualizado:
        """
        Move a lead to a financial status.

        Guards run in order: caller, status, mandatory receipt, receipt rules,
        lead existence. The status change, its timestamp, the referrer bonus
        reversal and the receipt insert are committed together.

        Raises:
            FinanceiroException subclasses, with the HTTP status to report.
        """
        if user is None:
            raise NaoAutorizadoException()

        transicao = parse_status_financeiro(status)

        if transicao.exige_comprovante and comprovante is None:
            raise ComprovanteObrigatorioException()

        if comprovante is not None:
            validar_comprovante(comprovante)

        lead = self.lead_repo.get_by_id(lead_id)
        if lead is None:
            raise LeadNaoEncontradoException()

        try:
            self._aplicar_transicao(lead, transicao, user, comprovante)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Error updating lead status: {e}",
                exc_info=True,
                extra={"lead_id": lead_id, "status": transicao.status.value, "user_id": user.id},
            )
            raise AtualizacaoStatusException()

        logger.info(
            f"Lead status updated to {transicao.status.value}",
            extra={
                "lead_id": lead_id,
                "status": transicao.status.value,
                "user_id": user.id,
                "comprovante": comprovante is not None and transicao.salva_comprovante,
            },
        )

        return StatusAtualizado(
            new_status=transicao.status,
            message=f"Status atualizado para {transicao.status.value} com sucesso",
        )

    def _aplicar_transicao(self, lead: Lead, transicao, user: UserClaims, comprovante: Comprovante | None) -> None:
        now = utcnow()

        lead.status = transicao.status
        setattr(lead, transicao.campo_timestamp, now)

        if transicao.registra_pagador:
            lead.pago_por = user.name

        if transicao.estorna_bonus and lead.user_id_promo_code:
            # Canceled leads no longer count toward the referrer's bonus
            self.user_repo.decrement_bonus(lead.user_id_promo_code)

        if transicao.salva_comprovante and comprovante is not None:
            self.lead_repo.add_comprovante(lead.id, comprovante.to_data_uri())

        self.db.flush()

    def listar_por_status(self, status: LeadStatus) -> list[Lead]:
        return self.lead_repo.list_by_status(status)

    def obter_comprovante(self, lead_id: str) -> str:
        comprovante = self.lead_repo.get_comprovante(lead_id)
        if comprovante is None:
            raise ComprovanteNaoEncontradoException()
        return comprovante
