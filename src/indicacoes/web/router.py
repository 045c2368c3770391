"""Routes for the financial team: status updates, listings and receipts."""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, Header, HTTPException, Query, Response, UploadFile
from sqlalchemy.orm import Session

from indicacoes.application.services.financeiro_service import FinanceiroService
from indicacoes.application.services.session_service import UserClaims
from indicacoes.contracts.payloads import (
    ActionFailure,
    ActionSuccess,
    ComprovanteOut,
    LeadOut,
    StatusOptionOut,
)
from indicacoes.core.config import get_settings
from indicacoes.core.database import get_db
from indicacoes.domain.enums import LeadStatus
from indicacoes.domain.financeiro import (
    TAMANHO_MAXIMO,
    Comprovante,
    ComprovanteNaoEncontradoException,
    FinanceiroException,
)
from indicacoes.domain.status_por_cargo import get_status_por_cargo
from indicacoes.web.deps import get_optional_web_user

logger = logging.getLogger(__name__)

web_router = APIRouter()

# Listing names used by the financial API
LISTAS_FINANCEIRAS = {
    "aguardando": LeadStatus.AGUARDANDO_PAGAMENTO,
    "pagos": LeadStatus.PAGO,
}


def _fail(response: Response, status_code: int, message: str) -> dict[str, Any]:
    response.status_code = status_code
    return ActionFailure(message=message).model_dump()


def _leads_json(leads) -> list[dict[str, Any]]:
    return [LeadOut.model_validate(lead).model_dump(mode="json", by_alias=True) for lead in leads]


async def _read_comprovante(upload: Optional[UploadFile]) -> Optional[Comprovante]:
    """
    Empty file inputs are sent without a filename; treat them as no file.

    At most one byte over the size limit is read, enough for validation to
    reject oversized files.
    """
    if upload is None or not upload.filename:
        return None
    data = await upload.read(TAMANHO_MAXIMO + 1)
    if not data:
        return None
    return Comprovante(content_type=upload.content_type or "application/octet-stream", data=data)


# =============================================================================
# Financeiro
# =============================================================================

@web_router.get("/financeiro")
async def financeiro_page(
    response: Response,
    user: Optional[UserClaims] = Depends(get_optional_web_user),
    db: Session = Depends(get_db),
):
    """Leads awaiting payment and paid leads for the financial page."""
    if user is None:
        return _fail(response, 401, "Não autorizado")

    service = FinanceiroService(db)
    return {
        "leads": {
            "aguardandoPagamento": _leads_json(service.listar_por_status(LeadStatus.AGUARDANDO_PAGAMENTO)),
            "pagos": _leads_json(service.listar_por_status(LeadStatus.PAGO)),
        }
    }


@web_router.post("/financeiro/update-status")
async def update_status(
    response: Response,
    id: str = Form(""),
    status: str = Form(""),
    comprovante: Optional[UploadFile] = File(None),
    user: Optional[UserClaims] = Depends(get_optional_web_user),
    db: Session = Depends(get_db),
):
    """Change the financial status of a lead, optionally attaching a receipt."""
    service = FinanceiroService(db)

    try:
        arquivo = await _read_comprovante(comprovante) if user is not None else None
        result = service.atualizar_status(
            user=user,
            lead_id=id,
            status=status,
            comprovante=arquivo,
        )
    except FinanceiroException as e:
        return _fail(response, e.status_code, e.message)
    except Exception as e:
        logger.error(f"Error updating status: {e}", exc_info=True, extra={"lead_id": id})
        return _fail(response, 500, "Erro ao atualizar status")

    return ActionSuccess(message=result.message, newStatus=result.new_status.value).model_dump()


# =============================================================================
# API
# =============================================================================

@web_router.get("/api/indicacoes/financeiro/comprovante/{lead_id}", response_model=ComprovanteOut)
async def get_comprovante(lead_id: str, db: Session = Depends(get_db)):
    """Receipt of a paid lead as a data URI."""
    try:
        comprovante = FinanceiroService(db).obter_comprovante(lead_id)
    except ComprovanteNaoEncontradoException as e:
        raise HTTPException(status_code=404, detail=e.message)
    except Exception as e:
        logger.error(f"Error fetching comprovante: {e}", exc_info=True, extra={"lead_id": lead_id})
        raise HTTPException(status_code=500, detail="Erro ao buscar comprovante")

    return ComprovanteOut(comprovante=comprovante)


@web_router.get("/api/indicacoes/financeiro/{lista}")
async def list_financeiro(
    lista: str,
    api_key: Optional[str] = Header(None, alias="API-KEY"),
    db: Session = Depends(get_db),
):
    """Leads of one financial listing ("aguardando" or "pagos"), newest first."""
    expected = get_settings().SITE_CHAVE_API
    if not expected or api_key != expected:
        raise HTTPException(status_code=401, detail="Não autorizado")

    status = LISTAS_FINANCEIRAS.get(lista)
    if status is None:
        raise HTTPException(status_code=404, detail="Lista não encontrada")

    return _leads_json(FinanceiroService(db).listar_por_status(status))


@web_router.get("/api/status-por-cargo", response_model=list[StatusOptionOut])
async def status_por_cargo(cargo: str = Query(...)):
    """Status options a role may assign."""
    return [StatusOptionOut(value=o.value, label=o.label) for o in get_status_por_cargo(cargo)]
