"""
Financial status transitions.

Each target status the financial team may assign maps to the timestamp field
it sets on the lead and to the side effects it triggers.
"""

from dataclasses import dataclass
from types import MappingProxyType

from indicacoes.domain.enums import LeadStatus
from indicacoes.domain.financeiro.exceptions import StatusInvalidoException


@dataclass(frozen=True)
class TransicaoFinanceira:
    status: LeadStatus
    campo_timestamp: str
    registra_pagador: bool = False
    exige_comprovante: bool = True
    salva_comprovante: bool = False
    estorna_bonus: bool = False


TRANSICOES_FINANCEIRAS: MappingProxyType[LeadStatus, TransicaoFinanceira] = MappingProxyType(
    {
        LeadStatus.AGUARDANDO_PAGAMENTO: TransicaoFinanceira(
            status=LeadStatus.AGUARDANDO_PAGAMENTO,
            campo_timestamp="aguardando_pagamento_em",
        ),
        LeadStatus.PAGO: TransicaoFinanceira(
            status=LeadStatus.PAGO,
            campo_timestamp="pago_em",
            registra_pagador=True,
            salva_comprovante=True,
        ),
        LeadStatus.CANCELADO: TransicaoFinanceira(
            status=LeadStatus.CANCELADO,
            campo_timestamp="cancelado_em",
            exige_comprovante=False,
            estorna_bonus=True,
        ),
    }
)


def parse_status_financeiro(value: str | None) -> TransicaoFinanceira:
    """
    Turn an untrusted status string into its financial transition.

    Raises:
        StatusInvalidoException: value is not one of the financial statuses.
    """
    try:
        status = LeadStatus(value)
    except ValueError:
        raise StatusInvalidoException()

    transicao = TRANSICOES_FINANCEIRAS.get(status)
    if transicao is None:
        raise StatusInvalidoException()
    return transicao
