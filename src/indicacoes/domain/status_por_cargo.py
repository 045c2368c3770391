"""
Status options each job role may assign to a lead.

The tables are built once at import time and never mutated. Order matters for
presentation, and the Admin table keeps its repeated "Cancelado" entry as-is.
"""

from types import MappingProxyType
from typing import NamedTuple

from indicacoes.domain.enums import Cargo, LeadStatus


class StatusOption(NamedTuple):
    value: str
    label: str


def _options(*statuses: LeadStatus) -> tuple[StatusOption, ...]:
    return tuple(StatusOption(value=s.value, label=s.value) for s in statuses)


STATUS_POR_CARGO: MappingProxyType[str, tuple[StatusOption, ...]] = MappingProxyType(
    {
        Cargo.VENDEDOR_INTERNO.value: _options(
            LeadStatus.PENDENTE,
            LeadStatus.SENDO_ATENDIDO,
            LeadStatus.FINALIZADO,
            LeadStatus.AGUARDANDO_PAGAMENTO,
            LeadStatus.CANCELADO,
        ),
        Cargo.FINANCEIRO.value: _options(
            LeadStatus.AGUARDANDO_PAGAMENTO,
            LeadStatus.PAGO,
            LeadStatus.CANCELADO,
        ),
        Cargo.ADMIN.value: _options(
            LeadStatus.PENDENTE,
            LeadStatus.SENDO_ATENDIDO,
            LeadStatus.FINALIZADO,
            LeadStatus.CANCELADO,
            LeadStatus.CANCELADO,
            LeadStatus.AGUARDANDO_PAGAMENTO,
            LeadStatus.PAGO,
        ),
    }
)


def get_status_por_cargo(cargo: str) -> list[StatusOption]:
    """Status options for a role, or an empty list for an unknown role."""
    return list(STATUS_POR_CARGO.get(str(cargo), ()))
