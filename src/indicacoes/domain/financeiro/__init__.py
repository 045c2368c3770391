"""
Financial settlement rules for leads.
"""

from indicacoes.domain.financeiro.comprovante import (
    TAMANHO_MAXIMO,
    TIPOS_PERMITIDOS,
    Comprovante,
    validar_comprovante,
)
from indicacoes.domain.financeiro.exceptions import (
    AtualizacaoStatusException,
    ComprovanteInvalidoException,
    ComprovanteNaoEncontradoException,
    ComprovanteObrigatorioException,
    FinanceiroException,
    LeadNaoEncontradoException,
    NaoAutorizadoException,
    StatusInvalidoException,
)
from indicacoes.domain.financeiro.transicoes import (
    TRANSICOES_FINANCEIRAS,
    TransicaoFinanceira,
    parse_status_financeiro,
)

__all__ = [
    "TAMANHO_MAXIMO",
    "TIPOS_PERMITIDOS",
    "Comprovante",
    "validar_comprovante",
    "AtualizacaoStatusException",
    "ComprovanteInvalidoException",
    "ComprovanteNaoEncontradoException",
    "ComprovanteObrigatorioException",
    "FinanceiroException",
    "LeadNaoEncontradoException",
    "NaoAutorizadoException",
    "StatusInvalidoException",
    "TRANSICOES_FINANCEIRAS",
    "TransicaoFinanceira",
    "parse_status_financeiro",
]
