"""Financial workflow exceptions.

Each carries the HTTP status and the message returned to the caller.
"""


class FinanceiroException(Exception):
    status_code = 400
    default_message = "Erro na operação financeira"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NaoAutorizadoException(FinanceiroException):
    status_code = 401
    default_message = "Não autorizado"


class StatusInvalidoException(FinanceiroException):
    default_message = "Status inválido para operação financeira"


class ComprovanteObrigatorioException(FinanceiroException):
    default_message = "Comprovante é obrigatório para pagamentos"


class ComprovanteInvalidoException(FinanceiroException):
    default_message = "Comprovante inválido"


class LeadNaoEncontradoException(FinanceiroException):
    status_code = 404
    default_message = "Lead não encontrado"


class ComprovanteNaoEncontradoException(FinanceiroException):
    status_code = 404
    default_message = "Comprovante não encontrado"


class AtualizacaoStatusException(FinanceiroException):
    """Unexpected persistence failure while applying a transition."""

    status_code = 500
    default_message = "Erro ao atualizar status"
