"""Login and identity resolution exceptions."""


class IdentityException(Exception):
    status_code = 400
    default_message = "Erro de autenticação"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class EmailAusenteException(IdentityException):
    default_message = "No primary email address"


class EmailNaoVerificadoException(IdentityException):
    default_message = "Email not verified"


class CredenciaisInvalidasException(IdentityException):
    default_message = "Email ou senha incorretos"
