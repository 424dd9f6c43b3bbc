"""Error taxonomy. Handled by the exception handler registered in main.py."""


class CurriculoError(Exception):
    """Base error: carries the HTTP status and the message returned to the client."""

    status_code: int = 400
    message: str = "Requisição inválida"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"message": self.message}


class MissingRequiredField(CurriculoError):
    status_code = 400
    message = "Campos obrigatórios não preenchidos"

    def __init__(self, fields: list[str] | None = None, message: str | None = None):
        self.fields = fields or []
        super().__init__(message)

    def to_dict(self) -> dict:
        data = super().to_dict()
        if self.fields:
            data["fields"] = self.fields
        return data


class InvalidAntiForgeryToken(CurriculoError):
    status_code = 403
    message = "Token CSRF inválido"


class InvalidIdentifier(CurriculoError):
    status_code = 400
    message = "ID inválido"


class RecordNotFound(CurriculoError):
    status_code = 404
    message = "Currículo não encontrado"


class StoreFailure(CurriculoError):
    """A database operation failed. The driver message is surfaced verbatim in ``error``."""

    status_code = 500
    message = "Erro no banco de dados"

    def __init__(self, message: str | None = None, error: str = ""):
        self.error = error
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"message": self.message, "error": self.error}
