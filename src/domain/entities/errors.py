# errors.py
from fastapi import status


class EmpreendedorError(Exception):
    """Erro de domínio com o status HTTP e a mensagem devolvida ao cliente."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Erro interno do servidor"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class NotFound(EmpreendedorError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Empreendedor não encontrado"


class ValidationFailed(EmpreendedorError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "CPF inválido"


class InternalError(EmpreendedorError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro interno do servidor"
