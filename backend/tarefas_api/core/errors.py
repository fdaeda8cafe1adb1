from fastapi import status

UNEXPECTED_ERROR_MESSAGE = "Erro inesperado"


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = UNEXPECTED_ERROR_MESSAGE):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Entrada malformada ou ausente."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ApiError):
    """Chave única duplicada."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class UnexpectedError(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
