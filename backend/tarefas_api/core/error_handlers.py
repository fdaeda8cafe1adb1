import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from tarefas_api.core.errors import UNEXPECTED_ERROR_MESSAGE, ApiError, UnexpectedError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Todas as falhas viram resposta em texto puro com a mensagem da primeira regra violada."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        message = first_validation_message(exc.errors())
        logger.warning("%s %s -> 400: %s", request.method, request.url.path, message)
        return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Erro inesperado em %s %s", request.method, request.url.path)
        error = UnexpectedError(str(exc).strip() or UNEXPECTED_ERROR_MESSAGE)
        return PlainTextResponse(error.message, status_code=error.status_code)


def first_validation_message(errors) -> str:
    if not errors:
        return "Requisição inválida"
    error = errors[0]
    ctx = error.get("ctx") or {}
    if isinstance(ctx.get("error"), ValueError):
        return str(ctx["error"])
    location = [str(part) for part in error.get("loc", ()) if part != "body"]
    if location:
        return f"'{location[-1]}': {error.get('msg', 'valor inválido')}"
    return "Corpo da requisição deve ser um objeto JSON"
