"""
Errores de la API con una estructura común.

Toda respuesta de error tiene la forma:
{
    "success": false,
    "error": "ErrorType",
    "message": "Texto legible",
    "code": "CODIGO_UNICO",
    "details": {}   (opcional)
}

NotFound, Validation, Conflict y Unauthorized son errores esperados del
usuario (4xx) y no tocan el estado del proceso. Cualquier otra excepción se
registra en el log y se devuelve como un 500 genérico.
"""
import logging
import uuid
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ErrorCode:
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_INPUT = "INVALID_INPUT"

    AUTH_REQUIRED = "AUTH_REQUIRED"
    AUTH_INVALID = "AUTH_INVALID"

    NOT_FOUND = "NOT_FOUND"
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    RESULT_NOT_FOUND = "RESULT_NOT_FOUND"

    MEDAL_CONFLICT = "MEDAL_CONFLICT"

    INTERNAL_ERROR = "INTERNAL_ERROR"


STATUS_ERRORS = {
    400: ("Bad Request", ErrorCode.INVALID_INPUT),
    401: ("Unauthorized", ErrorCode.AUTH_REQUIRED),
    404: ("Not Found", ErrorCode.NOT_FOUND),
    405: ("Method Not Allowed", ErrorCode.INVALID_INPUT),
    500: ("Internal Error", ErrorCode.INTERNAL_ERROR),
}


def error_body(error: str, message: str, code: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    content = {
        "success": False,
        "error": error,
        "message": message,
        "code": code,
    }
    if details:
        content["details"] = details
    return content


class APIError(Exception):
    """Excepción base de la API"""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.error = error
        self.message = message
        self.code = code
        self.details = details
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return error_body(self.error, self.message, self.code, self.details)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_dict())


class BadRequestError(APIError):
    """400 - petición mal formada o valor no permitido"""
    def __init__(self, message: str, code: str = ErrorCode.INVALID_INPUT, details: Optional[Dict] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="Bad Request",
            message=message,
            code=code,
            details=details
        )


class UnauthorizedError(APIError):
    """401 - falta la sesión o no es válida"""
    def __init__(self, message: str = "Unauthorized - Please log in as admin", code: str = ErrorCode.AUTH_REQUIRED):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="Unauthorized",
            message=message,
            code=code
        )


class NotFoundError(APIError):
    """404 - el recurso no existe"""
    def __init__(self, resource: str, identifier: Any = None, code: str = ErrorCode.NOT_FOUND):
        message = f"{resource} not found"
        if identifier is not None:
            message = f"{resource} with id '{identifier}' not found"
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="Not Found",
            message=message,
            code=code
        )


class MedalConflictError(APIError):
    """400 - la medalla ya la tiene otro equipo en este evento"""
    def __init__(self, medal: str, holder_id: int, holder_name: str):
        self.medal = medal
        self.holder_id = holder_id
        self.holder_name = holder_name
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="Conflict",
            message=f"{medal.upper()} medal is already assigned to {holder_name} for this event",
            code=ErrorCode.MEDAL_CONFLICT,
            details={"medal": medal, "teamId": holder_id, "teamName": holder_name}
        )


class InternalError(APIError):
    """500 - solo para fallos internos de verdad"""
    def __init__(self, message: str = "Internal server error", log_id: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error="Internal Error",
            message=message,
            code=ErrorCode.INTERNAL_ERROR,
            details={"log_id": log_id} if log_id else None
        )


# -----------------------
# Handlers
# -----------------------
async def api_error_handler(request: Request, exc: APIError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} -> {exc.code}: {exc.message}")
    return exc.to_response()


async def validation_error_handler(request: Request, exc: RequestValidationError):
    return BadRequestError(
        "Invalid request data",
        code=ErrorCode.VALIDATION_ERROR,
        details={"errors": jsonable_encoder(exc.errors())}
    ).to_response()


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    error, code = STATUS_ERRORS.get(exc.status_code, ("Error", ErrorCode.INVALID_INPUT))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(error, str(exc.detail), code),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    log_id = uuid.uuid4().hex[:8]
    logger.exception(f"[{log_id}] Internal error in {request.method} {request.url.path}: {type(exc).__name__}")
    return InternalError(log_id=log_id).to_response()


def register_error_handlers(app: FastAPI):
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
