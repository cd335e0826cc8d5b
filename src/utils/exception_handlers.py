import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.model.state import Notification
from src.schemas.generic import ApiResponse
from src.utils.exceptions import (
    AccessDeniedException,
    BackendUnavailableException,
    BadRequestException,
    ResourceNotFoundException,
)

logger = logging.getLogger(__name__)


def _error_response(code: int, message: str, data=None) -> JSONResponse:
    return JSONResponse(
        status_code=code,
        content=ApiResponse.error(code=code, message=message, data=data).model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI):
    """
    Register global exception handlers for the FastAPI app.
    Validation failures are rejected before any state is saved, so the
    session keeps its previous state.
    """

    @app.exception_handler(BadRequestException)
    async def bad_request_handler(request: Request, exc: BadRequestException):
        logger.warning(f"{type(exc).__name__}: {exc.message}")
        return _error_response(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(ResourceNotFoundException)
    async def resource_not_found_handler(
            request: Request, exc: ResourceNotFoundException
    ):
        logger.warning(f"ResourceNotFoundException: {exc.message}")
        return _error_response(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(AccessDeniedException)
    async def access_denied_handler(request: Request, exc: AccessDeniedException):
        logger.warning(f"AccessDeniedException: {exc.message}")
        return _error_response(status.HTTP_403_FORBIDDEN, exc.message)

    @app.exception_handler(BackendUnavailableException)
    async def backend_unavailable_handler(
            request: Request, exc: BackendUnavailableException
    ):
        logger.error(f"Backend unavailable ({exc.title}): {exc.message}")
        notification = Notification.error(exc.message, title=exc.title, blocking=True)
        return _error_response(
            status.HTTP_503_SERVICE_UNAVAILABLE,
            exc.message,
            data=notification.model_dump(mode="json"),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
            request: Request, exc: RequestValidationError
    ):
        logger.warning(f"Validation error: {exc.errors()}")
        errors = []
        for error in exc.errors():
            field = (
                ".".join(str(x) for x in error["loc"]) if error["loc"] else "unknown"
            )
            errors.append(f"{field}: {error['msg']}")

        message = ", ".join(errors)
        return _error_response(status.HTTP_400_BAD_REQUEST, f"Validation Error: {message}")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error(f"HTTPException: {exc.detail}")
        return _error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled Exception: {str(exc)}", exc_info=True)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )
