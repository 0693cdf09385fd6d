"""
Error -> HTTP response mapping.

Domain errors are mapped by ErrorKind. Anything else is an infrastructure
failure: logged with its traceback and answered with a generic 500.
"""
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backend.app.logging_config import get_logger
from backend.app.schemas.common import ErrorResponse
from backend.app.services.errors import ErrorKind, LedgerError

logger = get_logger(__name__)

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.CONFLICT: 409,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DOMAIN_REJECTION: 400,
    }

GENERIC_ERROR_MESSAGE = "Please try again later"


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    status_code = STATUS_BY_KIND[exc.kind]
    logger.info(
        "Domain error",
        path=request.url.path,
        kind=exc.kind.value,
        error=type(exc).__name__,
        status_code=status_code,
        )
    body = ErrorResponse(message=exc.message, kind=exc.kind.value)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error", path=request.url.path, error=str(exc), exc_info=exc)
    body = ErrorResponse(message=GENERIC_ERROR_MESSAGE)
    return JSONResponse(status_code=500, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LedgerError, ledger_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
