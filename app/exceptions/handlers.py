import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import MissingCookieError, TransportError

logger = logging.getLogger(__name__)


async def transport_error_handler(_request: Request, exc: TransportError) -> JSONResponse:
    logger.error("Lookup transport error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Lookup transport error: {exc.message}"},
    )


async def missing_cookie_error_handler(_request: Request, exc: MissingCookieError) -> JSONResponse:
    logger.warning("Lookup aborted: %s", exc.message)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Lookup aborted: {exc.message}"},
    )
