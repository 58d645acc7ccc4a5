import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import MissingCookieError, TransportError
from app.exceptions.handlers import (
    missing_cookie_error_handler,
    transport_error_handler,
)
from app.routers.lookup import router as lookup_router
from app.services.whitepages import ReversePhoneLookupClient


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    # httpx logs full request URLs, phone numbers included
    logging.getLogger("httpx").setLevel(logging.WARNING)

    with httpx.Client(timeout=settings.request_timeout) as client:
        app.state.lookup_client = ReversePhoneLookupClient(client, settings)
        yield


app = FastAPI(title="Reverse Phone Lookup", lifespan=lifespan)

app.add_exception_handler(TransportError, transport_error_handler)
app.add_exception_handler(MissingCookieError, missing_cookie_error_handler)

app.include_router(lookup_router)
