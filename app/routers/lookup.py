import logging

from fastapi import APIRouter

from app.dependencies import LookupClientDep
from app.schemas.lookup import ContactInfo

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/lookup/{number}", response_model=ContactInfo)
def lookup_number(number: str, client: LookupClientDep) -> ContactInfo:
    # Sync endpoint: FastAPI runs it in the threadpool, the lookup blocks
    info = client.for_number(number).lookup()
    logger.info(
        "Lookup done (name=%s, address=%s)",
        info.name is not None,
        info.address is not None,
    )
    return info
