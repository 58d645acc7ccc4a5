from typing import Annotated

from fastapi import Depends, Request

from app.services.whitepages import ReversePhoneLookupClient


def get_lookup_client(request: Request) -> ReversePhoneLookupClient:
    return request.app.state.lookup_client


LookupClientDep = Annotated[ReversePhoneLookupClient, Depends(get_lookup_client)]
