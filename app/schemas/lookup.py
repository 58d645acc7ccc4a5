from pydantic import BaseModel, ConfigDict


class LookupRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    number: str  # sent as-is, no local validation


class ContactInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str | None = None
    address: str | None = None  # primary, secondary, location joined by ", "
    formatted_number: str
    website: str
