from pydantic import BaseModel, TypeAdapter


class LocationPayload(BaseModel):
    """Body of a location ticket. Extra keys are accepted and dropped."""

    city: str
    country: str


class LocationEntry(BaseModel):
    date: str
    city: str
    country: str


LocationFile = TypeAdapter(list[LocationEntry])
