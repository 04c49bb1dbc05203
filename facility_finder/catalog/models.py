from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Facility(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    city: str
    district: str
    type: str
    card_types: tuple[str, ...] = Field(default_factory=tuple)
    lat: float
    lng: float
    address: str = ""
    image: str | None = None


class FacilityWithDistance(Facility):
    distance: float | None = Field(
        default=None,
        description="Kilometres from the user; only set when ranked by location",
    )
