from __future__ import annotations

from typing import Sequence

from pydantic import BaseModel, Field

from ..catalog.models import Facility, FacilityWithDistance
from .config import DEFAULT_VIEW_CONFIG, NO_RESULTS_HINT, NO_RESULTS_TITLE, ViewConfig


class FacilityCard(BaseModel):
    id: str
    name: str
    type: str
    location_label: str
    address: str
    card_types: list[str]
    image_url: str
    distance_label: str | None = None
    directions_url: str


class EmptyState(BaseModel):
    title: str = NO_RESULTS_TITLE
    hint: str = NO_RESULTS_HINT
    can_reset: bool = True


class ResultPage(BaseModel):
    cards: list[FacilityCard] = Field(default_factory=list)
    total: int = 0
    truncated: bool = False
    empty_state: EmptyState | None = None


def directions_url(facility: Facility, config: ViewConfig = DEFAULT_VIEW_CONFIG) -> str:
    return f"{config.directions_base_url}{facility.lat},{facility.lng}"


def format_distance(distance_km: float | None) -> str | None:
    if distance_km is None:
        return None
    return f"{distance_km:.1f} km"


def build_card(
    facility: FacilityWithDistance,
    config: ViewConfig = DEFAULT_VIEW_CONFIG,
) -> FacilityCard:
    return FacilityCard(
        id=facility.id,
        name=facility.name,
        type=facility.type,
        location_label=f"{facility.district}, {facility.city}",
        address=facility.address,
        card_types=list(facility.card_types),
        image_url=facility.image or config.placeholder_image,
        distance_label=format_distance(facility.distance),
        directions_url=directions_url(facility, config),
    )


def build_cards(
    results: Sequence[FacilityWithDistance],
    limit: int | None = None,
    config: ViewConfig = DEFAULT_VIEW_CONFIG,
) -> ResultPage:
    """
    Cards for the first ``limit`` ranked results (``config.display_limit`` by default).

    ``total`` always counts every ranked result so callers can show how many
    were cut off.
    """
    cap = config.display_limit if limit is None else limit
    shown = results[:cap]
    return ResultPage(
        cards=[build_card(f, config) for f in shown],
        total=len(results),
        truncated=len(results) > len(shown),
        empty_state=EmptyState() if not results else None,
    )
