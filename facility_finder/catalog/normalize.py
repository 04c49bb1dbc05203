from __future__ import annotations

import logging
from typing import Any, Iterable

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Facility

logger = logging.getLogger(__name__)


def _primary_type(groups: Any, placeholder: str) -> str:
    """Name of the first activity group, or the placeholder label."""
    if not isinstance(groups, list) or not groups:
        return placeholder
    first = groups[0]
    if not isinstance(first, dict):
        return placeholder
    name = first.get("name")
    return str(name) if name else placeholder


def _card_types(cards: Any) -> tuple[str, ...]:
    if not cards:
        return ()
    if isinstance(cards, str):
        return (cards,)
    if not isinstance(cards, (list, tuple)):
        return ()
    return tuple(str(c) for c in cards if c is not None)


def _coordinate(value: Any, field: str, record_id: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        logger.warning("Facility %s has unusable %s=%r, using 0.0", record_id, field, value)
        return 0.0


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_record(
    raw: dict[str, Any],
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> Facility:
    """
    Map one raw catalog record into the canonical Facility schema.

    Missing optional fields fall back to defaults:
    - no activity group -> ``config.other_type_label``
    - no card list -> empty tuple
    - no thumbnail -> ``None``
    """
    record_id = _text(raw.get("id"))
    return Facility(
        id=record_id,
        name=_text(raw.get("name")),
        city=_text(raw.get("city")),
        district=_text(raw.get("cityDistrict")),
        type=_primary_type(raw.get("activityGroups"), config.other_type_label),
        card_types=_card_types(raw.get("cards")),
        lat=_coordinate(raw.get("lat"), "lat", record_id),
        lng=_coordinate(raw.get("lng"), "lng", record_id),
        address=_text(raw.get("address")),
        image=_text(raw.get("thumbnail")) or None,
    )


def normalize_catalog(
    records: Iterable[dict[str, Any]],
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[Facility]:
    """Normalize every record, keeping the first facility seen for each id."""
    facilities: list[Facility] = []
    seen: set[str] = set()
    for raw in records:
        facility = normalize_record(raw, config)
        if facility.id in seen:
            logger.warning("Duplicate facility id %s dropped", facility.id)
            continue
        seen.add(facility.id)
        facilities.append(facility)
    return facilities
