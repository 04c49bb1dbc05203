from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd

from ..catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from ..catalog.data_store import to_frame
from ..catalog.models import Facility, FacilityWithDistance
from ..geo.distance import haversine_km_array
from .collation import TURKISH, Collator
from .models import FilterSelection, UserLocation

logger = logging.getLogger(__name__)


def _selection_mask(df: pd.DataFrame, selection: FilterSelection, all_cards_label: str) -> pd.Series:
    mask = pd.Series(True, index=df.index)

    if selection.city:
        mask = mask & (df["city"] == selection.city)

    if selection.district:
        mask = mask & (df["district"] == selection.district)

    if selection.type:
        mask = mask & (df["type"] == selection.type)

    if selection.card_type:
        wanted = selection.card_type
        mask = mask & df["card_types"].apply(
            lambda cards: wanted in cards or all_cards_label in cards
        ).astype(bool)

    return mask


def filter_facilities(
    catalog: Sequence[Facility],
    selection: FilterSelection,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> pd.DataFrame:
    """Frame of the facilities matching every set field of ``selection``, catalog order."""
    df = to_frame(catalog)
    if df.empty:
        return df

    candidates = df.loc[_selection_mask(df, selection, config.all_cards_label)]

    duplicated = candidates["id"].duplicated(keep="first")
    if duplicated.any():
        logger.warning("Dropping %d duplicate facility ids from results", int(duplicated.sum()))
        candidates = candidates.loc[~duplicated]

    return candidates


def rank(
    catalog: Sequence[Facility],
    selection: FilterSelection,
    user_location: UserLocation | None,
    collator: Collator = TURKISH,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[FacilityWithDistance]:
    """
    Filter ``catalog`` by ``selection`` and order the matches.

    With a user location every match gets a ``distance`` in km and the list
    is sorted nearest first; without one the list is sorted by name using
    ``collator``. Both sorts are stable, so ties keep catalog order. Nothing
    is truncated and an empty match is returned as an empty list.
    """
    candidates = filter_facilities(catalog, selection, config)
    if candidates.empty:
        return []

    if user_location is not None:
        candidates = candidates.assign(
            distance=haversine_km_array(
                user_location.lat,
                user_location.lng,
                candidates["lat"].to_numpy(),
                candidates["lng"].to_numpy(),
            )
        )
        ordered = candidates.sort_values("distance", kind="stable")
        return [
            FacilityWithDistance(**catalog[pos].model_dump(), distance=float(dist))
            for pos, dist in zip(ordered.index, ordered["distance"])
        ]

    positions = sorted(
        candidates.index,
        key=lambda pos: collator.sort_key(catalog[pos].name),
    )
    return [FacilityWithDistance(**catalog[pos].model_dump()) for pos in positions]
