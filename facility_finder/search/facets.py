from __future__ import annotations

from typing import Sequence

import pandas as pd

from ..catalog.data_store import to_frame
from ..catalog.models import Facility
from .models import FacetIndex


def _distinct(values: pd.Series) -> tuple[str, ...]:
    """Sorted distinct non-empty strings of a column."""
    cleaned = values.dropna()
    cleaned = cleaned[cleaned != ""]
    return tuple(sorted(cleaned.unique().tolist()))


def build_facets(catalog: Sequence[Facility], city: str | None = None) -> FacetIndex:
    """
    Selectable options for each filter.

    Every facet spans the whole catalog except ``districts``, which only
    lists the districts of ``city`` and is empty while no city is chosen.
    """
    df = to_frame(catalog)

    if city:
        districts = _distinct(df.loc[df["city"] == city, "district"])
    else:
        districts = ()

    return FacetIndex(
        cities=_distinct(df["city"]),
        districts=districts,
        types=_distinct(df["type"]),
        card_types=_distinct(df["card_types"].explode()),
    )
