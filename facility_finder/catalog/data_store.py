from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .models import Facility
from .normalize import normalize_catalog

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "name", "city", "district", "type", "card_types", "lat", "lng"]

_catalog: list[Facility] | None = None


def load_catalog(
    path: Path | None = None,
    config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
) -> list[Facility]:
    """Read a JSON array of raw records and normalize it."""
    source = Path(path) if path is not None else config.catalog_path
    with source.open(encoding="utf-8") as fh:
        records = json.load(fh)
    facilities = normalize_catalog(records, config)
    logger.info("Loaded %d facilities from %s", len(facilities), source)
    return facilities


def get_catalog() -> list[Facility]:
    """Return the in-memory catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def reset_catalog() -> None:
    global _catalog
    _catalog = None


def to_frame(catalog: Sequence[Facility]) -> pd.DataFrame:
    """One row per facility; the index is the facility's position in ``catalog``."""
    rows = [
        {
            "id": f.id,
            "name": f.name,
            "city": f.city,
            "district": f.district,
            "type": f.type,
            "card_types": f.card_types,
            "lat": f.lat,
            "lng": f.lng,
        }
        for f in catalog
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS, index=pd.RangeIndex(len(rows)))
