from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CATALOG = Path(__file__).resolve().parent.parent / "data" / "tesisler.json"

OTHER_TYPE_LABEL = "Diğer"
ALL_CARDS_LABEL = "Tümü"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the catalog lives and which labels stand in for missing data.
    """

    catalog_path: Path = Path(os.getenv("FACILITY_CATALOG_PATH", str(_BUNDLED_CATALOG)))
    locale: str = os.getenv("FACILITY_LOCALE", "tr")
    other_type_label: str = OTHER_TYPE_LABEL
    all_cards_label: str = ALL_CARDS_LABEL


DEFAULT_CATALOG_CONFIG = CatalogConfig()
