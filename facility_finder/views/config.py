from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ViewConfig:
    display_limit: int = int(os.getenv("FACILITY_DISPLAY_LIMIT", "100"))
    placeholder_image: str = "https://via.placeholder.com/500?text=No+Image"
    directions_base_url: str = "https://www.google.com/maps/dir/?api=1&destination="


DEFAULT_VIEW_CONFIG = ViewConfig()

NO_RESULTS_TITLE = "Sonuç Bulunamadı"
NO_RESULTS_HINT = (
    "Seçtiğiniz kriterlere uygun tesis bulunmamaktadır. "
    "Filtreleri temizleyip tekrar deneyebilirsiniz."
)
