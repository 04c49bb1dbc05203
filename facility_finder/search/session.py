from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from ..catalog.models import Facility, FacilityWithDistance
from .collation import Collator, get_collator
from .engine import rank
from .errors import InvalidSelectionError
from .facets import build_facets
from .memo import DerivedCache
from .models import FacetIndex, FilterSelection, UserLocation

logger = logging.getLogger(__name__)


class FinderSession:
    """
    Session-scoped filter selection and user location over one catalog.

    ``facets()`` and ``results()`` are recomputed from the current inputs on
    demand and memoised until one of those inputs changes.
    """

    def __init__(
        self,
        catalog: Sequence[Facility],
        collator: Collator | None = None,
        config: CatalogConfig = DEFAULT_CATALOG_CONFIG,
    ) -> None:
        self._catalog = list(catalog)
        self._config = config
        self._collator = collator or get_collator(config.locale)
        self.selection = FilterSelection()
        self.location: UserLocation | None = None
        self.cache = DerivedCache()

    @property
    def catalog(self) -> list[Facility]:
        return self._catalog

    def replace_catalog(self, catalog: Sequence[Facility]) -> None:
        self._catalog = list(catalog)
        self.cache.clear()
        logger.info("Catalog replaced with %d facilities", len(self._catalog))

    # ── Derived values ──────────────────────────────────────────────────

    def facets(self) -> FacetIndex:
        inputs = {"kind": "facets", "city": self.selection.city}
        cached = self.cache.get(inputs)
        if cached is not None:
            return cached
        facets = build_facets(self._catalog, self.selection.city)
        self.cache.set(inputs, facets)
        return facets

    def results(self) -> list[FacilityWithDistance]:
        inputs = {
            "kind": "results",
            "selection": self.selection.model_dump(),
            "location": self.location.model_dump() if self.location else None,
        }
        cached = self.cache.get(inputs)
        if cached is not None:
            return list(cached)
        ranked = rank(self._catalog, self.selection, self.location, self._collator, self._config)
        self.cache.set(inputs, ranked)
        return list(ranked)

    # ── Selection changes ───────────────────────────────────────────────

    def select_city(self, city: str | None) -> FilterSelection:
        self.selection = self.selection.with_city(city)
        return self.selection

    def select_district(self, district: str | None) -> FilterSelection:
        if district:
            if "district" in self.facets().invalid_fields(FilterSelection(district=district)):
                raise InvalidSelectionError("district", district)
        self.selection = self.selection.with_district(district)
        return self.selection

    def select_type(self, facility_type: str | None) -> FilterSelection:
        self.selection = self.selection.with_type(facility_type)
        return self.selection

    def select_card_type(self, card_type: str | None) -> FilterSelection:
        self.selection = self.selection.with_card_type(card_type)
        return self.selection

    def clear_filters(self) -> FilterSelection:
        self.selection = self.selection.cleared()
        return self.selection

    # ── Location ────────────────────────────────────────────────────────

    def set_location(self, location: UserLocation | None) -> None:
        self.location = location

    def clear_location(self) -> None:
        self.location = None
