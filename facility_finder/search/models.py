from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

SELECTION_FIELDS = ("city", "district", "type", "card_type")


class UserLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)


class FilterSelection(BaseModel):
    """
    The four independent filters. ``None`` (or an empty string) means "all".

    Use the ``with_*`` helpers to change a field; ``with_city`` always drops
    the district so a district from another city can never linger.
    """

    model_config = ConfigDict(frozen=True)

    city: str | None = None
    district: str | None = None
    type: str | None = None
    card_type: str | None = None

    @field_validator(*SELECTION_FIELDS, mode="before")
    @classmethod
    def _blank_is_unset(cls, value: str | None) -> str | None:
        if value == "":
            return None
        return value

    @property
    def is_active(self) -> bool:
        return any(getattr(self, name) is not None for name in SELECTION_FIELDS)

    def with_city(self, city: str | None) -> FilterSelection:
        return self.model_copy(update={"city": city or None, "district": None})

    def with_district(self, district: str | None) -> FilterSelection:
        return self.model_copy(update={"district": district or None})

    def with_type(self, facility_type: str | None) -> FilterSelection:
        return self.model_copy(update={"type": facility_type or None})

    def with_card_type(self, card_type: str | None) -> FilterSelection:
        return self.model_copy(update={"card_type": card_type or None})

    def cleared(self) -> FilterSelection:
        return FilterSelection()


class FacetIndex(BaseModel):
    model_config = ConfigDict(frozen=True)

    cities: tuple[str, ...] = ()
    districts: tuple[str, ...] = ()
    types: tuple[str, ...] = ()
    card_types: tuple[str, ...] = ()

    def options_for(self, field: str) -> tuple[str, ...]:
        return {
            "city": self.cities,
            "district": self.districts,
            "type": self.types,
            "card_type": self.card_types,
        }[field]

    def invalid_fields(self, selection: FilterSelection) -> list[str]:
        """Selection fields whose value is not one of the current options."""
        invalid: list[str] = []
        for name in SELECTION_FIELDS:
            value = getattr(selection, name)
            if value is not None and value not in self.options_for(name):
                invalid.append(name)
        return invalid
