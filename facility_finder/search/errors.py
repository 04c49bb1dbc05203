from __future__ import annotations


class InvalidSelectionError(ValueError):
    """A filter value was chosen that is not selectable in the current state."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"{value!r} is not a selectable {field}")
        self.field = field
        self.value = value
