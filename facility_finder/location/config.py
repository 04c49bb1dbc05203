from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PositionOptions:
    """Options passed to the provider for each position request."""

    high_accuracy: bool = True
    timeout_ms: int = 5000
    max_cached_age_ms: int = 0

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


DEFAULT_POSITION_OPTIONS = PositionOptions()

UNSUPPORTED_MESSAGE = "Tarayıcınız konum servisini desteklemiyor."
FAILURE_MESSAGE = "Konum alınamadı. Lütfen konum izni verip tekrar deneyin."
