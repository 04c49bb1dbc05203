from __future__ import annotations

import asyncio
import logging

from ..search.models import UserLocation
from .config import (
    DEFAULT_POSITION_OPTIONS,
    FAILURE_MESSAGE,
    UNSUPPORTED_MESSAGE,
    PositionOptions,
)
from .models import (
    LocationOutcome,
    LocationProvider,
    LocationResult,
    LocationStatus,
    PositionError,
)

logger = logging.getLogger(__name__)


class LocationAcquirer:
    """
    Single-shot position requests against an optional provider.

    ``provider=None`` means the platform has no location capability: every
    request ends in ``error`` with the unsupported message and never passes
    through ``loading``.
    """

    def __init__(
        self,
        provider: LocationProvider | None,
        options: PositionOptions = DEFAULT_POSITION_OPTIONS,
    ) -> None:
        self._provider = provider
        self.options = options
        self.status = LocationStatus.idle
        self.location: UserLocation | None = None
        self.last_result: LocationResult | None = None

    @property
    def is_loading(self) -> bool:
        return self.status is LocationStatus.loading

    def _finish(self, result: LocationResult) -> LocationResult:
        if result.outcome is LocationOutcome.success:
            self.status = LocationStatus.success
        else:
            self.status = LocationStatus.error
        self.location = result.location
        self.last_result = result
        return result

    async def request(self) -> LocationResult | None:
        """
        Fetch one fresh position.

        Returns ``None`` without touching the provider when a request is
        already in flight.
        """
        if self.is_loading:
            logger.debug("Location request ignored, one is already in flight")
            return None

        if self._provider is None:
            return self._finish(
                LocationResult(
                    outcome=LocationOutcome.unsupported,
                    message=UNSUPPORTED_MESSAGE,
                    reason="unsupported",
                )
            )

        self.status = LocationStatus.loading
        self.location = None
        try:
            position = await asyncio.wait_for(
                self._provider.current_position(self.options),
                timeout=self.options.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning("Location provider did not answer within %d ms", self.options.timeout_ms)
            return self._finish(
                LocationResult(
                    outcome=LocationOutcome.failure,
                    message=FAILURE_MESSAGE,
                    reason=PositionError.TIMEOUT,
                )
            )
        except PositionError as exc:
            logger.warning("Location provider failed: %s", exc.reason, exc_info=True)
            return self._finish(
                LocationResult(
                    outcome=LocationOutcome.failure,
                    message=FAILURE_MESSAGE,
                    reason=exc.reason,
                )
            )
        except asyncio.CancelledError:
            self.status = LocationStatus.error
            raise
        except Exception:
            logger.warning("Location provider crashed", exc_info=True)
            return self._finish(
                LocationResult(
                    outcome=LocationOutcome.failure,
                    message=FAILURE_MESSAGE,
                    reason=PositionError.POSITION_UNAVAILABLE,
                )
            )

        return self._finish(LocationResult(outcome=LocationOutcome.success, location=position))


def status_label(status: LocationStatus, result_count: int = 0) -> str:
    """Text for the location button in each state."""
    if status is LocationStatus.loading:
        return "Konum Alınıyor..."
    if status is LocationStatus.success:
        return f"Konuma Göre Sıralı ({result_count})"
    return "Konumumu Kullan"
