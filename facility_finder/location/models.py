from __future__ import annotations

from enum import Enum
from typing import Protocol

from pydantic import BaseModel, ConfigDict

from ..search.models import UserLocation
from .config import PositionOptions


class LocationStatus(str, Enum):
    idle = "idle"
    loading = "loading"
    success = "success"
    error = "error"


class LocationOutcome(str, Enum):
    success = "success"
    failure = "failure"
    unsupported = "unsupported"


class LocationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: LocationOutcome
    location: UserLocation | None = None
    message: str | None = None
    reason: str | None = None


class PositionError(Exception):
    """Raised by a provider that could not produce a position."""

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"

    def __init__(self, reason: str, message: str = "") -> None:
        super().__init__(message or reason)
        self.reason = reason


class LocationProvider(Protocol):
    async def current_position(self, options: PositionOptions) -> UserLocation: ...
