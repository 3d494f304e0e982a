"""Domain models for property availability."""

from __future__ import annotations

from .enums import DayStatus, FailureKind
from .errors import (
    AvailabilityError,
    PastDateError,
    PropertyMismatchError,
    RemoteLoadError,
    RemoteToggleError,
    ToggleInFlightError,
)
from .models import (
    AvailabilityRange,
    AvailabilityRecord,
    AvailabilitySnapshot,
    BlockedDateEntry,
    Property,
    ToggleOutcome,
    parse_date,
)
from .states import AVAILABLE, Confirmed, DayState, Pending, confirmed

__all__ = [
    "AVAILABLE",
    "AvailabilityError",
    "AvailabilityRange",
    "AvailabilityRecord",
    "AvailabilitySnapshot",
    "BlockedDateEntry",
    "Confirmed",
    "DayState",
    "DayStatus",
    "FailureKind",
    "PastDateError",
    "Pending",
    "Property",
    "PropertyMismatchError",
    "RemoteLoadError",
    "RemoteToggleError",
    "ToggleInFlightError",
    "ToggleOutcome",
    "confirmed",
    "parse_date",
]
