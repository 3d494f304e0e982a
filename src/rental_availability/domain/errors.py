from __future__ import annotations

from datetime import date
from typing import Optional

from .enums import FailureKind


class AvailabilityError(RuntimeError):
    """Base class for availability engine failures."""


class PastDateError(AvailabilityError):
    """Raised when a mutation targets a day before today."""

    def __init__(self, day: date, today: date) -> None:
        super().__init__(f"{day.isoformat()} is before {today.isoformat()} and cannot be changed.")
        self.day = day
        self.today = today


class RemoteLoadError(AvailabilityError):
    """Raised when the remote availability read fails."""

    def __init__(self, property_id: str, message: str, *, kind: FailureKind = FailureKind.APPLICATION) -> None:
        super().__init__(f"Could not load availability for property {property_id}: {message}")
        self.property_id = property_id
        self.kind = kind


class RemoteToggleError(AvailabilityError):
    """Raised when the remote toggle fails. Local state has already been restored."""

    def __init__(
        self,
        property_id: str,
        day: date,
        message: str,
        *,
        kind: FailureKind = FailureKind.APPLICATION,
    ) -> None:
        super().__init__(f"Could not toggle {day.isoformat()} for property {property_id}: {message}")
        self.property_id = property_id
        self.day = day
        self.kind = kind


class ToggleInFlightError(AvailabilityError):
    """Raised when a toggle is requested for a day whose previous toggle is still pending."""

    def __init__(self, day: date) -> None:
        super().__init__(f"A change for {day.isoformat()} is already in progress.")
        self.day = day


class PropertyMismatchError(AvailabilityError):
    """Raised when an operation names a property other than the one loaded."""

    def __init__(self, requested: str, loaded: Optional[str]) -> None:
        super().__init__(f"Property {requested} is not the loaded property ({loaded or 'none'}).")
        self.requested = requested
        self.loaded = loaded
