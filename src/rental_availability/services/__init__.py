"""Application services orchestrating data access and the availability engine."""

from __future__ import annotations

from .auth import AuthService
from .availability import AvailabilityService, DayView, MonthView
from .context import ServiceContext
from .toggle import AvailabilityRemote, ToggleCoordinator

__all__ = [
    "AuthService",
    "AvailabilityRemote",
    "AvailabilityService",
    "DayView",
    "MonthView",
    "ServiceContext",
    "ToggleCoordinator",
]
