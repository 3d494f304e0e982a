"""Property availability calendar engine."""

from __future__ import annotations

from .cli import main as main
from .core import MonthNavigator, compress
from .data import AvailabilityStore
from .services import ToggleCoordinator

__all__ = ["AvailabilityStore", "MonthNavigator", "ToggleCoordinator", "compress", "main"]
