"""Pure calendar algorithms: range compression and month navigation."""

from __future__ import annotations

from .clock import resolve_today, today_in
from .navigation import MonthNavigator, month_days, month_floor, step
from .ranges import compress, expand

__all__ = [
    "MonthNavigator",
    "compress",
    "expand",
    "month_days",
    "month_floor",
    "resolve_today",
    "step",
    "today_in",
]
