from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo


def today_in(timezone: str = "UTC") -> date:
    return datetime.now(ZoneInfo(timezone)).date()


def resolve_today(today: Optional[date], timezone: str = "UTC") -> date:
    """Return ``today`` when given, otherwise the current date in ``timezone``."""

    return today if today is not None else today_in(timezone)
