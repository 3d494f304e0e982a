from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from .clock import resolve_today


def month_floor(day: date) -> date:
    return day.replace(day=1)


def step(month: date, delta: int) -> date:
    """Move ``month`` by ``delta`` months, returning the first day of the result."""

    index = month.year * 12 + (month.month - 1) + delta
    year, zero_based = divmod(index, 12)
    return date(year, zero_based + 1, 1)


def month_days(month: date) -> List[date]:
    first = month_floor(month)
    _, length = calendar.monthrange(first.year, first.month)
    return [first + timedelta(days=offset) for offset in range(length)]


@dataclass(frozen=True, slots=True)
class MonthNavigator:
    """Decides which months may be displayed or edited relative to today.

    Months are represented by any date inside them; results are always the
    first day of the month. There is no upper bound.
    """

    timezone: str = "UTC"

    def current_month(self, today: Optional[date] = None) -> date:
        return month_floor(resolve_today(today, self.timezone))

    def can_navigate_to(self, target_month: date, today: Optional[date] = None) -> bool:
        return month_floor(target_month) >= self.current_month(today)

    def clamp_backward(self, requested_month: date, today: Optional[date] = None) -> date:
        return max(month_floor(requested_month), self.current_month(today))

    def can_go_back(self, displayed_month: date, today: Optional[date] = None) -> bool:
        return month_floor(displayed_month) > self.current_month(today)

    def previous(self, displayed_month: date, today: Optional[date] = None) -> date:
        return self.clamp_backward(step(month_floor(displayed_month), -1), today)

    def next(self, displayed_month: date) -> date:
        return step(month_floor(displayed_month), 1)

    def visible_months(self, displayed_month: date, count: int = 2, today: Optional[date] = None) -> List[date]:
        first = self.clamp_backward(displayed_month, today)
        return [step(first, offset) for offset in range(max(count, 1))]


__all__ = ["MonthNavigator", "month_days", "month_floor", "step"]
