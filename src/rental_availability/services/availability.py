from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from ..core import month_days, resolve_today
from ..data.cache import AvailabilityStore
from ..domain import AvailabilityRange, AvailabilitySnapshot, ToggleOutcome
from .context import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DayView:
    date: date
    blocked: bool
    past: bool
    today: bool
    pending: bool
    reason: Optional[str] = None

    @property
    def editable(self) -> bool:
        return not self.past and not self.pending


@dataclass(frozen=True, slots=True)
class MonthView:
    month: date
    days: List[DayView]

    @property
    def blocked_count(self) -> int:
        return sum(1 for day in self.days if day.blocked)


@dataclass(slots=True)
class AvailabilityService:
    context: ServiceContext

    @property
    def store(self) -> AvailabilityStore:
        return self.context.store

    @property
    def selected_property(self) -> Optional[str]:
        return self.store.property_id

    def _today(self, today: Optional[date]) -> date:
        return resolve_today(today, self.context.settings.calendar.timezone)

    async def select_property(
        self,
        property_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> AvailabilitySnapshot:
        if self.store.property_id and self.store.property_id != property_id:
            logger.debug("Switching property %s -> %s", self.store.property_id, property_id)
        return await self.store.load(property_id, start=start, end=end)

    async def reload(self) -> AvailabilitySnapshot:
        if self.store.property_id is None:
            raise ValueError("No property selected.")
        return await self.store.load(self.store.property_id)

    def deselect(self) -> None:
        self.store.clear()

    def is_blocked(self, day: date) -> bool:
        return self.store.is_blocked(day)

    def ranges(self) -> List[AvailabilityRange]:
        return self.store.ranges()

    async def toggle(self, day: date, *, today: Optional[date] = None) -> ToggleOutcome:
        if self.store.property_id is None:
            raise ValueError("No property selected.")
        return await self.context.coordinator.toggle(self.store.property_id, day, today=today)

    async def unblock_range(self, start: date, end: date, *, today: Optional[date] = None) -> int:
        if self.store.property_id is None:
            raise ValueError("No property selected.")
        return await self.context.coordinator.unblock_range(self.store.property_id, start, end, today=today)

    def month_view(
        self,
        displayed_month: date,
        *,
        count: Optional[int] = None,
        today: Optional[date] = None,
    ) -> List[MonthView]:
        """Per-day flags for the months starting at ``displayed_month``, clamped to the current month."""

        current_day = self._today(today)
        months = self.context.navigator.visible_months(
            displayed_month,
            count or self.context.settings.calendar.visible_months,
            today=current_day,
        )
        views: list[MonthView] = []
        for month in months:
            days = [
                DayView(
                    date=day,
                    blocked=self.store.is_blocked(day),
                    past=day < current_day,
                    today=day == current_day,
                    pending=self.store.is_pending(day),
                    reason=self.store.reason_for(day),
                )
                for day in month_days(month)
            ]
            views.append(MonthView(month=month, days=days))
        return views
