from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional, Protocol

from ..core.clock import resolve_today
from ..data.cache import AvailabilityStore
from ..domain import (
    DayStatus,
    PastDateError,
    Pending,
    PropertyMismatchError,
    RemoteToggleError,
    ToggleInFlightError,
    ToggleOutcome,
)

logger = logging.getLogger(__name__)


class AvailabilityRemote(Protocol):
    async def toggle(self, property_id: str, day: date, reason: str) -> Any: ...

    async def unblock_range(self, property_id: str, start: date, end: date) -> int: ...


@dataclass(slots=True)
class ToggleCoordinator:
    """Flips one day's availability optimistically and rolls back on remote failure."""

    store: AvailabilityStore
    remote: AvailabilityRemote
    default_reason: str
    timezone: str = "UTC"

    async def toggle(self, property_id: str, day: date, *, today: Optional[date] = None) -> ToggleOutcome:
        self._refuse_past(day, today)
        self._require_loaded(property_id)

        was_blocked = self.store.is_blocked(day)
        target_reason = None if was_blocked else self.default_reason
        pending = self.store.begin(day, not was_blocked, target_reason)
        logger.debug("Optimistically %s %s for property %s", "released" if was_blocked else "blocked", day, property_id)

        try:
            await self.remote.toggle(property_id, day, self.default_reason)
        except Exception as exc:
            self.store.rollback(day, pending)
            logger.warning("Toggle of %s for property %s failed, restored previous state: %s", day, property_id, exc)
            if isinstance(exc, RemoteToggleError):
                raise
            raise RemoteToggleError(property_id, day, str(exc)) from exc
        except BaseException:
            self.store.rollback(day, pending)
            logger.warning("Toggle of %s for property %s was interrupted, restored previous state", day, property_id)
            raise

        self.store.commit(day, pending)
        status = DayStatus.AVAILABLE if was_blocked else DayStatus.BLOCKED
        logger.info("Date %s %s for property %s", day, status.value, property_id)
        return ToggleOutcome(property_id=property_id, date=day, status=status, reason=target_reason)

    async def unblock_range(
        self,
        property_id: str,
        start: date,
        end: date,
        *,
        today: Optional[date] = None,
    ) -> int:
        """Release every blocked day in ``[start, end]``. Returns the remote release count."""

        if end < start:
            raise ValueError(f"Range end {end.isoformat()} is before start {start.isoformat()}.")
        self._refuse_past(start, today)
        self._require_loaded(property_id)

        in_flight = sorted(day for day in self.store.pending_dates() if start <= day <= end)
        if in_flight:
            raise ToggleInFlightError(in_flight[0])

        pendings: list[tuple[date, Pending]] = [
            (day, self.store.begin(day, False)) for day in self.store.blocked_between(start, end)
        ]

        try:
            released = await self.remote.unblock_range(property_id, start, end)
        except Exception as exc:
            for day, pending in pendings:
                self.store.rollback(day, pending)
            logger.warning("Unblocking %s..%s for property %s failed, restored previous state: %s", start, end, property_id, exc)
            if isinstance(exc, RemoteToggleError):
                raise
            raise RemoteToggleError(property_id, start, str(exc)) from exc
        except BaseException:
            for day, pending in pendings:
                self.store.rollback(day, pending)
            logger.warning("Unblocking %s..%s for property %s was interrupted, restored previous state", start, end, property_id)
            raise

        for day, pending in pendings:
            self.store.commit(day, pending)
        logger.info("Released %d dates between %s and %s for property %s", released, start, end, property_id)
        return released

    def _refuse_past(self, day: date, today: Optional[date]) -> None:
        current_day = resolve_today(today, self.timezone)
        if day < current_day:
            raise PastDateError(day, current_day)

    def _require_loaded(self, property_id: str) -> None:
        if self.store.property_id != property_id:
            raise PropertyMismatchError(property_id, self.store.property_id)
