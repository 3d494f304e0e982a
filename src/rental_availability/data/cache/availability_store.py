from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, FrozenSet, List, Optional, Protocol

from ...core.ranges import compress
from ...domain import (
    AVAILABLE,
    AvailabilityRange,
    AvailabilityRecord,
    AvailabilitySnapshot,
    BlockedDateEntry,
    DayState,
    Pending,
    ToggleInFlightError,
    confirmed,
)

logger = logging.getLogger(__name__)


class AvailabilitySource(Protocol):
    async def fetch(
        self,
        property_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[AvailabilityRecord]: ...


@dataclass
class AvailabilityStore:
    """In-memory view of the blocked days of the selected property.

    Absent days are available. Present days hold either a confirmed state or a
    pending optimistic change; reads always see the pending target.
    """

    source: AvailabilitySource
    property_id: Optional[str] = None
    _states: Dict[date, DayState] = field(default_factory=dict)
    _revision: int = 0
    _ranges: Optional[List[AvailabilityRange]] = None
    _ranges_revision: int = -1

    async def load(
        self,
        property_id: str,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> AvailabilitySnapshot:
        # Fetch before touching state so a failed read leaves the previous snapshot intact.
        records = await self.source.fetch(property_id, start, end)
        states: Dict[date, DayState] = {}
        for record in records:
            if record.is_available:
                continue
            states[record.date] = confirmed(True, record.reason)

        self.property_id = property_id
        self._states = states
        self._touch()
        logger.info("Loaded %d blocked dates for property %s", len(states), property_id)
        return self.snapshot()

    def is_blocked(self, day: date) -> bool:
        state = self._states.get(day)
        return state is not None and state.blocked

    def reason_for(self, day: date) -> Optional[str]:
        state = self._states.get(day)
        if state is None or not state.blocked:
            return None
        return state.reason

    def state_of(self, day: date) -> DayState:
        return self._states.get(day, AVAILABLE)

    def is_pending(self, day: date) -> bool:
        return isinstance(self._states.get(day), Pending)

    def pending_dates(self) -> FrozenSet[date]:
        return frozenset(day for day, state in self._states.items() if isinstance(state, Pending))

    def apply_local(self, day: date, blocked: bool, reason: Optional[str] = None) -> None:
        """Set the confirmed state of ``day`` without contacting the remote system."""

        if blocked and reason is None:
            reason = self.reason_for(day)
        self._set(day, confirmed(blocked, reason))

    def begin(self, day: date, blocked: bool, reason: Optional[str] = None) -> Pending:
        current = self._states.get(day, AVAILABLE)
        if isinstance(current, Pending):
            raise ToggleInFlightError(day)
        pending = Pending(target=confirmed(blocked, reason), previous=current)
        self._states[day] = pending
        self._touch()
        return pending

    def commit(self, day: date, pending: Pending) -> bool:
        if self._states.get(day) is not pending:
            logger.debug("Pending change for %s was superseded; commit skipped", day)
            return False
        self._set(day, pending.commit())
        return True

    def rollback(self, day: date, pending: Pending) -> bool:
        if self._states.get(day) is not pending:
            logger.debug("Pending change for %s was superseded; rollback skipped", day)
            return False
        self._set(day, pending.rollback())
        return True

    def entries(self) -> List[BlockedDateEntry]:
        return [
            BlockedDateEntry(date=day, reason=state.reason or "")
            for day, state in sorted(self._states.items())
            if state.blocked
        ]

    def blocked_between(self, start: date, end: date) -> List[date]:
        return [entry.date for entry in self.entries() if start <= entry.date <= end]

    def snapshot(self) -> AvailabilitySnapshot:
        return AvailabilitySnapshot(property_id=self.property_id or "", entries=tuple(self.entries()))

    def ranges(self) -> List[AvailabilityRange]:
        if self._ranges is None or self._ranges_revision != self._revision:
            self._ranges = compress(self.entries())
            self._ranges_revision = self._revision
        return list(self._ranges)

    def clear(self) -> None:
        self.property_id = None
        self._states = {}
        self._touch()

    def _set(self, day: date, state: DayState) -> None:
        if state.blocked:
            self._states[day] = state
        else:
            self._states.pop(day, None)
        self._touch()

    def _touch(self) -> None:
        self._revision += 1

    def __len__(self) -> int:
        return sum(1 for state in self._states.values() if state.blocked)

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.is_blocked(day)
