from __future__ import annotations

import asyncio
from datetime import date
from typing import Dict, List, Optional, Tuple

import pytest

from rental_availability.config import (
    AppSettings,
    CalendarSettings,
    OwnerSettings,
    StorageSettings,
    SupabaseSettings,
)
from rental_availability.data import AvailabilityStore
from rental_availability.domain import AvailabilityRecord, FailureKind, RemoteLoadError, RemoteToggleError
from rental_availability.services import ToggleCoordinator

PROPERTY_ID = "prop-123"
TODAY = date(2025, 6, 1)
DEFAULT_REASON = "manually blocked"


class FakeAvailabilityBackend:
    """In-memory stand-in for the Supabase availability procedures."""

    def __init__(self, blocked: Optional[Dict[date, str]] = None) -> None:
        self.rows: Dict[date, Tuple[bool, Optional[str]]] = {
            day: (False, reason) for day, reason in (blocked or {}).items()
        }
        self.fail_fetch = False
        self.fail_toggle: Optional[FailureKind] = None
        self.raise_unexpected = False
        self.gate: Optional[asyncio.Event] = None
        self.fetch_calls: List[Tuple[str, Optional[date], Optional[date]]] = []
        self.toggle_calls: List[Tuple[str, date, str]] = []
        self.unblock_calls: List[Tuple[str, date, date]] = []

    def mark_available(self, day: date) -> None:
        self.rows[day] = (True, None)

    async def fetch(
        self,
        property_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[AvailabilityRecord]:
        self.fetch_calls.append((property_id, start, end))
        if self.fail_fetch:
            raise RemoteLoadError(property_id, "service unavailable", kind=FailureKind.NETWORK)
        return [
            AvailabilityRecord(date=day, is_available=available, reason=reason, id=f"row-{day.isoformat()}")
            for day, (available, reason) in self.rows.items()
        ]

    async def toggle(self, property_id: str, day: date, reason: str) -> dict:
        self.toggle_calls.append((property_id, day, reason))
        if self.gate is not None:
            await self.gate.wait()
        if self.raise_unexpected:
            raise ConnectionResetError("socket closed")
        if self.fail_toggle is not None:
            raise RemoteToggleError(property_id, day, "rejected", kind=self.fail_toggle)
        available, _ = self.rows.get(day, (True, None))
        self.rows[day] = (True, None) if not available else (False, reason)
        return {"success": True}

    async def unblock_range(self, property_id: str, start: date, end: date) -> int:
        self.unblock_calls.append((property_id, start, end))
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_toggle is not None:
            raise RemoteToggleError(property_id, start, "rejected", kind=self.fail_toggle)
        released = 0
        for day, (available, _) in list(self.rows.items()):
            if start <= day <= end and not available:
                self.rows[day] = (True, None)
                released += 1
        return released


@pytest.fixture
def backend() -> FakeAvailabilityBackend:
    return FakeAvailabilityBackend(
        {
            date(2025, 6, 10): "owner-block",
            date(2025, 6, 11): "owner-block",
            date(2025, 6, 12): "owner-block",
            date(2025, 6, 20): "maintenance",
        }
    )


@pytest.fixture
def store(backend: FakeAvailabilityBackend) -> AvailabilityStore:
    return AvailabilityStore(source=backend)


@pytest.fixture
def coordinator(store: AvailabilityStore, backend: FakeAvailabilityBackend) -> ToggleCoordinator:
    return ToggleCoordinator(store=store, remote=backend, default_reason=DEFAULT_REASON)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        supabase=SupabaseSettings(url="https://example.supabase.co", anon_key="anon"),
        storage=StorageSettings(
            availability_rpc="get_property_availability",
            toggle_rpc="toggle_property_availability",
            unblock_rpc="unblock_property_dates",
            properties_table="properties",
        ),
        calendar=CalendarSettings(default_reason=DEFAULT_REASON, timezone="UTC", visible_months=2),
        owner=OwnerSettings(email=None, password=None),
    )
