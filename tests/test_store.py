from __future__ import annotations

from datetime import date

import pytest

from conftest import PROPERTY_ID
from rental_availability.domain import (
    AvailabilityRange,
    BlockedDateEntry,
    Confirmed,
    Pending,
    RemoteLoadError,
    ToggleInFlightError,
)


@pytest.mark.asyncio
async def test_load_keeps_only_blocked_rows(store, backend):
    backend.mark_available(date(2025, 6, 15))

    snapshot = await store.load(PROPERTY_ID)

    assert store.property_id == PROPERTY_ID
    assert len(snapshot) == 4
    assert store.is_blocked(date(2025, 6, 10))
    assert not store.is_blocked(date(2025, 6, 15))
    assert not store.is_blocked(date(2025, 6, 13))
    assert store.reason_for(date(2025, 6, 20)) == "maintenance"


@pytest.mark.asyncio
async def test_load_replaces_previous_state(store, backend):
    await store.load(PROPERTY_ID)
    store.apply_local(date(2025, 7, 1), True, "local only")
    backend.rows.clear()

    await store.load("other-property")

    assert store.property_id == "other-property"
    assert store.entries() == []
    assert not store.is_blocked(date(2025, 7, 1))


@pytest.mark.asyncio
async def test_failed_load_keeps_previous_snapshot(store, backend):
    await store.load(PROPERTY_ID)
    before = store.snapshot()
    backend.fail_fetch = True

    with pytest.raises(RemoteLoadError):
        await store.load("other-property")

    assert store.property_id == PROPERTY_ID
    assert store.snapshot() == before


@pytest.mark.asyncio
async def test_failed_first_load_leaves_store_empty(store, backend):
    backend.fail_fetch = True

    with pytest.raises(RemoteLoadError):
        await store.load(PROPERTY_ID)

    assert store.property_id is None
    assert len(store) == 0


@pytest.mark.asyncio
async def test_load_passes_window(store, backend):
    await store.load(PROPERTY_ID, start=date(2025, 6, 1), end=date(2025, 7, 31))

    assert backend.fetch_calls == [(PROPERTY_ID, date(2025, 6, 1), date(2025, 7, 31))]


def test_apply_local_block_and_release(store):
    day = date(2025, 8, 1)

    store.apply_local(day, True, "guests")
    assert store.is_blocked(day)
    assert store.reason_for(day) == "guests"

    store.apply_local(day, False)
    assert not store.is_blocked(day)
    assert store.reason_for(day) is None


def test_apply_local_same_state_replaces_reason(store):
    day = date(2025, 8, 1)
    store.apply_local(day, True, "guests")

    store.apply_local(day, True)
    assert store.reason_for(day) == "guests"

    store.apply_local(day, True, "repairs")
    assert store.reason_for(day) == "repairs"
    assert len(store) == 1


def test_begin_exposes_target_and_rejects_second_change(store):
    day = date(2025, 8, 1)

    pending = store.begin(day, True, "guests")

    assert isinstance(pending, Pending)
    assert store.is_blocked(day)
    assert store.pending_dates() == frozenset({day})
    with pytest.raises(ToggleInFlightError):
        store.begin(day, False)


def test_rollback_restores_previous_reason(store):
    day = date(2025, 8, 1)
    store.apply_local(day, True, "guests")

    pending = store.begin(day, False)
    assert not store.is_blocked(day)

    assert store.rollback(day, pending)
    assert store.state_of(day) == Confirmed(blocked=True, reason="guests")
    assert store.pending_dates() == frozenset()


def test_commit_makes_target_final(store):
    day = date(2025, 8, 1)
    pending = store.begin(day, True, "guests")

    assert store.commit(day, pending)
    assert store.state_of(day) == Confirmed(blocked=True, reason="guests")
    assert not store.is_pending(day)


@pytest.mark.asyncio
async def test_reload_supersedes_pending_change(store, backend):
    day = date(2025, 6, 10)
    await store.load(PROPERTY_ID)
    pending = store.begin(day, False)

    await store.load(PROPERTY_ID)

    assert not store.rollback(day, pending)
    assert not store.commit(day, pending)
    assert store.is_blocked(day)


@pytest.mark.asyncio
async def test_entries_and_ranges_follow_state(store):
    await store.load(PROPERTY_ID)

    assert store.entries()[0] == BlockedDateEntry(date(2025, 6, 10), "owner-block")
    first = store.ranges()
    assert first == [
        AvailabilityRange(date(2025, 6, 10), date(2025, 6, 12), "owner-block"),
        AvailabilityRange(date(2025, 6, 20), date(2025, 6, 20), "maintenance"),
    ]

    store.apply_local(date(2025, 6, 13), True, "owner-block")

    assert store.ranges()[0] == AvailabilityRange(date(2025, 6, 10), date(2025, 6, 13), "owner-block")
    assert first[0].end_date == date(2025, 6, 12)


@pytest.mark.asyncio
async def test_clear_discards_snapshot(store):
    await store.load(PROPERTY_ID)

    store.clear()

    assert store.property_id is None
    assert store.ranges() == []
    assert date(2025, 6, 10) not in store
