from __future__ import annotations

from datetime import timedelta
from typing import Iterable, List

from ..domain import AvailabilityRange, BlockedDateEntry

ONE_DAY = timedelta(days=1)


def compress(entries: Iterable[BlockedDateEntry]) -> List[AvailabilityRange]:
    """Collapse blocked days into runs of consecutive days sharing a reason.

    Entries are sorted by date first. Two entries for the same day are not
    merged: a differing reason starts a new run.
    """

    ordered = sorted(entries, key=lambda entry: entry.date)
    if not ordered:
        return []

    ranges: list[AvailabilityRange] = []
    run_start = ordered[0]
    run_end = ordered[0]
    for entry in ordered[1:]:
        if entry.date - run_end.date == ONE_DAY and entry.reason == run_start.reason:
            run_end = entry
            continue
        ranges.append(AvailabilityRange(run_start.date, run_end.date, run_start.reason))
        run_start = run_end = entry

    ranges.append(AvailabilityRange(run_start.date, run_end.date, run_start.reason))
    return ranges


def expand(ranges: Iterable[AvailabilityRange]) -> List[BlockedDateEntry]:
    """Inverse of :func:`compress`: one entry per day covered by ``ranges``."""

    entries: list[BlockedDateEntry] = []
    for span in ranges:
        entries.extend(BlockedDateEntry(day, span.reason) for day in span.dates())
    return entries


__all__ = ["compress", "expand"]
