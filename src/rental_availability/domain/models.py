from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from .enums import DayStatus


def parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


@dataclass(frozen=True, slots=True)
class BlockedDateEntry:
    """A single calendar day marked unavailable, with the reason it was blocked."""

    date: date
    reason: str = ""


@dataclass(frozen=True, slots=True)
class AvailabilityRange:
    """A run of consecutive blocked days sharing one reason."""

    start_date: date
    end_date: date
    reason: str = ""

    @property
    def days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def dates(self) -> list[date]:
        return [self.start_date + timedelta(days=offset) for offset in range(self.days)]


@dataclass(slots=True)
class AvailabilityRecord:
    """Row returned by the remote availability read."""

    date: date
    is_available: bool
    reason: Optional[str] = None
    id: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "AvailabilityRecord":
        return cls(
            date=parse_date(record["date"]),
            is_available=bool(record.get("is_available", True)),
            reason=record.get("reason"),
            id=str(record["id"]) if record.get("id") is not None else None,
        )

    def to_entry(self) -> BlockedDateEntry:
        return BlockedDateEntry(date=self.date, reason=self.reason or "")


@dataclass(frozen=True, slots=True)
class AvailabilitySnapshot:
    property_id: str
    entries: Tuple[BlockedDateEntry, ...] = ()

    @property
    def dates(self) -> frozenset[date]:
        return frozenset(entry.date for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class ToggleOutcome:
    property_id: str
    date: date
    status: DayStatus
    reason: Optional[str] = None

    @property
    def blocked(self) -> bool:
        return self.status is DayStatus.BLOCKED


@dataclass(slots=True)
class Property:
    id: str
    title: str
    status: str = "inactive"
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Property":
        known = {"id", "title", "status"}
        return cls(
            id=str(record["id"]),
            title=str(record.get("title") or ""),
            status=str(record.get("status") or "inactive"),
            metadata={key: value for key, value in record.items() if key not in known},
        )

    @property
    def is_active(self) -> bool:
        return self.status == "active"
