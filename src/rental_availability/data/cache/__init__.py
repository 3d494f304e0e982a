from __future__ import annotations

from .availability_store import AvailabilitySource, AvailabilityStore

__all__ = ["AvailabilitySource", "AvailabilityStore"]
