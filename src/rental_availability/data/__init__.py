"""Data access layer."""

from __future__ import annotations

from .supabase import SupabaseGateway, SupabaseNotInitializedError, SupabaseSessionMissingError
from .cache.availability_store import AvailabilitySource, AvailabilityStore

__all__ = [
    "AvailabilitySource",
    "AvailabilityStore",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
    "SupabaseSessionMissingError",
]
