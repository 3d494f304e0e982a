"""Supabase repositories for availability data."""

from __future__ import annotations

from .availability import AvailabilityRepository
from .properties import PropertyRepository

__all__ = ["AvailabilityRepository", "PropertyRepository"]
