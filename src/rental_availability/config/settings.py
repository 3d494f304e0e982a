from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    availability_rpc: str
    toggle_rpc: str
    unblock_rpc: str
    properties_table: str


@dataclass(frozen=True)
class CalendarSettings:
    default_reason: str
    timezone: str
    visible_months: int


@dataclass(frozen=True)
class OwnerSettings:
    email: Optional[str]
    password: Optional[str]


@dataclass(frozen=True)
class AppSettings:
    supabase: SupabaseSettings
    storage: StorageSettings
    calendar: CalendarSettings
    owner: OwnerSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        availability_rpc=os.getenv("SUPABASE_AVAILABILITY_RPC", "get_property_availability"),
        toggle_rpc=os.getenv("SUPABASE_TOGGLE_RPC", "toggle_property_availability"),
        unblock_rpc=os.getenv("SUPABASE_UNBLOCK_RPC", "unblock_property_dates"),
        properties_table=os.getenv("SUPABASE_PROPERTIES_TABLE", "properties"),
    )

    calendar = CalendarSettings(
        default_reason=os.getenv("RENTAL_DEFAULT_BLOCK_REASON", "Bloqué manuellement"),
        timezone=os.getenv("RENTAL_TIMEZONE", "UTC"),
        visible_months=_int_from_env("RENTAL_VISIBLE_MONTHS", 2),
    )

    owner = OwnerSettings(
        email=os.getenv("RENTAL_OWNER_EMAIL"),
        password=os.getenv("RENTAL_OWNER_PASSWORD"),
    )

    return AppSettings(supabase=supabase, storage=storage, calendar=calendar, owner=owner)
