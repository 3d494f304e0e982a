from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    AVAILABLE = "available"
    BLOCKED = "blocked"


class FailureKind(str, Enum):
    NETWORK = "network"
    APPLICATION = "application"
