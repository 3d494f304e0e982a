"""Per-date availability states.

A date is either ``Confirmed`` (the remote system agrees with it) or
``Pending`` (an optimistic change awaiting the remote call). Resolving a
pending state is a pure transition to either its target or its previous
confirmed state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True, slots=True)
class Confirmed:
    blocked: bool
    reason: Optional[str] = None


AVAILABLE = Confirmed(blocked=False)


@dataclass(frozen=True, slots=True, eq=False)
class Pending:
    target: Confirmed
    previous: Confirmed

    @property
    def blocked(self) -> bool:
        return self.target.blocked

    @property
    def reason(self) -> Optional[str]:
        return self.target.reason

    def commit(self) -> Confirmed:
        return self.target

    def rollback(self) -> Confirmed:
        return self.previous


DayState = Union[Confirmed, Pending]


def confirmed(blocked: bool, reason: Optional[str] = None) -> Confirmed:
    if not blocked:
        return AVAILABLE
    return Confirmed(blocked=True, reason=reason or "")
