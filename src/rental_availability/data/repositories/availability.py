from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional

import httpx
from postgrest.exceptions import APIError

from ...domain import AvailabilityRecord, FailureKind, RemoteLoadError, RemoteToggleError
from ..supabase import SupabaseGateway

logger = logging.getLogger(__name__)


def _api_message(exc: APIError) -> str:
    return getattr(exc, "message", None) or str(exc)


@dataclass(slots=True)
class AvailabilityRepository:
    """Remote availability reads and mutations backed by Supabase RPCs."""

    gateway: SupabaseGateway
    availability_rpc: str
    toggle_rpc: str
    unblock_rpc: str

    async def fetch(
        self,
        property_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[AvailabilityRecord]:
        if (start is None) != (end is None):
            raise ValueError("Both start and end are required to fetch a window.")
        params: Dict[str, Any] = {"p_property_id": property_id}
        if start is not None and end is not None:
            params["p_start_date"] = start.isoformat()
            params["p_end_date"] = end.isoformat()
        try:
            query = await self.gateway.rpc(self.availability_rpc, params)
            response = await query.execute()
        except APIError as exc:
            raise RemoteLoadError(property_id, _api_message(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteLoadError(property_id, str(exc), kind=FailureKind.NETWORK) from exc

        records = response.data or []
        logger.debug("Fetched %d availability rows for property %s", len(records), property_id)
        try:
            return [AvailabilityRecord.from_record(record) for record in records]
        except (KeyError, TypeError, ValueError) as exc:
            raise RemoteLoadError(property_id, f"malformed availability row: {exc!r}") from exc

    async def toggle(self, property_id: str, day: date, reason: str) -> Any:
        params = {"p_property_id": property_id, "p_date": day.isoformat(), "p_reason": reason}
        try:
            query = await self.gateway.rpc(self.toggle_rpc, params)
            response = await query.execute()
        except APIError as exc:
            raise RemoteToggleError(property_id, day, _api_message(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteToggleError(property_id, day, str(exc), kind=FailureKind.NETWORK) from exc

        payload = response.data
        if isinstance(payload, dict) and payload.get("success") is False:
            message = str(payload.get("error") or payload.get("message") or "toggle rejected")
            raise RemoteToggleError(property_id, day, message)
        return payload

    async def unblock_range(self, property_id: str, start: date, end: date) -> int:
        params = {"p_property_id": property_id, "p_start_date": start.isoformat(), "p_end_date": end.isoformat()}
        try:
            query = await self.gateway.rpc(self.unblock_rpc, params)
            response = await query.execute()
        except APIError as exc:
            raise RemoteToggleError(property_id, start, _api_message(exc)) from exc
        except httpx.HTTPError as exc:
            raise RemoteToggleError(property_id, start, str(exc), kind=FailureKind.NETWORK) from exc
        released = response.data
        return int(released) if isinstance(released, (int, float)) else 0
