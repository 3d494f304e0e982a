from __future__ import annotations

from dataclasses import dataclass

from ...domain import Property
from ..supabase import SupabaseGateway


@dataclass(slots=True)
class PropertyRepository:
    gateway: SupabaseGateway
    table_name: str

    async def list_for_owner(self) -> list[Property]:
        table = await self.gateway.table(self.table_name)
        response = await (
            table.select("id, title, status, created_at")
            .eq("owner_id", self.gateway.current_user_id())
            .order("created_at", desc=True)
            .execute()
        )
        records = response.data or []
        return [Property.from_record(record) for record in records]
