from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from supabase import AsyncClient, acreate_client

from ..config.settings import SupabaseSettings


class SupabaseNotInitializedError(RuntimeError):
    """Raised when accessing the Supabase client before initialization."""


class SupabaseSessionMissingError(RuntimeError):
    """Raised when a session-specific action is attempted without a session."""


@dataclass
class SupabaseGateway:
    """Thin wrapper around the asynchronous Supabase client with session awareness."""

    settings: SupabaseSettings
    _client: Optional[AsyncClient] = None
    _session: Optional[Any] = None

    async def ensure_client(self) -> AsyncClient:
        if self._client is not None:
            return self._client
        if not self.settings.is_configured:
            missing = ", ".join(self.settings.missing_env_vars)
            raise SupabaseNotInitializedError(f"Supabase settings are incomplete (missing {missing}).")
        self._client = await acreate_client(self.settings.url, self.settings.anon_key)
        return self._client

    def client(self) -> AsyncClient:
        if self._client is None:
            raise SupabaseNotInitializedError("Supabase client has not been initialized. Call ensure_client() first.")
        return self._client

    def set_session(self, session: Any) -> None:
        self._session = session

    def clear_session(self) -> None:
        self._session = None

    def session(self) -> Any:
        if self._session is None:
            raise SupabaseSessionMissingError("Supabase session is not available.")
        return self._session

    def current_user_id(self) -> str:
        session = self.session()
        user = getattr(session, "user", None)
        identifier = getattr(user, "id", None)
        if not identifier:
            raise SupabaseSessionMissingError("Supabase session has no user id.")
        return identifier

    def is_ready(self) -> bool:
        return self._client is not None and self._session is not None

    async def rpc(self, name: str, params: Dict[str, Any]):
        client = await self.ensure_client()
        return client.rpc(name, params)

    async def table(self, name: str):
        client = await self.ensure_client()
        return client.table(name)
