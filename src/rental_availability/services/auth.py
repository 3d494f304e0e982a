from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .context import ServiceContext


@dataclass(slots=True)
class AuthService:
    context: ServiceContext

    async def sign_in_with_password(self, email: str, password: str) -> Any:
        client = await self.context.gateway.ensure_client()
        response = await client.auth.sign_in_with_password({"email": email, "password": password})
        session = getattr(response, "session", None)
        if session:
            self.context.gateway.set_session(session)
            self.context.store.clear()
        return response

    def current_session(self) -> Any:
        return self.context.gateway.session()

    async def sign_out(self) -> None:
        try:
            client = await self.context.gateway.ensure_client()
            await client.auth.sign_out()
        finally:
            self.context.gateway.clear_session()
            self.context.store.clear()
