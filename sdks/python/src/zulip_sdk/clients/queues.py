from __future__ import annotations

from typing import Any

from .base import BaseClient


class QueuesClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def register(self, params: dict[str, Any] | None = None) -> Any:
        return await self._api.request_json("POST", "/register", params=params)

    async def deregister(self, params: dict[str, Any]) -> Any:
        return await self._api.request_json("DELETE", "/events", params=params)
