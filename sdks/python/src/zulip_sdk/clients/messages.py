from __future__ import annotations

from typing import Any

from .base import BaseClient


class MessagesClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def send(self, params: dict[str, Any]) -> Any:
        return await self._api.request_json("POST", "/messages", params=params)

    async def retrieve(self, params: dict[str, Any]) -> Any:
        return await self._api.request_json("GET", "/messages", params=params)
