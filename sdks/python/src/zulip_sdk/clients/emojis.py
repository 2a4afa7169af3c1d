from __future__ import annotations

from typing import Any

from .base import BaseClient


class EmojisClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def retrieve(self) -> Any:
        return await self._api.request_json("GET", "/realm/emoji")
