from __future__ import annotations

from typing import Any

from .base import BaseClient


class OwnUserClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def get_profile(self) -> Any:
        return await self._api.request_json("GET", "/users/me")


class UsersClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api
        self.me = OwnUserClient(api)

    async def create(self, params: dict[str, Any]) -> Any:
        return await self._api.request_json("POST", "/users", params=params)

    async def retrieve(self, params: dict[str, Any] | None = None) -> Any:
        return await self._api.request_json("GET", "/users", params=params)
