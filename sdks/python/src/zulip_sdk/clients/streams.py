from __future__ import annotations

from typing import Any
from urllib.parse import quote

from .base import BaseClient


class TopicsClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def retrieve(self, params: dict[str, Any]) -> Any:
        query = dict(params)
        stream_id = query.pop("stream_id")
        return await self._api.request_json(
            "GET",
            f"/users/me/{quote(str(stream_id), safe='')}/topics",
            params=query,
        )


class SubscriptionsClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api

    async def retrieve(self, params: dict[str, Any] | None = None) -> Any:
        return await self._api.request_json("GET", "/users/me/subscriptions", params=params)


class StreamsClient:
    def __init__(self, api: BaseClient) -> None:
        self._api = api
        self.topics = TopicsClient(api)
        self.subscriptions = SubscriptionsClient(api)

    async def get_stream_id(self, stream: str) -> Any:
        return await self._api.request_json("GET", "/get_stream_id", params={"stream": stream})
