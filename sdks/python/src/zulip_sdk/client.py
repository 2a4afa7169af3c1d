from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from . import __version__
from .clients import BaseClient, EmojisClient, MessagesClient, QueuesClient, StreamsClient, UsersClient
from .config import ZulipSettings, load_settings


class ZulipClient(BaseClient):
    """Async Zulip client grouped by resource area.

    ``client.messages``, ``client.users``, ``client.emojis``, ``client.queues``
    and ``client.streams`` all share one HTTP connection pool.
    """

    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        api_key: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(
            base_url=base_url,
            username=username,
            api_key=api_key,
            timeout=timeout,
            verify_ssl=verify_ssl,
            default_headers={"User-Agent": f"zulip-doc-examples/{__version__}"},
            transport=transport,
        )
        self.messages = MessagesClient(self)
        self.users = UsersClient(self)
        self.emojis = EmojisClient(self)
        self.queues = QueuesClient(self)
        self.streams = StreamsClient(self)

    @classmethod
    def from_settings(
        cls,
        settings: ZulipSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ZulipClient":
        return cls(
            base_url=settings.api_url,
            username=settings.username,
            api_key=settings.api_key,
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
            transport=transport,
        )


@asynccontextmanager
async def connect(
    settings: ZulipSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[ZulipClient]:
    """Open one client connection, loading settings from the environment if none are given."""
    client = ZulipClient.from_settings(settings or load_settings(), transport=transport)
    try:
        yield client
    finally:
        await client.aclose()
