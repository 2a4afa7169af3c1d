from __future__ import annotations

import asyncio
from collections.abc import Sequence

import httpx
import structlog
from zulip_sdk import ZulipSettings, connect

from .examples import DEFAULT_ORDER, build_registry
from .logging_config import configure_logging
from .registry import ExampleRegistry
from .results import ResultAccumulator
from .runner import ExampleRunner


async def generate(
    settings: ZulipSettings | None = None,
    *,
    names: Sequence[str] = DEFAULT_ORDER,
    registry: ExampleRegistry | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ResultAccumulator:
    """
    Run the documented examples against a live server and collect their responses.

    Settings default to the ``ZULIP_*`` environment; ``names`` defaults to the
    full documented example list in its fixed order. Logging goes to stderr at
    WARNING level unless structlog has already been configured.
    """

    if not structlog.is_configured():
        configure_logging()
    runner = ExampleRunner(registry if registry is not None else build_registry())
    async with connect(settings, transport=transport) as client:
        return await runner.run(client, names)


def run(
    settings: ZulipSettings | None = None,
    *,
    names: Sequence[str] = DEFAULT_ORDER,
    registry: ExampleRegistry | None = None,
) -> ResultAccumulator:
    return asyncio.run(generate(settings, names=names, registry=registry))
