from __future__ import annotations

import copy
import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATHS = [
    REPO_ROOT / "sdks" / "python" / "src",
    REPO_ROOT / "docgen" / "python" / "src",
]
for _path in SRC_PATHS:
    if str(_path) not in sys.path:
        sys.path.insert(0, str(_path))

import structlog  # noqa: E402


def quiet_logging() -> None:
    structlog.reset_defaults()
    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())


quiet_logging()


class FakeApiFailure(Exception):
    pass


RESPONSES: dict[str, Any] = {
    "messages.send": {"result": "success", "msg": "", "id": 42},
    "messages.retrieve": {
        "result": "success",
        "msg": "",
        "anchor": 21,
        "found_newest": True,
        "messages": [{"id": 21, "content": "Hello", "sender_email": "iago@zulip.com"}],
    },
    "users.create": {"result": "success", "msg": "", "user_id": 25},
    "users.retrieve": {"result": "success", "msg": "", "members": [{"user_id": 9, "full_name": "Iago"}]},
    "users.me.get_profile": {"result": "success", "msg": "", "user_id": 5, "email": "iago@zulip.com"},
    "emojis.retrieve": {"result": "success", "msg": "", "emoji": {}},
    "queues.register": {"result": "success", "msg": "", "queue_id": "1517975029:0", "last_event_id": -1},
    "queues.deregister": {"result": "success", "msg": ""},
    "streams.get_stream_id": {"result": "success", "msg": "", "stream_id": 15},
    "streams.topics.retrieve": {"result": "success", "msg": "", "topics": [{"name": "Castle", "max_id": 26}]},
    "streams.subscriptions.retrieve": {"result": "success", "msg": "", "subscriptions": []},
}


class FakeZulipClient:
    """In-memory stand-in for ZulipClient: fixed responses, every call recorded."""

    def __init__(self, *, fail_on: str | None = None) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self._fail_on = fail_on

        self.messages = SimpleNamespace(send=self._op("messages.send"), retrieve=self._op("messages.retrieve"))
        self.users = SimpleNamespace(
            create=self._op("users.create"),
            retrieve=self._op("users.retrieve"),
            me=SimpleNamespace(get_profile=self._op("users.me.get_profile")),
        )
        self.emojis = SimpleNamespace(retrieve=self._op("emojis.retrieve"))
        self.queues = SimpleNamespace(register=self._op("queues.register"), deregister=self._op("queues.deregister"))
        self.streams = SimpleNamespace(
            get_stream_id=self._op("streams.get_stream_id"),
            topics=SimpleNamespace(retrieve=self._op("streams.topics.retrieve")),
            subscriptions=SimpleNamespace(retrieve=self._op("streams.subscriptions.retrieve")),
        )

    def _op(self, name: str) -> Callable[..., Any]:
        async def _call(*args: Any) -> Any:
            self.calls.append((name, args))
            if name == self._fail_on:
                raise FakeApiFailure(f"{name} failed")
            return copy.deepcopy(RESPONSES[name])

        return _call

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]
