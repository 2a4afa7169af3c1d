"""
Example registry.

Maps example name -> descriptor. Populated explicitly (see ``build_registry``
in ``zulip_doc_examples.examples``), read by name during a run.

An operation callable signature:
    async fn(client) -> SingleResult | MultiResult
"""

from __future__ import annotations

from collections.abc import Awaitable, Iterator
from dataclasses import dataclass
from typing import Any, Callable

import structlog

from .errors import ExampleNotFoundError
from .results import OperationResult

logger = structlog.get_logger()

Operation = Callable[[Any], Awaitable[OperationResult]]


def split_endpoint(endpoint: str) -> tuple[str, str]:
    parts = endpoint.split(":")
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"endpoint must look like '<path>:<method>': {endpoint!r}")
    return parts[0], parts[1]


@dataclass(frozen=True, slots=True)
class ExampleDescriptor:
    name: str
    endpoint: str
    status_code: int
    operation: Operation

    @property
    def path(self) -> str:
        return split_endpoint(self.endpoint)[0]

    @property
    def method(self) -> str:
        return split_endpoint(self.endpoint)[1]


class ExampleRegistry:
    def __init__(self) -> None:
        self._examples: dict[str, ExampleDescriptor] = {}

    def register(self, name: str, endpoint: str, status_code: int, operation: Operation) -> ExampleDescriptor:
        if not isinstance(name, str) or not name.strip():
            raise ValueError("example name must be a non-empty string")
        split_endpoint(endpoint)
        if isinstance(status_code, bool) or not isinstance(status_code, int):
            raise TypeError(f"status_code must be an int, got {status_code!r}")

        if name in self._examples:
            # Later registrations win.
            logger.warning("example_overwritten", example=name, endpoint=endpoint)
        descriptor = ExampleDescriptor(name=name, endpoint=endpoint, status_code=status_code, operation=operation)
        self._examples[name] = descriptor
        return descriptor

    def example(self, name: str, endpoint: str, status_code: int = 200) -> Callable[[Operation], Operation]:
        """Decorator form of ``register``; returns the operation unchanged."""

        def _decorate(operation: Operation) -> Operation:
            self.register(name, endpoint, status_code, operation)
            return operation

        return _decorate

    def lookup(self, name: str) -> ExampleDescriptor:
        try:
            return self._examples[name]
        except KeyError:
            raise ExampleNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._examples)

    def __contains__(self, name: object) -> bool:
        return name in self._examples

    def __len__(self) -> int:
        return len(self._examples)

    def __iter__(self) -> Iterator[ExampleDescriptor]:
        return iter(list(self._examples.values()))
