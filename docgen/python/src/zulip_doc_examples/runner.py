from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import structlog

from .errors import DuplicateResultError
from .registry import ExampleDescriptor, ExampleRegistry
from .results import MultiResult, ResultAccumulator, ResultRecord, SingleResult

logger = structlog.get_logger()


def _record(descriptor: ExampleDescriptor, name: str, result: Any) -> ResultRecord:
    return ResultRecord(
        name=name,
        endpoint=descriptor.path,
        method=descriptor.method,
        status_code=str(descriptor.status_code),
        result=result,
    )


def normalize(descriptor: ExampleDescriptor, outcome: object) -> list[ResultRecord]:
    if isinstance(outcome, MultiResult):
        return [_record(descriptor, f"{descriptor.name}_{index}", value) for index, value in enumerate(outcome.values)]
    if isinstance(outcome, SingleResult):
        return [_record(descriptor, descriptor.name, outcome.value)]
    raise TypeError(
        f"Example {descriptor.name!r} returned {type(outcome).__name__}; expected SingleResult or MultiResult"
    )


class ExampleRunner:
    """Runs registered examples one after another against a single client."""

    def __init__(self, registry: ExampleRegistry) -> None:
        self._registry = registry

    async def run_example(self, client: Any, descriptor: ExampleDescriptor) -> list[ResultRecord]:
        logger.info("example_started", example=descriptor.name, endpoint=descriptor.endpoint)
        outcome = await descriptor.operation(client)
        records = normalize(descriptor, outcome)
        logger.info("example_completed", example=descriptor.name, records=len(records))
        return records

    async def run(
        self,
        client: Any,
        names: Sequence[str],
        accumulator: ResultAccumulator | None = None,
    ) -> ResultAccumulator:
        """Run ``names`` in order and append their records to ``accumulator``.

        Every name is resolved before the first call is made. Records are only
        committed once all examples have completed; if any operation raises, the
        exception propagates and ``accumulator`` is left as it was.
        """
        target = accumulator if accumulator is not None else ResultAccumulator()
        descriptors = [self._registry.lookup(name) for name in names]
        repeated = sorted({name for name in names if names.count(name) > 1})
        if repeated:
            raise DuplicateResultError(f"Examples listed more than once: {', '.join(repeated)}")

        seen = set(target.names())
        staged: list[ResultRecord] = []
        for descriptor in descriptors:
            for record in await self.run_example(client, descriptor):
                if record.name in seen:
                    raise DuplicateResultError(f"Duplicate result record name: {record.name}")
                seen.add(record.name)
                staged.append(record)

        target.extend(staged)
        logger.info("run_completed", examples=len(descriptors), records=len(staged))
        return target
