from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Union

_RECORD_KEYS = ("name", "endpoint", "method", "status_code", "result")


@dataclass(frozen=True, slots=True)
class SingleResult:
    """An example that made one API call."""

    value: Any


@dataclass(frozen=True, slots=True)
class MultiResult:
    """An example that made several API calls, in call order."""

    values: Sequence[Any]

    def __post_init__(self) -> None:
        if isinstance(self.values, (str, bytes)) or not isinstance(self.values, Sequence):
            raise TypeError("MultiResult expects a sequence of values")
        if not self.values:
            raise ValueError("MultiResult needs at least one value")
        object.__setattr__(self, "values", tuple(self.values))


OperationResult = Union[SingleResult, MultiResult]


@dataclass(frozen=True, slots=True)
class ResultRecord:
    name: str
    endpoint: str
    method: str
    status_code: str
    result: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "endpoint": self.endpoint,
            "method": self.method,
            "status_code": self.status_code,
            "result": self.result,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "ResultRecord":
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
        missing = [key for key in _RECORD_KEYS if key not in data]
        extra = sorted(set(data) - set(_RECORD_KEYS))
        if missing or extra:
            raise ValueError(f"Invalid result record (missing={missing}, extra={extra})")
        return ResultRecord(
            name=data["name"],
            endpoint=data["endpoint"],
            method=data["method"],
            status_code=data["status_code"],
            result=data["result"],
        )


class ResultAccumulator:
    """Ordered output sequence for one run."""

    def __init__(self, records: Iterable[ResultRecord] = ()) -> None:
        self._records: list[ResultRecord] = list(records)

    def append(self, record: ResultRecord) -> None:
        self._records.append(record)

    def extend(self, records: Iterable[ResultRecord]) -> None:
        self._records.extend(records)

    @property
    def records(self) -> tuple[ResultRecord, ...]:
        return tuple(self._records)

    def names(self) -> list[str]:
        return [r.name for r in self._records]

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ResultRecord]:
        return iter(self._records)

    def to_list(self) -> list[dict[str, Any]]:
        return [r.to_dict() for r in self._records]

    def to_json(self) -> str:
        return json.dumps(self.to_list(), separators=(",", ":"), ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "ResultAccumulator":
        payload = json.loads(text)
        if not isinstance(payload, list):
            raise ValueError("Expected a JSON array of result records")
        return cls(ResultRecord.from_dict(item) for item in payload)
