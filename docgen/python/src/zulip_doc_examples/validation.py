"""
Check generated result records against an OpenAPI document.

For every record the response schema is looked up at
``paths[endpoint][method].responses[status_code].content["application/json"].schema``
and ``record.result`` is validated against it. Local ``$ref`` pointers are
resolved against the whole document.
"""

from __future__ import annotations

import json
import warnings
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path
from typing import Any

from jsonschema import Draft4Validator, RefResolver
from ruamel.yaml import YAML

from .results import ResultRecord


def _to_builtin(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(k): _to_builtin(v) for k, v in value.items()}
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return [_to_builtin(v) for v in value]
    return value


def _load_yaml(path: Path) -> dict[str, Any]:
    yaml = YAML(typ="safe")
    with path.open("r", encoding="utf-8") as file:
        data = yaml.load(file)
    return _to_builtin(data)


def _load_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as file:
        return json.load(file)


def _apply_nullable(value: Any) -> Any:
    # OpenAPI 3.0 `nullable: true` has no JSON Schema draft 4 equivalent; widen the type instead.
    if isinstance(value, list):
        return [_apply_nullable(v) for v in value]
    if not isinstance(value, dict):
        return value

    out = {k: _apply_nullable(v) for k, v in value.items()}
    if out.pop("nullable", False) is True:
        schema_type = out.get("type")
        if isinstance(schema_type, str):
            out["type"] = [schema_type, "null"]
        elif isinstance(schema_type, list) and "null" not in schema_type:
            out["type"] = [*schema_type, "null"]
        if isinstance(out.get("enum"), list) and None not in out["enum"]:
            out["enum"] = [*out["enum"], None]
    return out


def _json_path(err: object) -> str:
    path = getattr(err, "absolute_path", None)
    if not path:
        return "$"
    out = "$"
    for part in path:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}"
    return out


class OpenApiResponseValidator:
    def __init__(self, document: dict[str, Any]) -> None:
        if not isinstance(document, dict) or not isinstance(document.get("paths"), dict):
            raise ValueError("OpenAPI document must be an object with a 'paths' mapping")
        self._document = _apply_nullable(document)

    @classmethod
    def load(cls, path: Path) -> "OpenApiResponseValidator":
        if path.suffix.lower() in {".yaml", ".yml"}:
            return cls(_load_yaml(path))
        return cls(_load_json(path))

    def response_schema(self, endpoint: str, method: str, status_code: str) -> dict[str, Any] | None:
        operation = self._document["paths"].get(endpoint, {}).get(method.lower())
        if not isinstance(operation, dict):
            return None
        response = operation.get("responses", {}).get(str(status_code))
        if not isinstance(response, dict):
            return None
        if "$ref" in response:
            response = self._resolve_pointer(response["$ref"])
        schema = response.get("content", {}).get("application/json", {}).get("schema")
        return schema if isinstance(schema, dict) else None

    def _resolve_pointer(self, ref: str) -> dict[str, Any]:
        if not ref.startswith("#/"):
            raise ValueError(f"Only local $ref pointers are supported: {ref}")
        current: Any = self._document
        for raw in ref[2:].split("/"):
            current = current[raw.replace("~1", "/").replace("~0", "~")]
        return current

    def validate(self, record: ResultRecord) -> list[str]:
        schema = self.response_schema(record.endpoint, record.method, record.status_code)
        if schema is None:
            return [f"No documented {record.status_code} JSON response for {record.method} {record.endpoint}"]

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DeprecationWarning)
            resolver = RefResolver(base_uri="", referrer=self._document)
            validator = Draft4Validator(schema, resolver=resolver)
            errors = sorted(validator.iter_errors(record.result), key=lambda e: list(e.absolute_path))
        return [f"{_json_path(e)}: {e.message}" for e in errors]


def validate_records(
    records: Iterable[ResultRecord],
    validator: OpenApiResponseValidator,
) -> list[tuple[str, list[str]]]:
    """Pair each record name with its validation errors (empty list when it matches), in input order."""
    return [(record.name, validator.validate(record)) for record in records]
