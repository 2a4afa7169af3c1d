from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

import httpx
import structlog

from ..errors import ApiError

logger = structlog.get_logger()


def _looks_like_json(content_type: str) -> bool:
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json") or mime == "text/json"


def encode_params(params: Mapping[str, Any] | None) -> dict[str, str]:
    """Flatten request parameters the way the Zulip API expects them.

    Strings are sent as-is; every other value (lists, dicts, numbers, booleans)
    is JSON-encoded, so ``[9]`` becomes ``"[9]"`` and ``True`` becomes ``"true"``.
    """
    out: dict[str, str] = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        out[key] = value if isinstance(value, str) else json.dumps(value)
    return out


class BaseClient:
    def __init__(
        self,
        *,
        base_url: str,
        username: str,
        api_key: str,
        timeout: float = 30.0,
        verify_ssl: bool = True,
        default_headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            auth=httpx.BasicAuth(username, api_key),
            timeout=timeout,
            verify=verify_ssl,
            headers={"Accept": "application/json", **(default_headers or {})},
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "BaseClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        method = method.upper()
        encoded = encode_params(params)
        logger.debug("api_request", method=method, path=path)

        try:
            if method == "GET":
                response = await self._http.request(method, path.lstrip("/"), params=encoded)
            else:
                response = await self._http.request(method, path.lstrip("/"), data=encoded)
        except httpx.HTTPError as exc:
            raise ApiError(0, message=str(exc)) from exc

        status = response.status_code
        if not _looks_like_json(response.headers.get("Content-Type", "")):
            text = response.text
            raise ApiError(status, message=f"Expected a JSON response, got: {text[:200]}", response_body=text)

        try:
            payload = response.json() if response.content else None
        except json.JSONDecodeError as exc:
            raise ApiError(status, message=f"Invalid JSON response: {exc}") from exc

        failed = isinstance(payload, dict) and payload.get("result") == "error"
        if status >= 400 or failed:
            message = code = None
            if isinstance(payload, dict):
                message = payload.get("msg")
                code = payload.get("code")
            raise ApiError(status, message=message, code=code, response_body=payload)

        return payload
