from __future__ import annotations

from typing import Any


class ZulipError(Exception):
    """Base class for client-side failures."""


class ConfigurationError(ZulipError):
    """Connection settings are missing or invalid."""


class ApiError(ZulipError):
    def __init__(
        self,
        status_code: int,
        *,
        message: str | None = None,
        code: str | None = None,
        response_body: Any | None = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.code = code
        self.response_body = response_body

        super().__init__(str(self))

    def __str__(self) -> str:
        if self.code and self.message:
            return f"API error {self.status_code}: {self.code}: {self.message}"
        if self.message:
            return f"API error {self.status_code}: {self.message}"
        return f"API error {self.status_code}"
