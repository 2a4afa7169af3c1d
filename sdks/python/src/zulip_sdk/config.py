"""Connection settings for the Zulip client.

Values come from ``ZULIP_*`` environment variables (or a ``.env`` file). A
``zuliprc`` file can be passed explicitly; its ``[api]`` section overrides the
environment.
"""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import Any

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

# zuliprc key -> settings field
_ZULIPRC_KEYS = {
    "email": "username",
    "key": "api_key",
    "site": "realm",
}
_FIELD_TO_ZULIPRC = {field_name: key for key, field_name in _ZULIPRC_KEYS.items()}


class ZulipSettings(BaseSettings):
    """Credentials and server location for one client connection."""

    model_config = SettingsConfigDict(
        env_prefix="ZULIP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    username: str = Field(min_length=1)
    api_key: str = Field(min_length=1, repr=False)
    realm: str
    timeout: float = Field(default=30.0, gt=0)
    verify_ssl: bool = True

    @field_validator("realm")
    @classmethod
    def validate_realm(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("realm must start with http:// or https://")
        return v.rstrip("/")

    @property
    def api_url(self) -> str:
        return f"{self.realm}/api/v1"


def read_zuliprc(path: Path) -> dict[str, str]:
    parser = configparser.ConfigParser()
    try:
        with path.open("r", encoding="utf-8") as file:
            parser.read_file(file)
    except OSError as exc:
        raise ConfigurationError(f"Cannot read zuliprc file {path}: {exc}") from exc
    except configparser.Error as exc:
        raise ConfigurationError(f"Invalid zuliprc file {path}: {exc}") from exc

    if not parser.has_section("api"):
        raise ConfigurationError(f"zuliprc file {path} has no [api] section")

    out: dict[str, str] = {}
    for key, field_name in _ZULIPRC_KEYS.items():
        value = parser.get("api", key, fallback=None)
        if value:
            out[field_name] = value.strip()
    return out


def load_settings(config_file: Path | None = None, **overrides: Any) -> ZulipSettings:
    """Build settings, turning validation failures into ConfigurationError."""
    values: dict[str, Any] = {}
    if config_file is not None:
        values.update(read_zuliprc(config_file))
    explicit = {key: value for key, value in overrides.items() if value is not None}
    # Fields whose final value came from the zuliprc file, for error messages.
    from_file = set(values) - set(explicit)
    values.update(explicit)

    try:
        return ZulipSettings(**values)
    except ValidationError as exc:
        problems = []
        for err in exc.errors():
            loc = ".".join(str(part) for part in err.get("loc", ())) or "<settings>"
            if loc in from_file:
                source = f"{config_file} [api] {_FIELD_TO_ZULIPRC[loc]}"
            else:
                source = f"ZULIP_{loc.upper()}"
            problems.append(f"{source}: {err.get('msg')}")
        raise ConfigurationError("Invalid Zulip connection settings: " + "; ".join(problems)) from exc
