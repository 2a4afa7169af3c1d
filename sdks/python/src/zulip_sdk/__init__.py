from __future__ import annotations

__all__ = [
    "__version__",
    "ApiError",
    "ConfigurationError",
    "ZulipClient",
    "ZulipError",
    "ZulipSettings",
    "clients",
    "connect",
    "load_settings",
]

__version__ = "0.3.0"

from . import clients  # noqa: E402
from .client import ZulipClient, connect  # noqa: E402
from .config import ZulipSettings, load_settings  # noqa: E402
from .errors import ApiError, ConfigurationError, ZulipError  # noqa: E402
