from __future__ import annotations

__all__ = [
    "__version__",
    "DEFAULT_ORDER",
    "DocExamplesError",
    "DuplicateResultError",
    "ExampleDescriptor",
    "ExampleNotFoundError",
    "ExampleRegistry",
    "ExampleRunner",
    "MultiResult",
    "ResultAccumulator",
    "ResultRecord",
    "SingleResult",
    "build_registry",
]

__version__ = "0.3.0"

from .errors import DocExamplesError, DuplicateResultError, ExampleNotFoundError  # noqa: E402
from .examples import DEFAULT_ORDER, build_registry  # noqa: E402
from .registry import ExampleDescriptor, ExampleRegistry  # noqa: E402
from .results import MultiResult, ResultAccumulator, ResultRecord, SingleResult  # noqa: E402
from .runner import ExampleRunner  # noqa: E402
