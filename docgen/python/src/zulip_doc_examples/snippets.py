from __future__ import annotations

import inspect
import textwrap
from typing import Any, Callable

from .errors import SnippetError

START_MARKER = "# {code_example|start}"
END_MARKER = "# {code_example|end}"


def extract_code_blocks(source: str) -> list[str]:
    """Return the dedented blocks between start/end markers, in source order."""
    blocks: list[str] = []
    current: list[str] | None = None
    for lineno, line in enumerate(source.splitlines(), start=1):
        stripped = line.strip()
        if stripped == START_MARKER:
            if current is not None:
                raise SnippetError(f"line {lineno}: nested code example start marker")
            current = []
        elif stripped == END_MARKER:
            if current is None:
                raise SnippetError(f"line {lineno}: code example end marker without a start")
            blocks.append(textwrap.dedent("\n".join(current)).strip("\n"))
            current = None
        elif current is not None:
            current.append(line)
    if current is not None:
        raise SnippetError("unterminated code example start marker")
    return blocks


def extract_code_examples(operation: Callable[..., Any]) -> list[str]:
    try:
        source = inspect.getsource(operation)
    except (OSError, TypeError) as exc:
        raise SnippetError(f"Cannot read source of {operation!r}: {exc}") from exc
    return extract_code_blocks(source)
