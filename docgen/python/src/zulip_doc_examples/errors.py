from __future__ import annotations


class DocExamplesError(Exception):
    """Base class for harness failures."""


class ExampleNotFoundError(DocExamplesError, LookupError):
    """Raised when an example name has no registered descriptor."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Example not registered: {name}")


class DuplicateResultError(DocExamplesError):
    """Raised when a run would emit two result records with the same name."""


class SnippetError(DocExamplesError):
    """Raised when code example markers in an example body are malformed."""
