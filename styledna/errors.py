"""Exception hierarchy. Style violations are data (see models.compliance), never raised."""

from __future__ import annotations


class StyleDNAError(Exception):
    """Base class for all pipeline errors."""


class PathParseError(StyleDNAError, ValueError):
    """Malformed path data. Raised only in strict parsing mode."""

    def __init__(self, message: str, position: int = -1, command: str | None = None) -> None:
        super().__init__(message)
        self.position = position
        self.command = command


class EmptyCorpusError(StyleDNAError, ValueError):
    """Style analysis was asked to summarize zero icons."""
