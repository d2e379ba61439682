"""Core ports (interfaces) for appconfig.

These protocols define the seams between the store and the pieces that
callers may want to swap: how a JSON value becomes a typed result, and
where load failures are reported.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Converter(Protocol):
    """Turns a generic JSON value into a caller-defined shape."""

    def convert(self, value: Any) -> Any:
        """Return the converted value or raise on failure."""


@runtime_checkable
class DiagnosticSink(Protocol):
    """Fire-and-forget channel for load failures."""

    def report(self, message: str, exc: BaseException | None = None) -> None:
        """Record a human-readable message with optional exception detail."""
