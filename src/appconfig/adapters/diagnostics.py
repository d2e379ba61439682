"""Diagnostic sink adapter wrapping the logging module."""

from __future__ import annotations

import logging


class LoggingDiagnosticSink:
    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING):
        self._logger = logger or logging.getLogger("appconfig")
        self._level = level

    def report(self, message: str, exc: BaseException | None = None) -> None:
        self._logger.log(self._level, message, exc_info=exc)
