"""Diagnostic reporter that forwards notices to the logging system."""

from __future__ import annotations

import logging

from swmanifest.logging import get_logger


class LoggingDiagnosticReporter:
    """Reports warnings on the ``swmanifest.diagnostics`` logger.

    This is the default reporter used by the Generator.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger("diagnostics")

    def warn(self, message: str) -> None:
        """Log the message at WARNING level."""
        self._logger.warning(message)
