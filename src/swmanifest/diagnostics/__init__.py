"""Diagnostic reporters for non-fatal generation notices."""

from swmanifest.diagnostics.logging_reporter import LoggingDiagnosticReporter
from swmanifest.diagnostics.rich_reporter import RichDiagnosticReporter


__all__ = ["LoggingDiagnosticReporter", "RichDiagnosticReporter"]
