"""Core domain module for swmanifest.

This module contains the glob compiler, duration parser, domain models,
port definitions and the manifest generator. It has no I/O dependencies
and can be tested in isolation.
"""

from swmanifest.core.duration import parse_duration_ms
from swmanifest.core.glob_utils import glob_to_regex, join_urls
from swmanifest.core.models import Config, Manifest
from swmanifest.core.ports import DiagnosticReporter, ExecutorPort, FilesystemPort
from swmanifest.core.services import Generator


__all__ = [
    "Config",
    "DiagnosticReporter",
    "ExecutorPort",
    "FilesystemPort",
    "Generator",
    "Manifest",
    "glob_to_regex",
    "join_urls",
    "parse_duration_ms",
]
