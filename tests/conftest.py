"""Pytest configuration and shared fixtures.

This module registers custom markers for CI job separation and provides
shared fixtures for the test suite.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator

import pytest

from swmanifest.adapters.filesystem import InMemoryFilesystem
from swmanifest.core.models import NavigationUrl


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "core: Core models, ports, and services")
    config.addinivalue_line("markers", "filesystem: Filesystem adapters")
    config.addinivalue_line("markers", "diagnostics: Diagnostic reporters and logging")
    config.addinivalue_line("markers", "cli: CLI tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line(
        "markers", "tra: Test Responsibility Anchor (TRA) - namespace.Anchor format"
    )
    config.addinivalue_line(
        "markers",
        "tier: Test tier for CI job separation (0=instant, 1=fast, 2=standard, 3=slow, 4=manual)",
    )


@pytest.fixture(autouse=True)
def _reset_swmanifest_logger() -> Iterator[None]:
    """Undo configure_logging() so caplog sees swmanifest records."""
    yield
    logger = logging.getLogger("swmanifest")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class RecordingDiagnosticReporter:
    """DiagnosticReporter that keeps every warning for assertions."""

    def __init__(self) -> None:
        self.warnings: list[str] = []

    def warn(self, message: str) -> None:
        self.warnings.append(message)


@pytest.fixture
def recording_reporter() -> RecordingDiagnosticReporter:
    """Reporter collecting warnings emitted during generation."""
    return RecordingDiagnosticReporter()


@pytest.fixture
def memory_fs() -> InMemoryFilesystem:
    """A small build output with an index, scripts, styles and assets."""
    return InMemoryFilesystem(
        {
            "/index.html": "<html></html>",
            "/main.js": "console.log('main')",
            "/vendor.js": "console.log('vendor')",
            "/styles.css": "body {}",
            "/assets/logo.png": b"\x89PNG",
            "/assets/icons/star.svg": "<svg/>",
            "/readme.md": "# readme",
        }
    )


def is_navigation(rules: Iterable[NavigationUrl], url: str) -> bool:
    """Evaluate navigation rules the way the runtime client does."""
    rules = list(rules)
    included = any(re.search(r.regex, url) for r in rules if r.positive)
    excluded = any(re.search(r.regex, url) for r in rules if not r.positive)
    return included and not excluded


@pytest.fixture
def navigation_check() -> Callable[[Iterable[NavigationUrl], str], bool]:
    """Return a callable evaluating navigation rules against a URL."""
    return is_navigation
