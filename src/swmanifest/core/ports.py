"""Port interfaces for hexagonal architecture.

Ports define contracts that adapters must implement. The core domain
depends only on these protocols, never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    import builtins
    from concurrent.futures import Future


@runtime_checkable
class FilesystemPort(Protocol):
    """Snapshot of a deployed static-asset directory.

    Paths are absolute and "/"-separated, rooted at the snapshot root
    (e.g. "/assets/logo.png"), independent of the host OS.
    """

    def list(self, directory: str) -> builtins.list[str]:
        """List every file below a directory, recursively.

        Args:
            directory: Snapshot directory, e.g. "/".

        Returns:
            Paths of all files. The result must be complete and stable for
            the duration of one generation run; order is not significant.

        Raises:
            FilesystemNotFoundError: If the directory does not exist.
        """
        ...

    def read(self, file: str) -> str:
        """Read a text file from the snapshot."""
        ...

    def hash(self, file: str) -> str:
        """Return an opaque content hash, stable for identical content.

        Raises:
            FilesystemNotFoundError: If the file does not exist.
        """
        ...

    def write(self, file: str, contents: str) -> None:
        """Write a text file into the snapshot, creating parent directories."""
        ...


@runtime_checkable
class DiagnosticReporter(Protocol):
    """Receives non-fatal notices emitted while generating a manifest.

    The core domain reports deprecations through this protocol instead of
    writing to a console, so embedding tools can capture or suppress them.
    """

    def warn(self, message: str) -> None:
        """Report a non-fatal warning.

        Args:
            message: Human-readable warning text.
        """
        ...


class NullDiagnosticReporter:
    """A DiagnosticReporter that discards every notice."""

    def warn(self, message: str) -> None:
        """Do nothing."""
        _ = message  # Unused but required by protocol


@runtime_checkable
class ExecutorPort(Protocol):
    """Executor for parallel task execution.

    Abstracts over concurrent.futures executors to allow dependency injection
    and testing. The core domain uses this protocol instead of directly
    importing ThreadPoolExecutor, maintaining "concurrency at the edges".
    """

    def submit(
        self, fn: Callable[..., object], *args: object, **kwargs: object
    ) -> Future[object]:  # type: ignore[name-defined, unused-ignore]
        """Submit a function for execution.

        Args:
            fn: Function to execute.
            *args: Positional arguments to pass to fn.
            **kwargs: Keyword arguments to pass to fn.

        Returns:
            Future representing the pending result.
        """
        ...

    def __enter__(self) -> ExecutorPort:
        """Enter context manager."""
        ...

    def __exit__(
        self, exc_type: object, exc_val: object, exc_tb: object
    ) -> object | None:
        """Exit context manager."""
        ...
