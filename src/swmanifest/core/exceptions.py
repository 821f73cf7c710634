"""Domain exceptions for swmanifest.

All library errors inherit from SwManifestError, allowing users to catch
any library exception with a single except clause. Each exception provides
a recovery_hint property with guidance on resolving the error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from pathlib import Path


class SwManifestError(Exception):
    """Base class for all swmanifest exceptions.

    Catch this to handle any error from the library.
    """

    @property
    def recovery_hint(self) -> str | None:
        """Optional guidance on how to resolve this error."""
        return None


class MalformedDurationError(SwManifestError):
    """Raised when a duration string contains an unrecognized unit.

    Attributes:
        duration: The full duration string that failed to parse.
        unit: The unrecognized unit token.
        group: Name of the data group the duration belongs to, if known.
        field: Configuration field ("maxAge" or "timeout"), if known.
    """

    def __init__(
        self,
        duration: str,
        unit: str,
        group: str | None = None,
        field: str | None = None,
    ) -> None:
        self.duration = duration
        self.unit = unit
        self.group = group
        self.field = field
        message = f"Not a valid duration: '{duration}' (unknown unit '{unit}')"
        if group is not None:
            location = f"{field} of " if field else ""
            message = f"{message} in {location}data group '{group}'"
        super().__init__(message)

    def in_group(self, group: str, field: str) -> MalformedDurationError:
        """Return a copy of this error annotated with its data group."""
        return type(self)(self.duration, self.unit, group=group, field=field)

    @property
    def recovery_hint(self) -> str:
        """Show the accepted units."""
        return "Use <number><unit> pairs with units d, h, m, s or u, e.g. '3d12h'"


class FilesystemError(SwManifestError):
    """Base class for filesystem-related errors.

    Raised by filesystem adapters when listing, reading, hashing or
    writing fails.

    Attributes:
        source: The path that caused the error.
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        source: str,
        cause: Exception | None = None,
    ) -> None:
        self.source = source
        self.cause = cause
        super().__init__(message)


class FilesystemNotFoundError(FilesystemError):
    """Raised when the requested file or directory does not exist."""

    @property
    def recovery_hint(self) -> str:
        """Suggest verifying the path."""
        return f"Verify the path exists in the build output: {self.source}"


class FilesystemAccessError(FilesystemError):
    """Raised when a file cannot be accessed (permissions)."""

    @property
    def recovery_hint(self) -> str:
        """Suggest checking permissions."""
        return f"Check read/write permissions for {self.source}"


class ConfigurationError(SwManifestError):
    """Raised for invalid configuration values.

    Attributes:
        field: The offending configuration field, if known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)

    @property
    def recovery_hint(self) -> str | None:
        """Point at the offending field."""
        if self.field:
            return f"Check the '{self.field}' setting in the configuration"
        return None


class ConfigLoadError(SwManifestError):
    """Raised when a configuration file cannot be loaded.

    Attributes:
        config_path: Path to the configuration file that failed to load.
        line: Line number where the error occurred (if available).
        cause: The underlying exception, if any.
    """

    def __init__(
        self,
        message: str,
        config_path: Path,
        line: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.config_path = config_path
        self.line = line
        self.cause = cause
        super().__init__(message)

    @property
    def recovery_hint(self) -> str:
        """Suggest checking the configuration file at the specific line."""
        if self.line:
            return f"Check {self.config_path.name} at line {self.line}"
        return f"Check that {self.config_path.name} exists and is valid JSON"
