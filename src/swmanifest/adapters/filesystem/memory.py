"""In-memory filesystem adapter."""

from __future__ import annotations

import hashlib
from collections.abc import Mapping
from typing import TYPE_CHECKING

from swmanifest.core.exceptions import FilesystemNotFoundError


if TYPE_CHECKING:
    import builtins


class InMemoryFilesystem:
    """Dict-backed snapshot implementing FilesystemPort.

    Useful for tests and for tools that already hold the build output in
    memory. Listing preserves insertion order, so callers control the
    enumeration order the generator sees.

    Args:
        files: Mapping of "/"-rooted path to text or bytes content.
        hashes: Optional explicit hashes overriding the computed SHA-1.
    """

    def __init__(
        self,
        files: Mapping[str, str | bytes] | None = None,
        hashes: Mapping[str, str] | None = None,
    ) -> None:
        self._files: dict[str, bytes] = {}
        for path, content in (files or {}).items():
            self._store(path, content)
        self._hashes = dict(hashes or {})
        self.hash_calls: list[str] = []

    @staticmethod
    def _normalize(path: str) -> str:
        return path if path.startswith("/") else f"/{path}"

    def _store(self, path: str, content: str | bytes) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        self._files[self._normalize(path)] = data

    def _get(self, file: str) -> bytes:
        try:
            return self._files[self._normalize(file)]
        except KeyError:
            raise FilesystemNotFoundError(
                f"File not found: {file}", source=file
            ) from None

    def list(self, directory: str) -> builtins.list[str]:
        """List files below a directory in insertion order."""
        prefix = self._normalize(directory).rstrip("/") + "/"
        return [path for path in self._files if path.startswith(prefix)]

    def read(self, file: str) -> str:
        """Return file content decoded as UTF-8."""
        return self._get(file).decode("utf-8")

    def hash(self, file: str) -> str:
        """Return the explicit hash if given, else SHA-1 of the content."""
        content = self._get(file)
        self.hash_calls.append(file)
        explicit = self._hashes.get(self._normalize(file))
        if explicit is not None:
            return explicit
        return hashlib.sha1(content).hexdigest()

    def write(self, file: str, contents: str) -> None:
        """Store text content at file, replacing any previous content."""
        self._store(file, contents)
