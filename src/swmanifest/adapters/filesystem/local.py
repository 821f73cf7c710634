"""Filesystem adapter for a build output directory on local disk."""

from __future__ import annotations

import hashlib
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from swmanifest.core.exceptions import FilesystemAccessError, FilesystemNotFoundError


if TYPE_CHECKING:
    import builtins


# Chunk size for reading files (64KB)
_CHUNK_SIZE = 64 * 1024


class LocalFilesystem:
    """Filesystem adapter rooted at a local directory.

    Implements FilesystemPort. Snapshot paths such as "/assets/app.js" are
    resolved below root; listings return paths in the same "/"-rooted form.
    Content hashes are SHA-1 hex digests.

    Example:
        >>> fs = LocalFilesystem("dist")
        >>> fs.list("/")
        ['/index.html', '/main.js']
    """

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root)

    @property
    def root(self) -> Path:
        """The directory backing this snapshot."""
        return self._root

    def _resolve(self, file: str) -> Path:
        relative = PurePosixPath(file.lstrip("/"))
        return self._root.joinpath(*relative.parts)

    def list(self, directory: str) -> builtins.list[str]:
        """List all files below a snapshot directory, recursively.

        Args:
            directory: Snapshot directory, e.g. "/" or "/assets".

        Returns:
            "/"-rooted POSIX paths of all files, sorted alphabetically.

        Raises:
            FilesystemNotFoundError: If the directory does not exist.
        """
        base = self._resolve(directory)
        if not base.is_dir():
            raise FilesystemNotFoundError(
                f"Directory not found: {directory}",
                source=str(base),
            )

        return sorted(
            "/" + path.relative_to(self._root).as_posix()
            for path in base.rglob("*")
            if path.is_file()
        )

    def read(self, file: str) -> str:
        """Read a UTF-8 text file.

        Raises:
            FilesystemNotFoundError: If the file does not exist.
            FilesystemAccessError: If the file cannot be read.
        """
        path = self._resolve(file)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FilesystemNotFoundError(
                f"File not found: {file}", source=file, cause=e
            ) from e
        except PermissionError as e:
            raise FilesystemAccessError(
                f"Permission denied: {file}", source=file, cause=e
            ) from e

    def hash(self, file: str) -> str:
        """Compute the SHA-1 hex digest of a file's bytes.

        Raises:
            FilesystemNotFoundError: If the file does not exist.
            FilesystemAccessError: If the file cannot be read.
        """
        path = self._resolve(file)
        sha1_hash = hashlib.sha1()
        try:
            with path.open("rb") as f:
                for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
                    sha1_hash.update(chunk)
        except FileNotFoundError as e:
            raise FilesystemNotFoundError(
                f"File not found: {file}", source=file, cause=e
            ) from e
        except PermissionError as e:
            raise FilesystemAccessError(
                f"Permission denied: {file}", source=file, cause=e
            ) from e
        return sha1_hash.hexdigest()

    def write(self, file: str, contents: str) -> None:
        """Write a UTF-8 text file, creating parent directories.

        Raises:
            FilesystemAccessError: If the file cannot be written.
        """
        path = self._resolve(file)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(contents, encoding="utf-8")
        except PermissionError as e:
            raise FilesystemAccessError(
                f"Permission denied: {file}", source=file, cause=e
            ) from e
