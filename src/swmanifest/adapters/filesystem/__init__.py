"""Filesystem adapters."""

from swmanifest.adapters.filesystem.local import LocalFilesystem
from swmanifest.adapters.filesystem.memory import InMemoryFilesystem


__all__ = ["InMemoryFilesystem", "LocalFilesystem"]
