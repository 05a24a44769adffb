"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from aidd.core.models import EntryKind, SourceEntry


class FileSystem(Protocol):
    """Contract for the filesystem backend driven by the clone engine.

    Any object that implements these methods with the correct
    signatures satisfies this protocol structurally (no explicit
    inheritance required).  Implementations must map every ``OSError``
    to :class:`~aidd.exceptions.FileSystemError` with the offending
    path attached.
    """

    def resolve(self, path: Path) -> Path:
        """Return the absolute, symlink-free form of *path*.

        Raises
        ------
        ValidationError
            When *path* cannot be resolved (e.g. a symlink loop).
        """
        ...  # pragma: no cover

    def kind_of(self, path: Path) -> EntryKind | None:
        """Return the kind of object at *path* without following links.

        Returns ``None`` when nothing exists there, including when a
        parent component is not a directory.
        """
        ...  # pragma: no cover

    def walk(self, root: Path) -> Iterator[SourceEntry]:
        """Lazily enumerate *root* and everything below it in pre-order.

        The first entry is *root* itself.  Siblings are yielded in
        lexical order; a directory is always yielded before its children.

        Raises
        ------
        CloneError
            When *root* is missing or is not a directory.
        FileSystemError
            When a directory inside the tree cannot be read.
        """
        ...  # pragma: no cover

    def make_directory(self, path: Path) -> None:
        """Create *path* and missing parents; existing directories are fine."""
        ...  # pragma: no cover

    def copy_file(self, source: Path, destination: Path) -> None:
        """Copy bytes and permission bits from *source* to *destination*."""
        ...  # pragma: no cover

    def create_symlink(self, link: Path, target: str) -> None:
        """Create a directory symlink at *link* pointing to *target*."""
        ...  # pragma: no cover

    def remove(self, path: Path) -> None:
        """Remove the file or symlink at *path* (never a directory)."""
        ...  # pragma: no cover
