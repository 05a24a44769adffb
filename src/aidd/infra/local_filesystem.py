"""Local-disk implementation of :class:`~aidd.core.protocols.FileSystem`.

This module is the **only** place in the codebase that touches the
filesystem on behalf of the clone engine.  Every ``OSError`` is caught
here and re-raised as :class:`~aidd.exceptions.FileSystemError` (or
:class:`~aidd.exceptions.CloneError` for a broken template root) with
the offending path in the message.
"""

from __future__ import annotations

import os
import shutil
import stat
from collections.abc import Iterator
from pathlib import Path, PurePath

from aidd.core.models import EntryKind, SourceEntry
from aidd.exceptions import CloneError, FileSystemError, ValidationError


class LocalFileSystem:
    """Concrete :class:`FileSystem` backed by :mod:`os` and :mod:`shutil`.

    This class satisfies the :class:`~aidd.core.protocols.FileSystem`
    protocol structurally — no explicit inheritance required.
    """

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def resolve(self, path: Path) -> Path:
        try:
            return path.expanduser().resolve()
        except (OSError, RuntimeError) as exc:
            raise ValidationError(
                f"Cannot resolve target directory {path}: {exc}",
                cause=exc,
            ) from exc

    def kind_of(self, path: Path) -> EntryKind | None:
        try:
            mode = os.lstat(path).st_mode
        except (FileNotFoundError, NotADirectoryError):
            return None
        except OSError as exc:
            raise FileSystemError(
                f"Cannot inspect {path}: {exc.strerror or exc}",
                cause=exc,
            ) from exc

        if stat.S_ISLNK(mode):
            return EntryKind.SYMLINK
        if stat.S_ISDIR(mode):
            return EntryKind.DIRECTORY
        if stat.S_ISREG(mode):
            return EntryKind.FILE
        return EntryKind.OTHER

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def walk(self, root: Path) -> Iterator[SourceEntry]:
        """Yield *root* and its descendants in lexical pre-order.

        Symlinks inside the template are followed and reported by the
        kind of their target.
        """
        if not root.is_dir():
            raise CloneError(
                f"Source template directory not found: {root}",
                hint="Reinstall aidd; the bundled ai/ folder is missing",
            )
        top = PurePath(root.name)
        yield SourceEntry(relative_path=top, kind=EntryKind.DIRECTORY)
        yield from self._walk_children(root, top, frozenset({_identity(root)}))

    def _walk_children(
        self,
        directory: Path,
        relative: PurePath,
        ancestors: frozenset[tuple[int, int]],
    ) -> Iterator[SourceEntry]:
        try:
            with os.scandir(directory) as it:
                children = sorted(it, key=lambda entry: entry.name)
        except OSError as exc:
            raise FileSystemError(
                f"Cannot read source directory {directory}: {exc.strerror or exc}",
                cause=exc,
            ) from exc

        for child in children:
            child_relative = relative / child.name
            if child.is_dir():
                identity = _identity(Path(child.path))
                if identity in ancestors:
                    raise CloneError(
                        f"Source template contains a symlink cycle at {child.path}",
                        hint="Reinstall aidd; the bundled ai/ folder is corrupted",
                    )
                yield SourceEntry(relative_path=child_relative, kind=EntryKind.DIRECTORY)
                yield from self._walk_children(
                    Path(child.path), child_relative, ancestors | {identity},
                )
            else:
                yield SourceEntry(relative_path=child_relative, kind=EntryKind.FILE)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def make_directory(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FileSystemError(
                f"Failed to create directory {path}: {exc.strerror or exc}",
                cause=exc,
            ) from exc

    def copy_file(self, source: Path, destination: Path) -> None:
        try:
            shutil.copy2(source, destination)
        except OSError as exc:
            raise FileSystemError(
                f"Failed to copy {source} to {destination}: {exc.strerror or exc}",
                cause=exc,
            ) from exc

    def create_symlink(self, link: Path, target: str) -> None:
        try:
            os.symlink(target, link, target_is_directory=True)
        except (OSError, NotImplementedError) as exc:
            raise FileSystemError(
                f"Failed to create symlink {link} -> {target}: {exc}",
                hint="Symlinks may be unsupported here; link the folder manually",
                cause=exc,
            ) from exc

    def remove(self, path: Path) -> None:
        try:
            path.unlink()
        except OSError as exc:
            raise FileSystemError(
                f"Failed to remove {path}: {exc.strerror or exc}",
                cause=exc,
            ) from exc


def _identity(directory: Path) -> tuple[int, int]:
    """Return ``(st_dev, st_ino)`` of *directory*, following symlinks."""
    try:
        info = os.stat(directory)
    except OSError as exc:
        raise FileSystemError(
            f"Cannot read source directory {directory}: {exc.strerror or exc}",
            cause=exc,
        ) from exc
    return info.st_dev, info.st_ino
