"""Domain models for aidd.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O and must remain pure
across the entire lifecycle of one clone invocation.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath
from typing import Literal

from aidd.exceptions import AiddError

CURSOR_LINK_NAME: str = ".cursor"
"""Name of the editor-integration symlink created inside the target."""


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class EntryKind(str, Enum):
    """Kind of filesystem object found at a source or destination path."""

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


class ActionKind(str, Enum):
    """Decision taken for one entry of the clone plan."""

    CREATE = "create"
    OVERWRITE = "overwrite"
    SKIP_CONFLICT = "skip-conflict"
    SYMLINK_CREATE = "symlink-create"
    SYMLINK_SKIP = "symlink-skip"


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CloneOptions:
    """Options for a single clone invocation.

    Constructed once by the CLI layer and passed by value into the
    engine.  ``source_directory`` defaults to the bundled ``ai/`` tree.
    """

    target_directory: Path = Path(".")
    force: bool = False
    dry_run: bool = False
    verbose: bool = False
    cursor: bool = False
    source_directory: Path | None = None


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SourceEntry:
    """One entry yielded by the tree walker."""

    relative_path: PurePath
    """Path relative to the *parent* of the source root (``ai/...``)."""

    kind: EntryKind
    """Only ``FILE`` or ``DIRECTORY`` are ever yielded."""


# ---------------------------------------------------------------------------
# Plan
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Action:
    """A single planned step, replayed verbatim by the executor."""

    kind: ActionKind
    entry_kind: EntryKind
    relative_path: PurePath
    destination: Path
    source: Path | None = None
    link_target: str | None = None
    replaces: bool = False
    """``True`` when an existing object must be removed first (symlinks)."""

    @property
    def display_path(self) -> str:
        path = self.relative_path.as_posix()
        if self.entry_kind is EntryKind.DIRECTORY:
            return f"{path}/"
        if self.link_target is not None:
            return f"{path} -> {self.link_target}"
        return path


@dataclass(frozen=True, slots=True)
class ClonePlan:
    """Immutable, ordered sequence of :class:`Action` entries.

    Ordering follows a pre-order traversal of the source tree with
    siblings in lexical order; the optional symlink step comes last.
    """

    source: Path
    target: Path
    actions: tuple[Action, ...]

    def __len__(self) -> int:
        return len(self.actions)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.actions)

    def counts(self) -> dict[ActionKind, int]:
        """Return the number of actions per kind, zero-filled, in enum order."""
        totals = {kind: 0 for kind in ActionKind}
        for action in self.actions:
            totals[action.kind] += 1
        return totals


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class CloneSuccess:
    """Success variant: the executed (or simulated) plan plus counts."""

    plan: ClonePlan
    summary: Mapping[ActionKind, int]
    dry_run: bool
    verbose: bool

    success: Literal[True] = True

    @property
    def actions(self) -> tuple[Action, ...]:
        """Per-entry detail, populated only in verbose mode."""
        return self.plan.actions if self.verbose else ()


@dataclass(frozen=True, slots=True)
class CloneFailure:
    """Failure variant: one classified engine error."""

    error: AiddError

    success: Literal[False] = False

    @property
    def kind(self) -> str:
        return type(self.error).__name__

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def cause(self) -> BaseException | None:
        return self.error.cause


CloneResult = CloneSuccess | CloneFailure
"""Discriminated clone outcome; branch on ``result.success``."""
