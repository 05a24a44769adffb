"""Core clone service — validation, planning, and plan execution.

This service delegates every filesystem interaction to a
:class:`~aidd.core.protocols.FileSystem` injected at construction time.
It is responsible for:

* Pre-flight validation of the target directory.
* Building the immutable :class:`~aidd.core.models.ClonePlan`.
* Replaying the plan, or simulating it under dry-run.

Guarantees
----------
* The plan is computed once and never mutated; execution replays it
  in order and stops at the first failure.
* No write happens for ``skip-conflict`` or ``symlink-skip`` entries.
* Dry-run performs zero mutations and yields the same plan.
* The source tree is only ever read.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from aidd.core.conflict_resolver import resolve_action, resolve_symlink_action
from aidd.core.models import (
    CURSOR_LINK_NAME,
    Action,
    ActionKind,
    CloneOptions,
    ClonePlan,
    CloneSuccess,
    EntryKind,
)
from aidd.core.protocols import FileSystem
from aidd.exceptions import CloneError, FileSystemError, ValidationError

logger = logging.getLogger(__name__)


class CloneService:
    """Stateless service that drives one clone invocation.

    Parameters
    ----------
    filesystem:
        Any object satisfying the :class:`FileSystem` protocol.
    """

    def __init__(self, filesystem: FileSystem) -> None:
        self._fs: FileSystem = filesystem

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate_target(self, target_directory: Path) -> Path:
        """Resolve *target_directory* and check that it is usable.

        A usable target is either an existing directory, or a missing
        path whose parent is an existing directory.

        Raises
        ------
        ValidationError
            When the path is empty, resolves through a non-directory,
            or its parent does not exist.
        """
        if not str(target_directory).strip():
            raise ValidationError("Target directory must not be empty")

        resolved = self._fs.resolve(target_directory)
        existing = self._fs.kind_of(resolved)
        if existing is EntryKind.DIRECTORY:
            return resolved
        if existing is not None:
            raise ValidationError(
                f"Target path exists and is not a directory: {resolved}",
                hint="Choose a directory path as the clone target",
            )

        parent_kind = self._fs.kind_of(resolved.parent)
        if parent_kind is not EntryKind.DIRECTORY:
            raise ValidationError(
                f"Parent directory does not exist: {resolved.parent}",
                hint="Create the parent directory first or choose another target",
            )
        return resolved

    # ------------------------------------------------------------------
    # Planning
    # ------------------------------------------------------------------

    def build_plan(self, source_root: Path, target: Path, options: CloneOptions) -> ClonePlan:
        """Walk *source_root* and decide an action for every entry.

        Raises
        ------
        CloneError
            When the source root is missing or not a directory.
        FileSystemError
            When the source tree or the destination cannot be inspected.
        """
        actions: list[Action] = []
        blocked: list[PurePath] = []

        for entry in self._fs.walk(source_root):
            destination = target / entry.relative_path
            if any(_is_within(entry.relative_path, prefix) for prefix in blocked):
                kind = ActionKind.SKIP_CONFLICT
            else:
                existing = self._fs.kind_of(destination)
                kind = resolve_action(entry.kind, existing, force=options.force)
                if kind is ActionKind.SKIP_CONFLICT and entry.kind is EntryKind.DIRECTORY:
                    blocked.append(entry.relative_path)

            source = source_root.parent / entry.relative_path
            actions.append(
                Action(
                    kind=kind,
                    entry_kind=entry.kind,
                    relative_path=entry.relative_path,
                    destination=destination,
                    source=source,
                )
            )
            logger.debug("planned %s %s", kind.value, entry.relative_path.as_posix())

        if options.cursor:
            actions.append(self._plan_symlink(source_root, target, force=options.force))

        return ClonePlan(source=source_root, target=target, actions=tuple(actions))

    def _plan_symlink(self, source_root: Path, target: Path, *, force: bool) -> Action:
        link = target / CURSOR_LINK_NAME
        existing = self._fs.kind_of(link)
        kind = resolve_symlink_action(existing, force=force)
        logger.debug("planned %s %s", kind.value, CURSOR_LINK_NAME)
        return Action(
            kind=kind,
            entry_kind=EntryKind.SYMLINK,
            relative_path=PurePath(CURSOR_LINK_NAME),
            destination=link,
            link_target=source_root.name,
            replaces=kind is ActionKind.SYMLINK_CREATE and existing is not None,
        )

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, plan: ClonePlan, *, dry_run: bool, verbose: bool = False) -> CloneSuccess:
        """Replay *plan* against the filesystem, or simulate it.

        Partial work performed before a failure is not rolled back.

        Raises
        ------
        FileSystemError
            On the first failing I/O operation; the rest of the plan is
            abandoned.
        CloneError
            When an action lacks the source or link target it needs.
        """
        if not dry_run:
            self._fs.make_directory(plan.target)

        for action in plan:
            if dry_run:
                logger.debug("would %s %s", action.kind.value, action.display_path)
                continue
            self._apply(action)

        return CloneSuccess(
            plan=plan,
            summary=plan.counts(),
            dry_run=dry_run,
            verbose=verbose,
        )

    def _apply(self, action: Action) -> None:
        if action.kind in (ActionKind.SKIP_CONFLICT, ActionKind.SYMLINK_SKIP):
            logger.debug("skipped %s", action.display_path)
            return

        if action.kind is ActionKind.SYMLINK_CREATE:
            self._link(action)
        elif action.entry_kind is EntryKind.DIRECTORY:
            self._fs.make_directory(action.destination)
        else:
            if action.source is None:
                raise CloneError(f"Planned copy has no source file: {action.display_path}")
            self._fs.copy_file(action.source, action.destination)
        logger.debug("%s %s", action.kind.value, action.display_path)

    def _link(self, action: Action) -> None:
        if action.link_target is None:
            raise CloneError(f"Planned symlink has no target: {action.display_path}")
        try:
            if action.replaces:
                self._fs.remove(action.destination)
            self._fs.create_symlink(action.destination, action.link_target)
        except FileSystemError as exc:
            logger.warning("could not create %s symlink: %s", action.display_path, exc)
            raise


def _is_within(path: PurePath, prefix: PurePath) -> bool:
    return path != prefix and prefix in path.parents
