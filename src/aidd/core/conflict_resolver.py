"""Pure conflict-resolution rules for the clone plan.

Given the kind of a source entry and whatever currently occupies its
destination, decide which :class:`~aidd.core.models.ActionKind` applies.

Rules
-----
* Existence is the only signal consulted — contents are never compared.
* An existing file is a conflict unless ``force`` is set.
* A destination of a different kind than the source is always a
  conflict, ``force`` or not; nothing is merged or deleted recursively.
* No side effects — all mutation is deferred to the executor.
"""

from __future__ import annotations

from aidd.core.models import ActionKind, EntryKind


def resolve_file_action(existing: EntryKind | None, *, force: bool) -> ActionKind:
    """Decide the action for a source *file*."""
    if existing is None:
        return ActionKind.CREATE
    if existing is not EntryKind.FILE:
        return ActionKind.SKIP_CONFLICT
    return ActionKind.OVERWRITE if force else ActionKind.SKIP_CONFLICT


def resolve_directory_action(existing: EntryKind | None, *, force: bool) -> ActionKind:
    """Decide the action for a source *directory*.

    Re-creating a directory is idempotent, so an existing directory is
    never a conflict: it is reported as ``overwrite`` under ``force`` and
    ``create`` otherwise.
    """
    if existing is None:
        return ActionKind.CREATE
    if existing is not EntryKind.DIRECTORY:
        return ActionKind.SKIP_CONFLICT
    return ActionKind.OVERWRITE if force else ActionKind.CREATE


def resolve_symlink_action(existing: EntryKind | None, *, force: bool) -> ActionKind:
    """Decide the action for the editor-integration symlink.

    Files and symlinks may be replaced under ``force``; a real directory
    is never removed.
    """
    if existing is None:
        return ActionKind.SYMLINK_CREATE
    if force and existing in (EntryKind.FILE, EntryKind.SYMLINK):
        return ActionKind.SYMLINK_CREATE
    return ActionKind.SYMLINK_SKIP


def resolve_action(
    source_kind: EntryKind,
    existing: EntryKind | None,
    *,
    force: bool,
) -> ActionKind:
    """Dispatch to the rule matching *source_kind*."""
    if source_kind is EntryKind.DIRECTORY:
        return resolve_directory_action(existing, force=force)
    if source_kind is EntryKind.FILE:
        return resolve_file_action(existing, force=force)
    raise ValueError(f"Unsupported source entry kind: {source_kind.value}")
