"""Core / service layer — clone decisions and data models.

Rules
-----
* No ``print()`` calls.
* No direct filesystem I/O — everything goes through
  :class:`~aidd.core.protocols.FileSystem`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from aidd.core.clone_service import CloneService
from aidd.core.models import (
    Action,
    ActionKind,
    CloneFailure,
    CloneOptions,
    ClonePlan,
    CloneResult,
    CloneSuccess,
    EntryKind,
    SourceEntry,
)
from aidd.core.protocols import FileSystem

__all__: list[str] = [
    "Action",
    "ActionKind",
    "CloneFailure",
    "CloneOptions",
    "ClonePlan",
    "CloneResult",
    "CloneService",
    "CloneSuccess",
    "EntryKind",
    "FileSystem",
    "SourceEntry",
]
