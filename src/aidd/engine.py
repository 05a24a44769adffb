"""Clone engine entry point.

:func:`execute_clone` wires the local filesystem adapter into
:class:`~aidd.core.clone_service.CloneService` and runs one complete
pass: validate, walk and decide, then execute or simulate.

It never raises.  Every failure is returned as a
:class:`~aidd.core.models.CloneFailure` carrying one of the engine error
kinds; unexpected exceptions are wrapped as
:class:`~aidd.exceptions.CloneError`.
"""

from __future__ import annotations

import logging

from aidd.core.clone_service import CloneService
from aidd.core.models import CloneFailure, CloneOptions, CloneResult
from aidd.core.protocols import FileSystem
from aidd.exceptions import ENGINE_ERRORS, AiddError, CloneError
from aidd.infra.local_filesystem import LocalFileSystem
from aidd.infra.templates import bundled_template_root

logger = logging.getLogger(__name__)


def execute_clone(
    options: CloneOptions,
    *,
    filesystem: FileSystem | None = None,
) -> CloneResult:
    """Clone the template tree into ``options.target_directory``.

    Parameters
    ----------
    options:
        Already-defaulted options for this invocation.
    filesystem:
        Backend override; defaults to :class:`LocalFileSystem`.

    Returns
    -------
    CloneResult
        ``CloneSuccess`` with the executed (or simulated) plan, or
        ``CloneFailure`` with a classified error.
    """
    service = CloneService(filesystem if filesystem is not None else LocalFileSystem())
    source_root = options.source_directory or bundled_template_root()

    try:
        target = service.validate_target(options.target_directory)
        logger.info(
            "cloning %s into %s (force=%s, dry_run=%s, cursor=%s)",
            source_root,
            target,
            options.force,
            options.dry_run,
            options.cursor,
        )
        plan = service.build_plan(source_root, target, options)
        result = service.execute(plan, dry_run=options.dry_run, verbose=options.verbose)
    except AiddError as exc:
        if not isinstance(exc, ENGINE_ERRORS):
            exc = CloneError(str(exc), cause=exc)
        logger.info("clone failed: %s %s", exc.code, exc)
        return CloneFailure(error=exc)
    except Exception as exc:  # noqa: BLE001
        logger.exception("unexpected clone failure")
        return CloneFailure(
            error=CloneError(f"Unexpected clone failure: {exc}", cause=exc),
        )

    logger.info(
        "clone finished: %s",
        ", ".join(f"{kind.value}={count}" for kind, count in result.summary.items() if count),
    )
    return result
