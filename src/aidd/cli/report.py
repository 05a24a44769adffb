"""Rendering of clone results for the terminal.

Turns a :class:`~aidd.core.models.CloneResult` into user-facing output:
a headline, per-kind counts, the action table in verbose mode, and for
failures the classified error with its actionable hint.  No business
logic lives here.
"""

from __future__ import annotations

from aidd.cli.console import console, escape
from aidd.core.models import ActionKind, CloneFailure, CloneSuccess

_KIND_STYLES: dict[ActionKind, str] = {
    ActionKind.CREATE: "green",
    ActionKind.OVERWRITE: "yellow",
    ActionKind.SKIP_CONFLICT: "red",
    ActionKind.SYMLINK_CREATE: "green",
    ActionKind.SYMLINK_SKIP: "red",
}


def format_summary(result: CloneSuccess) -> str:
    """Return ``"create: 3, skip-conflict: 1"`` style counts, non-zero only."""
    parts = [f"{kind.value}: {count}" for kind, count in result.summary.items() if count]
    return ", ".join(parts) if parts else "nothing to do"


def render_success(result: CloneSuccess) -> None:
    """Print the headline, counts, and (verbose) the per-entry actions."""
    target = escape(str(result.plan.target))
    if result.dry_run:
        console.print(f"[bold cyan]Dry run:[/bold cyan] no files were written to {target}")
    else:
        console.print(f"[bold green]AI folder cloned to[/bold green] {target}")
    console.print(f"  {format_summary(result)}")

    if result.actions:
        rows = [
            (
                f"[{_KIND_STYLES[action.kind]}]{action.kind.value}[/{_KIND_STYLES[action.kind]}]",
                escape(action.display_path),
            )
            for action in result.actions
        ]
        title = "Planned actions" if result.dry_run else "Actions"
        console.table(title, ("Action", "Path"), rows)

    skipped = result.summary.get(ActionKind.SKIP_CONFLICT, 0) + result.summary.get(
        ActionKind.SYMLINK_SKIP, 0
    )
    if skipped:
        console.print(
            f"[yellow]Hint:[/yellow] {skipped} existing path(s) were left untouched; "
            "use --force to overwrite them"
        )


def render_failure(failure: CloneFailure, *, verbose: bool) -> None:
    """Print the classified error, its hint, and (verbose) the cause."""
    error = failure.error
    console.print(f"[bold red]{error.label}:[/bold red] {escape(failure.message)}")
    if error.hint:
        console.print(f"[yellow]Hint:[/yellow] {escape(error.hint)}")
    if verbose and failure.cause is not None:
        console.print(f"[dim]Caused by:[/dim] {escape(str(failure.cause))}")
