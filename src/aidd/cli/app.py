"""CLI application entry point for aidd.

This module is the **sole error boundary** for the entire application.
It renders the clone result returned by the engine, catches
:class:`~aidd.exceptions.AiddError`, ``KeyboardInterrupt``, and any
unexpected ``Exception``, and returns well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to
  :func:`aidd.engine.execute_clone`.
* ``print()`` is forbidden outside the CLI layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from aidd.cli import exit_codes
from aidd.cli.console import console
from aidd.exceptions import AiddError
from aidd.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``aidd [target-directory]`` — clone ``ai/`` into the target (default ``.``)
    * ``aidd --version``
    """
    parser = argparse.ArgumentParser(
        prog="aidd",
        description="AI Driven Development - Clone SudoLang AI agent orchestration system",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "target_directory",
        metavar="target-directory",
        nargs="?",
        default=".",
        help="target directory to clone ai/ folder (default: current directory)",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="overwrite existing files",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="show what would be copied without copying",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="provide detailed output",
    )
    parser.add_argument(
        "-c",
        "--cursor",
        action="store_true",
        help="create .cursor symlink for Cursor editor integration",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_clone(args: argparse.Namespace) -> int:
    """Run the clone engine and render its result."""
    from aidd.cli.report import render_failure, render_success
    from aidd.core.models import CloneOptions
    from aidd.engine import execute_clone

    options = CloneOptions(
        target_directory=Path(args.target_directory),
        force=args.force,
        dry_run=args.dry_run,
        verbose=args.verbose,
        cursor=args.cursor,
    )
    result = execute_clone(options)

    if result.success:
        render_success(result)
        return exit_codes.SUCCESS

    render_failure(result, verbose=options.verbose)
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the aidd CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    from aidd.utils.log import configure_logging

    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging()
    return _handle_clone(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except AiddError as exc:
        # Last-resort guard: execute_clone returns engine errors as results.
        console.print(f"[bold red]{exc.label}:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
