"""Allow ``python -m aidd`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m aidd`` behaves identically to the ``aidd`` console
script.
"""

from __future__ import annotations

from aidd.cli.app import cli

if __name__ == "__main__":
    cli()
