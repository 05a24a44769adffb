"""Single source of truth for the aidd package version."""

from __future__ import annotations

__version__ = "1.4.0"
