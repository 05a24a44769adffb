"""Custom exception hierarchy for aidd.

The clone engine surfaces a **closed** set of failure kinds.  Every raw
``OSError`` must be caught in the infrastructure layer and re-raised as
one of the typed subclasses below, with the offending path in the
message and the original exception attached as ``cause``.

Hierarchy
---------
AiddError
├── ValidationError     (VALIDATION_ERROR)
├── FileSystemError     (FILESYSTEM_ERROR)
├── CloneError          (CLONE_ERROR)
└── EnvironmentError    (ENVIRONMENT_ERROR, CLI layer only)
"""

from __future__ import annotations

from typing import ClassVar


class AiddError(Exception):
    """Base exception for all aidd errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    code: ClassVar[str] = "AIDD_ERROR"
    """Stable machine-readable identifier for programmatic handling."""

    label: ClassVar[str] = "Error"
    """Human-readable kind name used as the rendered message prefix."""

    default_hint: ClassVar[str | None] = None

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint if hint is not None else self.default_hint
        """Optional actionable guidance shown below the error message."""
        self.cause: BaseException | None = cause
        """Wrapped lower-level exception, surfaced in verbose mode."""

    @property
    def message(self) -> str:
        return str(self)


# --- Engine failure kinds --------------------------------------------------

class ValidationError(AiddError):
    """Raised when the supplied target path is structurally invalid."""

    code = "VALIDATION_ERROR"
    label = "Validation Error"
    default_hint = "Try using --force to overwrite existing files"


class FileSystemError(AiddError):
    """Raised when reading, creating, copying, or linking on disk fails."""

    code = "FILESYSTEM_ERROR"
    label = "File System Error"
    default_hint = "Check file permissions and available disk space"


class CloneError(AiddError):
    """Raised when the bundled template tree is missing or corrupted.

    This signals a packaging or installation defect rather than a
    user-input or transient I/O problem.
    """

    code = "CLONE_ERROR"
    label = "Clone Error"
    default_hint = "Check source directory and target permissions"


ENGINE_ERRORS: tuple[type[AiddError], ...] = (
    ValidationError,
    FileSystemError,
    CloneError,
)
"""Every failure kind that may appear in a clone result."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(AiddError):
    """Raised when an optional runtime dependency is not available."""

    code = "ENVIRONMENT_ERROR"
    label = "Environment Error"
