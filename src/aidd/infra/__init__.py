"""Infrastructure layer — operating-system integration.

This layer wraps all interaction with the local filesystem.  Every raw
``OSError`` must be caught here and re-raised as a
:class:`~aidd.exceptions.AiddError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from aidd.infra.local_filesystem import LocalFileSystem
from aidd.infra.templates import TEMPLATE_DIRNAME, bundled_template_root

__all__: list[str] = [
    "LocalFileSystem",
    "TEMPLATE_DIRNAME",
    "bundled_template_root",
]
