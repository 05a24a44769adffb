"""Infrastructure: locate the bundled ``ai/`` template tree.

The template folder ships as package data inside :mod:`aidd` and is
resolved through :mod:`importlib.resources`, so it is found the same way
from a source checkout, an editable install, or a wheel.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path

TEMPLATE_DIRNAME: str = "ai"
"""Name of the bundled template folder, also the cloned folder name."""


def bundled_template_root() -> Path:
    """Return the on-disk path of the bundled template folder.

    The path is returned even when it does not exist; the tree walker
    reports a missing root as a :class:`~aidd.exceptions.CloneError`.
    """
    return Path(str(resources.files("aidd").joinpath(TEMPLATE_DIRNAME)))
