"""aidd — AI Driven Development project provisioning.

Clones the bundled ``ai/`` agent-orchestration template folder into a
target project, with dry-run preview, forced overwrite, and an optional
``.cursor`` editor symlink.
"""

from aidd.version import __version__

__all__: list[str] = ["__version__"]
