"""CLI layer — argument parsing, result rendering, and error boundary.

This package is the outermost layer of the application.  It may import
from ``core``, ``infra``, ``engine``, and ``utils``, but no other layer
may import from ``cli``.
"""
