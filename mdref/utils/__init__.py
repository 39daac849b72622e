"""mdref utility functions.

Each file in this package exports exactly one function or class, following
the single file == function/class rule.
"""

from .configure_logging import configure_logging
from .normalize_path import normalize_path

__all__ = [
    "configure_logging",
    "normalize_path",
]
