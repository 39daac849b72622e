"""API module for mdref.

Functions defined here serve as the single source of truth for the library
entry points and the CLI commands built on top of them.
"""

__all__ = []
