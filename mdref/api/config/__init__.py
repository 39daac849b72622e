"""Config API module."""

from .LogConfig import LogConfig
from .MdrefConfig import MdrefConfig

__all__ = ["LogConfig", "MdrefConfig"]
