"""Log configuration."""

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LogConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")

    def level_number(self) -> int:
        """Numeric level for the logging module."""
        return logging.getLevelName(self.level)
