"""Top-level mdref configuration."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..vault.VaultConfig import VaultConfig
from .LogConfig import LogConfig


class MdrefConfig(BaseModel):
    """Top-level configuration for mdref."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get mdref home directory based on MDREF_HOME or default to ~/.mdref."""
        home_env = os.environ.get("MDREF_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".mdref"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file inside the mdref home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "MdrefConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
