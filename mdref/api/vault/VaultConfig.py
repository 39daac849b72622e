"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(..., description="Path to vault root directory")
    extensions: list[str] = Field(default_factory=lambda: [".md"], description="Note file extensions to load")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from mdref.utils.normalize_path import normalize_path

        return str(normalize_path(v))

    @field_validator("extensions")
    @classmethod
    def _validate_extensions(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one extension is required")
        for ext in v:
            if not ext.startswith("."):
                raise ValueError(f"extension must start with '.': {ext!r}")
        return [ext.lower() for ext in v]
