"""Output schema for the query parse command."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class QueryParseOutput(BaseModel):
    """Structured output of ``mdrefc query entity|block``."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    kind: str
    path: str
    line: int
    character: int
    found: bool = False
    query: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    success: bool
