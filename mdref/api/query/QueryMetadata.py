"""Query metadata model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .Location import Location
from .QuerySyntaxInfo import QuerySyntaxInfo


@dataclass(frozen=True)
class QueryMetadata:
    """Where a reference query was found and how it was written."""

    line: int
    char_range: tuple[int, int]
    syntax_info: QuerySyntaxInfo
    path: Path
    cursor: int

    @classmethod
    def new(cls, location: Location, char_range: tuple[int, int], syntax_info: QuerySyntaxInfo) -> "QueryMetadata":
        return cls(
            line=location.line,
            char_range=char_range,
            syntax_info=syntax_info,
            path=location.path,
            cursor=location.character,
        )

    @property
    def display(self) -> str | None:
        return self.syntax_info.display

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dict for command output."""
        start, end = self.char_range
        return {
            "path": str(self.path),
            "line": self.line,
            "cursor": self.cursor,
            "char_range": [start, end],
            "syntax": self.syntax_info.syntax,
            "display": self.syntax_info.display,
        }
