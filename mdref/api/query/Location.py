"""Location model (UNO: single model)."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Location:
    """Cursor position to resolve: file, zero-indexed line and character."""

    path: Path
    line: int
    character: int

    def __post_init__(self) -> None:
        if self.line < 0:
            raise ValueError(f"line must be non-negative (got {self.line})")
        if self.character < 0:
            raise ValueError(f"character must be non-negative (got {self.character})")
