"""Abstract line source (private)."""

from abc import ABC, abstractmethod
from pathlib import Path


class _AbstractLineSource(ABC):
    """Read access to the text of a single line of a document.

    Implementations must tolerate concurrent calls from several parse requests.
    """

    @abstractmethod
    def select_line_text(self, path: Path, line: int) -> str | None:
        """Return the zero-indexed line of ``path`` without its terminator, or None."""
        pass
