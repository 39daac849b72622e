"""StageResult dataclass for the 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result of a command: announce, progress, result, output.

    ``progress_callback`` is a generator that does the work, yields
    ``(fraction, message)`` pairs, and fills in ``result``, ``output`` and
    ``success`` on the StageResult it is given.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
