"""Query syntax info models."""

from dataclasses import dataclass
from typing import ClassVar

from ._constants import SYNTAX_MARKDOWN, SYNTAX_WIKI


@dataclass(frozen=True)
class MarkdownSyntax:
    """Reference typed as ``[display](target)``; display is always present."""

    syntax: ClassVar[str] = SYNTAX_MARKDOWN

    display: str


@dataclass(frozen=True)
class WikiSyntax:
    """Reference typed as ``[[target]]`` or ``[[target|display]]``.

    ``display`` is ``None`` when no ``|`` was typed and ``""`` for
    ``[[target|]]``.
    """

    syntax: ClassVar[str] = SYNTAX_WIKI

    display: str | None = None


QuerySyntaxInfo = MarkdownSyntax | WikiSyntax
