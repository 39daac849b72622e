"""Cursor-aware reference matcher (private)."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from ._constants import SYNTAX_MARKDOWN, SYNTAX_WIKI
from ._GrammarSet import build_grammar_set
from ._QueryGrammar import _QueryGrammar
from .GrammarContractError import GrammarContractError
from .QuerySyntaxInfo import MarkdownSyntax, QuerySyntaxInfo, WikiSyntax

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=_QueryGrammar)


class _Closure(Enum):
    CLOSED = "closed"
    UNCLOSED = "unclosed"


class _LinkMatcher:
    """Find the reference the cursor sits in and extract a query from it.

    The four grammars are tried in a fixed order and the first hit wins:
    closed wiki, unclosed wiki, closed markdown, unclosed markdown. Closed
    grammars scan the whole line and need a match containing the cursor;
    unclosed grammars scan the text before the cursor and need a match
    starting before it.
    """

    def __init__(self, line: str, character: int):
        self.line = line
        self.character = character

    def parse(self, query_cls: type[Q]) -> tuple[Q, tuple[int, int], QuerySyntaxInfo] | None:
        """Parse the line for a ``query_cls`` reference at the cursor.

        Returns:
            (query, char_range, syntax_info), or None when the cursor is not
            inside a recognizable reference
        """
        if self.character > len(self.line):
            logger.debug("Cursor %d is past the end of a %d character line", self.character, len(self.line))
            return None

        grammars = build_grammar_set(query_cls)
        candidates: list[tuple[re.Pattern[str], _Closure, str]] = [
            (grammars.wiki_closed, _Closure.CLOSED, SYNTAX_WIKI),
            (grammars.wiki_unclosed, _Closure.UNCLOSED, SYNTAX_WIKI),
            (grammars.markdown_closed, _Closure.CLOSED, SYNTAX_MARKDOWN),
            (grammars.markdown_unclosed, _Closure.UNCLOSED, SYNTAX_MARKDOWN),
        ]

        for pattern, closure, syntax in candidates:
            match = self._find(pattern, closure)
            if match is None:
                continue

            logger.debug("Matched %s %s reference at %d", closure.value, syntax, match.start())
            query = query_cls.from_match(match)
            # The cursor reference was found; a failed extraction ends the search
            if query is None:
                return None
            return query, self._char_range(match, closure), self._syntax_info(match, syntax)

        return None

    def _find(self, pattern: re.Pattern[str], closure: _Closure) -> re.Match[str] | None:
        hay, accept = self._scan_policy(closure)
        return next((m for m in pattern.finditer(hay) if accept(m)), None)

    def _scan_policy(self, closure: _Closure) -> tuple[str, Callable[[re.Match[str]], bool]]:
        if closure is _Closure.CLOSED:
            return self.line, lambda m: m.start() <= self.character <= m.end()
        return self.line[: self.character], lambda m: m.start() < self.character

    def _char_range(self, match: re.Match[str], closure: _Closure) -> tuple[int, int]:
        if closure is _Closure.CLOSED:
            return match.start(), match.end()
        # The cursor sits one past the last typed character, so it is the exclusive end
        return match.start(), self.character

    def _syntax_info(self, match: re.Match[str], syntax: str) -> QuerySyntaxInfo:
        display = match.groupdict().get("display")
        if syntax == SYNTAX_WIKI:
            return WikiSyntax(display=display)
        if display is None:
            raise GrammarContractError(f"Markdown reference matched without a display group: {match.group(0)!r}")
        return MarkdownSyntax(display=display)
