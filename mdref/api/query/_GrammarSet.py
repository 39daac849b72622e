"""Grammar assembler (private)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

from ._constants import LINK_CHAR
from ._QueryGrammar import _QueryGrammar


@dataclass(frozen=True)
class _GrammarSet:
    """The four whole-reference patterns built for one query variant."""

    wiki_closed: re.Pattern[str]
    wiki_unclosed: re.Pattern[str]
    markdown_closed: re.Pattern[str]
    markdown_unclosed: re.Pattern[str]


@lru_cache(maxsize=None)
def build_grammar_set(query_cls: type[_QueryGrammar]) -> _GrammarSet:
    """Compile the wiki/markdown × closed/unclosed patterns for ``query_cls``.

    A fragment that does not compile raises ``re.error``; that is a defect in
    the grammar definitions and is left to propagate.
    """
    query_re = query_cls.grammar_fragment(LINK_CHAR)

    return _GrammarSet(
        wiki_closed=re.compile(rf"\[\[{query_re}(?:\|(?P<display>{LINK_CHAR}*?))?\]\]"),
        # Display text is only recognized once the reference is closed
        wiki_unclosed=re.compile(rf"\[\[{query_re}\Z"),
        markdown_closed=re.compile(rf"\[(?P<display>{LINK_CHAR}*?)\]\({query_re}\)"),
        markdown_unclosed=re.compile(rf"\[(?P<display>{LINK_CHAR}*?)\]\({query_re}\Z"),
    )
