"""Block search query model (UNO: single model)."""

import re
from dataclasses import dataclass
from typing import Self

from ._QueryGrammar import _QueryGrammar


@dataclass(frozen=True)
class BlockSearchQuery(_QueryGrammar):
    """Free-text search typed as ``[[ text]]``.

    ``raw_grep_string`` is the captured text as typed and may still contain
    escaped brackets (``\\[`` and ``\\]``).
    """

    raw_grep_string: str

    def grep_string(self) -> str:
        """Search text with escaped brackets turned into literal brackets."""
        return self.raw_grep_string.replace(r"\[", "[").replace(r"\]", "]")

    def display_grep_string(self) -> str:
        """Search text with escaped brackets removed, for previews."""
        return self.raw_grep_string.replace(r"\[", "").replace(r"\]", "")

    @classmethod
    def grammar_fragment(cls, char_class: str) -> str:
        return rf" (?P<grep>{char_class}*?)"

    @classmethod
    def from_match(cls, match: re.Match[str]) -> Self | None:
        grep = match.groupdict().get("grep")
        if grep is None:
            return None
        return cls(raw_grep_string=grep)
