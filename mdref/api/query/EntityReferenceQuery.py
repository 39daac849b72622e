"""Entity reference query model (UNO: single model)."""

import re
from dataclasses import dataclass
from typing import Self

from ._QueryGrammar import _QueryGrammar
from .EntityInfileQuery import EntityInfileQuery, Heading, Index


@dataclass(frozen=True)
class EntityReferenceQuery(_QueryGrammar):
    """Query for a note, optionally narrowed to a heading or block index.

    ``infile_query`` is ``None`` when no ``#`` was typed at all; ``Heading("")``
    and ``Index("")`` mean the ``#`` (or ``#^``) was typed with nothing after it.
    """

    file_query: str
    infile_query: EntityInfileQuery | None = None

    def grep_string(self) -> str:
        """Recombine the query into the text the user typed."""
        match self.infile_query:
            case Heading(text):
                return f"{self.file_query}#{text}"
            case Index(text):
                return f"{self.file_query}#^{text}"
            case _:
                return self.file_query

    @classmethod
    def grammar_fragment(cls, char_class: str) -> str:
        return (
            rf"(?P<file_ref>{char_class}*?)"
            rf"(?:#(?:(?:\^(?P<index>{char_class}*?))|(?P<heading>{char_class}*?)))??"
        )

    @classmethod
    def from_match(cls, match: re.Match[str]) -> Self | None:
        groups = match.groupdict()
        file_ref = groups.get("file_ref")
        if file_ref is None:
            return None

        infile_query: EntityInfileQuery | None = None
        if groups.get("index") is not None:
            infile_query = Index(groups["index"])
        elif groups.get("heading") is not None:
            infile_query = Heading(groups["heading"])

        return cls(file_query=file_ref, infile_query=infile_query)
