"""Abstract base for query grammar variants (private)."""

import re
from abc import ABC, abstractmethod
from typing import Self


class _QueryGrammar(ABC):
    """Interface every reference query kind implements.

    A variant contributes the payload part of the reference pattern and knows
    how to build itself from a successful match.
    """

    @classmethod
    @abstractmethod
    def grammar_fragment(cls, char_class: str) -> str:
        """Return the payload sub-pattern built from the shared character class."""
        pass

    @classmethod
    @abstractmethod
    def from_match(cls, match: re.Match[str]) -> Self | None:
        """Build the query from the named groups of a match."""
        pass
