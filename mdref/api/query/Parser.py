"""Reference query parser facade."""

from __future__ import annotations

import logging
from typing import TypeVar

from ..vault._AbstractLineSource import _AbstractLineSource
from ._LinkMatcher import _LinkMatcher
from ._QueryGrammar import _QueryGrammar
from .BlockSearchQuery import BlockSearchQuery
from .EntityReferenceQuery import EntityReferenceQuery
from .Location import Location
from .QueryMetadata import QueryMetadata

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=_QueryGrammar)


class Parser:
    """Extract the reference query under the cursor for completion.

    Lines are read through the injected line source, so the parser can run
    against the live vault or against fixed lines in tests.
    """

    def __init__(self, line_source: _AbstractLineSource):
        self.line_source = line_source

    def parse_entity_query(self, location: Location) -> tuple[EntityReferenceQuery, QueryMetadata] | None:
        """Parse a note reference (``[[file#heading]]``, ``[text](file)``, ...) at the cursor."""
        return self._parse_query(location, EntityReferenceQuery)

    def parse_block_query(self, location: Location) -> tuple[BlockSearchQuery, QueryMetadata] | None:
        """Parse a block search (``[[ search text]]``) at the cursor."""
        return self._parse_query(location, BlockSearchQuery)

    def _parse_query(self, location: Location, query_cls: type[Q]) -> tuple[Q, QueryMetadata] | None:
        line_text = self.line_source.select_line_text(location.path, location.line)
        if line_text is None:
            logger.debug("No line %d in %s", location.line, location.path)
            return None

        parsed = _LinkMatcher(line_text, location.character).parse(query_cls)
        if parsed is None:
            return None

        query, char_range, syntax_info = parsed
        return query, QueryMetadata.new(location, char_range, syntax_info)
