"""Reference query API module."""

from .BlockSearchQuery import BlockSearchQuery
from .EntityInfileQuery import EntityInfileQuery, Heading, Index
from .EntityReferenceQuery import EntityReferenceQuery
from .GrammarContractError import GrammarContractError
from .Location import Location
from .Parser import Parser
from .QueryMetadata import QueryMetadata
from .QuerySyntaxInfo import MarkdownSyntax, QuerySyntaxInfo, WikiSyntax

__all__ = [
    "BlockSearchQuery",
    "EntityInfileQuery",
    "EntityReferenceQuery",
    "GrammarContractError",
    "Heading",
    "Index",
    "Location",
    "MarkdownSyntax",
    "Parser",
    "QueryMetadata",
    "QuerySyntaxInfo",
    "WikiSyntax",
]
