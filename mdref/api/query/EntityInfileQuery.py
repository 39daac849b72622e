"""In-file sub-reference models: #heading and #^index."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Heading:
    """Heading sub-reference; text excludes the leading # and may be empty."""

    text: str


@dataclass(frozen=True)
class Index:
    """Block index sub-reference; text excludes the leading #^ and may be empty."""

    text: str


EntityInfileQuery = Heading | Index
