"""mdref - cursor-aware reference query parsing for note-linking editors."""

__version__ = "0.1.0"
