"""Constants for reference query grammars (private)."""

# One unit of reference text: an escaped bracket (\[ or \]) or any single
# character except [, ], ( and ). An unescaped delimiter ends the candidate.
# The escape is tried first so that \] is consumed whole and never leaves a
# bare ] behind to close the reference early.
LINK_CHAR = r"(?:\\[\[\]]|[^\[\]\(\)])"

# Syntax names used in command output
SYNTAX_WIKI = "wiki"
SYNTAX_MARKDOWN = "markdown"

# Query kinds accepted by the CLI
QUERY_KIND_ENTITY = "entity"
QUERY_KIND_BLOCK = "block"
