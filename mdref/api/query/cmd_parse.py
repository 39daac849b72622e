"""Query parse API command.

CLI: mdrefc query entity|block <path> <line> <character>
"""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ._constants import QUERY_KIND_BLOCK, QUERY_KIND_ENTITY
from .BlockSearchQuery import BlockSearchQuery
from .EntityInfileQuery import Heading, Index
from .EntityReferenceQuery import EntityReferenceQuery
from .QueryParseOutput import QueryParseOutput


def _query_to_dict(query: EntityReferenceQuery | BlockSearchQuery) -> dict[str, Any]:
    if isinstance(query, BlockSearchQuery):
        return {
            "grep_string": query.grep_string(),
            "display_grep_string": query.display_grep_string(),
        }

    infile: dict[str, str] | None = None
    match query.infile_query:
        case Heading(text):
            infile = {"heading": text}
        case Index(text):
            infile = {"index": text}
    return {
        "file_query": query.file_query,
        "infile_query": infile,
        "grep_string": query.grep_string(),
    }


def cmd_parse(path: str, line: int, character: int, kind: str = QUERY_KIND_ENTITY) -> StageResult:
    """Parse the reference query at a cursor position in a vault note.

    Args:
        path: Note path, absolute or relative to the vault root
        line: Zero-indexed line number
        character: Zero-indexed cursor offset within the line
        kind: "entity" for note references, "block" for block searches
    """

    def _fail(result_obj: StageResult, message: str) -> None:
        result_obj.output = QueryParseOutput(
            errors=[message],
            kind=kind,
            path=path,
            line=line,
            character=character,
            success=False,
        ).model_dump(mode="python")
        result_obj.result = f"Query parse failed: {message}"
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.MdrefConfig import MdrefConfig
        from ..vault.Vault import Vault
        from .Location import Location
        from .Parser import Parser

        if kind not in (QUERY_KIND_ENTITY, QUERY_KIND_BLOCK):
            _fail(result_obj, f"Unknown query kind: {kind!r} (expected 'entity' or 'block')")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = MdrefConfig.load()
        except ValueError as e:
            _fail(result_obj, f"Failed to load config: {e}")
            return

        yield (0.4, "Loading note...")
        vault = Vault.from_config(config.vault)
        note_path = vault.resolve(path)
        if not vault.load_file(note_path):
            _fail(result_obj, f"Cannot read note: {note_path}")
            return

        yield (0.7, "Parsing reference...")
        try:
            location = Location(path=note_path, line=line, character=character)
        except ValueError as e:
            _fail(result_obj, str(e))
            return

        parser = Parser(vault)
        parsed = (
            parser.parse_entity_query(location)
            if kind == QUERY_KIND_ENTITY
            else parser.parse_block_query(location)
        )

        yield (1.0, "Complete")
        warnings: list[str] = []
        if parsed is None:
            warnings.append("Cursor is not inside a reference")
            query_dict = None
            metadata_dict = None
        else:
            query, metadata = parsed
            query_dict = _query_to_dict(query)
            metadata_dict = metadata.to_dict()

        result_obj.output = QueryParseOutput(
            errors=[],
            warnings=warnings,
            kind=kind,
            path=str(note_path),
            line=line,
            character=character,
            found=parsed is not None,
            query=query_dict,
            metadata=metadata_dict,
            success=True,
        ).model_dump(mode="python")
        result_obj.result = (
            f"Found {kind} query at {note_path}:{line}:{character}"
            if parsed is not None
            else f"No {kind} query at {note_path}:{line}:{character}"
        )
        result_obj.success = True

    return StageResult(
        announce=f"Parsing {kind} query at {path}:{line}:{character}...",
        progress_callback=do_work,
    )
