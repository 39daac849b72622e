"""Unit tests for the query parse command."""

import pytest

from mdref.api.query.cmd_parse import cmd_parse
from tests.conftest import run_cmd

pytestmark = pytest.mark.query

LINE = "intro [[file#heading|Shown]] and [[ grep \\[x\\]]] and [label](target"


@pytest.fixture
def note(mdref_home, vault_dir):
    path = vault_dir / "note.md"
    path.write_text("# Title\n" + LINE + "\n", encoding="utf-8")
    return path


def test_entity_query(note):
    result = run_cmd(cmd_parse, "note.md", 1, LINE.index("heading"))

    assert result.success is True
    assert result.output["found"] is True
    assert result.output["path"] == str(note)
    assert result.output["query"] == {
        "file_query": "file",
        "infile_query": {"heading": "heading"},
        "grep_string": "file#heading",
    }
    start = LINE.index("[[file")
    assert result.output["metadata"]["char_range"] == [start, LINE.index("]]") + 2]
    assert result.output["metadata"]["syntax"] == "wiki"
    assert result.output["metadata"]["display"] == "Shown"
    assert "Found entity query" in result.result


def test_block_query(note):
    result = run_cmd(cmd_parse, str(note), 1, LINE.index("grep") + 2, kind="block")

    assert result.success is True
    assert result.output["query"] == {
        "grep_string": "grep [x]",
        "display_grep_string": "grep x",
    }


def test_unclosed_markdown_query(note):
    result = run_cmd(cmd_parse, "note.md", 1, len(LINE))

    assert result.output["query"]["file_query"] == "target"
    assert result.output["query"]["infile_query"] is None
    assert result.output["metadata"]["syntax"] == "markdown"
    assert result.output["metadata"]["display"] == "label"
    assert result.output["metadata"]["char_range"] == [LINE.index("[label"), len(LINE)]


def test_no_query_at_cursor(note):
    result = run_cmd(cmd_parse, "note.md", 0, 2)

    assert result.success is True
    assert result.output["found"] is False
    assert result.output["query"] is None
    assert result.output["warnings"] == ["Cursor is not inside a reference"]
    assert "No entity query" in result.result


def test_missing_note(mdref_home):
    result = run_cmd(cmd_parse, "missing.md", 0, 0)

    assert result.success is False
    assert "Cannot read note" in result.output["errors"][0]


def test_unknown_kind(note):
    result = run_cmd(cmd_parse, "note.md", 0, 0, kind="other")

    assert result.success is False
    assert "Unknown query kind" in result.output["errors"][0]


def test_negative_character(note):
    result = run_cmd(cmd_parse, "note.md", 0, -1)

    assert result.success is False
    assert "non-negative" in result.output["errors"][0]


def test_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("MDREF_HOME", str(tmp_path))

    result = run_cmd(cmd_parse, "note.md", 0, 0)

    assert result.success is False
    assert result.output["errors"][0].startswith("Failed to load config")
