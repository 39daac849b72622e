"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from mdref.api.vault._AbstractLineSource import _AbstractLineSource


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "query: reference query parsing tests")
    config.addinivalue_line("markers", "config: configuration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(vault_dir: Path | str = "~/_vault") -> dict:
    """Minimal valid mdref configuration dict for testing."""
    return {
        "vault": {
            "base_dir": str(vault_dir),
        },
        "log": {
            "level": "DEBUG",
        },
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """Empty vault root directory."""
    d = tmp_path / "vault"
    d.mkdir()
    return d


@pytest.fixture
def mdref_home(tmp_path: Path, monkeypatch, vault_dir: Path) -> Path:
    """Set up MDREF_HOME with a minimal config file pointing at ``vault_dir``.

    Returns:
        Path to the mdref home directory
    """
    home = tmp_path / ".mdref"
    home.mkdir()
    monkeypatch.setenv("MDREF_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(vault_dir)))
    return home


# =============================================================================
# Test Helpers
# =============================================================================


class StaticLineSource(_AbstractLineSource):
    """Line source serving fixed lines, keyed by path."""

    def __init__(self, lines: dict[Path, list[str]]):
        self.lines = lines
        self.calls: list[tuple[Path, int]] = []

    def select_line_text(self, path: Path, line: int) -> str | None:
        self.calls.append((path, line))
        doc = self.lines.get(path)
        if doc is None or not 0 <= line < len(doc):
            return None
        return doc[line]


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
