"""In-memory vault document store."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Generator, Iterable
from pathlib import Path

from ._AbstractLineSource import _AbstractLineSource
from .VaultConfig import VaultConfig

logger = logging.getLogger(__name__)

# Editors count \r\n, \r and \n as line breaks; str.splitlines() also splits
# on form feeds and unicode separators, which would shift line numbers.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class Vault(_AbstractLineSource):
    """Holds the current text of every note, split into lines.

    Documents are keyed by absolute path. Relative paths are taken relative to
    the vault root. All access goes through a lock so editor requests served
    in parallel can read lines while files are being updated.
    """

    def __init__(self, vault_path: Path, extensions: Iterable[str] = (".md",)):
        self._vault_path = vault_path
        self._extensions = tuple(ext.lower() for ext in extensions)
        self._documents: dict[Path, list[str]] = {}
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, vault_config: VaultConfig) -> Vault:
        return cls(Path(vault_config.base_dir), vault_config.extensions)

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def resolve(self, path: Path | str) -> Path:
        """Absolute path used as the document key."""
        candidate = Path(path).expanduser()
        if not candidate.is_absolute():
            candidate = self._vault_path / candidate
        return candidate.absolute()

    def iter_note_files(self) -> Generator[Path, None, None]:
        """Iterate all note files under the vault root (skips hidden directories)."""
        if not self._vault_path.is_dir():
            return
        for note in sorted(self._vault_path.rglob("*")):
            if not note.is_file() or note.suffix.lower() not in self._extensions:
                continue
            rel_parts = note.relative_to(self._vault_path).parts
            if any(part.startswith(".") for part in rel_parts[:-1]):
                continue
            yield note

    def load(self) -> int:
        """Read every note under the vault root. Returns the number of files loaded."""
        loaded = 0
        for note in self.iter_note_files():
            if self.load_file(note):
                loaded += 1
        logger.info("Loaded %d note(s) from %s", loaded, self._vault_path)
        return loaded

    def load_file(self, path: Path | str) -> bool:
        """Read one file from disk into the store. Returns False if it cannot be read."""
        key = self.resolve(path)
        try:
            text = key.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Cannot read %s: %s", key, exc)
            return False
        self.update_file(key, text)
        return True

    def update_file(self, path: Path | str, text: str) -> None:
        """Replace the stored text of a document."""
        lines = _LINE_BREAK.split(text)
        with self._lock:
            self._documents[self.resolve(path)] = lines

    def remove_file(self, path: Path | str) -> None:
        with self._lock:
            self._documents.pop(self.resolve(path), None)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        with self._lock:
            return self.resolve(path) in self._documents

    def select_line_text(self, path: Path, line: int) -> str | None:
        with self._lock:
            lines = self._documents.get(self.resolve(path))
        if lines is None or not 0 <= line < len(lines):
            return None
        return lines[line]
