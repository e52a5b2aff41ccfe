"""Markdown editor and workspace focus."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

log = logging.getLogger(__name__)


class Editor(Protocol):
    def replace_selection(self, text: str) -> None: ...


class MarkdownEditor:
    """Edits one markdown note on disk at a cursor position.

    The cursor defaults to the end of the note and moves past each
    insertion, so consecutive inserts appear in order.
    """

    def __init__(self, root: Path, note_path: str, cursor: Optional[int] = None) -> None:
        self.path = Path(root) / note_path
        self.note_path = note_path
        text = self.read()
        if cursor is None:
            self.cursor = len(text)
        else:
            self.cursor = max(0, min(cursor, len(text)))

    def read(self) -> str:
        if not self.path.exists():
            return ""
        return self.path.read_text(encoding="utf-8")

    def replace_selection(self, text: str) -> None:
        content = self.read()
        content = content[: self.cursor] + text + content[self.cursor :]
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(content, encoding="utf-8")
        self.cursor += len(text)
        log.debug("Inserted %r into %s", text, self.note_path)


class Workspace:
    """Tracks which editor currently has focus."""

    def __init__(self, active_editor: Optional[Editor] = None) -> None:
        self.active_editor = active_editor

    def get_active_editor(self) -> Optional[Editor]:
        return self.active_editor
