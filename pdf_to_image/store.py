"""Document store: the vault of notes and attachments."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

from .errors import StoreWriteFailure
from .models import SourceFile

log = logging.getLogger(__name__)


class DocumentStore(Protocol):
    def list_files(self) -> list[SourceFile]: ...

    def read_binary(self, file: SourceFile) -> bytes: ...

    def create_binary(self, path: str, data: bytes) -> SourceFile: ...


class VaultStore:
    """A vault backed by a local directory.

    Paths handed out and accepted are POSIX-style and relative to the
    vault root. Dot-directories (``.obsidian``, ``.git``, ...) are hidden.
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def list_files(self) -> list[SourceFile]:
        """Every file in the vault, in directory-walk order."""
        if not self.root.exists():
            return []
        files: list[SourceFile] = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            rel_dir = Path(dirpath).relative_to(self.root)
            for filename in filenames:
                files.append(SourceFile((rel_dir / filename).as_posix()))
        return files

    def read_binary(self, file: SourceFile) -> bytes:
        return self._resolve(file.path).read_bytes()

    def create_binary(self, path: str, data: bytes) -> SourceFile:
        """Write *data* to *path*, replacing any existing file."""
        try:
            target = self._resolve(path)
        except ValueError as exc:
            raise StoreWriteFailure(str(exc)) from exc
        try:
            target.write_bytes(data)
        except OSError as exc:
            raise StoreWriteFailure(f"Could not write {path}: {exc}") from exc
        log.debug("Wrote %s (%s bytes)", path, len(data))
        return SourceFile(path)

    def _resolve(self, path: str) -> Path:
        root = self.root.resolve()
        target = (root / path).resolve()
        if target != root and root not in target.parents:
            raise ValueError(f"Path escapes the vault: {path}")
        return target
