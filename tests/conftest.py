"""Shared fixtures for the PDF-to-image test suite.

PDFs are generated on the fly with PyMuPDF so every test runs against a
real document of known size and page count.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import fitz
import pytest

from pdf_to_image import (
    Configuration,
    MarkdownEditor,
    SettingsStore,
    SourceFile,
    VaultStore,
    Workspace,
    default_settings_path,
)

# ---------------------------------------------------------------------------
# Configure verbose logging for test debugging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stderr,
    force=True,
)

PAGE_WIDTH = 200
PAGE_HEIGHT = 100


def build_pdf_bytes(num_pages: int, width: float = PAGE_WIDTH, height: float = PAGE_HEIGHT) -> bytes:
    doc = fitz.open()
    for i in range(num_pages):
        page = doc.new_page(width=width, height=height)
        page.insert_text((20, 50), f"Page {i + 1}")
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def store(vault: Path) -> VaultStore:
    return VaultStore(vault)


@pytest.fixture
def make_pdf(vault: Path):
    """Write a generated PDF into the vault and return its SourceFile."""

    def _make(rel_path: str, num_pages: int = 3) -> SourceFile:
        target = vault / rel_path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(build_pdf_bytes(num_pages))
        return SourceFile(rel_path)

    return _make


@pytest.fixture
def settings() -> Configuration:
    return Configuration()


@pytest.fixture
def settings_store(vault: Path) -> SettingsStore:
    return SettingsStore(default_settings_path(vault))


@pytest.fixture
def note(vault: Path) -> MarkdownEditor:
    (vault / "Note.md").write_text("# Note\n", encoding="utf-8")
    return MarkdownEditor(vault, "Note.md")


@pytest.fixture
def workspace(note: MarkdownEditor) -> Workspace:
    return Workspace(active_editor=note)
