"""Fuzzy file picker over the PDFs in the document store."""

from __future__ import annotations

import logging
from typing import Callable, Optional

from .errors import PickerCancelled
from .models import SourceFile
from .store import DocumentStore
from .utils import PDF_EXTENSION

log = logging.getLogger(__name__)


def list_candidates(store: DocumentStore) -> list[SourceFile]:
    """All PDFs in the store, in the order the store lists them."""
    return [f for f in store.list_files() if f.extension == PDF_EXTENSION]


def get_item_text(file: SourceFile) -> str:
    return file.basename


def fuzzy_match(query: str, text: str) -> Optional[int]:
    """Score *text* against *query* as a case-insensitive subsequence.

    Returns ``None`` when some query character cannot be matched in order.
    Consecutive runs and matches at word starts score higher.
    """
    query = query.lower().strip()
    text_l = text.lower()
    if not query:
        return 0

    score = 0
    pos = 0
    prev = -2
    for ch in query:
        if ch.isspace():
            continue
        idx = text_l.find(ch, pos)
        if idx < 0:
            return None
        score += 1
        if idx == prev + 1:
            score += 2
        if idx == 0 or not text_l[idx - 1].isalnum():
            score += 3
        prev = idx
        pos = idx + 1
    return score


def rank(query: str, files: list[SourceFile]) -> list[SourceFile]:
    """Matching files, best first; ties keep store order."""
    scored = []
    for file in files:
        score = fuzzy_match(query, get_item_text(file))
        if score is not None:
            scored.append((score, file))
    scored.sort(key=lambda item: -item[0])
    return [file for _, file in scored]


class FilePicker:
    """Lets the user choose exactly one PDF, or cancel."""

    def __init__(
        self,
        store: DocumentStore,
        prompt: Callable[[str], str] = input,
        output: Callable[[str], None] = print,
    ) -> None:
        self.store = store
        self.prompt = prompt
        self.output = output

    def choose(self, query: Optional[str] = None) -> SourceFile:
        candidates = list_candidates(self.store)
        if not candidates:
            log.info("No PDF files in the vault")
            raise PickerCancelled("no PDF files to choose from")

        if query is None:
            for i, file in enumerate(candidates, start=1):
                self.output(f"{i:>3}. {get_item_text(file)}  ({file.path})")
            try:
                query = self.prompt("Choose a PDF (number or name, empty to cancel): ")
            except EOFError:
                raise PickerCancelled("input closed") from None
            query = query.strip()
            if not query:
                raise PickerCancelled("no selection")
            if query.isdigit() and 1 <= int(query) <= len(candidates):
                return candidates[int(query) - 1]

        matches = rank(query, candidates)
        if not matches:
            log.info("No PDF matches %r", query)
            raise PickerCancelled(f"no PDF matches {query!r}")
        log.debug("Picker query %r -> %s", query, matches[0].path)
        return matches[0]
