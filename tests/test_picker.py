from __future__ import annotations

import pytest

from pdf_to_image import (
    FilePicker,
    PickerCancelled,
    SourceFile,
    fuzzy_match,
    get_item_text,
    list_candidates,
    rank,
)


@pytest.fixture
def pdfs(vault):
    for rel in ("Annual Report.pdf", "papers/attention.pdf", "papers/notes.md", "scan.PDF"):
        path = vault / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"%PDF-stub")
    (vault / ".obsidian").mkdir()
    (vault / ".obsidian" / "hidden.pdf").write_bytes(b"%PDF-stub")


def _prompt(answer):
    calls = []

    def _ask(message):
        calls.append(message)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    _ask.calls = calls
    return _ask


class TestListCandidates:
    def test_only_pdfs(self, pdfs, store):
        paths = sorted(f.path for f in list_candidates(store))
        assert paths == ["Annual Report.pdf", "papers/attention.pdf", "scan.PDF"]

    def test_empty_vault(self, store):
        assert list_candidates(store) == []

    def test_item_text_is_basename(self):
        assert get_item_text(SourceFile("papers/attention.pdf")) == "attention"


class TestFuzzyMatch:
    def test_subsequence_matches(self):
        assert fuzzy_match("anrep", "Annual Report") is not None

    def test_out_of_order_does_not_match(self):
        assert fuzzy_match("tropre", "Annual Report") is None

    def test_case_insensitive(self):
        assert fuzzy_match("ANNUAL", "annual report") is not None

    def test_contiguous_prefix_scores_higher(self):
        assert fuzzy_match("att", "attention") > fuzzy_match("att", "a tight trip")

    def test_rank_best_first(self):
        files = [SourceFile("a tight trip.pdf"), SourceFile("attention.pdf")]
        assert [f.basename for f in rank("att", files)] == ["attention", "a tight trip"]


class TestFilePicker:
    def test_query_picks_best_match(self, pdfs, store):
        picker = FilePicker(store, prompt=_prompt("unused"), output=lambda line: None)
        assert picker.choose("attn").path == "papers/attention.pdf"

    def test_query_without_match_cancels(self, pdfs, store):
        picker = FilePicker(store, output=lambda line: None)
        with pytest.raises(PickerCancelled):
            picker.choose("zzz")

    def test_prompt_by_number(self, pdfs, store):
        lines = []
        picker = FilePicker(store, prompt=_prompt("1"), output=lines.append)
        chosen = picker.choose()
        assert chosen == list_candidates(store)[0]
        assert len(lines) == 3

    def test_prompt_by_name(self, pdfs, store):
        picker = FilePicker(store, prompt=_prompt("scan"), output=lambda line: None)
        assert picker.choose().path == "scan.PDF"

    @pytest.mark.parametrize("answer", ["", "   ", EOFError()])
    def test_prompt_cancel(self, pdfs, store, answer):
        picker = FilePicker(store, prompt=_prompt(answer), output=lambda line: None)
        with pytest.raises(PickerCancelled):
            picker.choose()

    def test_no_candidates_cancels_without_prompt(self, store):
        ask = _prompt("1")
        picker = FilePicker(store, prompt=ask, output=lambda line: None)
        with pytest.raises(PickerCancelled):
            picker.choose()
        assert ask.calls == []
