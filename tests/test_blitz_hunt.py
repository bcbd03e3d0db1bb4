from pathlib import Path

import pytest

from doc_snipe.lightning.blitz_hunt import Hound, SearchConfig
from doc_snipe.lightning.context_strike import HIGHLIGHT_END as END
from doc_snipe.lightning.context_strike import HIGHLIGHT_START as START
from doc_snipe.lightning.context_strike import strip_marks
from doc_snipe.lightning.line_blast import split_lines
from doc_snipe.lightning.models import ContextWindow
from doc_snipe.lightning.pattern_splinter import ConfigError

from .conftest import corrupt_docx, numbered_text, write_docx


def test_multi_term_end_to_end_match(five_line_text):
    result = Hound(SearchConfig(["dharma", "yoga"], line_count=3)).search_text(five_line_text)

    assert result.matched
    assert (result.proximity.first.line, result.proximity.second.line) == (1, 4)
    assert strip_marks(result.rendered) == "\n".join(split_lines(five_line_text))
    assert f"{START}dharma{END}" in result.rendered
    assert f"{START}yoga{END}" in result.rendered


def test_multi_term_end_to_end_too_far(five_line_text):
    result = Hound(SearchConfig(["dharma", "yoga"], line_count=2)).search_text(five_line_text)
    assert not result.matched
    assert result.rendered == ""
    assert result.proximity is None


@pytest.mark.parametrize("terms", [["dharma"], ["dharma", "yoga"]])
@pytest.mark.parametrize("text", ["", None])
def test_empty_text_is_a_miss(terms, text):
    result = Hound(SearchConfig(terms, line_count=3)).search_text(text)
    assert not result.matched
    assert result.rendered == ""


def test_single_reports_every_window_multi_only_the_first():
    single_text = numbered_text(30, {3: "dharma", 20: "dharma"})
    single = Hound(SearchConfig(["dharma"], color=False)).search_text(single_text)

    assert single.matched
    assert single.windows == [ContextWindow(1, 5), ContextWindow(18, 22)]
    assert single.rendered.count("dharma") == 2
    assert "\n--\n" in single.rendered

    multi_text = numbered_text(30, {3: "dharma", 4: "yoga", 20: "dharma", 21: "yoga"})
    multi = Hound(SearchConfig(["dharma", "yoga"], line_count=2, color=False)).search_text(
        multi_text
    )

    assert multi.matched
    assert (multi.proximity.first.line, multi.proximity.second.line) == (3, 4)
    assert multi.rendered.split("\n") == split_lines(multi_text)[0:6]
    assert "--" not in multi.rendered


def test_single_term_misses():
    result = Hound(SearchConfig(["moksha"])).search_text(numbered_text(10, {2: "dharma"}))
    assert not result.matched
    assert result.windows == []


def test_only_one_term_present_is_a_miss():
    text = numbered_text(10, {2: "dharma", 3: "dharma"})
    assert not Hound(SearchConfig(["dharma", "yoga"], line_count=5)).search_text(text).matched


def test_wildcard_terms_in_multi_mode():
    text = numbered_text(10, {2: "the dharmas of old", 3: "hatha-yogi practice"})
    result = Hound(SearchConfig(["dharma*", "yog*"], line_count=1, color=False)).search_text(text)
    assert result.matched
    assert result.proximity.second.pattern.term == "yog*"


def test_search_is_idempotent(five_line_text):
    hound = Hound(SearchConfig(["dharma", "yoga"], line_count=3))
    first = hound.search_text(five_line_text)
    second = hound.search_text(five_line_text)
    assert first.proximity == second.proximity
    assert first.rendered == second.rendered

    again = Hound(SearchConfig(["dharma", "yoga"], line_count=3)).search_text(five_line_text)
    assert again.rendered == first.rendered


def test_search_document_flags_failed_extraction():
    hound = Hound(SearchConfig(["dharma"]))
    hit = hound.search_document("lost.doc", None)
    assert not hit.extracted
    assert not hit.matched
    assert hound.search_document("ok.doc", "dharma\n").matched


def test_mode_follows_distinct_terms():
    assert SearchConfig(["dharma"]).mode == "single"
    assert SearchConfig(["dharma", "dharma"]).mode == "single"
    assert SearchConfig(["dharma", "Dharma"]).mode == "multi"


@pytest.mark.parametrize(
    "config",
    [
        SearchConfig([]),
        SearchConfig(["dharma", "yoga"], line_count=0),
        SearchConfig(["dharma", "yoga"], line_count=-2),
        SearchConfig(["dharma", "yoga"], regex=True),
        SearchConfig(["dharma", ""]),
        SearchConfig(["*", "yoga"]),
        SearchConfig(["dharma"], workers=0),
    ],
)
def test_bad_config_fails_before_scanning(config):
    with pytest.raises(ConfigError):
        Hound(config)


def test_find_documents_order_and_filters(corpus):
    hound = Hound(SearchConfig(["dharma"]))
    found = [p.relative_to(corpus).as_posix() for p in hound.find_documents(corpus)]
    assert found == ["a.docx", "b.doc", "sub/c.docx"]


@pytest.mark.parametrize("workers", [1, 3])
def test_hunt_yields_in_document_order_with_running_count(corpus, workers):
    hound = Hound(SearchConfig(["dharma", "yoga"], line_count=2, workers=workers))

    seen = []
    for hit in hound.hunt(corpus):
        seen.append(hit)
        assert hound.summary.documents_matched == sum(h.matched for h in seen)
        assert hound.summary.documents_searched == len(seen)

    assert [h.document_id for h in seen] == [
        str(corpus / "a.docx"),
        str(corpus / "b.doc"),
        str(corpus / "sub" / "c.docx"),
    ]
    assert [h.matched for h in seen] == [True, False, True]
    assert hound.summary.doc_files == 1
    assert hound.summary.docx_files == 2
    assert hound.summary.documents_matched == 2


def test_hunt_single_term(corpus):
    hound = Hound(SearchConfig(["dharma"]))
    assert [h.matched for h in hound.hunt(corpus)] == [True, True, True]
    assert hound.summary.documents_matched == 3


def test_hunt_counts_extraction_failures(corpus, fake_extract):
    fake_extract["b.doc"] = None
    fake_extract["c.docx"] = ""
    hound = Hound(SearchConfig(["dharma"]))
    hits = list(hound.hunt(corpus))

    assert [h.extracted for h in hits] == [True, False, True]
    assert hound.summary.extraction_failures == 1
    assert hound.summary.documents_matched == 1


def test_hunt_missing_directory(tmp_path):
    with pytest.raises(ConfigError):
        list(Hound(SearchConfig(["dharma"])).hunt(tmp_path / "nope"))


def test_hunt_empty_directory(tmp_path, fake_extract):
    hound = Hound(SearchConfig(["dharma"]))
    assert list(hound.hunt(tmp_path)) == []
    assert hound.summary.total_files == 0
    assert hound.summary.documents_matched == 0


def test_hunt_continues_past_corrupt_docx(tmp_path):
    corrupt_docx(tmp_path / "a_bad.docx")
    write_docx(tmp_path / "b_ok.docx", ["filler", "dharma here"])

    hound = Hound(SearchConfig(["dharma"]))
    hits = list(hound.hunt(tmp_path))

    assert [Path(h.document_id).name for h in hits] == ["a_bad.docx", "b_ok.docx"]
    assert [h.extracted for h in hits] == [False, True]
    assert [h.matched for h in hits] == [False, True]
    assert hound.summary.extraction_failures == 1
    assert hound.summary.documents_matched == 1
