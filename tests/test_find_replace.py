from __future__ import annotations

import pytest

from mdpad.domain.models import SelectionRange
from mdpad.domain.text_buffer import TextBuffer
from mdpad.services.ui.find_replace import (
    FindOutcome,
    FindReplaceDialog,
    FindReplaceEngine,
    SearchOptions,
    replace_all_text,
)


def engine_for(text: str) -> tuple[TextBuffer, FindReplaceEngine]:
    buf = TextBuffer(text)
    return buf, FindReplaceEngine(buf)


# ------------------------------
# find_next
# ------------------------------
def test_find_next_wraps_around():
    buf, eng = engine_for("hello hello")
    opt = SearchOptions("hello")

    seen = []
    for _ in range(3):
        assert eng.find_next(opt) is FindOutcome.FOUND
        seen.append(buf.selection)
    assert seen == [SelectionRange(0, 5), SelectionRange(6, 5), SelectionRange(0, 5)]


@pytest.mark.parametrize("k", [1, 2, 4])
def test_k_searches_return_to_first_match(k):
    buf, eng = engine_for(" ab" * k)
    opt = SearchOptions("ab")
    assert eng.find_next(opt) is FindOutcome.FOUND
    first = buf.selection
    for _ in range(k):
        eng.find_next(opt)
    assert buf.selection == first


def test_find_next_starts_after_current_selection_when_idle():
    buf, eng = engine_for("cat cat cat")
    buf.set_selection(0, 3)
    eng.find_next(SearchOptions("cat"))
    assert buf.selection == SelectionRange(4, 3)


def test_find_next_is_case_insensitive_by_default():
    buf, eng = engine_for("Hello HELLO")
    eng.find_next(SearchOptions("hello"))
    assert buf.selection == SelectionRange(0, 5)


def test_find_next_case_sensitive_skips_other_case():
    buf, eng = engine_for("Hello hello")
    eng.find_next(SearchOptions("hello", case_sensitive=True))
    assert buf.selection == SelectionRange(6, 5)


def test_find_next_not_found_returns_to_idle():
    buf, eng = engine_for("abc")
    eng.find_next(SearchOptions("b"))
    assert eng.is_positioned
    assert eng.find_next(SearchOptions("zzz")) is FindOutcome.NOT_FOUND
    assert not eng.is_positioned


def test_find_next_rejects_empty_text():
    buf, eng = engine_for("abc")
    assert eng.find_next(SearchOptions("")) is FindOutcome.REJECTED
    assert eng.last_found is None


def test_reset_starts_a_new_session():
    buf, eng = engine_for("x x x")
    eng.find_next(SearchOptions("x"))
    eng.find_next(SearchOptions("x"))
    eng.reset()
    buf.set_selection(0, 0)
    eng.find_next(SearchOptions("x"))
    assert buf.selection == SelectionRange(0, 1)


# ------------------------------
# replace
# ------------------------------
def test_replace_swaps_matching_selection_and_moves_on():
    buf, eng = engine_for("one two one")
    opt = SearchOptions("one", replace="1")
    eng.find_next(opt)
    assert eng.replace(opt) is FindOutcome.FOUND
    assert buf.text == "1 two one"
    assert buf.selected_text() == "one"


def test_replace_without_matching_selection_only_finds():
    buf, eng = engine_for("one two")
    opt = SearchOptions("two", replace="2")
    assert eng.replace(opt) is FindOutcome.FOUND
    assert buf.text == "one two"
    assert buf.selection == SelectionRange(4, 3)


# ------------------------------
# replace_all
# ------------------------------
def test_replace_all_counts_and_replaces():
    buf, eng = engine_for("a-b-c-d")
    assert eng.replace_all(SearchOptions("-", replace="+")) == 3
    assert buf.text == "a+b+c+d"


def test_replace_all_empty_find_text_is_noop():
    buf, eng = engine_for("abc")
    assert eng.replace_all(SearchOptions("", replace="x")) == 0
    assert buf.text == "abc"


def test_replace_all_without_matches_leaves_buffer_untouched():
    buf, eng = engine_for("abc")
    changes = []
    buf.subscribe(lambda: changes.append(1))
    assert eng.replace_all(SearchOptions("q", replace="x")) == 0
    assert changes == []


def test_replace_all_resumes_after_replacement():
    assert replace_all_text("aaa", SearchOptions("aa", replace="a")) == ("aa", 1)


def test_replace_all_does_not_rematch_inserted_text():
    text, count = replace_all_text("ab ab", SearchOptions("ab", replace="abab"))
    assert (text, count) == ("abab abab", 2)


@pytest.mark.parametrize(
    "text, find, repl",
    [
        ("the cat sat on the mat", "at", "og"),
        ("xxxx", "x", "yz"),
        ("Mixed MIXED mixed", "mixed", "m"),
    ],
)
def test_replace_all_leaves_no_occurrences(text, find, repl):
    expected = text.lower().count(find.lower())
    new_text, count = replace_all_text(text, SearchOptions(find, replace=repl))
    assert count == expected
    assert find.lower() not in new_text.lower()


# ------------------------------
# Dialog
# ------------------------------
@pytest.fixture
def dlg(qtbot, messages):
    buf = TextBuffer("alpha beta alpha")
    d = FindReplaceDialog(buf, messages, None)
    qtbot.addWidget(d)
    return d


def test_dialog_is_non_modal(dlg: FindReplaceDialog):
    assert dlg.isModal() is False


def test_show_find_hides_replace_widgets(dlg: FindReplaceDialog):
    dlg.show_find()
    assert dlg.is_replace_mode() is False
    dlg.show_replace()
    assert dlg.is_replace_mode() is True


def test_dialog_reports_not_found(dlg: FindReplaceDialog, messages):
    dlg.show_find()
    dlg.find_edit.setText("gamma")
    assert dlg.find_next() is FindOutcome.NOT_FOUND
    assert messages.infos == [("Find", "Could not find 'gamma'.")]


def test_dialog_replace_all_reports_count(dlg: FindReplaceDialog, messages):
    dlg.show_replace()
    dlg.find_edit.setText("alpha")
    dlg.replace_edit.setText("A")
    assert dlg.replace_all() == 2
    assert messages.infos[-1] == ("Replace All", "Replaced 2 occurrence(s).")


def test_each_session_resets_engine(dlg: FindReplaceDialog):
    dlg.show_find()
    dlg.find_edit.setText("alpha")
    dlg.find_next()
    assert dlg.engine.is_positioned
    dlg.show_find()
    assert not dlg.engine.is_positioned
