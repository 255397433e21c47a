import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from goal_analyzer.orchestrator.summarization import extract_summary, split_sentences  # noqa: E402


def test_split_reattaches_terminators():
    assert split_sentences("First one. Second one!") == ["First one.", "Second one!"]
    assert split_sentences("Why does this happen?? I really wonder!!! ") == [
        "Why does this happen??",
        "I really wonder!!!",
    ]


def test_split_keeps_inline_punctuation():
    assert split_sentences("Released v1.2 today.") == ["Released v1.2 today."]


def test_leading_terminator_is_dropped():
    assert split_sentences("... and then it worked out fine.") == ["and then it worked out fine."]


def test_short_fragments_are_filtered():
    assert extract_summary("Ok. This sentence is long enough.") == ["This sentence is long enough."]


def test_up_to_three_sentences_returned_in_order():
    text = "Made great progress today! Completed my workout."
    assert extract_summary(text) == ["Made great progress today!", "Completed my workout."]


def test_fallback_when_nothing_survives():
    assert extract_summary("Ok. Fine. Yes.") == ["Ok. Fine. Yes."]
    assert extract_summary("short") == ["short"]


def test_fallback_truncates_long_input():
    text = "Hi. " * 60
    assert extract_summary(text) == [("Hi. " * 50).strip() + "..."]


def test_shortest_three_keep_document_order():
    sentences = [
        "The longest sentence of them all goes right here.",
        "Short one here.",
        "A medium length sentence here.",
        "Tiny bit here.",
        "Another fairly short one.",
    ]
    summary = extract_summary(" ".join(sentences))
    assert summary == ["Short one here.", "Tiny bit here.", "Another fairly short one."]


def test_length_ties_resolve_by_position():
    text = "Number one here. Number two here. Number six here. Tiny bit here."
    assert extract_summary(text) == ["Number one here.", "Number two here.", "Tiny bit here."]


def test_duplicate_sentences_stay_within_bound():
    text = " ".join(["Same sentence here."] * 4)
    assert extract_summary(text) == ["Same sentence here."] * 3


@pytest.mark.parametrize(
    "text",
    [
        "x",
        "One sentence only here.",
        "First sentence here. Second sentence here. Third sentence here. Fourth sentence here.",
        "no punctuation at all but plenty of words " * 10,
    ],
)
def test_bullet_count_bounds(text):
    summary = extract_summary(text)
    assert 1 <= len(summary) <= 3
    for bullet in summary:
        assert bullet == bullet.strip()
