import re

import pytest

from seq_tools.sequence_collector import SequenceCollector, Status


def collect(words):
    return SequenceCollector().observe_all(words).finalize()


def test_shared_sequence_is_dropped():
    assert collect(["test", "tent", "tester"]) == [
        ("tent", "tent"),
        ("este", "tester"),
        ("ster", "tester"),
    ]


@pytest.mark.parametrize("words", [["abc"], ["ab3d"], ["aaaaa"], []])
def test_no_output(words):
    assert collect(words) == []


def test_single_window_word():
    assert collect(["aaaa"]) == [("aaaa", "aaaa")]


def test_original_case_is_kept():
    assert collect(["Zebra"]) == [("zebr", "Zebra"), ("ebra", "Zebra")]


def test_case_insensitive_matching():
    assert collect(["Jazz", "jazz"]) == []


def test_repeated_word_counts_twice():
    assert collect(["quiz", "quiz"]) == []


def test_non_unique_is_terminal():
    collector = SequenceCollector().observe_all(["fizz", "fizz", "fizz"])
    assert collector.lookup("fizz") == (Status.NON_UNIQUE, None)
    assert collector.finalize() == []


def test_windows_with_punctuation_are_skipped():
    assert collect(["o'clock"]) == [("cloc", "o'clock"), ("lock", "o'clock")]


def test_discovery_order_not_alphabetical():
    pairs = collect(["zzzy", "aaab"])
    assert [sequence for sequence, _ in pairs] == ["zzzy", "aaab"]


def test_finalize_is_idempotent():
    collector = SequenceCollector().observe_all(["walrus", "narwhal", "wall"])
    assert collector.finalize() == collector.finalize()


def test_output_properties():
    words = ["Apple", "apply", "maple", "snap-pea", "pineapple", "x1yz", "staple", "  grape"]
    pairs = collect(words)
    sequences = [sequence for sequence, _ in pairs]
    assert len(sequences) == len(set(sequences))
    for sequence, word in pairs:
        assert re.fullmatch(r"[a-z]{4}", sequence)
        assert sequence in word.lower()
    assert "appl" not in sequences
    assert "aple" not in sequences


def test_stats():
    collector = SequenceCollector().observe_all(["test", "tent", "tester", "ab3d", "abc"])
    assert collector.stats() == {
        "Words Read": 5,
        "Candidates": 5,
        "Rejected Windows": 1,
        "Unique Sequences": 3,
        "Non-unique Sequences": 1,
    }


def test_lookup_unseen():
    assert SequenceCollector().lookup("abcd") == (None, None)
