import pytest

from wordle_analysis.letter_stats import (
    letter_counts,
    letter_frequencies,
    positional_counts,
    positional_frequencies,
)


def test_letter_counts():
    counts = letter_counts(["SISSY", "CIGAR"])
    assert counts["S"] == 3
    assert counts["I"] == 2
    assert sum(counts.values()) == 10


def test_positional_counts():
    pos = positional_counts(["SISSY", "SERVE", "CIGAR"])
    assert len(pos) == 5
    assert pos[0]["S"] == 2
    assert pos[0]["C"] == 1
    assert pos[4]["E"] == 1


def test_frequencies_sum_to_one(sample_words):
    assert sum(letter_frequencies(sample_words).values()) == pytest.approx(1.0)
    for table in positional_frequencies(sample_words):
        assert sum(table.values()) == pytest.approx(1.0)


def test_empty_input():
    assert letter_counts([]) == {}
    assert letter_frequencies([]) == {}
    assert positional_counts([]) == []
    assert positional_frequencies([]) == []
