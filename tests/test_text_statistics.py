"""
Unit tests for the text-statistics engine.

Syllable counts come from an estimator, so exact expectations are limited to
common words; longer texts are checked through formula identities instead.
"""

from __future__ import annotations

import pytest

from legible.core.evals import text_statistics as ts

HIGH_TEXT = (
    "A hard word to read is chlorofluorocarbonation. Others I can learn include "
    "antidisestablishmentarianism, chlorofluorocarbonation and phosphorescent."
)
LOW_TEXT = "An easy word to read is deal. Others I can learn are make, gem and the."

FORMULAS = (
    ts.flesch_kincaid_reading_ease,
    ts.flesch_kincaid_grade_level,
    ts.gunning_fog_score,
    ts.coleman_liau_index,
    ts.smog_index,
    ts.automated_readability_index,
    ts.dale_chall_readability_score,
    ts.spache_readability_score,
)


# ---- Primitives --------------------------------------------------------------


def test_word_count_ignores_punctuation_tokens() -> None:
    """Dashes and ellipses between words are not words."""
    assert ts.word_count("Wait - what ... really?") == 3
    assert ts.word_count("") == 0
    assert ts.word_count("   ") == 0
    assert ts.word_count("It costs 42 dollars.") == 4


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0),
        ("   ", 0),
        ("no terminal punctuation", 1),
        ("One. Two! Three?", 3),
        ("Really?! Yes...", 2),
        ('He said "stop." Then he left.', 2),
        ("The value is 3.14 exactly.", 1),
    ],
)  # type: ignore[misc]
def test_sentence_count(text: str, expected: int) -> None:
    """Terminal punctuation only ends a sentence before whitespace or the end."""
    assert ts.sentence_count(text) == expected


def test_letter_count_counts_alphanumerics_only() -> None:
    assert ts.letter_count("Hi, you 2!") == 6


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("", 0),
        ("42", 1),
        ("a", 1),
        ("the", 1),
        ("cat", 1),
        ("make", 1),
        ("table", 2),
        ("water", 2),
        ("created", 3),
    ],
)  # type: ignore[misc]
def test_syllable_count(word: str, expected: int) -> None:
    assert ts.syllable_count(word) == expected


def test_syllable_count_floors_non_empty_words_at_one() -> None:
    """Any token with content has at least one syllable."""
    for word in ("x", "hmm", "rhythm", "42", "b2b"):
        assert ts.syllable_count(word) >= 1


def test_long_words_are_polysyllabic() -> None:
    for word in ("phosphorescent", "chlorofluorocarbonation", "antidisestablishmentarianism"):
        assert ts.syllable_count(word) >= 3
    assert ts.syllable_count("antidisestablishmentarianism") > ts.syllable_count("include")


def test_syllable_count_ignores_case_and_punctuation() -> None:
    assert ts.syllable_count("Table,") == ts.syllable_count("table")


def test_complex_words_skip_hyphenated_and_suffixed() -> None:
    """Gunning Fog does not count compounds or words padded by a suffix."""
    assert ts.complex_word_count("well-established") == 0
    assert ts.complex_word_count("phosphorescent") == 1
    assert ts.polysyllable_count("well-established") == 1


def test_dale_chall_accepts_inflected_familiar_words() -> None:
    """Plurals and -ed forms of listed words are not difficult."""
    assert ts.dale_chall_difficult_word_count(
        "The dogs jumped over the houses. Cats played in trees."
    ) == 0
    assert ts.dale_chall_difficult_word_count("office officer states") == 0


def test_dale_chall_counts_every_occurrence() -> None:
    """Repeated unfamiliar words count each time; single letters never do."""
    assert ts.dale_chall_difficult_word_count("zygote zygote a I") == 2


def test_spache_counts_unique_words_and_accepts_plurals() -> None:
    """Repeated unfamiliar words count once; regular plurals of familiar words pass."""
    assert ts.spache_difficult_word_count("zygote zygote others") == 1


# ---- Snapshot ----------------------------------------------------------------


def test_analyse_matches_standalone_counters() -> None:
    """One-pass analysis agrees with every individual counter."""
    stats = ts.analyse(HIGH_TEXT)

    assert stats.words == ts.word_count(HIGH_TEXT) == 16
    assert stats.sentences == ts.sentence_count(HIGH_TEXT) == 2
    assert stats.letters == ts.letter_count(HIGH_TEXT) == 130
    assert stats.syllables == ts.total_syllables(HIGH_TEXT)
    assert stats.polysyllables == ts.polysyllable_count(HIGH_TEXT) == 4
    assert stats.complex_words == ts.complex_word_count(HIGH_TEXT) == 4
    assert stats.dale_chall_difficult_words == ts.dale_chall_difficult_word_count(HIGH_TEXT)
    assert stats.dale_chall_difficult_words == 5
    assert stats.spache_difficult_words == ts.spache_difficult_word_count(HIGH_TEXT) == 4


def test_averages() -> None:
    assert ts.average_words_per_sentence(HIGH_TEXT) == 8.0
    assert ts.average_syllables_per_word(HIGH_TEXT) == pytest.approx(
        ts.total_syllables(HIGH_TEXT) / 16
    )
    assert ts.average_words_per_sentence("One two three. Four five.") == 2.5


# ---- Formulas ----------------------------------------------------------------


def test_raw_formulas_on_low_text() -> None:
    """Formulas return unclamped, unrounded values."""
    stats = ts.analyse(LOW_TEXT)
    asw = stats.syllables / 16

    assert stats.words == 16
    assert stats.sentences == 2
    ease = 206.835 - 1.015 * 8 - 84.6 * asw
    assert ts.flesch_kincaid_reading_ease(stats) == pytest.approx(ease)
    assert ts.flesch_kincaid_grade_level(stats) == pytest.approx(0.39 * 8 + 11.8 * asw - 15.59)
    assert ts.gunning_fog_score(stats) == pytest.approx(3.2)
    assert ts.smog_index(stats) == pytest.approx(3.0)


def test_raw_formulas_on_high_text() -> None:
    stats = ts.analyse(HIGH_TEXT)
    asw = stats.syllables / 16

    assert ts.flesch_kincaid_grade_level(stats) == pytest.approx(0.39 * 8 + 11.8 * asw - 15.59)
    assert ts.flesch_kincaid_grade_level(stats) > 12
    assert ts.gunning_fog_score(stats) == pytest.approx(13.2)
    assert ts.smog_index(stats) == pytest.approx(3 + 60**0.5)
    assert ts.dale_chall_readability_score(stats) == pytest.approx(8.967675)
    assert ts.spache_readability_score(stats) == pytest.approx(3.677)


def test_formulas_accept_text_or_snapshot() -> None:
    stats = ts.analyse(HIGH_TEXT)
    for formula in FORMULAS:
        assert formula(HIGH_TEXT) == formula(stats)


@pytest.mark.parametrize("text", ["", "   ", "- ... --"])  # type: ignore[misc]
def test_formulas_on_empty_text_return_zero(text: str) -> None:
    """No words means every score is 0.0 rather than an error."""
    for formula in FORMULAS:
        assert formula(text) == 0.0
    assert ts.average_words_per_sentence(text) == 0.0
