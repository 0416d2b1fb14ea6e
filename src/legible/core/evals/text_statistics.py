"""
Text statistics and readability formulas.

This module is the measurement engine behind the readability calculator.
Syllables are estimated with the :mod:`syllables` package; everything else
is counted with plain regular expressions over whitespace tokens.

Primitives
----------
Words
    Whitespace-delimited tokens that contain at least one letter or digit.
    Tokens made only of punctuation (``-``, ``...``) are not words.
Sentences
    Segments separated by runs of terminal punctuation (``.``, ``!``, ``?``,
    optionally followed by closing quotes/brackets) that are followed by
    whitespace or the end of the text. Any non-empty text counts as at least
    one sentence.
Syllables
    ``syllables.estimate`` on the lower-cased letters of a word, floored at
    one for any non-empty token. Approximate, never dictionary-exact.
Complex words
    Words of three or more syllables, excluding hyphenated compounds and
    words that only reach three syllables through an ``-es``, ``-ed`` or
    ``-ing`` suffix (Gunning Fog convention).
Difficult words
    Words missing from the Dale-Chall (every occurrence counts, base-form
    match) or Spache (unique words, plurals reduced) familiar-word lists.
    Single letters are always familiar.

Formulas
--------
All formulas return the *raw* score: no rounding and no clamping. Range
normalisation is the calculator's job. Each formula accepts either the text
itself or a :class:`TextStatistics` snapshot from :func:`analyse`, so callers
that need several scores can tokenise once.

Empty input never raises: counts are 0 and every formula returns 0.0.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

import syllables

from legible.core.evals.word_lists import (
    dale_chall_words,
    is_familiar,
    normalize_word,
    singularize,
    spache_words,
)

# ---- Tokenisation ------------------------------------------------------------

_SENTENCE_END_RE = re.compile(r"[.!?]+[\"'”’)\]]*(?=\s|$)")
_NON_LETTER_RE = re.compile(r"[^a-z]")

_COMPLEX_SUFFIXES = ("es", "ed", "ing")


def _is_word(token: str) -> bool:
    """Return ``True`` if a whitespace token carries at least one letter or digit."""
    return any(ch.isalnum() for ch in token)


def words(text: str) -> list[str]:
    """Split text into word tokens (punctuation-only tokens are dropped)."""
    return [token for token in text.split() if _is_word(token)]


# ---- Counting primitives -----------------------------------------------------


def word_count(text: str) -> int:
    """Return the number of words in ``text`` (0 for empty or blank text)."""
    return len(words(text))


def sentence_count(text: str) -> int:
    """Return the number of sentences in ``text``.

    Empty or whitespace-only text has 0 sentences. Any other text has at
    least one, even without terminal punctuation, which keeps every
    per-sentence ratio well defined.
    """
    stripped = text.strip()
    if not stripped:
        return 0

    parts = _SENTENCE_END_RE.split(stripped)
    count = sum(1 for part in parts if words(part))
    return max(count, 1)


def letter_count(text: str) -> int:
    """Return the number of letters and digits in ``text``."""
    return sum(1 for ch in text if ch.isalnum())


def syllable_count(word: str) -> int:
    """Estimate the number of syllables in a single word.

    Punctuation and case are ignored before ``syllables.estimate`` runs.
    Returns 0 for an empty token and at least 1 for anything else, including
    numbers and tokens the estimator scores as 0.

    >>> syllable_count("Table,")
    2
    """
    if not word.strip():
        return 0

    letters = _NON_LETTER_RE.sub("", word.lower())
    if not letters:
        return 1
    return max(syllables.estimate(letters), 1)


def total_syllables(text: str) -> int:
    """Return the summed syllable estimate over every word of ``text``."""
    return sum(syllable_count(token) for token in words(text))


def _is_complex(token: str, syllable_total: int) -> bool:
    """Apply the Gunning Fog complex-word rules to one token."""
    if syllable_total < 3 or "-" in token:
        return False
    letters = _NON_LETTER_RE.sub("", token.lower())
    for suffix in _COMPLEX_SUFFIXES:
        if letters.endswith(suffix) and len(letters) > len(suffix) + 2:
            return syllable_count(letters[: -len(suffix)]) >= 3
    return True


def polysyllable_count(text: str) -> int:
    """Return the number of words with three or more syllables."""
    return sum(1 for token in words(text) if syllable_count(token) >= 3)


def complex_word_count(text: str) -> int:
    """Return the number of Gunning Fog complex words in ``text``."""
    return sum(1 for token in words(text) if _is_complex(token, syllable_count(token)))


def _familiar_candidate(token: str) -> str | None:
    """Normalize a token for list lookup; single letters and blanks yield ``None``."""
    word = normalize_word(token)
    if len(word) < 2:
        return None
    return word


def dale_chall_difficult_word_count(text: str) -> int:
    """Count word occurrences missing from the Dale-Chall familiar-word list.

    Matching is case-insensitive and on the base form: plurals, possessives
    and ``-ed``/``-ing`` inflections of a listed word are familiar, so
    ``others`` and ``played`` are not difficult.
    """
    familiar = dale_chall_words()
    difficult = 0
    for token in words(text):
        word = _familiar_candidate(token)
        if word is not None and not is_familiar(word, familiar):
            difficult += 1
    return difficult


def spache_difficult_word_count(text: str) -> int:
    """Count unique words missing from the Spache familiar-word list.

    Each unfamiliar word is counted once, and regular plurals are accepted
    when their singular is familiar.
    """
    familiar = spache_words()
    seen: set[str] = set()
    difficult = 0
    for token in words(text):
        word = _familiar_candidate(token)
        if word is None or word in seen:
            continue
        seen.add(word)
        if word not in familiar and singularize(word) not in familiar:
            difficult += 1
    return difficult


# ---- Snapshot ----------------------------------------------------------------


@dataclass(frozen=True)
class TextStatistics:
    """All primitive counts of one text, gathered in a single pass."""

    words: int = 0
    sentences: int = 0
    letters: int = 0
    syllables: int = 0
    polysyllables: int = 0
    complex_words: int = 0
    dale_chall_difficult_words: int = 0
    spache_difficult_words: int = 0

    @property
    def words_per_sentence(self) -> float:
        """Average sentence length (ASL); 0.0 when there are no words."""
        if self.words == 0:
            return 0.0
        return self.words / max(self.sentences, 1)

    @property
    def syllables_per_word(self) -> float:
        """Average syllables per word (ASW); 0.0 when there are no words."""
        if self.words == 0:
            return 0.0
        return self.syllables / self.words

    @property
    def letters_per_word(self) -> float:
        """Average letters per word; 0.0 when there are no words."""
        if self.words == 0:
            return 0.0
        return self.letters / self.words

    def percentage(self, count: int) -> float:
        """Express ``count`` as a percentage of the word count."""
        if self.words == 0:
            return 0.0
        return 100.0 * count / self.words


def analyse(text: str) -> TextStatistics:
    """Tokenise ``text`` once and return every primitive count.

    The result matches the standalone counting functions exactly; it only
    avoids re-splitting the text for each of them.
    """
    tokens = words(text)
    if not tokens:
        return TextStatistics(sentences=sentence_count(text))

    dale_chall = dale_chall_words()
    spache = spache_words()

    syllable_total = 0
    polysyllables = 0
    complex_words = 0
    dc_difficult = 0
    spache_seen: set[str] = set()
    spache_difficult = 0

    for token in tokens:
        count = syllable_count(token)
        syllable_total += count
        if count >= 3:
            polysyllables += 1
        if _is_complex(token, count):
            complex_words += 1

        word = _familiar_candidate(token)
        if word is None:
            continue
        if not is_familiar(word, dale_chall):
            dc_difficult += 1
        if word not in spache_seen:
            spache_seen.add(word)
            if word not in spache and singularize(word) not in spache:
                spache_difficult += 1

    return TextStatistics(
        words=len(tokens),
        sentences=sentence_count(text),
        letters=letter_count(text),
        syllables=syllable_total,
        polysyllables=polysyllables,
        complex_words=complex_words,
        dale_chall_difficult_words=dc_difficult,
        spache_difficult_words=spache_difficult,
    )


def _stats(source: str | TextStatistics) -> TextStatistics:
    """Accept either raw text or a ready snapshot."""
    if isinstance(source, TextStatistics):
        return source
    return analyse(source)


# ---- Averages ----------------------------------------------------------------


def average_words_per_sentence(source: str | TextStatistics, precision: int = 1) -> float:
    """Return the average sentence length rounded to ``precision`` places."""
    return round(_stats(source).words_per_sentence, precision)


def average_syllables_per_word(source: str | TextStatistics) -> float:
    """Return the unrounded average number of syllables per word."""
    return _stats(source).syllables_per_word


# ---- Readability formulas ----------------------------------------------------


def flesch_kincaid_reading_ease(source: str | TextStatistics) -> float:
    """Flesch Reading Ease: ``206.835 - 1.015*ASL - 84.6*ASW``.

    Higher is easier. Values outside [0, 100] are returned as computed.
    """
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    return 206.835 - 1.015 * stats.words_per_sentence - 84.6 * stats.syllables_per_word


def flesch_kincaid_grade_level(source: str | TextStatistics) -> float:
    """Flesch-Kincaid Grade Level: ``0.39*ASL + 11.8*ASW - 15.59``."""
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    return 0.39 * stats.words_per_sentence + 11.8 * stats.syllables_per_word - 15.59


def gunning_fog_score(source: str | TextStatistics) -> float:
    """Gunning Fog index: ``0.4 * (ASL + percentage of complex words)``."""
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    return 0.4 * (stats.words_per_sentence + stats.percentage(stats.complex_words))


def coleman_liau_index(source: str | TextStatistics) -> float:
    """Coleman-Liau index: ``0.0588*L - 0.296*S - 15.8``.

    ``L`` is letters per 100 words and ``S`` sentences per 100 words.
    """
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    letters_per_100 = stats.percentage(stats.letters)
    sentences_per_100 = stats.percentage(max(stats.sentences, 1))
    return 0.0588 * letters_per_100 - 0.296 * sentences_per_100 - 15.8


def smog_index(source: str | TextStatistics) -> float:
    """SMOG grade: ``3 + sqrt(polysyllables scaled to a 30-sentence sample)``."""
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    return 3.0 + math.sqrt(stats.polysyllables * 30.0 / max(stats.sentences, 1))


def automated_readability_index(source: str | TextStatistics) -> float:
    """Automated Readability Index: ``4.71*(letters/words) + 0.5*ASL - 21.43``."""
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    return 4.71 * stats.letters_per_word + 0.5 * stats.words_per_sentence - 21.43


def dale_chall_readability_score(source: str | TextStatistics) -> float:
    """New Dale-Chall score: ``0.1579*PDW + 0.0496*ASL`` (+3.6365 when PDW > 5).

    ``PDW`` is the percentage of words missing from the Dale-Chall list.
    """
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    difficult_pct = stats.percentage(stats.dale_chall_difficult_words)
    score = 0.1579 * difficult_pct + 0.0496 * stats.words_per_sentence
    if difficult_pct > 5.0:
        score += 3.6365
    return score


def spache_readability_score(source: str | TextStatistics) -> float:
    """Revised Spache grade: ``0.121*ASL + 0.082*PUW + 0.659``.

    ``PUW`` is the percentage of unique words missing from the Spache list.
    """
    stats = _stats(source)
    if stats.words == 0:
        return 0.0
    unfamiliar_pct = stats.percentage(stats.spache_difficult_words)
    return 0.121 * stats.words_per_sentence + 0.082 * unfamiliar_pct + 0.659


__all__ = [
    "TextStatistics",
    "analyse",
    "words",
    "word_count",
    "sentence_count",
    "letter_count",
    "syllable_count",
    "total_syllables",
    "polysyllable_count",
    "complex_word_count",
    "dale_chall_difficult_word_count",
    "spache_difficult_word_count",
    "average_words_per_sentence",
    "average_syllables_per_word",
    "flesch_kincaid_reading_ease",
    "flesch_kincaid_grade_level",
    "gunning_fog_score",
    "coleman_liau_index",
    "smog_index",
    "automated_readability_index",
    "dale_chall_readability_score",
    "spache_readability_score",
]
