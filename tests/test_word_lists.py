"""Tests for the familiar-word lists and base-form matching."""

from __future__ import annotations

from importlib.resources import files

import pytest

from legible.core.evals.word_lists import (
    base_forms,
    dale_chall_source_lines,
    dale_chall_words,
    is_familiar,
    normalize_word,
    singularize,
    spache_words,
)


def test_lists_load_as_cached_frozensets() -> None:
    """Each list is parsed once and shared."""
    assert isinstance(dale_chall_words(), frozenset)
    assert dale_chall_words() is dale_chall_words()
    assert spache_words() is spache_words()


def test_list_sizes_are_plausible() -> None:
    """Dale-Chall holds roughly three thousand words, Spache far fewer."""
    assert 2900 <= len(dale_chall_words()) <= 3100
    assert 500 <= len(spache_words()) < len(dale_chall_words())


def test_dale_chall_matches_installed_resource() -> None:
    """The set is exactly the normalised entries of textstat's easy-word file."""
    published = files("textstat") / "resources" / "en" / "easy_words.txt"
    lines = published.read_text(encoding="utf-8").splitlines()
    entries = {normalize_word(token) for line in lines for token in line.split()}
    entries.discard("")

    assert lines == dale_chall_source_lines()
    assert dale_chall_words() == frozenset(entries)


def test_known_memberships() -> None:
    """Spot-check entries that the scoring tests depend on."""
    assert {"hard", "word", "read", "learn", "deal", "other"} <= dale_chall_words()
    assert {"office", "officer", "states"} <= dale_chall_words()
    assert "include" not in dale_chall_words()
    assert "gem" not in dale_chall_words()
    assert {"hard", "word", "read", "learn", "other", "easy"} <= spache_words()
    assert "include" not in spache_words()


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("Hello,", "hello"),
        ("(Hello)", "hello"),
        ("Don't", "don't"),
        ("'quoted'", "quoted"),
        ("well-known.", "well-known"),
        ("...", ""),
    ],
)  # type: ignore[misc]
def test_normalize_word(token: str, expected: str) -> None:
    """Case and edge punctuation never affect list lookups."""
    assert normalize_word(token) == expected


@pytest.mark.parametrize(
    ("word", "expected"),
    [
        ("stories", "story"),
        ("boxes", "box"),
        ("churches", "church"),
        ("others", "other"),
        ("glass", "glass"),
        ("bus", "bus"),
        ("this", "this"),
        ("is", "is"),
    ],
)  # type: ignore[misc]
def test_singularize(word: str, expected: str) -> None:
    """Regular plurals reduce; words that merely end in "s" are left alone."""
    assert singularize(word) == expected


@pytest.mark.parametrize(
    ("word", "base"),
    [
        ("dogs", "dog"),
        ("houses", "house"),
        ("jumped", "jump"),
        ("played", "play"),
        ("hoped", "hope"),
        ("studied", "study"),
        ("stopped", "stop"),
        ("running", "run"),
        ("making", "make"),
        ("boy's", "boy"),
    ],
)  # type: ignore[misc]
def test_base_forms_include_the_base(word: str, base: str) -> None:
    """Plural, possessive and -ed/-ing inflections reduce to the listed form."""
    forms = base_forms(word)
    assert forms[0] == word
    assert base in forms


def test_base_forms_leave_short_words_alone() -> None:
    assert base_forms("red") == ("red",)
    assert base_forms("sing") == ("sing",)


def test_is_familiar_accepts_inflections_of_listed_words() -> None:
    familiar = dale_chall_words()
    for word in ("dogs", "jumped", "houses", "cats", "played", "trees", "others"):
        assert is_familiar(word, familiar), word
    assert not is_familiar("zygotes", familiar)
