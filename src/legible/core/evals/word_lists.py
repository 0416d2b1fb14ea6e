"""
Familiar-word reference lists for the difficult-word formulas.

- Dale-Chall: the ~3000 words US fourth-graders reliably know. Read from the
  ``easy_words.txt`` resource installed with :mod:`textstat`, one word per
  line, so the published list is used unmodified.
- Spache: the revised Spache list of everyday words for early-grade readers,
  bundled under ``data/spache.txt`` (whitespace separated, ``#`` comments).

Each list is parsed once and cached as a :class:`frozenset`, so lookups are
O(1) and the sets can be shared freely between concurrent calculations.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache
from importlib.resources import files
from pathlib import Path

_DATA_DIR = Path(__file__).resolve().parent / "data"

SPACHE_FILE = "spache.txt"

# Location of the Dale-Chall list inside the installed textstat distribution.
DALE_CHALL_PACKAGE = "textstat"
DALE_CHALL_RESOURCE = ("resources", "en", "easy_words.txt")

_EDGE_PUNCT_RE = re.compile(r"^[^a-z0-9]+|[^a-z0-9]+$")
_INNER_RE = re.compile(r"[^a-z0-9'\-]")
_DOUBLED_FINAL_RE = re.compile(r"([b-df-hj-np-tv-z])\1$")


def normalize_word(token: str) -> str:
    """Lower-case a token and strip everything but letters, digits, ``'`` and ``-``.

    Leading and trailing apostrophes/hyphens are dropped too, so quoted or
    dashed tokens (``'hello``, ``well-``) match their list entry.

    Examples
    --------
    >>> normalize_word("Don't,")
    "don't"
    >>> normalize_word("(Hello)")
    'hello'
    """
    cleaned = _INNER_RE.sub("", token.lower())
    return _EDGE_PUNCT_RE.sub("", cleaned)


def _parse_words(lines: Iterable[str]) -> frozenset[str]:
    words: set[str] = set()
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        for token in stripped.split():
            word = normalize_word(token)
            if word:
                words.add(word)
    return frozenset(words)


def dale_chall_source_lines() -> list[str]:
    """Return the raw lines of the installed Dale-Chall resource."""
    resource = files(DALE_CHALL_PACKAGE)
    for part in DALE_CHALL_RESOURCE:
        resource = resource / part
    return resource.read_text(encoding="utf-8").splitlines()


@lru_cache(maxsize=1)
def dale_chall_words() -> frozenset[str]:
    """Return the cached Dale-Chall familiar-word set."""
    return _parse_words(dale_chall_source_lines())


@lru_cache(maxsize=1)
def spache_words() -> frozenset[str]:
    """Return the cached Spache familiar-word set."""
    with (_DATA_DIR / SPACHE_FILE).open("r", encoding="utf-8") as fh:
        return _parse_words(fh)


def singularize(word: str) -> str:
    """Reduce a regular English plural to its singular form.

    Only the regular patterns are handled (``-ies``, sibilant ``-es`` and a
    plain ``-s``); irregular plurals are expected to appear in the lists
    themselves.
    """
    if len(word) > 4 and word.endswith("ies"):
        return word[:-3] + "y"
    if len(word) > 3 and word.endswith(("sses", "shes", "ches", "xes", "zes")):
        return word[:-2]
    if len(word) > 2 and word.endswith("s") and not word.endswith(("ss", "us", "is", "'s")):
        return word[:-1]
    return word


def _verb_stems(stem: str) -> list[str]:
    """Candidate bases for a stem left after removing ``-ed`` or ``-ing``."""
    candidates = [stem, stem + "e"]
    if _DOUBLED_FINAL_RE.search(stem):
        # "stopped" -> "stop", "running" -> "run"
        candidates.append(stem[:-1])
    return candidates


def base_forms(word: str) -> tuple[str, ...]:
    """Return ``word`` followed by its plausible base forms.

    Covers possessive ``'s``, regular plurals and the ``-ed``/``-ing``
    inflections (``played`` -> ``play``, ``hoped`` -> ``hope``,
    ``studied`` -> ``study``, ``running`` -> ``run``). Candidates are not
    guaranteed to be real words; callers look them up in a list.

    >>> base_forms("dogs")
    ('dogs', 'dog')
    """
    forms = [word]
    if word.endswith("'s") and len(word) > 3:
        forms.append(word[:-2])

    plural = singularize(word)
    if plural != word:
        forms.append(plural)

    if len(word) > 4 and word.endswith("ied"):
        forms.append(word[:-3] + "y")
    elif len(word) > 4 and word.endswith("ed"):
        forms.extend(_verb_stems(word[:-2]))
    elif len(word) > 5 and word.endswith("ing"):
        forms.extend(_verb_stems(word[:-3]))

    return tuple(dict.fromkeys(forms))


def is_familiar(word: str, familiar: frozenset[str]) -> bool:
    """Return ``True`` if ``word`` or one of its base forms is in ``familiar``."""
    return any(form in familiar for form in base_forms(word))


__all__ = [
    "base_forms",
    "dale_chall_source_lines",
    "dale_chall_words",
    "is_familiar",
    "spache_words",
    "normalize_word",
    "singularize",
]
