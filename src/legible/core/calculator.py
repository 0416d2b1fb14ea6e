"""
Readability calculator: the public entry point of the scoring core.

The calculator wraps the text-statistics engine and adds the three things the
engine deliberately leaves out:

1. **Text cleaning**: tabs and whitespace runs are collapsed before anything
   is measured, so layout artefacts from extraction do not split words or
   sentences.
2. **Reading speed**: an injected provider supplies the configured words per
   minute; anything missing or non-positive falls back to
   :data:`DEFAULT_READING_SPEED`.
3. **Presentation**: scores are rounded and (optionally) clamped to their
   published ranges, and reading time can be formatted as ``H:MM:SS``.

Every call is a pure computation over its input plus one snapshot of the
reading speed, so a single calculator can be shared across threads.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from legible.core.contracts.scores import ScoreSet
from legible.core.evals import text_statistics as ts
from legible.core.settings import Settings, configured_reading_speed, get_logger

logger = get_logger(__name__)

# Brysbaert, M. (2019). How many words do we read per minute? A review and
# meta-analysis of reading rate. doi:10.31234/osf.io/xynwg
DEFAULT_READING_SPEED = 238

WORDS_PER_SENTENCE_PRECISION = 1

ReadingSpeedProvider = Callable[[], object]

# Published ranges used when normalising scores.
SCORE_RANGES: Mapping[str, tuple[float, float]] = {
    "fleschkincaidreadingease": (0.0, 100.0),
    "fleschkincaidgradelevel": (0.0, 12.0),
    "gunningfogscore": (0.0, 19.0),
    "colemanliauindex": (0.0, 12.0),
    "smogindex": (0.0, 12.0),
    "automatedreadabilityindex": (0.0, 12.0),
    "dalechallreadabilityscore": (0.0, 10.0),
    "spachereadabilityscore": (0.0, 5.0),
}

_WHITESPACE_RUN_RE = re.compile(r"\s{2,}")


def normalise_score(value: float, lower: float, upper: float, precision: int = 1) -> float:
    """Clamp ``value`` into ``[lower, upper]`` and round to ``precision`` places."""
    return round(min(max(value, lower), upper), precision)


def format_time(seconds: int) -> str:
    """Format whole seconds as ``H:MM:SS`` (hours are not padded or capped).

    >>> format_time(12605)
    '3:30:05'
    """
    if seconds < 0:
        raise ValueError(f"Reading time cannot be negative: {seconds}")
    minutes, secs = divmod(int(seconds), 60)
    hours, minutes = divmod(minutes, 60)
    return "%d:%02d:%02d" % (hours, minutes, secs)


class ReadabilityCalculator:
    """Compute readability scores and reading time for plain text.

    Parameters
    ----------
    reading_speed:
        Zero-argument callable returning the configured words per minute.
        It may return ``None``, a string, or a non-positive number; all of
        these mean "not configured". ``None`` (the default) always uses
        :data:`DEFAULT_READING_SPEED`.
    normalise:
        Clamp each formula score to its published range (see
        :data:`SCORE_RANGES`).
    precision:
        Decimal places kept on formula scores.
    """

    def __init__(
        self,
        reading_speed: ReadingSpeedProvider | None = None,
        *,
        normalise: bool = True,
        precision: int = 1,
    ) -> None:
        self._reading_speed = reading_speed
        self.normalise = normalise
        self.precision = precision

    @classmethod
    def from_settings(cls, config: Settings) -> ReadabilityCalculator:
        """Build a calculator whose reading speed tracks the loaded settings."""
        return cls(
            configured_reading_speed,
            normalise=config.normalise_scores,
            precision=config.score_precision,
        )

    # ----- Configuration -----------------------------------------------------
    def get_reading_speed(self) -> int:
        """Return the configured reading speed, or the default when absent."""
        if self._reading_speed is None:
            return DEFAULT_READING_SPEED

        raw = self._reading_speed()
        if raw is None or isinstance(raw, bool):
            return DEFAULT_READING_SPEED
        try:
            speed = int(raw)  # type: ignore[call-overload]
        except (TypeError, ValueError):
            return DEFAULT_READING_SPEED
        return speed if speed > 0 else DEFAULT_READING_SPEED

    # ----- Text handling -----------------------------------------------------
    @staticmethod
    def clean_for_calculation(text: str) -> str:
        """Replace tabs with spaces and collapse whitespace runs to one space."""
        return _WHITESPACE_RUN_RE.sub(" ", text.replace("\t", " "))

    # ----- Reading time ------------------------------------------------------
    @staticmethod
    def _seconds_for(words: int, speed: int) -> int:
        # Integer arithmetic keeps floor(words / speed * 60) exact.
        return words * 60 // speed

    def calculate_reading_time(self, text: str) -> int:
        """Return the estimated reading time of ``text`` in whole seconds."""
        return self._seconds_for(ts.word_count(text), self.get_reading_speed())

    @staticmethod
    def format_time(seconds: int) -> str:
        """Format whole seconds as ``H:MM:SS``."""
        return format_time(seconds)

    # ----- Scores ------------------------------------------------------------
    def _score(self, key: str, value: float) -> float:
        if self.normalise:
            lower, upper = SCORE_RANGES[key]
            return normalise_score(value, lower, upper, self.precision)
        return round(value, self.precision)

    def calculate_scores(self, text: str) -> ScoreSet:
        """Clean ``text`` once and compute the full score set from one analysis."""
        cleaned = self.clean_for_calculation(text)
        stats = ts.analyse(cleaned)
        speed = self.get_reading_speed()

        scores = ScoreSet(
            fleschkincaidreadingease=self._score(
                "fleschkincaidreadingease", ts.flesch_kincaid_reading_ease(stats)
            ),
            fleschkincaidgradelevel=self._score(
                "fleschkincaidgradelevel", ts.flesch_kincaid_grade_level(stats)
            ),
            gunningfogscore=self._score("gunningfogscore", ts.gunning_fog_score(stats)),
            colemanliauindex=self._score("colemanliauindex", ts.coleman_liau_index(stats)),
            smogindex=self._score("smogindex", ts.smog_index(stats)),
            automatedreadabilityindex=self._score(
                "automatedreadabilityindex", ts.automated_readability_index(stats)
            ),
            dalechallreadabilityscore=self._score(
                "dalechallreadabilityscore", ts.dale_chall_readability_score(stats)
            ),
            dalechalldifficultwordcount=stats.dale_chall_difficult_words,
            spachereadabilityscore=self._score(
                "spachereadabilityscore", ts.spache_readability_score(stats)
            ),
            spachedifficultwordcount=stats.spache_difficult_words,
            wordcount=stats.words,
            averagewordspersentence=ts.average_words_per_sentence(
                stats, precision=WORDS_PER_SENTENCE_PRECISION
            ),
            readingtime=self._seconds_for(stats.words, speed),
        )
        logger.debug(
            "Scored %d words in %d sentences at %d wpm", stats.words, stats.sentences, speed
        )
        return scores


__all__ = [
    "DEFAULT_READING_SPEED",
    "SCORE_RANGES",
    "ReadabilityCalculator",
    "ReadingSpeedProvider",
    "format_time",
    "normalise_score",
]
