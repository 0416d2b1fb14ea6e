"""
Request and response models for the HTTP API.

Scores are returned as the same `ScoreSet` contract the calculator produces,
so the JSON keys and their order match what hosts persist.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from legible.core.contracts.scores import ScoreSet


class TextRequest(BaseModel):
    """Plain text to analyse, with an optional reading-speed override."""

    text: str = Field(description="Raw text; tabs and whitespace runs are collapsed.")
    reading_speed: int | None = Field(
        default=None,
        gt=0,
        description="Words per minute. Defaults to the configured speed.",
    )


class ScoresResponse(BaseModel):
    """Full score set plus the reading time formatted as ``H:MM:SS``."""

    scores: ScoreSet
    readingtimeformatted: str = Field(description="Reading time as H:MM:SS.")


class ReadingTimeResponse(BaseModel):
    """Reading-time estimate for a text."""

    seconds: int = Field(ge=0)
    formatted: str
    reading_speed: int = Field(gt=0, description="Words per minute actually used.")


__all__ = ["TextRequest", "ScoresResponse", "ReadingTimeResponse"]
