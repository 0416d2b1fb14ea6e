"""
API routes for readability scoring.

Endpoints
---------
- `POST /scores`: Full score set for a text.
- `POST /reading-time`: Reading-time estimate for a text.

Both handlers are plain `def` functions, so FastAPI runs the CPU-bound
calculation in its worker thread pool instead of on the event loop.
"""

from __future__ import annotations

from fastapi import APIRouter

from legible.api.schemas import ReadingTimeResponse, ScoresResponse, TextRequest
from legible.core.calculator import ReadabilityCalculator
from legible.core.settings import configured_reading_speed, load_settings

router = APIRouter(tags=["Readability"])


def _calculator_for(request: TextRequest) -> ReadabilityCalculator:
    config = load_settings()
    speed = request.reading_speed
    return ReadabilityCalculator(
        (lambda: speed) if speed is not None else configured_reading_speed,
        normalise=config.normalise_scores,
        precision=config.score_precision,
    )


@router.post("/scores", response_model=ScoresResponse, summary="Score a text")
def score_text(request: TextRequest) -> ScoresResponse:
    """Return every readability score for `request.text`."""
    calculator = _calculator_for(request)
    scores = calculator.calculate_scores(request.text)
    return ScoresResponse(
        scores=scores,
        readingtimeformatted=calculator.format_time(scores.readingtime),
    )


@router.post(
    "/reading-time",
    response_model=ReadingTimeResponse,
    summary="Estimate reading time",
)
def reading_time(request: TextRequest) -> ReadingTimeResponse:
    """Return the reading time of `request.text` in seconds and as ``H:MM:SS``."""
    calculator = _calculator_for(request)
    seconds = calculator.calculate_reading_time(
        calculator.clean_for_calculation(request.text)
    )
    return ReadingTimeResponse(
        seconds=seconds,
        formatted=calculator.format_time(seconds),
        reading_speed=calculator.get_reading_speed(),
    )


__all__ = ["router"]
