"""
Score Set and metadata record contracts.

`ScoreSet` is the fixed, ordered set of readability measurements produced by
one calculation. Field order is part of the contract: `model_dump()` yields
the keys in exactly the order hosts expect to persist them.

`ReadabilityMetadata` is what a host stores for a resource: the score set
plus the identity hash of the file or URL it was computed from.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

NonNegativeInt = Annotated[int, Field(ge=0)]

SCORE_KEYS: tuple[str, ...] = (
    "fleschkincaidreadingease",
    "fleschkincaidgradelevel",
    "gunningfogscore",
    "colemanliauindex",
    "smogindex",
    "automatedreadabilityindex",
    "dalechallreadabilityscore",
    "dalechalldifficultwordcount",
    "spachereadabilityscore",
    "spachedifficultwordcount",
    "wordcount",
    "averagewordspersentence",
    "readingtime",
)


class ScoreSet(BaseModel):
    """Readability scores for one text."""

    model_config = ConfigDict(frozen=True)

    fleschkincaidreadingease: float = Field(
        description="Flesch Reading Ease; higher is easier, normally 0-100."
    )
    fleschkincaidgradelevel: float = Field(description="Flesch-Kincaid US grade level.")
    gunningfogscore: float = Field(description="Gunning Fog index (years of education).")
    colemanliauindex: float = Field(description="Coleman-Liau US grade level.")
    smogindex: float = Field(description="SMOG grade.")
    automatedreadabilityindex: float = Field(description="Automated Readability Index.")
    dalechallreadabilityscore: float = Field(description="New Dale-Chall score.")
    dalechalldifficultwordcount: NonNegativeInt = Field(
        description="Words missing from the Dale-Chall familiar-word list."
    )
    spachereadabilityscore: float = Field(description="Revised Spache grade.")
    spachedifficultwordcount: NonNegativeInt = Field(
        description="Unique words missing from the Spache familiar-word list."
    )
    wordcount: NonNegativeInt = Field(description="Number of words.")
    averagewordspersentence: float = Field(ge=0.0, description="Average sentence length.")
    readingtime: NonNegativeInt = Field(description="Estimated reading time in seconds.")


class ReadabilityMetadata(BaseModel):
    """Score set bound to the resource it describes."""

    resourcehash: str = Field(
        min_length=1, description="SHA-1 identity hash of the file content or URL."
    )
    scores: ScoreSet

    def record(self) -> dict[str, float | int | str]:
        """Flatten into a single row: the hash followed by every score."""
        row: dict[str, float | int | str] = {"resourcehash": self.resourcehash}
        row.update(self.scores.model_dump())
        return row


__all__ = ["SCORE_KEYS", "ScoreSet", "ReadabilityMetadata"]
