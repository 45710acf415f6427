"""
Ranking component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Validation Error ---


@dataclass(frozen=True)
class RankValidationError:
    """Rank allocation or validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class AllocateRankInput:
    """
    Input for allocating a rank between two neighbours.

    before is the rank of the preceding item (None at the head), after the
    rank of the following item (None at the tail).
    """

    before: str | None = None
    after: str | None = None


@dataclass(frozen=True)
class ValidateRankInput:
    """Input for checking a single rank."""

    rank: str


# --- Output Models ---


@dataclass(frozen=True)
class RankOutput:
    """Output of a ranking operation."""

    rank: str | None
    errors: list[RankValidationError] = field(default_factory=list)
    success: bool = True
