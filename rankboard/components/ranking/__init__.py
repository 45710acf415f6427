"""
Ranking component - Fractional ordering keys for ranked lists.
"""

from ._impl import (
    DEFAULT_ALPHABET,
    DEFAULT_ALPHABET_CHARS,
    Alphabet,
    AlphabetError,
    InvalidRange,
    InvalidRank,
    RankError,
    decrement,
    increment,
    is_valid_rank,
    midpoint,
    rank_between_many,
    validate_rank,
)
from .component import DEFAULT_MAX_RANK_LENGTH_WARNING, run, run_allocate, run_validate
from .models import (
    AllocateRankInput,
    RankOutput,
    RankValidationError,
    ValidateRankInput,
)
from .ports import RankingRulesPort

__all__ = [
    # Entry points
    "run",
    "run_allocate",
    "run_validate",
    # Input models
    "AllocateRankInput",
    "ValidateRankInput",
    # Output models
    "RankOutput",
    "RankValidationError",
    # Ports
    "RankingRulesPort",
    # Functional core
    "DEFAULT_MAX_RANK_LENGTH_WARNING",
    "Alphabet",
    "AlphabetError",
    "DEFAULT_ALPHABET",
    "DEFAULT_ALPHABET_CHARS",
    "InvalidRange",
    "InvalidRank",
    "RankError",
    "decrement",
    "increment",
    "is_valid_rank",
    "midpoint",
    "rank_between_many",
    "validate_rank",
]
