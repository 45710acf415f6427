"""
Ranking component - Rank allocation for ordered lists.

Shell Layer - converts allocator errors into validation results.

Invariants:
- I1: before < result < after for every successful allocation
- I2: An empty list always starts at the same canonical rank
- I3: Allocation is deterministic and touches no other rank
- I4: Reversed or equal bounds are rejected, never repaired
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_ALPHABET,
    Alphabet,
    InvalidRank,
    RankError,
    midpoint,
    validate_rank,
)
from .models import (
    AllocateRankInput,
    RankOutput,
    RankValidationError,
    ValidateRankInput,
)
from .ports import RankingRulesPort

logger = logging.getLogger(__name__)

DEFAULT_MAX_RANK_LENGTH_WARNING = 64


def _build_alphabet(rules: RankingRulesPort | None) -> Alphabet:
    """Build alphabet from rules port."""
    if rules is None:
        return DEFAULT_ALPHABET
    chars = rules.get_alphabet()
    if chars == DEFAULT_ALPHABET.chars:
        return DEFAULT_ALPHABET
    return Alphabet(chars)


def _convert_error(error: RankError) -> RankValidationError:
    """Convert allocator exception to component error."""
    return RankValidationError(
        code=error.code,
        message=str(error),
        field=error.field if isinstance(error, InvalidRank) else None,
    )


def _warn_on_growth(rank: str, rules: RankingRulesPort | None) -> None:
    limit = (
        rules.get_max_rank_length_warning()
        if rules is not None
        else DEFAULT_MAX_RANK_LENGTH_WARNING
    )
    if len(rank) > limit:
        logger.warning(
            "Allocated rank of length %d exceeds %d; gap is densely packed",
            len(rank),
            limit,
        )


# --- Component Entry Points ---


def run_allocate(
    inp: AllocateRankInput,
    *,
    rules: RankingRulesPort | None = None,
) -> RankOutput:
    """
    Allocate a rank between two neighbours.

    Args:
        inp: Input containing the neighbouring ranks.
        rules: Optional rules port for the alphabet and growth warning.

    Returns:
        RankOutput with the new rank or errors.
    """
    alphabet = _build_alphabet(rules)

    try:
        rank = midpoint(inp.before, inp.after, alphabet)
    except RankError as e:
        return RankOutput(rank=None, errors=[_convert_error(e)], success=False)

    _warn_on_growth(rank, rules)
    return RankOutput(rank=rank, errors=[], success=True)


def run_validate(
    inp: ValidateRankInput,
    *,
    rules: RankingRulesPort | None = None,
) -> RankOutput:
    """
    Check that a rank is well formed for the configured alphabet.

    Args:
        inp: Input containing the rank.
        rules: Optional rules port for the alphabet.

    Returns:
        RankOutput echoing the rank, or errors.
    """
    alphabet = _build_alphabet(rules)

    try:
        validate_rank(inp.rank, alphabet, "rank")
    except InvalidRank as e:
        return RankOutput(rank=None, errors=[_convert_error(e)], success=False)

    return RankOutput(rank=inp.rank, errors=[], success=True)


def run(
    inp: AllocateRankInput | ValidateRankInput,
    *,
    rules: RankingRulesPort | None = None,
) -> RankOutput:
    """
    Main entry point for the ranking component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, AllocateRankInput):
        return run_allocate(inp, rules=rules)
    elif isinstance(inp, ValidateRankInput):
        return run_validate(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
