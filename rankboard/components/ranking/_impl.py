"""
RankAllocator - Fractional (lexo-rank style) ordering keys.

Computes a rank string that sorts strictly between two neighbouring ranks,
so an item can be inserted or moved without renumbering any other item.

Functional Core - pure logic, no I/O.

Key behaviors:
- Ranks compare with plain string comparison; the alphabet is ascending in
  code-point order so that comparison matches alphabet order
- An empty list starts at the middle character of the alphabet
- Head/tail insertion steps one character toward the low/high end
- Insertion between adjacent characters extends the rank one character at a
  time until a gap is found (always terminates)
- A valid rank never ends with the lowest character; otherwise gaps such as
  ("A", "A0") would be empty
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_ALPHABET_CHARS = (
    "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)


# --- Errors ---


class AlphabetError(ValueError):
    """Alphabet definition is unusable for ranking."""


class RankError(ValueError):
    """Base class for rank allocation failures."""

    code = "rank_error"


class InvalidRank(RankError):
    """A supplied rank is not a well-formed rank for the alphabet."""

    code = "invalid_rank"

    def __init__(self, rank: str, reason: str, field: str | None = None) -> None:
        self.rank = rank
        self.reason = reason
        self.field = field
        super().__init__(f"Invalid rank {rank!r}: {reason}")


class InvalidRange(RankError):
    """before is not strictly less than after."""

    code = "invalid_range"

    def __init__(self, before: str, after: str) -> None:
        self.before = before
        self.after = after
        super().__init__(
            f"Rank range is empty: before={before!r} must sort before after={after!r}"
        )


# --- Alphabet ---


@dataclass(frozen=True)
class Alphabet:
    """Ordered character set ranks are drawn from."""

    chars: str = DEFAULT_ALPHABET_CHARS
    _positions: dict[str, int] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        if len(self.chars) < 3:
            raise AlphabetError("Alphabet needs at least 3 characters")
        if len(set(self.chars)) != len(self.chars):
            raise AlphabetError("Alphabet characters must be unique")
        if list(self.chars) != sorted(self.chars):
            raise AlphabetError(
                "Alphabet must be in ascending code-point order"
            )
        object.__setattr__(
            self, "_positions", {c: i for i, c in enumerate(self.chars)}
        )

    def __len__(self) -> int:
        return len(self.chars)

    @property
    def lowest(self) -> str:
        return self.chars[0]

    @property
    def highest(self) -> str:
        return self.chars[-1]

    @property
    def middle(self) -> str:
        """Canonical starting rank for an empty list."""
        return self.chars[(len(self.chars) - 1) // 2]

    def index(self, char: str) -> int:
        return self._positions[char]

    def contains(self, char: str) -> bool:
        return char in self._positions


DEFAULT_ALPHABET = Alphabet()


# --- Validation ---


def validate_rank(
    rank: str,
    alphabet: Alphabet = DEFAULT_ALPHABET,
    field: str | None = None,
) -> str:
    """
    Check that rank is usable as an ordering key.

    Raises:
        InvalidRank: empty, foreign characters, or trailing lowest character.
    """
    if not isinstance(rank, str) or not rank:
        raise InvalidRank(str(rank), "rank must be a non-empty string", field)

    bad = sorted({c for c in rank if not alphabet.contains(c)})
    if bad:
        raise InvalidRank(
            rank, f"characters not in alphabet: {''.join(bad)!r}", field
        )

    if rank[-1] == alphabet.lowest:
        raise InvalidRank(
            rank,
            f"rank must not end with the lowest character {alphabet.lowest!r}",
            field,
        )

    return rank


def is_valid_rank(rank: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> bool:
    try:
        validate_rank(rank, alphabet)
    except InvalidRank:
        return False
    return True


# --- Boundary Steps ---


def increment(rank: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Return a rank strictly greater than rank.

    Steps the last character one position up. When it is already the
    highest character the middle character is appended instead.
    """
    validate_rank(rank, alphabet, "before")

    last = alphabet.index(rank[-1])
    if last < len(alphabet) - 1:
        return rank[:-1] + alphabet.chars[last + 1]
    return rank + alphabet.middle


def decrement(rank: str, alphabet: Alphabet = DEFAULT_ALPHABET) -> str:
    """
    Return a rank strictly less than rank.

    Steps the first character one position down. Leading lowest characters
    cannot step, so the first character above the lowest is stepped
    instead. If that leaves a trailing lowest character, the middle
    character is appended to keep the result valid.
    """
    validate_rank(rank, alphabet, "after")

    # A valid rank always has a character above the lowest (its last one).
    pos = next(i for i, c in enumerate(rank) if c != alphabet.lowest)
    stepped = alphabet.chars[alphabet.index(rank[pos]) - 1]
    result = rank[:pos] + stepped + rank[pos + 1 :]

    if result[-1] == alphabet.lowest:
        result += alphabet.middle
    return result


# --- Midpoint ---


def _between(before: str, after: str, alphabet: Alphabet) -> str:
    prefix: list[str] = []
    i = 0
    while True:
        ca = before[i] if i < len(before) else alphabet.lowest
        cb = after[i] if i < len(after) else alphabet.highest

        if ca == cb:
            prefix.append(ca)
            i += 1
            continue

        lo = alphabet.index(ca)
        hi = alphabet.index(cb)
        if hi - lo > 1:
            prefix.append(alphabet.chars[(lo + hi) // 2])
            return "".join(prefix)

        # No room at this position; keep before's character and go deeper.
        prefix.append(ca)
        i += 1


def midpoint(
    before: str | None,
    after: str | None,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> str:
    """
    Compute a rank strictly between before and after.

    Args:
        before: Rank of the preceding item, or None at the head.
        after: Rank of the following item, or None at the tail.
        alphabet: Ordered character set (must match the stored ranks).

    Returns:
        A new valid rank r with before < r < after (absent bounds are open).

    Raises:
        InvalidRank: A supplied bound is malformed.
        InvalidRange: Both bounds present and before >= after.
    """
    if before is None:
        result = alphabet.middle if after is None else decrement(after, alphabet)
    elif after is None:
        result = increment(before, alphabet)
    else:
        validate_rank(before, alphabet, "before")
        validate_rank(after, alphabet, "after")
        if before >= after:
            raise InvalidRange(before, after)
        result = _between(before, after, alphabet)

    logger.debug("midpoint(%r, %r) -> %r", before, after, result)
    return result


def rank_between_many(
    before: str | None,
    after: str | None,
    count: int,
    alphabet: Alphabet = DEFAULT_ALPHABET,
) -> list[str]:
    """
    Allocate count strictly increasing ranks inside one gap.

    Each rank is the midpoint of the previous one and after, so a bulk
    insert lands in order between the same two neighbours.
    """
    if count < 0:
        raise ValueError("count must be non-negative")

    ranks: list[str] = []
    lower = before
    for _ in range(count):
        lower = midpoint(lower, after, alphabet)
        ranks.append(lower)
    return ranks
