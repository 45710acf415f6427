import random

import pytest

from rankboard.adapters.memory import InMemoryRankedItemRepo
from rankboard.components.ordering import OrderingService
from rankboard.components.ranking import (
    DEFAULT_ALPHABET,
    Alphabet,
    InvalidRange,
    is_valid_rank,
    midpoint,
)

CHARS = DEFAULT_ALPHABET.chars


def _random_rank(rng: random.Random, max_len: int = 6) -> str:
    body = "".join(rng.choice(CHARS) for _ in range(rng.randint(0, max_len - 1)))
    return body + rng.choice(CHARS[1:])


@pytest.fixture
def rng():
    return random.Random(20240917)


# --- R1: Order ---
def test_R1_midpoint_sorts_strictly_between(rng):
    """R1: before < midpoint(before, after) < after for every valid pair."""
    for _ in range(2000):
        a, b = _random_rank(rng), _random_rank(rng)
        if a == b:
            continue
        before, after = min(a, b), max(a, b)

        result = midpoint(before, after)

        assert before < result < after, (before, after, result)
        assert is_valid_rank(result)


# --- R2: Boundaries ---
def test_R2_open_bounds(rng):
    """R2: Head results sort below, tail results above, empty is canonical."""
    assert {midpoint(None, None) for _ in range(10)} == {"U"}

    for _ in range(1000):
        rank = _random_rank(rng)
        head = midpoint(None, rank)
        tail = midpoint(rank, None)

        assert head < rank < tail
        assert is_valid_rank(head)
        assert is_valid_rank(tail)


# --- R3: Determinism ---
def test_R3_deterministic(rng):
    """R3: Identical inputs always give identical outputs."""
    for _ in range(200):
        a, b = sorted([_random_rank(rng), _random_rank(rng)])
        if a == b:
            continue
        assert midpoint(a, b) == midpoint(a, b)
        assert midpoint(None, b) == midpoint(None, b)
        assert midpoint(a, None) == midpoint(a, None)


# --- R4: Repeated Bisection ---
@pytest.mark.parametrize("towards", ["before", "after"])
def test_R4_repeated_bisection_never_collides(towards):
    """R4: 1000 insertions into one shrinking gap stay ordered and distinct."""
    lo, hi = "F", "G"
    seen = {lo, hi}

    for _ in range(1000):
        result = midpoint(lo, hi)

        assert lo < result < hi
        assert result not in seen
        seen.add(result)

        if towards == "before":
            hi = result
        else:
            lo = result

    # Growth is acceptable; this only guards against regressions.
    assert len(result) < 256


def test_R4_fifty_insertions_next_to_f():
    """R4: 50 insertions between F and G nearest F are distinct and ordered."""
    results = []
    hi = "G"
    for _ in range(50):
        hi = midpoint("F", hi)
        results.append(hi)

    assert len(set(results)) == 50
    assert results == sorted(results, reverse=True)
    assert all("F" < r < "G" for r in results)


# --- R5: Growth ---
def test_R5_head_and_tail_growth_is_bounded():
    """R5: 1000 consecutive head or tail insertions stay under 64 chars."""
    head = tail = midpoint(None, None)
    for _ in range(1000):
        new_head = midpoint(None, head)
        new_tail = midpoint(tail, None)
        assert new_head < head
        assert new_tail > tail
        head, tail = new_head, new_tail

    assert len(head) < 64
    assert len(tail) < 64


# --- R6: Adjacent Characters Terminate ---
def test_R6_adjacent_characters_terminate():
    """R6: Adjacent-everywhere neighbours extend rather than fail."""
    assert midpoint("A", "B") == "AU"

    lo = "Az"
    hi = "B"
    for _ in range(100):
        result = midpoint(lo, hi)
        assert lo < result < hi
        lo = result


# --- R7: Invalid Range ---
def test_R7_reversed_range_rejected():
    """R7: Reversed bounds fail loudly."""
    with pytest.raises(InvalidRange):
        midpoint("M", "A")


# --- R8: Small Alphabet ---
def test_R8_small_alphabet_property(rng):
    """R8: Ordering holds for a minimal alphabet too."""
    abc = Alphabet("abc")
    ranks = ["b"]
    for _ in range(300):
        idx = rng.randint(0, len(ranks))
        before = ranks[idx - 1] if idx > 0 else None
        after = ranks[idx] if idx < len(ranks) else None
        ranks.insert(idx, midpoint(before, after, abc))

    assert ranks == sorted(ranks)
    assert len(set(ranks)) == len(ranks)


# --- R9: Only The Moved Item Changes ---
def test_R9_random_moves_preserve_total_order(rng):
    """R9: Random drag-and-drop keeps each lane sorted and rewrites one rank."""
    repo = InMemoryRankedItemRepo()
    service = OrderingService(repo=repo)
    lanes = list(service.lanes)

    expected: dict[str, list] = {lane: [] for lane in lanes}
    for n in range(40):
        lane = rng.choice(lanes)
        item, errors = service.place(f"item-{n}", lane=lane)
        assert not errors
        expected[lane].append(item.id)

    for _ in range(300):
        src = rng.choice([lane for lane in lanes if expected[lane]])
        item_id = rng.choice(expected[src])
        dst = rng.choice(lanes)

        expected[src].remove(item_id)
        target = expected[dst]
        idx = rng.randint(0, len(target))
        after_id = target[idx - 1] if idx > 0 else None
        before_id = target[idx] if idx < len(target) else None

        ranks_before = {
            i.id: i.rank for lane in lanes for i in service.list_lane(lane)
        }
        _, errors = service.move(item_id, dst, after_id=after_id, before_id=before_id)
        assert not errors
        target.insert(idx, item_id)

        ranks_after = {
            i.id: i.rank for lane in lanes for i in service.list_lane(lane)
        }
        changed = {k for k in ranks_before if ranks_before[k] != ranks_after[k]}
        assert changed <= {item_id}

    for lane in lanes:
        assert [i.id for i in service.list_lane(lane)] == expected[lane]
