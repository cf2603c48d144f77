"""Counting and selection puzzles over lists of integers."""

from __future__ import annotations

from bisect import bisect_right
from collections import Counter, defaultdict
from collections.abc import Sequence
from itertools import combinations, groupby

# The shortest cut never exceeds this length, whatever the sticks measure.
_LONGEST_CUT = 1000


def climbing_leaderboard(ranked: Sequence[int], player: Sequence[int]) -> list[int]:
    """Dense rank of each of the player's ascending scores on the leaderboard."""
    leaders = [score for score, _ in groupby(ranked)]
    rank = len(leaders) + 1
    ranks: list[int] = []
    for score in player:
        while rank > 1 and score >= leaders[rank - 2]:
            rank -= 1
        ranks.append(rank)
    return ranks


def cut_the_sticks(lengths: Sequence[int]) -> list[int]:
    """Number of sticks cut in each round until none are left."""
    if any(length < 0 for length in lengths):
        raise ValueError("stick lengths must not be negative")
    sticks = list(lengths)
    rounds: list[int] = []
    while True:
        shortest = min(
            min((s for s in sticks if s), default=_LONGEST_CUT), _LONGEST_CUT
        )
        cut = sum(1 for s in sticks if s >= shortest)
        if cut == 0:
            return rounds
        rounds.append(cut)
        sticks = [s - shortest if s >= shortest else s for s in sticks]


def picking_numbers(values: Sequence[int]) -> int:
    """Largest group whose values differ pairwise by at most one."""
    ordered = sorted(values)
    best = max(
        (bisect_right(ordered, value + 1) - i - 1 for i, value in enumerate(ordered[:-1])),
        default=0,
    )
    return best + 1


def non_divisible_subset(k: int, values: Sequence[int]) -> int:
    """Largest subset in which no two values sum to a multiple of ``k``."""
    if k <= 0:
        raise ValueError("k must be positive")
    remainders = Counter(value % k for value in values)
    if k % 2 == 0:
        remainders[k // 2] = min(1, remainders[k // 2])
    return min(remainders[0], 1) + sum(
        max(remainders[r], remainders[k - r]) for r in range(1, k // 2 + 1)
    )


def minimum_distances(values: Sequence[int]) -> int:
    """Smallest gap between the last two occurrences of any repeated value, or -1."""
    positions: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        positions[value].append(index)
    gaps = [found[-1] - found[-2] for found in positions.values() if len(found) > 1]
    return min(gaps, default=-1)


def equalize_array(values: Sequence[int]) -> int:
    """Fewest deletions that leave all remaining values equal."""
    most_common = max(Counter(values).values(), default=1)
    return len(values) - most_common


def beautiful_triplets(d: int, values: Sequence[int]) -> int:
    """Count of triples stepping up by ``d``, the last two in list order."""
    return sum(
        1
        for first in values
        for j, second in enumerate(values)
        if second - first == d
        for third in values[j + 1:]
        if third - second == d
    )


def divisible_sum_pairs(k: int, values: Sequence[int]) -> int:
    """Count of index pairs i < j whose values sum to a multiple of ``k``."""
    return sum(1 for a, b in combinations(values, 2) if (a + b) % k == 0)


def sock_merchant(socks: Sequence[int]) -> int:
    """Matching pairs of socks by colour; colour 0 never pairs."""
    return sum(count // 2 for colour, count in Counter(socks).items() if colour != 0)


def breaking_records(scores: Sequence[int]) -> tuple[int, int]:
    """Times the season's best and worst scores were broken."""
    if not scores:
        raise ValueError("at least one score is needed")
    best = worst = scores[0]
    most = least = 0
    for score in scores[1:]:
        if score > best:
            best = score
            most += 1
        if score < worst:
            worst = score
            least += 1
    return most, least


def migratory_birds(sightings: Sequence[int]) -> int:
    """Most often sighted bird type among 1..5, smallest on ties."""
    counts = Counter(sightings)
    return max(range(1, 6), key=lambda kind: (counts[kind], -kind))


def birthday_chocolate(squares: Sequence[int], day: int, month: int) -> int:
    """Ways to take ``month`` adjacent squares whose values sum to ``day``."""
    return sum(
        1
        for start in range(len(squares) - month + 1)
        if sum(squares[start:start + month]) == day
    )