"""Puzzles about orderings, rearrangements and rotations of sequences."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def _run_end(values: Sequence[int], start: int, rising: bool) -> int:
    """Index where a strictly rising (or falling) run that begins at ``start`` ends."""
    i = start
    last = len(values) - 1
    while i < last and (
        values[i] < values[i + 1] if rising else values[i] > values[i + 1]
    ):
        i += 1
    return i


def _single_dip(values: Sequence[int]) -> tuple[int, int] | None:
    """Bounds of one falling stretch that, reversed, would sort the sequence."""
    last = len(values) - 1
    peak = _run_end(values, 0, rising=True)
    valley = _run_end(values, peak, rising=False)
    if _run_end(values, valley, rising=True) != last:
        return None
    left_ok = peak == 0 or values[valley] > values[peak - 1]
    right_ok = valley == last or values[peak] < values[valley + 1]
    return (peak, valley) if left_ok and right_ok else None


def _double_dip(values: Sequence[int]) -> tuple[int, int] | None:
    """Positions of two elements that, swapped, would sort the sequence."""
    last = len(values) - 1
    first_peak = _run_end(values, 0, rising=True)
    first_valley = _run_end(values, first_peak, rising=False)
    second_peak = _run_end(values, first_valley, rising=True)
    second_valley = second_peak + 1
    if _run_end(values, second_valley, rising=True) != last:
        return None
    left_ok = first_peak == 0 or (
        values[first_peak - 1] < values[second_valley] < values[first_valley]
    )
    middle_ok = values[first_peak] > values[second_peak]
    right_ok = (
        second_valley + 1 >= last
        or values[first_peak] < values[second_valley + 1]
    )
    if left_ok and middle_ok and right_ok:
        return first_peak, second_valley
    return None


def almost_sorted(arr: Sequence[int]) -> str:
    """Say whether one swap or one reversal sorts ``arr``, and which one.

    The answer is ``"yes"``, ``"no"``, or ``"yes"`` followed on a second line by
    ``"swap l r"`` or ``"reverse l r"`` with 1-based positions.
    """
    values = list(arr)
    if all(a <= b for a, b in pairwise(values)):
        return "yes"
    if len(values) == 2:
        return "yes\nswap 1 2"
    dip = _single_dip(values)
    if dip is not None:
        left, right = dip[0] + 1, dip[1] + 1
        operation = "swap" if right - left == 1 else "reverse"
        return f"yes\n{operation} {left} {right}"
    swap = _double_dip(values)
    if swap is not None:
        return f"yes\nswap {swap[0] + 1} {swap[1] + 1}"
    return "no"


def absolute_permutation(n: int, k: int) -> list[int]:
    """Smallest permutation of 1..n with ``|pos[i] - i| == k``, or ``[-1]``."""
    used: set[int] = set()
    result: list[int] = []
    for position in range(1, n + 1):
        for candidate in (position - k, position + k):
            if 1 <= candidate <= n and candidate not in used:
                used.add(candidate)
                result.append(candidate)
                break
        else:
            return [-1]
    return result


def bigger_is_greater(word: str) -> str:
    """Next lexicographic rearrangement of ``word``, or ``"no answer"``."""
    chars = list(word)
    pivot = next(
        (i for i in range(len(chars) - 2, -1, -1) if chars[i] < chars[i + 1]),
        None,
    )
    if pivot is None:
        return "no answer"
    successor = next(
        j for j in range(len(chars) - 1, pivot, -1) if chars[j] > chars[pivot]
    )
    chars[pivot], chars[successor] = chars[successor], chars[pivot]
    chars[pivot + 1:] = reversed(chars[pivot + 1:])
    return "".join(chars)


def permutation_equation(p: Sequence[int]) -> list[int]:
    """For each x in 1..n, every y with ``p(p(y)) == x`` (1-based)."""
    n = len(p)
    return [
        outer
        for target in range(1, n + 1)
        for inner, inner_value in enumerate(p, start=1)
        if inner_value == target
        for outer, outer_value in enumerate(p, start=1)
        if outer_value == inner
    ]


def circular_array_rotation(
    arr: Sequence[int], k: int, queries: Sequence[int]
) -> list[int]:
    """Values at ``queries`` after rotating ``arr`` right ``k`` times."""
    n = len(arr)
    if n == 0:
        raise ValueError("cannot rotate an empty sequence")
    shift = k % n
    rotated = list(arr[n - shift:]) + list(arr[:n - shift])
    return [rotated[index] for index in queries]