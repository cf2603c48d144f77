"""Arithmetic puzzles over single numbers and small counting rules."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


def _reverse_digits(n: int) -> int:
    """Decimal digits of ``n`` in reverse order; non-positive values give 0."""
    if n <= 0:
        return 0
    return int(str(n)[::-1])


def beautiful_days(start: int, end: int, divisor: int) -> int:
    """Days in ``start..end`` whose difference from their reversal divides evenly."""
    if divisor == 0:
        raise ValueError("divisor must not be zero")
    return sum(
        1
        for day in range(start, end + 1)
        if abs(_reverse_digits(day) - day) % divisor == 0
    )


def between_two_sets(a: Sequence[int], b: Sequence[int]) -> int:
    """Count of values that every element of ``a`` divides and that divide all of ``b``.

    Candidates run from the last element of ``a`` to the first element of ``b``.
    """
    if not a or not b:
        raise ValueError("both sets must be non-empty")
    return sum(
        1
        for candidate in range(a[-1], b[0] + 1)
        if all(candidate % factor == 0 for factor in a)
        and all(multiple % candidate == 0 for multiple in b)
    )


def chocolate_feast(money: int, cost: int, wrappers: int) -> int:
    """Chocolates eaten when ``wrappers`` wrappers buy one more bar."""
    if cost <= 0:
        raise ValueError("cost must be positive")
    if wrappers < 2:
        raise ValueError("at least two wrappers must be needed for a trade")
    eaten = money // cost
    held = eaten
    while held >= wrappers:
        traded, left = divmod(held, wrappers)
        eaten += traded
        held = traded + left
    return eaten


def page_count(pages: int, page: int) -> int:
    """Fewest page turns to reach ``page`` from either cover of the book."""
    from_front = page // 2
    from_back = pages // 2 - page // 2
    return min(from_front, from_back)


def electronics_shop(budget: int, keyboards: Sequence[int], drives: Sequence[int]) -> int:
    """Dearest keyboard and drive pair within ``budget``, or -1 if none fits."""
    return max(
        (k + d for k in keyboards for d in drives if k + d <= budget),
        default=-1,
    )


def find_digits(n: int) -> int:
    """Count of the digits of ``n`` (with repeats) that divide ``n`` exactly."""
    if n <= 0:
        return 0
    return sum(1 for ch in str(n) if ch != "0" and n % int(ch) == 0)


def _is_kaprekar(value: int) -> bool:
    digits = len(str(value)) if value > 0 else 0
    right, left = (value * value) % 10**digits, (value * value) // 10**digits
    return left + right == value


def kaprekar_numbers(p: int, q: int) -> list[int]:
    """Modified Kaprekar numbers in ``p..q``; an empty list means an invalid range."""
    return [value for value in range(p, q + 1) if _is_kaprekar(value)]


def strange_counter(t: int) -> int:
    """Value shown at time ``t`` by a counter that restarts at double its last start."""
    if t < 1:
        raise ValueError("time starts at 1")
    cycle = ((t - 1) // 3 + 1).bit_length() - 1
    cycle_start_time = (2**cycle - 1) * 3 + 1
    return 3 * 2**cycle - (t - cycle_start_time)


def utopian_tree(cycles: int) -> int:
    """Height of a tree that doubles each spring and grows one metre each summer."""
    height = 1
    for cycle in range(1, cycles + 1):
        height = height + 1 if cycle % 2 == 0 else height * 2
    return height


def viral_advertising(days: int) -> int:
    """Cumulative likes after ``days`` days of the sharing campaign."""
    liked = total = 2
    for _ in range(1, days):
        liked = liked * 3 // 2
        total += liked
    return total


def save_the_prisoner(prisoners: int, sweets: int, start: int) -> int:
    """Seat of the prisoner who receives the last sweet."""
    if prisoners <= 0:
        raise ValueError("there must be at least one prisoner")
    seat = (sweets + start - 1) % prisoners
    return seat or prisoners


def how_many_games(price: int, discount: int, minimum: int, budget: int) -> int:
    """Games bought when each costs ``discount`` less than the last, down to ``minimum``."""
    if price <= 0 or minimum <= 0:
        raise ValueError("prices must be positive")
    games = 0
    current = price
    while budget >= current:
        budget -= current
        games += 1
        current = max(current - discount, minimum)
    return games


def josephus(n: int, step: int) -> int:
    """Survivor when every ``step``-th of ``n`` people in a circle is removed."""
    if n < 1:
        raise ValueError("the circle needs at least one person")
    if step < 1:
        raise ValueError("step must be positive")
    circle = deque(range(1, n + 1))
    while len(circle) > 1:
        circle.rotate(-(step - 1))
        circle.popleft()
    return circle[0]