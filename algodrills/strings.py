"""Puzzles over strings, words and letter counts."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Sequence
from itertools import combinations
from math import isqrt

_HOURS = (
    "one", "two", "three", "four", "five", "six",
    "seven", "eight", "nine", "ten", "eleven", "twelve",
)

_NUMBERS = (
    "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen", "twenty", "twenty one", "twenty two",
    "twenty three", "twenty four", "twenty five", "twenty six", "twenty seven",
    "twenty eight", "twenty nine",
)


def acm_team(topics: Sequence[str]) -> tuple[int, int]:
    """Most topics a two-person team knows, and how many teams know that many.

    Each entry is a string of ``0``/``1`` flags; a position counts unless
    both members have ``0`` there.
    """
    if len({len(known) for known in topics}) > 1:
        raise ValueError("every topic string must have the same length")
    scores = [
        sum(1 for x, y in zip(first, second) if not (x == "0" and y == "0"))
        for first, second in combinations(topics, 2)
    ]
    best = max(scores, default=0)
    return best, scores.count(best)


def designer_pdf_viewer(heights: Sequence[int], word: str) -> int:
    """Area of the highlight box around ``word``: tallest letter times length."""
    if len(heights) != 26:
        raise ValueError("a height is needed for each of the 26 letters")
    if not word:
        raise ValueError("word must not be empty")
    if any(ch not in string.ascii_lowercase for ch in word):
        raise ValueError("word must consist of lowercase letters a-z")
    tallest = max(heights[ord(ch) - ord("a")] for ch in word)
    return tallest * len(word)


def encryption(text: str) -> str:
    """Columns of ``text`` laid out in a near-square grid, separated by spaces."""
    if not text:
        return ""
    width = isqrt(len(text))
    if width * width != len(text):
        width += 1
    return " ".join(text[column::width] for column in range(width))


def happy_ladybugs(board: str) -> bool:
    """Whether every ladybug on ``board`` can end up next to one of its colour.

    Colours are uppercase letters; ``_`` marks an empty cell.
    """
    counts = Counter(board)
    empty = counts.pop("_", 0)
    if any(colour not in string.ascii_uppercase for colour in counts):
        raise ValueError("ladybugs must be uppercase letters A-Z or '_'")
    if not counts:
        return True
    if 1 in counts.values():
        return False
    if empty:
        return True
    return all(
        board[i] in (board[i - 1], board[i + 1])
        for i in range(1, len(board) - 1, 2)
    )


def repeated_string(s: str, n: int) -> int:
    """Occurrences of ``a`` in the first ``n`` letters of ``s`` repeated forever."""
    if not s:
        raise ValueError("the repeated string must not be empty")
    whole, rest = divmod(n, len(s))
    return s.count("a") * whole + s[:rest].count("a")


def time_in_words(hour: int, minute: int) -> str:
    """The time ``hour:minute`` spelt out in English words."""
    if not 1 <= hour <= 12:
        raise ValueError("hour must be between 1 and 12")
    if not 0 <= minute <= 59:
        raise ValueError("minute must be between 0 and 59")
    current = _HOURS[hour - 1]
    following = _HOURS[hour % 12]
    if minute == 0:
        return f"{current} o' clock"
    if minute == 1:
        return f"one minute past {current}"
    if minute == 15:
        return f"quarter past {current}"
    if minute == 30:
        return f"half past {current}"
    if minute == 45:
        return f"quarter to {following}"
    if minute < 30:
        return f"{_NUMBERS[minute - 1]} minutes past {current}"
    return f"{_NUMBERS[59 - minute]} minutes to {following}"