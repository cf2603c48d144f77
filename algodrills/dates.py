"""Calendar puzzles: overdue fines and the day of the programmer."""

from __future__ import annotations

_MONTH_ENDS = (31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334, 365)
_PROGRAMMERS_DAY = 256
_CALENDAR_SWITCH = 1918
_SKIPPED_DAYS = 13


def library_fine(d1: int, m1: int, y1: int, d2: int, m2: int, y2: int) -> int:
    """Fine for a book returned on ``d1/m1/y1`` that was due on ``d2/m2/y2``."""
    if y1 > y2:
        return 10000
    if y1 == y2 and m1 > m2:
        return 500 * (m1 - m2)
    if y1 == y2 and m1 == m2 and d1 > d2:
        return 15 * (d1 - d2)
    return 0


def _is_leap(year: int) -> bool:
    if year < _CALENDAR_SWITCH:
        return year % 4 == 0
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def day_of_programmer(year: int) -> str:
    """Date of the 256th day of ``year`` in Russia, as ``dd.mm.yyyy``."""
    month = next(i for i, end in enumerate(_MONTH_ENDS) if end > _PROGRAMMERS_DAY)
    day = _PROGRAMMERS_DAY - _MONTH_ENDS[month - 1] - int(_is_leap(year))
    if year == _CALENDAR_SWITCH:
        day += _SKIPPED_DAYS
    return f"{day:02d}.{month + 1:02d}.{year}"