"""Small simulations of everyday situations: classes, bills, clouds and lanes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_STARTING_ENERGY = 100


def angry_professor(threshold: int, arrivals: Sequence[int]) -> bool:
    """Whether the class is cancelled: fewer than ``threshold`` arrive on time.

    An arrival time of zero or less counts as on time.
    """
    on_time = sum(1 for arrival in arrivals if arrival <= 0)
    return on_time < threshold


def bon_appetit(bill: Sequence[int], skipped: int, charged: int) -> int:
    """Amount overcharged to the diner who did not eat item ``skipped``.

    Zero means the split was fair.
    """
    shared = sum(cost for index, cost in enumerate(bill) if index != skipped)
    return charged - shared // 2


def fair_rations(loaves: Sequence[int]) -> int | None:
    """Fewest loaves handed out so everyone holds an even number, or None.

    Each hand-out gives one loaf to a person and one to the next in line.
    """
    if sum(1 for loaf in loaves if loaf % 2) % 2:
        return None
    given = 0
    carried = 0
    for loaf in loaves:
        if (loaf + carried) % 2:
            given += 2
            carried = 1
        else:
            carried = 0
    return given


def flatland_space_stations(cities: int, stations: Sequence[int]) -> int:
    """Longest distance any of ``cities`` cities lies from its nearest station."""
    if cities < 1:
        raise ValueError("there must be at least one city")
    if not stations:
        raise ValueError("there must be at least one space station")
    return max(
        min(abs(station - city) for station in stations) for city in range(cities)
    )


def hurdle_race(jump: int, heights: Sequence[int]) -> int:
    """Doses of potion needed to clear the tallest hurdle."""
    return max(max(heights, default=0) - jump, 0)


def jumping_on_clouds(clouds: Sequence[int]) -> int:
    """Fewest jumps of one or two clouds to the end, avoiding thunderheads (1)."""
    if not clouds:
        raise ValueError("there must be at least one cloud")
    jumps = 0
    position = 0
    last = len(clouds) - 1
    while position < last:
        if position + 2 <= last and clouds[position + 2] != 1:
            position += 2
        else:
            position += 1
        jumps += 1
    return jumps


def jumping_on_clouds_revisited(clouds: Sequence[int], k: int) -> int:
    """Energy left after jumping ``k`` clouds at a time round a circle of clouds.

    Each jump costs one unit and landing on a thunderhead (1) two more.
    """
    if not clouds:
        raise ValueError("there must be at least one cloud")
    if k < 1:
        raise ValueError("jump length must be positive")
    energy = _STARTING_ENERGY
    if clouds[0] == 1:
        energy -= 2
    for cloud in clouds[k::k]:
        energy -= 1
        if cloud == 1:
            energy -= 2
    return energy - 1


def lisa_workbook(per_page: int, chapters: Sequence[int]) -> int:
    """Problems whose number matches the page they are printed on.

    Each chapter starts a new page and holds ``per_page`` problems a page.
    """
    if per_page < 1:
        raise ValueError("a page must hold at least one problem")
    special = 0
    page = 1
    for problems in chapters:
        for first in range(1, problems + 1, per_page):
            last = min(first + per_page - 1, problems)
            if first <= page <= last:
                special += 1
            page += 1
    return special


def service_lane(widths: Sequence[int], cases: Iterable[tuple[int, int]]) -> list[int]:
    """Widest vehicle that fits through each ``(entry, exit)`` stretch of road."""
    result: list[int] = []
    for entry, exit_ in cases:
        segment = widths[entry:exit_ + 1]
        if not segment:
            raise ValueError(f"empty stretch from {entry} to {exit_}")
        result.append(min(segment))
    return result