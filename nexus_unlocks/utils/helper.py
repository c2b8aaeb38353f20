from datetime import date

import pendulum

from nexus_unlocks.utils.constants import (
    BASE_XP,
    GROWTH_RATE,
    MONTH_FORMAT,
    RANK_TITLES,
)


def experience_for_level(level: int) -> int:
    '''Total experience required to reach ``level``.'''
    if level <= 1:
        return 0
    return int(BASE_XP * (GROWTH_RATE ** (level - 1) - 1) / (GROWTH_RATE - 1))


def calculate_level(points: int) -> int:
    if points < 0:
        return 1
    level = 1
    while points >= experience_for_level(level + 1):
        level += 1
    return level


def experience_for_next_level(level: int) -> int:
    return experience_for_level(level + 1) - experience_for_level(level)


def rank_title(level: int) -> str:
    lvl = max(1, int(level))
    for th, name in RANK_TITLES:
        if lvl >= th:
            return name
    return RANK_TITLES[-1][1]


def today() -> date:
    return pendulum.now().date()


def month_key(day: date, months_ago: int = 0) -> str:
    '''YYYY-MM for ``day`` shifted back ``months_ago`` calendar months.'''
    shifted = pendulum.date(day.year, day.month, 1).subtract(months=months_ago)
    return shifted.strftime(MONTH_FORMAT)
