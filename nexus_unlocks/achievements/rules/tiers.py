from __future__ import annotations

from collections import defaultdict

from nexus_unlocks.achievements.registry import achievement_rules
from nexus_unlocks.achievements.rules.base import (
    BaseTierAchievementRule,
    valid_transactions,
)
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.utils.constants import (
    CATEGORY_COUNT_TIERS,
    CATEGORY_VALUE_TIERS,
    SALARY_CATEGORY,
    SCORE_TIERS,
    STREAK_TIERS,
    TRACKED_CATEGORIES,
    VOLUME_TIERS,
    WEALTH_TIERS,
)


class VolumeTierRule(BaseTierAchievementRule):
    prefix = 'total_tx'
    metric = 'transactions'

    def measure(self, state: ProgressState) -> float:
        # Salary entries are created by setup, not by the user
        return sum(
            1
            for t in valid_transactions(state)
            if t.is_paid and t.category != SALARY_CATEGORY
        )


class WealthTierRule(BaseTierAchievementRule):
    prefix = 'wealth'
    metric = 'net_worth'

    def measure(self, state: ProgressState) -> float:
        income = expense = 0.0
        for t in valid_transactions(state):
            if not t.is_paid:
                continue
            if t.kind == 'income':
                income += t.amount
            else:
                expense += t.amount
        return income - expense


class StreakTierRule(BaseTierAchievementRule):
    prefix = 'streak'
    metric = 'streak'

    def measure(self, state: ProgressState) -> float:
        return state.current_streak or 0


class ScoreTierRule(BaseTierAchievementRule):
    prefix = 'nexus_score'
    metric = 'nexus_score'

    def measure(self, state: ProgressState) -> float:
        return state.nexus_score or 0


def category_stats(state: ProgressState) -> dict[str, dict[str, float]]:
    '''Paid expense count and total per category id.'''
    ids_by_name = {c.name: c.id for c in state.categories}
    stats: dict[str, dict[str, float]] = defaultdict(
        lambda: {'count': 0, 'value': 0.0}
    )
    for t in valid_transactions(state):
        if t.kind != 'expense' or not t.is_paid:
            continue
        cat_id = ids_by_name.get(t.category)
        if cat_id is None:
            continue
        stats[cat_id]['count'] += 1
        stats[cat_id]['value'] += t.amount
    return stats


class CategoryTierRule(BaseTierAchievementRule):
    suffix = 'count'
    field = 'count'

    def __init__(self, category_id: str, threshold: int) -> None:
        self.category_id = category_id
        self.prefix = f'cat_{category_id}_{self.suffix}'
        self.metric = self.field
        super().__init__(threshold)

    def measure(self, state: ProgressState) -> float:
        stats = category_stats(state).get(self.category_id)
        return stats[self.field] if stats else 0


class CategoryValueTierRule(CategoryTierRule):
    suffix = 'val'
    field = 'value'


for _n in VOLUME_TIERS:
    achievement_rules.register(VolumeTierRule(_n))
for _n in WEALTH_TIERS:
    achievement_rules.register(WealthTierRule(_n))
for _n in STREAK_TIERS:
    achievement_rules.register(StreakTierRule(_n))
for _n in SCORE_TIERS:
    achievement_rules.register(ScoreTierRule(_n))
for _cat_id, _name, _icon in TRACKED_CATEGORIES:
    for _n in CATEGORY_COUNT_TIERS:
        achievement_rules.register(CategoryTierRule(_cat_id, _n))
    for _n in CATEGORY_VALUE_TIERS:
        achievement_rules.register(CategoryValueTierRule(_cat_id, _n))
