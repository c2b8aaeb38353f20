from __future__ import annotations

from nexus_unlocks.achievements.interface import RuleResult
from nexus_unlocks.achievements.rules.base import BaseStateAchievementRule
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.models.unlockable import UnlockableDefinition


class CapstoneRule(BaseStateAchievementRule):
    '''Satisfied when every non-capstone achievement of a category is granted.

    Must be evaluated after the tier pass; it reads the granted set as left by
    that pass.
    '''

    def __init__(self, code: str, category: str, members: list[str]) -> None:
        self.code = code
        self.category = category
        self.members = members

    def check(self, state: ProgressState) -> RuleResult:
        missing = [m for m in self.members if m not in state.achievements]
        return bool(self.members) and not missing, {
            'category': self.category,
            'missing': len(missing),
        }


def capstone_rules(definitions: list[UnlockableDefinition]) -> list[CapstoneRule]:
    '''Build one capstone rule per capstone definition in ``definitions``.'''
    rules = []
    for definition in definitions:
        if not definition.capstone:
            continue
        members = [
            d.id
            for d in definitions
            if d.category == definition.category and not d.capstone
        ]
        rules.append(CapstoneRule(definition.id, definition.category, members))
    return rules

