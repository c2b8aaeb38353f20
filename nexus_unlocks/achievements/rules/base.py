from __future__ import annotations

from typing import Any, Sequence

from nexus_unlocks.achievements.events import DomainEvent
from nexus_unlocks.achievements.interface import RuleResult, UnlockRule
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.utils.helper import today


def valid_transactions(state: ProgressState) -> list[Transaction]:
    '''Transactions dated today or earlier; future-dated entries never count.'''
    cutoff = today()
    return [t for t in state.transactions if t.day <= cutoff]


class BaseStateAchievementRule(UnlockRule):
    '''Rule that only looks at the progress state, whatever the event.'''

    code: str = ''

    def handles(self, event: DomainEvent) -> bool:
        return True

    def evaluate(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction] = (),
    ) -> RuleResult:
        return self.check(state)

    def check(self, state: ProgressState) -> RuleResult:
        raise NotImplementedError


class BaseTierAchievementRule(BaseStateAchievementRule):
    '''Threshold rule: satisfied once ``measure(state) >= threshold``.

    Tiers of the same metric are independent rules, so a single jump in state
    can satisfy several of them in the same sweep.
    '''

    prefix: str = ''
    metric: str = 'value'

    def __init__(self, threshold: int) -> None:
        self.threshold = threshold
        self.code = f'{self.prefix}_{threshold}'

    def measure(self, state: ProgressState) -> float:
        raise NotImplementedError

    def check(self, state: ProgressState) -> RuleResult:
        value = self.measure(state)
        metadata: dict[str, Any] = {self.metric: value}
        return value >= self.threshold, metadata
