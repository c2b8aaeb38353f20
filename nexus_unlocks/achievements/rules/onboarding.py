from __future__ import annotations

from typing import Sequence

from nexus_unlocks.achievements.events import DomainEvent, ViewOpenedEvent
from nexus_unlocks.achievements.interface import RuleResult
from nexus_unlocks.achievements.registry import achievement_rules
from nexus_unlocks.achievements.rules.base import BaseStateAchievementRule
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.utils.constants import REPORT_VIEW


class IdentitySetRule(BaseStateAchievementRule):
    code = 'identity_set'

    def check(self, state: ProgressState) -> RuleResult:
        return state.has_identity, None


class FirstStepsRule(BaseStateAchievementRule):
    code = 'first_steps'

    def check(self, state: ProgressState) -> RuleResult:
        return state.onboarding_complete, None


class CreditCardCountRule(BaseStateAchievementRule):
    def __init__(self, code: str, required: int) -> None:
        self.code = code
        self.required = required

    def check(self, state: ProgressState) -> RuleResult:
        count = len(state.credit_cards)
        return count >= self.required, {'credit_cards': count}


class ReportViewRule(BaseStateAchievementRule):
    code = 'first_report_view'

    def handles(self, event: DomainEvent) -> bool:
        return isinstance(event, ViewOpenedEvent)

    def evaluate(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction] = (),
    ) -> RuleResult:
        if not isinstance(event, ViewOpenedEvent):
            return False, None
        return event.view_id == REPORT_VIEW, {'view': event.view_id}


achievement_rules.register(FirstStepsRule())
achievement_rules.register(IdentitySetRule())
achievement_rules.register(CreditCardCountRule('first_credit_card', 1))
achievement_rules.register(CreditCardCountRule('two_cards', 2))
achievement_rules.register(ReportViewRule())
