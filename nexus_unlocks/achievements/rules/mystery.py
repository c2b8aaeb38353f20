from __future__ import annotations

from typing import Callable

from nexus_unlocks.achievements.interface import RuleResult
from nexus_unlocks.achievements.registry import achievement_rules
from nexus_unlocks.achievements.rules.base import (
    BaseStateAchievementRule,
    valid_transactions,
)
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.utils.constants import AMOUNT_EPSILON
from nexus_unlocks.utils.helper import today


class TransactionMatchRule(BaseStateAchievementRule):
    '''Satisfied when any valid transaction matches ``matches``.'''

    def __init__(self, code: str, matches: Callable[[Transaction], bool]) -> None:
        self.code = code
        self.matches = matches

    def check(self, state: ProgressState) -> RuleResult:
        for t in valid_transactions(state):
            if self.matches(t):
                return True, {'transaction_id': t.id}
        return False, None


def amount_rule(
    code: str, value: float, tolerance: float = AMOUNT_EPSILON
) -> TransactionMatchRule:
    return TransactionMatchRule(code, lambda t: abs(t.amount - value) < tolerance)


def time_rule(code: str, hh_mm: str) -> TransactionMatchRule:
    return TransactionMatchRule(
        code,
        lambda t: t.has_time and t.occurred_at.strftime('%H:%M') == hh_mm,
    )


def hour_range_rule(code: str, start: int, end: int) -> TransactionMatchRule:
    return TransactionMatchRule(
        code,
        lambda t: t.has_time and start <= t.occurred_at.hour < end,
    )


def keyword_rule(code: str, *keywords: str) -> TransactionMatchRule:
    return TransactionMatchRule(
        code, lambda t: any(k in t.description.lower() for k in keywords)
    )


class PennyPincherRule(BaseStateAchievementRule):
    code = 'secret_penny'
    required = 5

    def check(self, state: ProgressState) -> RuleResult:
        day = today()
        count = sum(
            1 for t in valid_transactions(state) if t.amount <= 1.0 and t.day == day
        )
        return count >= self.required, {'count': count}


AMOUNTS = [
    ('rng_199', 1.99),
    ('rng_12345', 123.45),
    ('rng_314', 3.14),
    ('rng_42', 42.00),
    ('rng_777', 777.00),
    ('rng_1001', 1001.00),
    ('rng_888', 888.00),
    ('rng_9999', 99.99),
    ('rng_5050', 50.50),
    ('rng_1337', 1337.00),
    ('rng_420', 4.20),
    ('rng_1990', 19.90),
    ('rng_007', 0.07),
    ('rng_1010', 10.10),
    ('rng_9000', 9001.00),
    ('rng_123', 1.23),
]

TIMES = [
    ('time_0404', '04:04'),
    ('time_1200', '12:00'),
    ('time_2359', '23:59'),
    ('time_1620', '16:20'),
    ('time_1111', '11:11'),
    ('time_0000', '00:00'),
]

KEYWORDS = [
    ('key_pizza', ('pizza',)),
    ('key_uber', ('uber', '99')),
    ('key_steam', ('steam',)),
    ('key_ifood', ('ifood',)),
    ('key_netflix', ('netflix',)),
    ('key_spotify', ('spotify',)),
    ('key_gym', ('academia', 'gym')),
    ('key_beer', ('cerveja', 'bar')),
    ('key_book', ('livro', 'kindle')),
    ('key_gift', ('presente',)),
    ('key_pet', ('ração', 'vet')),
    ('key_doctor', ('médico', 'exame')),
]


for _code, _value in AMOUNTS:
    achievement_rules.register(amount_rule(_code, _value))
achievement_rules.register(amount_rule('rng_001', 0.01, tolerance=0.001))
for _code, _hh_mm in TIMES:
    achievement_rules.register(time_rule(_code, _hh_mm))
achievement_rules.register(hour_range_rule('time_dawn', 3, 5))
achievement_rules.register(hour_range_rule('time_lunch', 12, 14))
for _code, _words in KEYWORDS:
    achievement_rules.register(keyword_rule(_code, *_words))
achievement_rules.register(
    TransactionMatchRule(
        'secret_negative', lambda t: t.amount < 0 and t.kind == 'expense'
    )
)
achievement_rules.register(
    TransactionMatchRule(
        'secret_rich', lambda t: t.amount >= 1_000_000 and t.kind == 'income'
    )
)
achievement_rules.register(PennyPincherRule())
