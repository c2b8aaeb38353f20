from __future__ import annotations

from typing import Callable, Dict, Iterable, List

from nexus_unlocks.achievements.interface import Predicate, PredicateRule, UnlockRule


class RuleRegistry:
    def __init__(self) -> None:
        self._rules: List[UnlockRule] = []
        self._by_code: Dict[str, UnlockRule] = {}

    def register(self, rule: UnlockRule) -> None:
        # Avoid duplicates by code
        if rule.code not in self._by_code:
            self._rules.append(rule)
            self._by_code[rule.code] = rule

    def predicate(self, code: str) -> Callable[[Predicate], Predicate]:
        '''Decorator registering a plain predicate function under ``code``.'''

        def decorator(fn: Predicate) -> Predicate:
            self.register(PredicateRule(code, fn))
            return fn

        return decorator

    def get(self, code: str) -> UnlockRule | None:
        return self._by_code.get(code)

    def all(self) -> Iterable[UnlockRule]:
        return list(self._rules)

    def codes(self) -> set[str]:
        return set(self._by_code)

    def clear(self) -> None:
        self._rules.clear()
        self._by_code.clear()


achievement_rules = RuleRegistry()
card_rules = RuleRegistry()
