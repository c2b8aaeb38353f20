from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

from nexus_unlocks.achievements.events import DomainEvent
from nexus_unlocks.models.progress import ProgressState, Transaction

RuleResult = tuple[bool, dict[str, Any] | None]
Predicate = Callable[[DomainEvent, ProgressState, Sequence[Transaction]], bool]


@runtime_checkable
class UnlockRule(Protocol):
    code: str

    def handles(self, event: DomainEvent) -> bool:
        pass

    def evaluate(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction],
    ) -> RuleResult:
        '''
        Return (satisfied, metadata). If satisfied is True and the unlockable is
        not granted yet, the engine grants it and keeps metadata on the grant.
        '''
        pass


class PredicateRule:
    '''Adapts a plain boolean predicate to the rule protocol.'''

    def __init__(self, code: str, predicate: Predicate) -> None:
        self.code = code
        self.predicate = predicate

    def handles(self, event: DomainEvent) -> bool:
        return True

    def evaluate(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction],
    ) -> RuleResult:
        return bool(self.predicate(event, state, history)), None

    def __repr__(self) -> str:
        return f'PredicateRule({self.code!r})'
