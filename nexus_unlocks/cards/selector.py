from __future__ import annotations

import logging
from typing import Optional, Sequence

import nexus_unlocks.cards  # noqa: F401
from nexus_unlocks.achievements.events import CHECK, DomainEvent, SystemSignal
from nexus_unlocks.achievements.registry import RuleRegistry, card_rules
from nexus_unlocks.cards.catalog import NEXUS_TRADING_CARDS, WELCOME_CARD
from nexus_unlocks.cards.eligibility import EligibilityCache
from nexus_unlocks.cards.triggers import TriggerFilter
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.models.unlockable import Catalog, UnlockableDefinition
from nexus_unlocks.services.grants import GrantBoundary
from nexus_unlocks.utils.exceptions import RuleEvaluationError
from nexus_unlocks.utils.tracing import add_span_metadata, trace_span

logger = logging.getLogger(__name__)


class CardDropSelector:
    '''Grants at most one card per event.

    Candidates are the ungranted cards that are relevant to the event and whose
    rule is satisfied. Cards satisfiable for the first time (novel) go ahead of
    the backlog, each group by rarity descending with catalog order breaking
    ties, and the welcome card jumps to the front whenever it is a candidate.
    Everything but the winner stays ungranted and comes back on later events.
    '''

    def __init__(
        self,
        boundary: GrantBoundary,
        catalog: Optional[Catalog] = None,
        rules: Optional[RuleRegistry] = None,
        triggers: Optional[TriggerFilter] = None,
        cache: Optional[EligibilityCache] = None,
        welcome_card_id: Optional[str] = WELCOME_CARD,
    ) -> None:
        self.boundary = boundary
        self.catalog = catalog if catalog is not None else Catalog(NEXUS_TRADING_CARDS)
        self.rules = rules if rules is not None else card_rules
        self.triggers = triggers if triggers is not None else TriggerFilter()
        self.cache = cache if cache is not None else EligibilityCache()
        self.welcome_card_id = welcome_card_id
        self.last_errors: list[RuleEvaluationError] = []

    def warm_up(
        self, state: ProgressState, history: Optional[Sequence[Transaction]] = None
    ) -> set[str]:
        '''Seed the cache with everything already satisfiable. Grants nothing.'''
        self.last_errors = []
        history = state.transactions if history is None else history
        neutral = SystemSignal(CHECK)
        with trace_span('cards.warm_up'):
            satisfiable = {
                d.id
                for d in self.catalog.cards()
                if not state.is_granted(d.id)
                and self._satisfied(d, neutral, state, history)
            }
        self.cache.seed(satisfiable)
        logger.info(f'Card cache seeded with {len(satisfiable)} backlog cards')
        return satisfiable

    def candidates(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction],
    ) -> list[UnlockableDefinition]:
        return [
            d
            for d in self.catalog.cards()
            if not state.is_granted(d.id)
            and self.triggers.is_relevant(d.id, event)
            and self._satisfied(d, event, state, history)
        ]

    def order(
        self,
        candidates: list[UnlockableDefinition],
        novel: set[str],
    ) -> list[UnlockableDefinition]:
        # sorted() is stable, so equal rarities keep catalog order
        by_rarity = sorted(candidates, key=lambda d: d.rarity, reverse=True)
        ordered = [d for d in by_rarity if d.id in novel] + [
            d for d in by_rarity if d.id not in novel
        ]
        for i, definition in enumerate(ordered):
            if definition.id == self.welcome_card_id:
                ordered.insert(0, ordered.pop(i))
                break
        return ordered

    def select_grant(
        self,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction],
    ) -> str | None:
        self.last_errors = []
        with trace_span('cards.select', {'event_type': event.type}):
            candidates = self.candidates(event, state, history)
            if not candidates:
                return None

            ids = [d.id for d in candidates]
            novel = self.cache.novel(ids)
            self.cache.absorb(ids)

            winner = self.order(candidates, novel)[0]
            add_span_metadata('candidates', len(candidates))
            add_span_metadata('novel', len(novel))
            add_span_metadata('winner', winner.id)

            if not self.boundary.grant(winner.id, state):
                return None
            self.cache.discard(winner.id)
            return winner.id

    def _satisfied(
        self,
        definition: UnlockableDefinition,
        event: DomainEvent,
        state: ProgressState,
        history: Sequence[Transaction],
    ) -> bool:
        rule = self.rules.get(definition.id)
        if rule is None:
            return False
        try:
            satisfied, _ = rule.evaluate(event, state, history)
        except Exception as e:
            error = RuleEvaluationError(definition.id, e)
            self.last_errors.append(error)
            logger.warning(str(error), exc_info=True)
            return False
        return bool(satisfied)
