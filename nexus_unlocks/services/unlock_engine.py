from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import Callable, Optional

from nexus_unlocks.achievements.catalog import ALL_ACHIEVEMENTS
from nexus_unlocks.achievements.engine import AchievementSweep
from nexus_unlocks.achievements.events import (
    CHECK,
    DomainEvent,
    SystemSignal,
    ViewOpenedEvent,
)
from nexus_unlocks.achievements.registry import (
    RuleRegistry,
    achievement_rules,
    card_rules,
)
from nexus_unlocks.cards.catalog import NEXUS_TRADING_CARDS, WELCOME_CARD
from nexus_unlocks.cards.selector import CardDropSelector
from nexus_unlocks.cards.triggers import TriggerFilter
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.models.unlockable import Catalog, UnlockableDefinition
from nexus_unlocks.services.event_bus import EventBus
from nexus_unlocks.services.grants import GrantBoundary, SaveFn
from nexus_unlocks.utils.constants import STATE_CHANGED, UNLOCK_GRANTED, VIEW_OPENED
from nexus_unlocks.utils.exceptions import MisconfigurationWarning
from nexus_unlocks.utils.tracing import trace_span

logger = logging.getLogger(__name__)


def default_catalog() -> Catalog:
    return Catalog([*ALL_ACHIEVEMENTS, *NEXUS_TRADING_CARDS])


@dataclass
class UnlockReport:
    achievements: list[str] = field(default_factory=list)
    card: Optional[str] = None

    @property
    def granted(self) -> list[str]:
        return [*self.achievements, *([self.card] if self.card else [])]


class UnlockEngine:
    '''Wires the sweep, the card selector and the grant boundary to a bus.

    Build one per loaded progress state and hand it to whoever needs to
    trigger a re-check.
    '''

    def __init__(
        self,
        state: Callable[[], ProgressState],
        save: SaveFn,
        bus: EventBus,
        catalog: Optional[Catalog] = None,
        achievement_rule_set: Optional[RuleRegistry] = None,
        card_rule_set: Optional[RuleRegistry] = None,
        triggers: Optional[TriggerFilter] = None,
        welcome_card_id: Optional[str] = WELCOME_CARD,
    ) -> None:
        self._state = state
        self.bus = bus
        self.catalog = catalog if catalog is not None else default_catalog()
        achievement_rule_set = (
            achievement_rule_set
            if achievement_rule_set is not None
            else achievement_rules
        )
        card_rule_set = card_rule_set if card_rule_set is not None else card_rules

        self.boundary = GrantBoundary(self.catalog, save, notify=self._signal)
        self.sweeper = AchievementSweep(
            self.boundary, self.catalog, achievement_rule_set
        )
        self.selector = CardDropSelector(
            self.boundary,
            self.catalog,
            card_rule_set,
            triggers,
            welcome_card_id=welcome_card_id,
        )
        self._started = False
        self._report_missing_rules(achievement_rule_set, card_rule_set)

    @property
    def state(self) -> ProgressState:
        return self._state()

    def start(self) -> UnlockReport:
        '''Seed the card cache, subscribe, and catch up on anything earned offline.'''
        if self._started:
            return UnlockReport()
        self.selector.warm_up(self.state)
        self.bus.subscribe(STATE_CHANGED, self.handle_state_changed)
        self.bus.subscribe(VIEW_OPENED, self.handle_view_opened)
        self._started = True
        logger.info('Unlock engine started')
        granted = self.sweeper.sweep(SystemSignal(CHECK), self.state)
        return UnlockReport(achievements=granted)

    def stop(self) -> None:
        self.bus.unsubscribe(STATE_CHANGED, self.handle_state_changed)
        self.bus.unsubscribe(VIEW_OPENED, self.handle_view_opened)
        self._started = False

    def handle_state_changed(
        self,
        state: Optional[ProgressState] = None,
        event: Optional[DomainEvent] = None,
    ) -> UnlockReport:
        if state is None:
            state = self.state
        if event is None:
            event = SystemSignal(CHECK)
        if not self.selector.cache.seeded:
            logger.warning('Card cache used before warm-up; warming up now')
            self.selector.warm_up(state)

        with trace_span('engine.state_changed', {'event_type': event.type}):
            report = UnlockReport()
            report.achievements = self.sweeper.sweep(event, state)
            report.card = self.selector.select_grant(event, state, state.transactions)
        return report

    def handle_view_opened(self, view_id: str) -> UnlockReport:
        return UnlockReport(
            achievements=self.sweeper.sweep(ViewOpenedEvent(view_id), self.state)
        )

    def recheck(self) -> UnlockReport:
        return self.handle_state_changed(self.state, SystemSignal(CHECK))

    def force_grant(self, unlockable_id: str) -> bool:
        '''Grant without evaluating rules or triggers (debug/operator use).'''
        logger.info(f'Force-granting {unlockable_id}')
        return self.boundary.grant(unlockable_id, self.state, {'forced': True})

    def _signal(self, definition: UnlockableDefinition) -> None:
        self.bus.publish(UNLOCK_GRANTED, definition)

    def _report_missing_rules(
        self, achievement_rule_set: RuleRegistry, card_rule_set: RuleRegistry
    ) -> None:
        # Capstones get their rules from the sweep, built over this catalog
        missing = [
            d.id
            for d in self.catalog.achievements()
            if d.id not in achievement_rule_set.codes()
            and d.id not in self.sweeper.capstones
        ] + [d.id for d in self.catalog.cards() if d.id not in card_rule_set.codes()]
        if missing:
            message = (
                f'No rule for {len(missing)} unlockables, they can never unlock: '
                f'{", ".join(missing)}'
            )
            logger.warning(message)
            warnings.warn(message, MisconfigurationWarning, stacklevel=3)
