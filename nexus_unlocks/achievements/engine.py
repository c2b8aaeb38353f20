from __future__ import annotations

import logging
from typing import Optional

import nexus_unlocks.achievements  # noqa: F401
from nexus_unlocks.achievements.catalog import ALL_ACHIEVEMENTS
from nexus_unlocks.achievements.events import DomainEvent
from nexus_unlocks.achievements.registry import RuleRegistry, achievement_rules
from nexus_unlocks.achievements.rules.capstone import CapstoneRule, capstone_rules
from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.models.unlockable import Catalog, UnlockableDefinition
from nexus_unlocks.services.grants import GrantBoundary
from nexus_unlocks.utils.exceptions import RuleEvaluationError
from nexus_unlocks.utils.tracing import trace_span

logger = logging.getLogger(__name__)


class AchievementSweep:
    '''Grants every achievement the current event and state satisfy.

    Runs in two phases: the tier pass over regular achievements, then the
    capstone pass, which sees the granted set as the tier pass left it.
    Capstone rules come from this sweep's own catalog, not from the registry,
    so a custom catalog gets capstones over its own members.
    '''

    def __init__(
        self,
        boundary: GrantBoundary,
        catalog: Optional[Catalog] = None,
        rules: Optional[RuleRegistry] = None,
    ) -> None:
        self.boundary = boundary
        self.catalog = catalog if catalog is not None else Catalog(ALL_ACHIEVEMENTS)
        self.rules = rules if rules is not None else achievement_rules
        self.capstones: dict[str, CapstoneRule] = {
            rule.code: rule for rule in capstone_rules(self.catalog.achievements())
        }
        self.last_errors: list[RuleEvaluationError] = []

    def sweep(self, event: DomainEvent, state: ProgressState) -> list[str]:
        self.last_errors = []
        if not state.has_identity:
            # Default/empty state after a reset or before setup
            return []

        with trace_span('achievements.sweep', {'event_type': event.type}):
            definitions = self.catalog.achievements()
            granted: list[str] = []
            for phase, members in (
                ('tier', [d for d in definitions if not d.capstone]),
                ('capstone', [d for d in definitions if d.capstone]),
            ):
                with trace_span(f'achievements.{phase}_pass'):
                    granted.extend(self._run_pass(members, event, state))
            return granted

    def _run_pass(
        self,
        definitions: list[UnlockableDefinition],
        event: DomainEvent,
        state: ProgressState,
    ) -> list[str]:
        granted: list[str] = []
        for definition in definitions:
            if state.is_granted(definition.id):
                continue
            rule = self.capstones.get(definition.id) or self.rules.get(definition.id)
            if rule is None or not rule.handles(event):
                continue

            try:
                earned, metadata = rule.evaluate(event, state, state.transactions)
            except Exception as e:
                # A broken rule must not block the rest of the sweep
                error = RuleEvaluationError(definition.id, e)
                self.last_errors.append(error)
                logger.warning(str(error), exc_info=True)
                continue
            if not earned:
                continue

            if self.boundary.grant(definition.id, state, metadata):
                granted.append(definition.id)
        return granted
