from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from nexus_unlocks.models.progress import ProgressState
from nexus_unlocks.models.unlockable import Catalog, UnlockableDefinition
from nexus_unlocks.utils.exceptions import PersistenceError
from nexus_unlocks.utils.tracing import note_grant

logger = logging.getLogger(__name__)

SaveFn = Callable[[ProgressState], None]
NotifyFn = Callable[[UnlockableDefinition], None]


class GrantBoundary:
    '''Single place where anything becomes granted.

    A grant is tentative until ``save`` returns: if saving raises, the
    in-memory insertion is rolled back and ``PersistenceError`` is raised, and
    no grant signal is emitted.
    '''

    def __init__(
        self,
        catalog: Catalog,
        save: SaveFn,
        notify: Optional[NotifyFn] = None,
    ) -> None:
        self.catalog = catalog
        self.save = save
        self.notify = notify

    def grant(
        self,
        unlockable_id: str,
        state: ProgressState,
        metadata: dict[str, Any] | None = None,
    ) -> bool:
        definition = self.catalog.get(unlockable_id)
        if definition is None:
            raise KeyError(f'Unknown unlockable: {unlockable_id}')

        if state.is_granted(unlockable_id):
            return False

        state.record_grant(definition, metadata)
        try:
            self.save(state)
        except Exception as e:
            state.discard_grant(definition)
            logger.error(f'Failed to persist grant of {unlockable_id}: {e}')
            raise PersistenceError(unlockable_id) from e

        logger.info(
            f'Unlocked {definition.kind.value} {definition.id} ({definition.name})'
        )
        note_grant(definition.id)
        if self.notify is not None:
            try:
                self.notify(definition)
            except Exception:
                # Already persisted; the listener owns its own failures
                logger.exception(f'Grant signal for {unlockable_id} failed')
        return True
