from __future__ import annotations

import logging

from psycopg.types.json import Json

from nexus_unlocks.database.db_manager import DBManager
from nexus_unlocks.database.schema import PROGRESS_TABLE
from nexus_unlocks.models.progress import ProgressState

logger = logging.getLogger(__name__)


class ProgressStore:
    '''Loads and saves one user's progress document.

    ``save`` is what the host hands to the engine as its persistence
    operation; it raises on any database failure.
    '''

    def __init__(self, user_id: str) -> None:
        self.user_id = user_id

    def load(self) -> ProgressState:
        with DBManager() as db:
            row = db.fetchone(
                f'SELECT state FROM {PROGRESS_TABLE} WHERE user_id = %s',
                (self.user_id,),
            )
        if not row or not row.get('state'):
            logger.info(f'No stored progress for {self.user_id}, starting fresh')
            return ProgressState()
        return ProgressState.from_dict(row['state'])

    def save(self, state: ProgressState) -> None:
        with DBManager() as db:
            db.execute(
                f'''
                INSERT INTO {PROGRESS_TABLE} (user_id, state, updated_at)
                VALUES (%s, %s, now())
                ON CONFLICT (user_id)
                DO UPDATE SET state = EXCLUDED.state, updated_at = now()
                ''',
                (self.user_id, Json(state.to_dict())),
            )
