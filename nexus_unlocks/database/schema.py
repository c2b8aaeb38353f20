import logging

from nexus_unlocks.database.db_manager import DBManager

logger = logging.getLogger(__name__)

PROGRESS_TABLE = 'progress_states'

SCHEMA = f'''
CREATE TABLE IF NOT EXISTS {PROGRESS_TABLE} (
    user_id TEXT PRIMARY KEY,
    state JSONB NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
'''


def ensure_schema(db: DBManager) -> None:
    db.execute(SCHEMA)
    logger.info(f'Ensured table {PROGRESS_TABLE}')
