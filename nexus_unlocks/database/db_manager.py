import logging
import os
from functools import wraps
from typing import Any, Callable, Iterable, List, Optional, TypeVar

import psycopg
from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

T = TypeVar('T')

logger = logging.getLogger(__name__)


def require_connection(func: Callable) -> Callable:
    '''Decorator to ensure DBManager is used within a context manager.'''

    @wraps(func)
    def wrapper(self: 'DBManager', *args, **kwargs) -> Any:
        if self._conn is None:
            raise RuntimeError(
                'DBManager is not in a context. Use "with DBManager() as db:"'
            )
        return func(self, *args, **kwargs)

    return wrapper


def _database_url(db_url: Optional[str] = None) -> str:
    conninfo = db_url or os.getenv('DATABASE_URL')
    if not conninfo:
        raise RuntimeError('DATABASE_URL is not set. Progress is stored in Postgres.')
    return conninfo


class DBManager:
    '''Postgres connection scoped to a ``with`` block.

    Commits when the block exits cleanly, rolls back otherwise.
    '''

    # Shared pool across the process
    _pool: Optional[ConnectionPool] = None

    def __init__(self) -> None:
        self._conn: Any | None = None
        self._from_pool: bool = False

    @classmethod
    def init_pool(
        cls, db_url: Optional[str] = None, min_size: int = 1, max_size: int = 5
    ) -> None:
        if cls._pool is not None:
            return
        cls._pool = ConnectionPool(
            conninfo=_database_url(db_url),
            min_size=min_size,
            max_size=max_size,
            kwargs={'row_factory': dict_row},
        )
        logger.info('Initialized Postgres connection pool')

    @classmethod
    def close_pool(cls) -> None:
        if cls._pool is not None:
            try:
                cls._pool.close()
            finally:
                cls._pool = None

    def _connect(self) -> None:
        if self.__class__._pool is not None:
            self._conn = self.__class__._pool.getconn()
            self._from_pool = True
        else:
            self._conn = psycopg.connect(_database_url(), row_factory=dict_row)
            self._from_pool = False

    def _release(self) -> None:
        conn, self._conn = self._conn, None
        if conn is None:
            return
        if self._from_pool and self.__class__._pool is not None:
            self.__class__._pool.putconn(conn)
        else:
            conn.close()
        self._from_pool = False

    def __enter__(self) -> 'DBManager':
        self._connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._conn is None:
            return
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._release()

    def _run_with_retry(self, fn: Callable[[], T]) -> T:
        '''Run DB exec, reconnect on OperationalError/InterfaceError, retry once'''
        try:
            return fn()
        except (psycopg.OperationalError, psycopg.InterfaceError) as e:
            logger.warning(
                f'DB operation failed due to connection issue: {e}. '
                f'Reconnecting and retrying once...'
            )
            self._release()
            self._connect()
            return fn()

    def _select(self, query: str, params: Iterable[Any] | None) -> List[dict[str, Any]]:
        assert self._conn is not None
        with self._conn.cursor() as cur:
            cur.execute(query, tuple(params or ()))
            return cur.fetchall() if cur.description else []

    @require_connection
    def execute(self, query: str, params: Iterable[Any] | None = None) -> None:
        '''Execute a single SQL statement.'''

        def _do() -> None:
            assert self._conn is not None
            with self._conn.cursor() as cur:
                cur.execute(query, tuple(params or ()))

        try:
            self._run_with_retry(_do)
        except Exception as e:
            logger.error(f'Postgres execute() error: {e}\nQuery: {query}')
            raise

    @require_connection
    def fetchall(
        self, query: str, params: Iterable[Any] | None = None
    ) -> List[dict[str, Any]]:
        '''Return all rows as a list of dictionaries.'''
        try:
            return self._run_with_retry(lambda: self._select(query, params))
        except Exception as e:
            logger.error(f'Postgres fetchall() error: {e}\nQuery: {query}')
            raise

    @require_connection
    def fetchone(
        self, query: str, params: Iterable[Any] | None = None
    ) -> Optional[dict[str, Any]]:
        '''Return a single row as a dictionary, or None if no result.'''
        rows = self.fetchall(query, params)
        return rows[0] if rows else None
