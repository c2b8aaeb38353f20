import pytest

from nexus_unlocks.database import db_manager
from nexus_unlocks.database.schema import PROGRESS_TABLE, ensure_schema


class _Cursor:
    def __init__(self, conn):
        self.conn = conn
        self.description = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, query, params):
        self.conn.queries.append((query, params))
        if self.conn.rows is not None:
            self.description = [('state',)]

    def fetchall(self):
        return self.conn.rows


class _Conn:
    def __init__(self, rows=None):
        self.rows = rows
        self.queries = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self):
        return _Cursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


@pytest.fixture()
def conn(monkeypatch):
    fake = _Conn()
    monkeypatch.setenv('DATABASE_URL', 'postgresql://localhost/nexus')
    monkeypatch.setattr(db_manager.psycopg, 'connect', lambda *a, **k: fake)
    return fake


def test_queries_require_a_context():
    with pytest.raises(RuntimeError):
        db_manager.DBManager().execute('SELECT 1')


def test_missing_database_url_is_reported(monkeypatch):
    monkeypatch.delenv('DATABASE_URL', raising=False)

    with pytest.raises(RuntimeError, match='DATABASE_URL'):
        with db_manager.DBManager():
            pass


def test_clean_exit_commits_and_closes(conn):
    with db_manager.DBManager() as db:
        ensure_schema(db)

    assert conn.committed and conn.closed
    assert not conn.rolled_back
    assert PROGRESS_TABLE in conn.queries[0][0]


def test_error_rolls_back(conn):
    with pytest.raises(ValueError):
        with db_manager.DBManager() as db:
            db.execute('SELECT 1')
            raise ValueError('boom')

    assert conn.rolled_back and not conn.committed


def test_fetchone_returns_first_row_or_none(conn):
    with db_manager.DBManager() as db:
        assert db.fetchone('SELECT state FROM t') is None
        conn.rows = [{'state': {'a': 1}}, {'state': {'a': 2}}]
        assert db.fetchone('SELECT state FROM t', ('u',)) == {'state': {'a': 1}}

    assert conn.queries[-1] == ('SELECT state FROM t', ('u',))
