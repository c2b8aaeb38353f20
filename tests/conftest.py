from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pytest

from nexus_unlocks.achievements.registry import RuleRegistry
from nexus_unlocks.models.progress import ProgressState, Transaction
from nexus_unlocks.models.unlockable import (
    Catalog,
    Rarity,
    UnlockableDefinition,
    UnlockKind,
)
from nexus_unlocks.services.grants import GrantBoundary


@dataclass
class FakeDB:
    fetchone_results: list[Any] = field(default_factory=list)
    fetchall_results: list[Any] = field(default_factory=list)
    executed: list[tuple[str, tuple[Any, ...]]] = field(default_factory=list)
    last_query: str | None = None
    last_params: tuple[Any, ...] | None = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def fetchone(self, query: str, params=None):
        self.last_query = query
        self.last_params = tuple(params or ())
        if self.fetchone_results:
            return self.fetchone_results.pop(0)

    def fetchall(self, query: str, params=None):
        self.last_query = query
        self.last_params = tuple(params or ())
        if self.fetchall_results:
            return self.fetchall_results.pop(0)
        return []

    def execute(self, query: str, params=None) -> None:
        self.executed.append((query, tuple(params or ())))


class FakeDBManager:
    def __init__(self, db: FakeDB):
        self._db = db

    def __call__(self):
        return self._db


@pytest.fixture()
def fake_db() -> FakeDB:
    return FakeDB()


@pytest.fixture()
def patch_db(monkeypatch, fake_db):
    def _patch(target_module) -> FakeDB:
        monkeypatch.setattr(target_module, 'DBManager', FakeDBManager(fake_db))
        return fake_db

    return _patch


class SaveRecorder:
    '''Stands in for the host's save operation.'''

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.fail = False

    def __call__(self, state: ProgressState) -> None:
        if self.fail:
            raise OSError('disk full')
        self.calls.append(sorted([*state.achievements, *state.collected_cards]))


@pytest.fixture()
def saver() -> SaveRecorder:
    return SaveRecorder()


def _make_tx(
    amount: float,
    kind: str = 'expense',
    category: str = 'Outros',
    occurred_at: date = date(2024, 3, 10),
    status: str = 'paid',
    description: str = '',
    id: str | None = None,
) -> Transaction:
    return Transaction(
        id=id or f'tx-{amount}-{category}-{occurred_at}',
        description=description,
        amount=amount,
        occurred_at=occurred_at,
        category=category,
        kind=kind,  # type: ignore[arg-type]
        status=status,  # type: ignore[arg-type]
    )


def _card_def(card_id: str, rarity: Rarity = Rarity.COMMON) -> UnlockableDefinition:
    return UnlockableDefinition(
        id=card_id,
        name=card_id,
        description='',
        kind=UnlockKind.CARD,
        category='Test Series',
        rarity=rarity,
    )


def _achievement_def(
    ach_id: str, category: str = 'Test', capstone: bool = False
) -> UnlockableDefinition:
    return UnlockableDefinition(
        id=ach_id,
        name=ach_id,
        description='',
        kind=UnlockKind.ACHIEVEMENT,
        category=category,
        capstone=capstone,
    )


@pytest.fixture()
def named_state() -> ProgressState:
    return ProgressState(user_name='Ana', onboarding_complete=True)


@pytest.fixture()
def rules() -> RuleRegistry:
    return RuleRegistry()


@pytest.fixture()
def boundary_for(saver):
    def _build(catalog: Catalog, notify=None) -> GrantBoundary:
        return GrantBoundary(catalog, saver, notify=notify)

    return _build


@pytest.fixture()
def make_tx():
    return _make_tx


@pytest.fixture()
def card_def():
    return _card_def


@pytest.fixture()
def achievement_def():
    return _achievement_def
