from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Union

from nexus_unlocks.models.progress import (
    Transaction,
    TransactionKind,
    TransactionStatus,
)

EventType = Literal['transaction', 'system_signal', 'view_opened']
SignalKind = Literal['onboarding', 'check']

ONBOARDING: SignalKind = 'onboarding'
CHECK: SignalKind = 'check'


@dataclass(frozen=True)
class TransactionEvent:
    kind: TransactionKind
    category: str
    amount: float
    occurred_at: date | datetime
    status: TransactionStatus = 'paid'
    description: str = ''
    transaction_id: str = ''

    @property
    def type(self) -> EventType:
        return 'transaction'

    @property
    def day(self) -> date:
        if isinstance(self.occurred_at, datetime):
            return self.occurred_at.date()
        return self.occurred_at

    @property
    def has_time(self) -> bool:
        return isinstance(self.occurred_at, datetime)

    @property
    def is_paid(self) -> bool:
        return self.status == 'paid'

    @classmethod
    def from_transaction(cls, tx: Transaction) -> 'TransactionEvent':
        return cls(
            kind=tx.kind,
            category=tx.category,
            amount=tx.amount,
            occurred_at=tx.occurred_at,
            status=tx.status,
            description=tx.description,
            transaction_id=tx.id,
        )


@dataclass(frozen=True)
class SystemSignal:
    '''Lets state-only rules run without a real transaction.'''

    signal: SignalKind = CHECK

    @property
    def type(self) -> EventType:
        return 'system_signal'


@dataclass(frozen=True)
class ViewOpenedEvent:
    view_id: str

    @property
    def type(self) -> EventType:
        return 'view_opened'


DomainEvent = Union[TransactionEvent, SystemSignal, ViewOpenedEvent]
