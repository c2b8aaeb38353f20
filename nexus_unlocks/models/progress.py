from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any, Literal, Optional

import pendulum

from nexus_unlocks.models.unlockable import UnlockableDefinition, UnlockKind

TransactionKind = Literal['income', 'expense']
TransactionStatus = Literal['pending', 'paid']


def _parse_date(value: Any) -> date | datetime | None:
    if value is None or value == '':
        return None
    if isinstance(value, (date, datetime)):
        return value
    return pendulum.parse(str(value), exact=True, tz=None)


def _format_date(value: date | datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True)
class Transaction:
    id: str
    description: str
    amount: float
    occurred_at: date | datetime
    category: str
    kind: TransactionKind
    status: TransactionStatus = 'paid'
    card_id: Optional[str] = None
    payment_month: Optional[str] = None  # YYYY-MM

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

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data['occurred_at'] = _format_date(self.occurred_at)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Transaction':
        return cls(
            id=str(data['id']),
            description=data.get('description', ''),
            amount=float(data.get('amount', 0)),
            occurred_at=_parse_date(data['occurred_at']),  # type: ignore[arg-type]
            category=data.get('category', ''),
            kind=data.get('kind', 'expense'),
            status=data.get('status', 'paid'),
            card_id=data.get('card_id'),
            payment_month=data.get('payment_month'),
        )


@dataclass
class Category:
    id: str
    name: str


@dataclass
class Goal:
    id: str
    name: str
    goal_type: Literal['Saving', 'Debt']
    target_amount: float
    current_amount: float = 0.0

    @property
    def is_complete(self) -> bool:
        return self.current_amount >= self.target_amount


@dataclass
class Budget:
    category_id: str
    amount: float


@dataclass
class CreditCard:
    id: str
    name: str
    limit: float = 0.0


@dataclass
class EmergencyFund:
    current_balance: float = 0.0
    target_amount: float = 0.0
    is_enabled: bool = False


@dataclass
class GrantRecord:
    granted_at: datetime
    metadata: dict[str, Any] = field(default_factory=dict)


DEFAULT_CATEGORIES = [
    Category('cat_1', 'Moradia'),
    Category('cat_2', 'Alimentação'),
    Category('cat_3', 'Transporte'),
    Category('cat_4', 'Saúde'),
    Category('cat_5', 'Lazer'),
    Category('cat_6', 'Assinaturas'),
    Category('cat_7', 'Educação'),
    Category('cat_8', 'Investimentos'),
    Category('cat_9', 'Outros'),
    Category('cat_income_1', 'Salário'),
    Category('cat_income_2', 'Renda Extra'),
]


@dataclass
class ProgressState:
    '''Everything the rules read, plus the granted sets.

    Owned by the host application; the engine reads it and only ever adds to
    ``achievements`` and ``collected_cards``.
    '''

    user_name: str = ''
    onboarding_complete: bool = False
    transactions: list[Transaction] = field(default_factory=list)
    categories: list[Category] = field(
        default_factory=lambda: [Category(c.id, c.name) for c in DEFAULT_CATEGORIES]
    )
    goals: list[Goal] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    credit_cards: list[CreditCard] = field(default_factory=list)
    emergency_fund: EmergencyFund = field(default_factory=EmergencyFund)
    nexus_score: int = 0
    current_streak: int = 0
    report_view_count: int = 0
    full_screen_usage_count: int = 0
    first_access_date: Optional[date] = None
    achievements: dict[str, GrantRecord] = field(default_factory=dict)
    collected_cards: list[str] = field(default_factory=list)

    @property
    def has_identity(self) -> bool:
        return bool(self.user_name and self.user_name.strip())

    def paid_transactions(self) -> list[Transaction]:
        return [t for t in self.transactions if t.is_paid]

    def is_granted(self, unlockable_id: str) -> bool:
        return (
            unlockable_id in self.achievements
            or unlockable_id in self.collected_cards
        )

    def record_grant(
        self,
        definition: UnlockableDefinition,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        if definition.kind is UnlockKind.ACHIEVEMENT:
            self.achievements[definition.id] = GrantRecord(
                granted_at=pendulum.now(), metadata=dict(metadata or {})
            )
        else:
            self.collected_cards.append(definition.id)

    def discard_grant(self, definition: UnlockableDefinition) -> None:
        '''Undo a tentative grant whose persistence failed.'''
        if definition.kind is UnlockKind.ACHIEVEMENT:
            self.achievements.pop(definition.id, None)
        elif definition.id in self.collected_cards:
            self.collected_cards.remove(definition.id)

    def to_dict(self) -> dict[str, Any]:
        return {
            'user_name': self.user_name,
            'onboarding_complete': self.onboarding_complete,
            'transactions': [t.to_dict() for t in self.transactions],
            'categories': [asdict(c) for c in self.categories],
            'goals': [asdict(g) for g in self.goals],
            'budgets': [asdict(b) for b in self.budgets],
            'credit_cards': [asdict(c) for c in self.credit_cards],
            'emergency_fund': asdict(self.emergency_fund),
            'nexus_score': self.nexus_score,
            'current_streak': self.current_streak,
            'report_view_count': self.report_view_count,
            'full_screen_usage_count': self.full_screen_usage_count,
            'first_access_date': _format_date(self.first_access_date),
            'achievements': {
                ach_id: {
                    'granted_at': _format_date(record.granted_at),
                    'metadata': record.metadata,
                }
                for ach_id, record in self.achievements.items()
            },
            'collected_cards': list(self.collected_cards),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ProgressState':
        state = cls(
            user_name=data.get('user_name') or '',
            onboarding_complete=bool(data.get('onboarding_complete')),
            transactions=[
                Transaction.from_dict(t) for t in data.get('transactions') or []
            ],
            goals=[Goal(**g) for g in data.get('goals') or []],
            budgets=[Budget(**b) for b in data.get('budgets') or []],
            credit_cards=[CreditCard(**c) for c in data.get('credit_cards') or []],
            emergency_fund=EmergencyFund(**(data.get('emergency_fund') or {})),
            nexus_score=int(data.get('nexus_score') or 0),
            current_streak=int(data.get('current_streak') or 0),
            report_view_count=int(data.get('report_view_count') or 0),
            full_screen_usage_count=int(data.get('full_screen_usage_count') or 0),
            first_access_date=_parse_date(data.get('first_access_date')),
            achievements={
                ach_id: GrantRecord(
                    granted_at=_parse_date(record.get('granted_at'))
                    or pendulum.now(),
                    metadata=record.get('metadata') or {},
                )
                for ach_id, record in (data.get('achievements') or {}).items()
            },
            collected_cards=list(data.get('collected_cards') or []),
        )
        if data.get('categories'):
            state.categories = [Category(**c) for c in data['categories']]
        return state
