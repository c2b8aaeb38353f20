from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Iterable, Iterator, Mapping


class Rarity(IntEnum):
    '''Ordinal rarity, only ever used to break ties between candidates.'''

    COMMON = 1
    UNCOMMON = 2
    RARE = 3
    EPIC = 4
    LEGENDARY = 5

    @property
    def label(self) -> str:
        return self.name.capitalize()


class UnlockKind(str, Enum):
    ACHIEVEMENT = 'achievement'
    CARD = 'card'


@dataclass(frozen=True)
class UnlockableDefinition:
    id: str
    name: str
    description: str
    kind: UnlockKind
    category: str
    rarity: Rarity = Rarity.COMMON
    reward: Mapping[str, Any] = field(default_factory=dict)
    capstone: bool = False

    def as_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'kind': self.kind.value,
            'category': self.category,
            'rarity': self.rarity.label,
            'reward': dict(self.reward),
            'capstone': self.capstone,
        }


class Catalog:
    '''Ordered, immutable collection of unlockable definitions.

    Insertion order is meaningful: it is the deterministic secondary key when
    two candidates share a rarity.
    '''

    def __init__(self, definitions: Iterable[UnlockableDefinition]) -> None:
        self._by_id: dict[str, UnlockableDefinition] = {}
        self._order: dict[str, int] = {}
        for definition in definitions:
            if definition.id in self._by_id:
                raise ValueError(f'Duplicate unlockable id: {definition.id}')
            self._order[definition.id] = len(self._by_id)
            self._by_id[definition.id] = definition

    def __contains__(self, unlockable_id: object) -> bool:
        return unlockable_id in self._by_id

    def __iter__(self) -> Iterator[UnlockableDefinition]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def get(self, unlockable_id: str) -> UnlockableDefinition | None:
        return self._by_id.get(unlockable_id)

    def __getitem__(self, unlockable_id: str) -> UnlockableDefinition:
        return self._by_id[unlockable_id]

    def position(self, unlockable_id: str) -> int:
        return self._order[unlockable_id]

    def of_kind(self, kind: UnlockKind) -> list[UnlockableDefinition]:
        return [d for d in self._by_id.values() if d.kind is kind]

    def achievements(self) -> list[UnlockableDefinition]:
        return self.of_kind(UnlockKind.ACHIEVEMENT)

    def cards(self) -> list[UnlockableDefinition]:
        return self.of_kind(UnlockKind.CARD)

    def in_category(self, category: str) -> list[UnlockableDefinition]:
        return [d for d in self._by_id.values() if d.category == category]

    def merged(self, other: Iterable[UnlockableDefinition]) -> 'Catalog':
        return Catalog([*self, *other])
