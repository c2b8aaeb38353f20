from __future__ import annotations

from typing import Iterable, Iterator


class EligibilityCache:
    '''Card ids known to be satisfiable but not granted yet.

    Lives as long as the engine instance and is never persisted. It only
    separates novel candidates (first time satisfiable) from the backlog.
    '''

    def __init__(self) -> None:
        self._ids: set[str] = set()
        self.seeded = False

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def seed(self, card_ids: Iterable[str]) -> None:
        self._ids.update(card_ids)
        self.seeded = True

    def novel(self, card_ids: Iterable[str]) -> set[str]:
        return {c for c in card_ids if c not in self._ids}

    def absorb(self, card_ids: Iterable[str]) -> None:
        self._ids.update(card_ids)

    def discard(self, card_id: str) -> None:
        self._ids.discard(card_id)
