from __future__ import annotations

from typing import Generic, Optional

from ..core.exceptions import ValidationError
from .repository import P


class InMemoryPersonRepository(Generic[P]):
    """Dict-backed store keyed by person id; keeps registration order."""

    def __init__(self) -> None:
        self._by_id: dict[int, P] = {}

    def get_by_id(self, person_id: int) -> Optional[P]:
        return self._by_id.get(person_id)

    def add(self, person: P) -> None:
        if person.id in self._by_id:
            raise ValidationError(f"Duplicate person id {person.id}")
        self._by_id[person.id] = person

    def list_all(self) -> list[P]:
        return list(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)
