from __future__ import annotations

from typing import Optional, Protocol, Sequence, TypeVar

from .model import Person

P = TypeVar("P", bound=Person)


class PersonRepository(Protocol[P]):
    """Repository interface for one kind of person record.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, person_id: int) -> Optional[P]:
        raise NotImplementedError

    def add(self, person: P) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[P]:
        """Records in registration order."""

        raise NotImplementedError
