from __future__ import annotations

from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional


class AttendanceLedger:
    """Per-person attendance: one presence flag per calendar date.

    Marking a date again replaces the earlier flag. Distinct dates keep the
    order in which they were first marked.
    """

    def __init__(self) -> None:
        self._entries: dict[date, bool] = {}

    def mark(self, on: date, present: bool) -> None:
        self._entries[on] = bool(present)

    def get(self, on: date) -> Optional[bool]:
        return self._entries.get(on)

    def view(self) -> Mapping[date, bool]:
        return MappingProxyType(dict(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, on: object) -> bool:
        return on in self._entries
