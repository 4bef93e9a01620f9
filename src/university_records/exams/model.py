from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class ExaminationDetail:
    """A scheduled exam. Subjects are not unique across the catalog."""

    subject: str
    date: date
    max_marks: int

    def matches(self, subject: str) -> bool:
        return self.subject.casefold() == subject.casefold()


class MarksLedger:
    """Per-student marks keyed by the subject text exactly as entered."""

    def __init__(self) -> None:
        self._marks: dict[str, int] = {}

    def record(self, subject: str, marks: int) -> None:
        self._marks[subject] = int(marks)

    def get(self, subject: str) -> Optional[int]:
        return self._marks.get(subject)

    def view(self) -> Mapping[str, int]:
        return MappingProxyType(dict(self._marks))

    def __len__(self) -> int:
        return len(self._marks)
