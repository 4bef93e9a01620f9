from __future__ import annotations

from typing import Optional

from .model import ExaminationDetail


class InMemoryExamCatalog:
    def __init__(self) -> None:
        self._exams: list[ExaminationDetail] = []

    def add(self, exam: ExaminationDetail) -> None:
        self._exams.append(exam)

    def list_all(self) -> tuple[ExaminationDetail, ...]:
        return tuple(self._exams)

    def first_matching(self, subject: str) -> Optional[ExaminationDetail]:
        return next((e for e in self._exams if e.matches(subject)), None)

    def __len__(self) -> int:
        return len(self._exams)
