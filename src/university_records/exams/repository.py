from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ExaminationDetail


class ExamCatalog(Protocol):
    def add(self, exam: ExaminationDetail) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[ExaminationDetail]:
        """Exams in the order they were added."""

        raise NotImplementedError

    def first_matching(self, subject: str) -> Optional[ExaminationDetail]:
        """First exam whose subject equals ``subject`` ignoring case."""

        raise NotImplementedError
