from __future__ import annotations

import logging
from datetime import date
from typing import Mapping

from ..common.validators import require_in_range, require_non_negative
from ..core.exceptions import OutOfRangeError, SubjectNotFoundError
from ..people.capabilities import HasMarks
from .model import ExaminationDetail
from .repository import ExamCatalog

logger = logging.getLogger(__name__)


class ExamService:
    """Use case: keep the exam schedule and record marks against it."""

    def __init__(self, catalog: ExamCatalog):
        self._catalog = catalog

    def add_exam(self, subject: str, exam_date: date, max_marks: int) -> ExaminationDetail:
        require_non_negative(max_marks, "Max marks")

        exam = ExaminationDetail(subject=subject, date=exam_date, max_marks=int(max_marks))
        self._catalog.add(exam)
        logger.info("Exam added: %s on %s (max %s)", subject, exam_date, max_marks)
        return exam

    def view_exam_schedule(self) -> tuple[ExaminationDetail, ...]:
        return tuple(self._catalog.list_all())

    def enter_marks(self, student: HasMarks, subject: str, marks: int) -> None:
        """Record ``marks`` for ``subject``.

        The subject is looked up case-insensitively in the schedule (first
        match wins) but stored under the exact text supplied. Nothing is
        written when the subject is unknown or the marks are out of range.
        """

        exam = self._catalog.first_matching(subject)
        if not exam:
            logger.warning("Marks rejected, no exam for subject %r", subject)
            raise SubjectNotFoundError(f"No such subject in exam schedule: {subject}")

        try:
            require_in_range(marks, "Marks", 0, exam.max_marks)
        except OutOfRangeError:
            logger.warning("Marks rejected for %r: %s not in 0..%s", subject, marks, exam.max_marks)
            raise

        student.marks.record(subject, marks)

    def view_marks(self, student: HasMarks) -> Mapping[str, int]:
        return student.marks.view()
