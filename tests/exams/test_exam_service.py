from __future__ import annotations

from datetime import date

import pytest

from university_records.core.exceptions import NotFoundError, OutOfRangeError, SubjectNotFoundError, ValidationError
from university_records.exams.memory_repository import InMemoryExamCatalog
from university_records.exams.model import ExaminationDetail
from university_records.exams.service import ExamService
from university_records.people.capabilities import HasMarks
from university_records.people.model import Student, Teacher


@pytest.fixture
def service() -> ExamService:
    svc = ExamService(InMemoryExamCatalog())
    svc.add_exam("Math", date(2024, 5, 3), 100)
    return svc


@pytest.fixture
def student() -> Student:
    return Student(1001, "Jane Doe", "jane.doe@student.univ.edu")


def test_schedule_keeps_insertion_order_and_duplicates(service):
    service.add_exam("Physics", date(2024, 5, 1), 50)
    service.add_exam("Math", date(2024, 6, 1), 20)

    schedule = service.view_exam_schedule()

    assert [e.subject for e in schedule] == ["Math", "Physics", "Math"]
    assert schedule[1] == ExaminationDetail("Physics", date(2024, 5, 1), 50)
    assert isinstance(schedule, tuple)


def test_exam_is_immutable(service):
    exam = service.view_exam_schedule()[0]

    with pytest.raises(AttributeError):
        exam.max_marks = 5  # type: ignore[misc]


def test_negative_max_marks_rejected():
    svc = ExamService(InMemoryExamCatalog())

    with pytest.raises(OutOfRangeError):
        svc.add_exam("Art", date(2024, 5, 1), -1)
    assert svc.view_exam_schedule() == ()


def test_unknown_subject_leaves_marks_unchanged(service, student):
    service.enter_marks(student, "Math", 70)

    with pytest.raises(SubjectNotFoundError):
        service.enter_marks(student, "Chemistry", 10)

    assert dict(service.view_marks(student)) == {"Math": 70}


def test_subject_not_found_is_a_not_found_error(service, student):
    with pytest.raises(NotFoundError):
        service.enter_marks(student, "History", 1)


@pytest.mark.parametrize("marks", [101, -1])
def test_marks_out_of_range(service, student, marks):
    with pytest.raises(OutOfRangeError):
        service.enter_marks(student, "Math", marks)

    assert dict(service.view_marks(student)) == {}


def test_marks_bounds_are_inclusive(service, student):
    service.enter_marks(student, "Math", 100)
    assert service.view_marks(student)["Math"] == 100

    service.enter_marks(student, "Math", 0)
    assert service.view_marks(student)["Math"] == 0


def test_subject_match_ignores_case_but_key_keeps_input(service, student):
    service.enter_marks(student, "mATH", 55)

    assert dict(service.view_marks(student)) == {"mATH": 55}


def test_first_matching_exam_decides_max(student):
    svc = ExamService(InMemoryExamCatalog())
    svc.add_exam("Math", date(2024, 5, 3), 20)
    svc.add_exam("math", date(2024, 6, 3), 100)

    with pytest.raises(OutOfRangeError):
        svc.enter_marks(student, "Math", 50)


def test_out_of_range_is_a_validation_error(service, student):
    with pytest.raises(ValidationError):
        service.enter_marks(student, "Math", 1000)


def test_marks_view_is_read_only(service, student):
    service.enter_marks(student, "Math", 70)

    with pytest.raises(TypeError):
        service.view_marks(student)["Math"] = 1  # type: ignore[index]


def test_only_students_carry_marks():
    assert isinstance(Student(1, "a", "a"), HasMarks)
    assert not isinstance(Teacher(2, "b", "b", "Physics"), HasMarks)
