from __future__ import annotations

from datetime import date

import pytest

from university_records.attendance.model import AttendanceLedger
from university_records.attendance.service import AttendanceService
from university_records.core.exceptions import InvalidArgumentError
from university_records.people.capabilities import HasAttendance
from university_records.people.model import Student, Teacher


class Visitor:
    """A person-like record without an attendance ledger."""

    id = 1
    name = "Guest"


@pytest.fixture
def service(fixed_today) -> AttendanceService:
    return AttendanceService(today=lambda: fixed_today)


def test_mark_defaults_to_today(service, fixed_today):
    student = Student(1001, "Jane", "j@x.edu")

    service.mark_attendance(student, True)

    assert dict(service.view_attendance(student)) == {fixed_today: True}


def test_same_date_last_write_wins(service):
    teacher = Teacher(1002, "A. Smith", "a@x.edu", "Physics")
    day = date(2024, 4, 2)

    service.mark_attendance(teacher, True, on=day)
    service.mark_attendance(teacher, False, on=day)

    entries = service.view_attendance(teacher)
    assert len(entries) == 1
    assert entries[day] is False


def test_distinct_dates_keep_first_marked_order(service):
    student = Student(1001, "Jane", "j@x.edu")
    days = [date(2024, 4, 3), date(2024, 4, 1), date(2024, 4, 2)]
    for d in days:
        service.mark_attendance(student, True, on=d)
    service.mark_attendance(student, False, on=days[0])

    assert list(service.view_attendance(student)) == days


def test_unsupported_person_type_is_rejected(service):
    with pytest.raises(InvalidArgumentError):
        service.mark_attendance(Visitor(), True)


def test_view_for_person_without_ledger_is_empty(service):
    assert dict(service.view_attendance(Visitor())) == {}


def test_view_is_read_only_snapshot(service):
    student = Student(1001, "Jane", "j@x.edu")
    service.mark_attendance(student, True, on=date(2024, 4, 1))

    view = service.view_attendance(student)
    with pytest.raises(TypeError):
        view[date(2024, 4, 2)] = True  # type: ignore[index]

    service.mark_attendance(student, True, on=date(2024, 4, 2))
    assert len(view) == 1


def test_capabilities():
    assert isinstance(Student(1, "a", "a"), HasAttendance)
    assert isinstance(Teacher(2, "b", "b", "d"), HasAttendance)
    assert not isinstance(Visitor(), HasAttendance)


def test_ledger_coerces_flag():
    ledger = AttendanceLedger()
    ledger.mark(date(2024, 1, 1), 1)  # type: ignore[arg-type]

    assert ledger.get(date(2024, 1, 1)) is True
    assert date(2024, 1, 1) in ledger
    assert ledger.get(date(2024, 1, 2)) is None
