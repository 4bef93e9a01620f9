from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from .attendance.service import AttendanceService
from .exams.model import ExaminationDetail
from .exams.service import ExamService
from .fees.model import Payment
from .fees.service import FeeService
from .people.capabilities import HasAttendance
from .people.model import Person, Student, Teacher
from .people.service import PeopleService, StudentUpdate, TeacherUpdate


class University:
    """Directory facade: owns every person record and the exam schedule.

    Lookups by id are soft (``None``/``False`` when nothing matches) while
    validation failures raise :class:`~university_records.core.exceptions.DomainError`
    subclasses. Use :func:`university_records.container.build_container` to
    get a wired instance.
    """

    def __init__(
        self,
        name: str,
        *,
        people: PeopleService,
        attendance: AttendanceService,
        exams: ExamService,
        fees: FeeService,
    ):
        self.name = name
        self._people = people
        self._attendance = attendance
        self._exams = exams
        self._fees = fees

    # people

    def register_student(self, name: str, email: Optional[str] = None) -> Student:
        return self._people.register_student(name, email)

    def register_teacher(self, name: str, email: str, department: str) -> Teacher:
        return self._people.register_teacher(name, email, department)

    def update_student(self, student_id: int, update: StudentUpdate) -> bool:
        return self._people.update_student(student_id, update)

    def update_teacher(self, teacher_id: int, update: TeacherUpdate) -> bool:
        return self._people.update_teacher(teacher_id, update)

    def find_student(self, student_id: int) -> Optional[Student]:
        return self._people.find_student(student_id)

    def find_teacher(self, teacher_id: int) -> Optional[Teacher]:
        return self._people.find_teacher(teacher_id)

    def find_person(self, person_id: int) -> Optional[Person]:
        return self._people.find_person(person_id)

    def list_students(self) -> list[Student]:
        return self._people.list_students()

    def list_teachers(self) -> list[Teacher]:
        return self._people.list_teachers()

    # attendance

    def mark_attendance(self, person: HasAttendance, present: bool, *, on: Optional[date] = None) -> None:
        self._attendance.mark_attendance(person, present, on=on)

    def view_attendance(self, person: HasAttendance) -> Mapping[date, bool]:
        return self._attendance.view_attendance(person)

    # exams

    def add_exam(self, subject: str, exam_date: date, max_marks: int) -> ExaminationDetail:
        return self._exams.add_exam(subject, exam_date, max_marks)

    def view_exam_schedule(self) -> tuple[ExaminationDetail, ...]:
        return self._exams.view_exam_schedule()

    def enter_marks(self, student: Student, subject: str, marks: int) -> None:
        self._exams.enter_marks(student, subject, marks)

    def view_marks(self, student: Student) -> Mapping[str, int]:
        return self._exams.view_marks(student)

    # fees

    def register_payment(self, student: Student, amount: float) -> Payment:
        return self._fees.register_payment(student, amount)

    def view_payments(self, student: Student) -> tuple[Payment, ...]:
        return self._fees.view_payments(student)

    def total_paid(self, student: Student) -> float:
        return self._fees.total_paid(student)

    @staticmethod
    def person_card(person: Person) -> str:
        lines = ["---- Person Card ----", str(person), *person.card_details()]
        lines.append("---------------------")
        return "\n".join(lines)
