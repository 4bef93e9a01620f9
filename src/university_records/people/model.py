from __future__ import annotations

from typing import ClassVar

from ..attendance.model import AttendanceLedger
from ..core.enums import Role
from ..exams.model import MarksLedger
from ..fees.model import PaymentLedger


class Person:
    """Domain entity shared by every registered person.

    ``id`` is assigned once at registration and is read-only afterwards;
    ``name`` and ``email`` may be changed through the directory updates.
    """

    role: ClassVar[Role]

    def __init__(self, person_id: int, name: str, email: str):
        self._id = int(person_id)
        self.name = name
        self.email = email

    @property
    def id(self) -> int:
        return self._id

    def __str__(self) -> str:
        return f"[{self.role.value}] ID={self.id}, Name={self.name}, Email={self.email}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, name={self.name!r}, email={self.email!r})"

    def card_details(self) -> list[str]:
        """Extra lines shown under the summary on a person card."""
        return []


class Student(Person):
    role = Role.STUDENT

    def __init__(self, person_id: int, name: str, email: str):
        super().__init__(person_id, name, email)
        self.attendance = AttendanceLedger()
        self.marks = MarksLedger()
        self.payments = PaymentLedger()


class Teacher(Person):
    role = Role.TEACHER

    def __init__(self, person_id: int, name: str, email: str, department: str):
        super().__init__(person_id, name, email)
        self.department = department
        self.attendance = AttendanceLedger()

    def __str__(self) -> str:
        return f"{super().__str__()}, Department={self.department}"

    def card_details(self) -> list[str]:
        return [f"Department: {self.department}"]
