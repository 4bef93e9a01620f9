from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from ..core.constants import DEFAULT_STUDENT_EMAIL_DOMAIN
from ..identity.allocator import IdentityAllocator
from .model import Person, Student, Teacher
from .repository import PersonRepository

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class StudentUpdate:
    """Fields to overwrite on a student. ``None`` leaves a field untouched."""

    name: str
    email: Optional[str] = None


@dataclass(frozen=True)
class TeacherUpdate:
    """Fields to overwrite on a teacher. ``None`` leaves a field untouched."""

    name: str
    email: Optional[str] = None
    department: Optional[str] = None


def default_student_email(name: str, domain: str = DEFAULT_STUDENT_EMAIL_DOMAIN) -> str:
    """``"Jane Doe"`` -> ``"jane.doe@student.univ.edu"``."""
    return f"{_WHITESPACE_RUN.sub('.', name.lower())}@{domain}"


class PeopleService:
    """Use case: register, update and look up students and teachers."""

    def __init__(
        self,
        students: PersonRepository[Student],
        teachers: PersonRepository[Teacher],
        *,
        allocator: Optional[IdentityAllocator] = None,
        student_email_domain: str = DEFAULT_STUDENT_EMAIL_DOMAIN,
    ):
        self._students = students
        self._teachers = teachers
        self._allocator = allocator or IdentityAllocator()
        self._email_domain = student_email_domain

    def register_student(self, name: str, email: Optional[str] = None) -> Student:
        if email is None:
            email = default_student_email(name, self._email_domain)

        student = Student(self._allocator.next(), name, email)
        self._students.add(student)
        logger.info("Registered student %s", student.id, extra={"person_id": student.id, "role": student.role.value})
        return student

    def register_teacher(self, name: str, email: str, department: str) -> Teacher:
        teacher = Teacher(self._allocator.next(), name, email, department)
        self._teachers.add(teacher)
        logger.info("Registered teacher %s", teacher.id, extra={"person_id": teacher.id, "role": teacher.role.value})
        return teacher

    def update_student(self, student_id: int, update: StudentUpdate) -> bool:
        student = self._students.get_by_id(student_id)
        if not student:
            logger.info("Update skipped, no student with id %s", student_id)
            return False

        student.name = update.name
        if update.email is not None:
            student.email = update.email
        return True

    def update_teacher(self, teacher_id: int, update: TeacherUpdate) -> bool:
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher:
            logger.info("Update skipped, no teacher with id %s", teacher_id)
            return False

        teacher.name = update.name
        if update.email is not None:
            teacher.email = update.email
        if update.department is not None:
            teacher.department = update.department
        return True

    def find_student(self, student_id: int) -> Optional[Student]:
        return self._students.get_by_id(student_id)

    def find_teacher(self, teacher_id: int) -> Optional[Teacher]:
        return self._teachers.get_by_id(teacher_id)

    def find_person(self, person_id: int) -> Optional[Person]:
        return self.find_student(person_id) or self.find_teacher(person_id)

    def list_students(self) -> list[Student]:
        return list(self._students.list_all())

    def list_teachers(self) -> list[Teacher]:
        return list(self._teachers.list_all())
