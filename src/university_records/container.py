from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from .attendance.service import AttendanceService
from .core.constants import DEFAULT_ID_SEED, DEFAULT_STUDENT_EMAIL_DOMAIN, DEFAULT_UNIVERSITY_NAME
from .directory import University
from .exams.memory_repository import InMemoryExamCatalog
from .exams.service import ExamService
from .fees.service import FeeService
from .identity.allocator import IdentityAllocator
from .people.memory_repository import InMemoryPersonRepository
from .people.model import Student, Teacher
from .people.service import PeopleService


@dataclass(frozen=True)
class Container:
    allocator: IdentityAllocator

    students_repo: InMemoryPersonRepository[Student]
    teachers_repo: InMemoryPersonRepository[Teacher]
    exam_catalog: InMemoryExamCatalog

    people_service: PeopleService
    attendance_service: AttendanceService
    exam_service: ExamService
    fee_service: FeeService

    university: University


def build_container(
    *,
    university_name: str = DEFAULT_UNIVERSITY_NAME,
    id_seed: int = DEFAULT_ID_SEED,
    student_email_domain: str = DEFAULT_STUDENT_EMAIL_DOMAIN,
    today: Optional[Callable[[], date]] = None,
) -> Container:
    allocator = IdentityAllocator(seed=int(id_seed))

    students_repo: InMemoryPersonRepository[Student] = InMemoryPersonRepository()
    teachers_repo: InMemoryPersonRepository[Teacher] = InMemoryPersonRepository()
    exam_catalog = InMemoryExamCatalog()

    people_service = PeopleService(
        students_repo,
        teachers_repo,
        allocator=allocator,
        student_email_domain=student_email_domain,
    )
    attendance_service = AttendanceService(today=today)
    exam_service = ExamService(exam_catalog)
    fee_service = FeeService(today=today)

    university = University(
        university_name,
        people=people_service,
        attendance=attendance_service,
        exams=exam_service,
        fees=fee_service,
    )

    return Container(
        allocator=allocator,
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        exam_catalog=exam_catalog,
        people_service=people_service,
        attendance_service=attendance_service,
        exam_service=exam_service,
        fee_service=fee_service,
        university=university,
    )
