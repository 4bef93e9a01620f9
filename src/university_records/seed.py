from __future__ import annotations

import logging
from datetime import date

from .directory import University

logger = logging.getLogger(__name__)


def seed_demo_data(university: University) -> None:
    """Register a handful of sample records for demos and manual testing."""

    jane = university.register_student("Jane Doe")
    omar = university.register_student("Omar Haddad", "omar.h@student.univ.edu")
    smith = university.register_teacher("A. Smith", "a.smith@univ.edu", "Physics")

    university.add_exam("Physics", date(2024, 5, 1), 50)
    university.add_exam("Math", date(2024, 5, 3), 100)

    university.enter_marks(jane, "Math", 87)
    university.enter_marks(omar, "Physics", 41)

    university.mark_attendance(jane, True, on=date(2024, 4, 29))
    university.mark_attendance(omar, False, on=date(2024, 4, 29))
    university.mark_attendance(smith, True, on=date(2024, 4, 29))

    university.register_payment(jane, 250.50)

    logger.info(
        "Demo data seeded: %s students, %s teachers",
        len(university.list_students()),
        len(university.list_teachers()),
    )
