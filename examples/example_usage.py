"""Example: drive the directory facade directly (no console menu).

Controllers are a thin layer; the record rules live in the services.
"""

from datetime import date

from university_records.container import build_container
from university_records.core.exceptions import DomainError
from university_records.people.service import StudentUpdate


def main():
    university = build_container().university

    jane = university.register_student("Jane Doe")
    university.add_exam("Math", date(2024, 5, 3), 100)
    university.enter_marks(jane, "math", 92)
    university.register_payment(jane, 250.50)
    university.update_student(jane.id, StudentUpdate(name="Jane A. Doe"))

    try:
        university.enter_marks(jane, "Chemistry", 10)
    except DomainError as e:
        print(f"Rejected: {e}")

    print(university.person_card(jane))
    print(dict(university.view_marks(jane)))
    print(university.view_payments(jane))


if __name__ == "__main__":
    main()
