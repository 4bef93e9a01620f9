from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from university_records.config import get_settings_module
from university_records.container import build_container
from university_records.seed import seed_demo_data


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        university_name=settings.UNIVERSITY_NAME,
        id_seed=settings.ID_SEED,
        student_email_domain=settings.STUDENT_EMAIL_DOMAIN,
    )
    university = container.university
    seed_demo_data(university)

    for person in [*university.list_students(), *university.list_teachers()]:
        print(university.person_card(person))

    print(f"OK: Seeded {university.name} (last id {container.allocator.current})")


if __name__ == "__main__":
    main()
