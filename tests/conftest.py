from __future__ import annotations

from datetime import date

import pytest

from university_records.container import Container, build_container


@pytest.fixture
def fixed_today() -> date:
    return date(2024, 5, 1)


@pytest.fixture
def container(fixed_today) -> Container:
    return build_container(today=lambda: fixed_today)


@pytest.fixture
def university(container):
    return container.university
