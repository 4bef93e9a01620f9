from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Fixed role tag of a person record, chosen at registration."""

    STUDENT = "Student"
    TEACHER = "Teacher"
