from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import today_local
from ..core.exceptions import InvalidArgumentError
from ..people.capabilities import HasAttendance

logger = logging.getLogger(__name__)


class AttendanceService:
    def __init__(self, *, today: Optional[Callable[[], date]] = None):
        self._today = today or today_local

    def mark_attendance(self, person: object, present: bool, *, on: Optional[date] = None) -> None:
        if not isinstance(person, HasAttendance):
            logger.warning("Attendance rejected for %s", type(person).__name__)
            raise InvalidArgumentError("Unsupported person type for attendance")

        on = on or self._today()
        person.attendance.mark(on, present)
        logger.debug("Attendance %s on %s: %s", getattr(person, "id", "?"), on, present)

    def view_attendance(self, person: object) -> Mapping[date, bool]:
        if not isinstance(person, HasAttendance):
            return MappingProxyType({})
        return person.attendance.view()
