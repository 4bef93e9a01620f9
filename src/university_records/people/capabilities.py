"""Record capabilities.

Services accept anything exposing the ledger they work on instead of asking
for a concrete person class.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..attendance.model import AttendanceLedger
from ..exams.model import MarksLedger
from ..fees.model import PaymentLedger


@runtime_checkable
class HasAttendance(Protocol):
    attendance: AttendanceLedger


@runtime_checkable
class HasMarks(Protocol):
    marks: MarksLedger


@runtime_checkable
class HasPayments(Protocol):
    payments: PaymentLedger
