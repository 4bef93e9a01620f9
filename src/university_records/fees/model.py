from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class Payment:
    """A tuition payment event."""

    amount: float
    date: date = field(default_factory=date.today)


class PaymentLedger:
    """Append-only list of payments of one student."""

    def __init__(self) -> None:
        self._payments: list[Payment] = []

    def append(self, payment: Payment) -> None:
        self._payments.append(payment)

    def view(self) -> tuple[Payment, ...]:
        return tuple(self._payments)

    def total(self) -> float:
        return sum(p.amount for p in self._payments)

    def __len__(self) -> int:
        return len(self._payments)
