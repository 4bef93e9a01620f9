from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import today_local
from ..common.validators import require_positive
from ..core.exceptions import InvalidArgumentError
from ..people.capabilities import HasPayments
from .model import Payment

logger = logging.getLogger(__name__)


class FeeService:
    def __init__(self, *, today: Optional[Callable[[], date]] = None):
        self._today = today or today_local

    def register_payment(self, student: HasPayments, amount: float) -> Payment:
        try:
            require_positive(amount, "Amount")
        except InvalidArgumentError:
            logger.warning("Payment rejected, amount %r", amount)
            raise

        payment = Payment(amount=float(amount), date=self._today())
        student.payments.append(payment)
        logger.info("Payment of %.2f registered", payment.amount, extra={"person_id": getattr(student, "id", None)})
        return payment

    def view_payments(self, student: HasPayments) -> tuple[Payment, ...]:
        return student.payments.view()

    def total_paid(self, student: HasPayments) -> float:
        return student.payments.total()
