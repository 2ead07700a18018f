# apps/finance/services.py
"""
Fee record writes and the rules tying status, amount paid and payment date
together.
"""

import logging
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.utils import timezone

from apps.academics.services import student_snapshot

from .models import Fee

logger = logging.getLogger(__name__)


class FeeValidationError(ValidationError):
    """A fee write would leave the record inconsistent."""


def create_fee_record(student, fee_title, amount_due, due_date, status=Fee.Status.PENDING, amount_paid=None):
    """
    Create a fee for ``student``.

    A fee created as Paid without an explicit amount paid is recorded as
    fully paid now. Any other status starts with the given amount paid
    (zero if none) and no payment date.
    """
    snapshot = student_snapshot(student)
    amount_due = Decimal(str(amount_due))
    if amount_paid is None:
        amount_paid = amount_due if status == Fee.Status.PAID else Decimal('0.00')

    fee = Fee(
        student_id=snapshot.student_id,
        student_name=snapshot.student_name,
        fee_title=fee_title,
        amount_due=amount_due,
        amount_paid=Decimal(str(amount_paid)),
        due_date=due_date,
        status=status,
    )
    apply_fee_rules(fee)
    fee.save()
    logger.info(f"Fee '{fee.fee_title}' created for {fee.student_name} ({fee.status})")
    return fee


def apply_fee_rules(fee):
    """
    Bring ``amount_paid`` and ``payment_date`` in line with ``status``:

    - Paid with a missing or short amount paid is raised to the amount due.
    - Paid without a payment date gets the current time.
    - Any other status clears the payment date.

    Raises ``FeeValidationError`` when the amount paid exceeds the amount due.
    """
    if fee.amount_paid is None:
        fee.amount_paid = Decimal('0.00')

    if fee.status == Fee.Status.PAID:
        if fee.amount_paid < fee.amount_due:
            fee.amount_paid = fee.amount_due
        if fee.payment_date is None:
            fee.payment_date = timezone.now()
    else:
        fee.payment_date = None

    if fee.amount_paid > fee.amount_due:
        raise FeeValidationError("Amount paid cannot exceed amount due.", code='overpaid')
    return fee


def update_fee_record(fee, **changes):
    """
    Apply ``changes`` to ``fee``, enforce the fee rules and save.
    The copied student name is left as it is.
    """
    for name, value in changes.items():
        setattr(fee, name, value)
    apply_fee_rules(fee)
    fee.save()
    logger.info(f"Fee '{fee.fee_title}' updated for {fee.student_name} ({fee.status})")
    return fee
