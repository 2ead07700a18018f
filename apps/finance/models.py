# apps/finance/models.py

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel, StudentRecordQuerySet, reference_field


class Fee(CoreBaseModel):
    """
    A fee charged to a student.

    A Paid fee is expected to have ``amount_paid == amount_due`` and a
    payment date; ``apps.finance.services`` keeps that true for writes made
    through it. Nothing guards against two admins editing the same fee at
    once: the last save wins.
    """
    class Status(models.TextChoices):
        PENDING = 'Pending', _('Pending')
        PAID = 'Paid', _('Paid')
        OVERDUE = 'Overdue', _('Overdue')
        PARTIALLY_PAID = 'Partially Paid', _('Partially Paid')

    student = reference_field(
        'academics.Student',
        verbose_name=_('student'),
        related_name='fees',
    )
    # Copied from the student at write time
    student_name = models.CharField(_('student name'), max_length=200)
    fee_title = models.CharField(_('fee title'), max_length=200)
    amount_due = models.DecimalField(
        _('amount due'),
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    amount_paid = models.DecimalField(
        _('amount paid'),
        max_digits=12,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))]
    )
    due_date = models.DateField(_('due date'))
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        db_index=True
    )
    payment_date = models.DateTimeField(_('payment date'), null=True, blank=True)

    objects = StudentRecordQuerySet.as_manager()

    class Meta:
        verbose_name = _('Fee')
        verbose_name_plural = _('Fees')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.fee_title} - {self.student_name}"

    @property
    def balance(self):
        return self.amount_due - self.amount_paid

    @property
    def is_paid(self):
        return self.status == self.Status.PAID

    def get_status_badge(self):
        return {
            self.Status.PAID: 'success',
            self.Status.PARTIALLY_PAID: 'warning',
            self.Status.OVERDUE: 'danger',
        }.get(self.status, 'secondary')
