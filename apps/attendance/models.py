# apps/attendance/models.py

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel, StudentRecordQuerySet, reference_field


class AttendanceRecord(CoreBaseModel):
    """
    A student's attendance on one date, optionally for one subject.
    """
    class Status(models.TextChoices):
        PRESENT = 'Present', _('Present')
        ABSENT = 'Absent', _('Absent')
        LATE = 'Late', _('Late')
        EXCUSED = 'Excused', _('Excused')

    student = reference_field(
        'academics.Student',
        verbose_name=_('student'),
        related_name='attendance_records',
    )
    # Copied from the student at write time
    student_name = models.CharField(_('student name'), max_length=200)
    date = models.DateField(_('date'), db_index=True)
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=Status.choices,
        db_index=True
    )
    subject = models.CharField(_('subject'), max_length=100, blank=True)
    reason = models.TextField(_('reason'), blank=True)

    objects = StudentRecordQuerySet.as_manager()

    class Meta:
        verbose_name = _('Attendance Record')
        verbose_name_plural = _('Attendance Records')
        ordering = ['-date', '-created_at']

    def __str__(self):
        return f"{self.student_name} - {self.date} ({self.status})"

    def get_status_badge(self):
        return {
            self.Status.PRESENT: 'success',
            self.Status.LATE: 'warning',
            self.Status.ABSENT: 'danger',
            self.Status.EXCUSED: 'info',
        }.get(self.status, 'secondary')
