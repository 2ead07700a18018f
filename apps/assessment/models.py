# apps/assessment/models.py

from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel, StudentRecordQuerySet, reference_field


class Result(CoreBaseModel):
    """
    One subject result for a student in a term.

    ``marks`` is free text: usually a percentage such as "92%" but letter
    grades like "A+" are accepted and kept as entered. ``term`` is a free
    text label and is matched exactly when grouping.
    """
    student = reference_field(
        'academics.Student',
        verbose_name=_('student'),
        related_name='results',
    )
    # Copied from the student at write time
    student_name = models.CharField(_('student name'), max_length=200)
    subject_name = models.CharField(_('subject'), max_length=100)
    marks = models.CharField(_('marks/grade'), max_length=20)
    term = models.CharField(_('term'), max_length=100, db_index=True)
    comments = models.TextField(_('comments'), blank=True)

    objects = StudentRecordQuerySet.as_manager()

    class Meta:
        verbose_name = _('Result')
        verbose_name_plural = _('Results')
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.student_name} - {self.subject_name} ({self.term}): {self.marks}"
