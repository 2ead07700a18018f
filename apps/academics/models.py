# apps/academics/models.py

from django.db import models
from django.core.validators import MinValueValidator
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel, reference_field


class Student(CoreBaseModel):
    """
    Student record. ``parent_email`` is the only link between a student and
    a parent login; it is not required to be unique.
    """
    student_name = models.CharField(_('student name'), max_length=200, db_index=True)
    student_id = models.CharField(
        _('student ID'),
        max_length=50,
        unique=True,
        db_index=True,
        help_text=_('School-issued identifier, e.g. S1001')
    )
    grade_level = models.CharField(_('grade level'), max_length=50)
    date_of_birth = models.DateField(_('date of birth'), null=True, blank=True)
    parent_name = models.CharField(_('parent name'), max_length=200, blank=True)
    parent_email = models.EmailField(_('parent email'), blank=True, db_index=True)

    class Meta:
        verbose_name = _('Student')
        verbose_name_plural = _('Students')
        ordering = ['student_name']

    def __str__(self):
        return f"{self.student_name} ({self.student_id})"

    def get_initials(self):
        parts = [p for p in self.student_name.split() if p]
        return ''.join(p[0] for p in parts)[:2].upper()


class Teacher(CoreBaseModel):
    """
    Teaching staff member. Listed publicly on the faculty page.
    """
    teacher_name = models.CharField(_('teacher name'), max_length=200, db_index=True)
    teacher_id = models.CharField(_('teacher ID'), max_length=50, unique=True, db_index=True)
    subjects_taught = models.CharField(
        _('subjects taught'),
        max_length=255,
        blank=True,
        help_text=_('Comma separated, e.g. Mathematics, Physics')
    )
    department = models.CharField(_('department'), max_length=100, blank=True)
    email = models.EmailField(_('email'), blank=True)
    phone = models.CharField(_('phone'), max_length=30, blank=True)
    bio = models.TextField(_('short bio'), blank=True)

    class Meta:
        verbose_name = _('Teacher')
        verbose_name_plural = _('Teachers')
        ordering = ['teacher_name']

    def __str__(self):
        return f"{self.teacher_name} ({self.teacher_id})"

    @property
    def subject_list(self):
        return [s.strip() for s in self.subjects_taught.split(',') if s.strip()]


class SchoolClass(CoreBaseModel):
    """
    A class (form/stream) with an optional class teacher.
    """
    class_name = models.CharField(_('class name'), max_length=100)
    grade_level = models.CharField(_('grade level'), max_length=50)
    section = models.CharField(_('section'), max_length=50, blank=True)
    class_teacher = reference_field(
        Teacher,
        verbose_name=_('class teacher'),
        related_name='classes',
        null=True,
    )
    # Copied from the teacher when assigned
    class_teacher_name = models.CharField(_('class teacher name'), max_length=200, blank=True)
    capacity = models.PositiveIntegerField(
        _('capacity'),
        default=0,
        validators=[MinValueValidator(0)]
    )

    class Meta:
        verbose_name = _('Class')
        verbose_name_plural = _('Classes')
        ordering = ['grade_level', 'class_name', 'section']

    def __str__(self):
        if self.section:
            return f"{self.class_name} - {self.section}"
        return self.class_name


class Subject(CoreBaseModel):
    """
    A subject offered to one or more grade levels.
    """
    subject_name = models.CharField(_('subject name'), max_length=100)
    subject_code = models.CharField(_('subject code'), max_length=20, unique=True)
    applicable_grade_levels = models.CharField(
        _('applicable grade levels'),
        max_length=255,
        help_text=_('e.g. Grade 9, Grade 10')
    )
    assigned_teacher = reference_field(
        Teacher,
        verbose_name=_('assigned teacher'),
        related_name='subjects',
        null=True,
    )
    # Copied from the teacher when assigned
    assigned_teacher_name = models.CharField(_('assigned teacher name'), max_length=200, blank=True)

    class Meta:
        verbose_name = _('Subject')
        verbose_name_plural = _('Subjects')
        ordering = ['subject_name']

    def __str__(self):
        return f"{self.subject_name} ({self.subject_code})"
