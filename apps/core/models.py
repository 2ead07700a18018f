# apps/core/models.py
import uuid
from django.db import models
from django.utils.translation import gettext_lazy as _


class CoreBaseModel(models.Model):
    """
    Base model shared by every collection in the portal:
    - UUID primary key (opaque, collection-scoped identifier)
    - Created/updated timestamps

    Records are hard deleted; there is no soft delete or version field, so
    concurrent edits resolve as last write wins.
    """

    # UUID Primary Key
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Timestamp fields
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.__class__.__name__} {self.id}"


def reference_field(to, verbose_name, related_name, null=False):
    """
    Foreign key used as a plain reference by convention.

    No database constraint and no delete behaviour: removing the referenced
    record leaves referencing records in place (orphaned references are
    tolerated and keep their denormalized display fields).
    """
    return models.ForeignKey(
        to,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=null,
        blank=null,
        related_name=related_name,
        verbose_name=verbose_name,
    )


class WebsiteContent(CoreBaseModel):
    """
    Editable content for the public website, one record per page section.
    The ``key`` plays the role of the section's document id.
    """
    class Section(models.TextChoices):
        HERO = 'heroSection', _('Hero Section')
        ABOUT = 'aboutUsPage', _('About Us Page')
        FEATURES = 'featuresSection', _('Features Section')
        PROGRAMS = 'programsPageContent', _('Programs Page')

    key = models.CharField(
        _('section key'),
        max_length=50,
        choices=Section.choices,
        unique=True,
        db_index=True
    )
    data = models.JSONField(_('content'), default=dict, blank=True)

    class Meta:
        verbose_name = _('Website Content')
        verbose_name_plural = _('Website Content')
        ordering = ['key']

    def __str__(self):
        return self.get_key_display()


class StudentRecordQuerySet(models.QuerySet):
    """Queryset for records that reference a student (results, fees, attendance)."""

    def for_student(self, student):
        return self.filter(student_id=student.pk)
