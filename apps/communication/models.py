# apps/communication/models.py

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.core.models import CoreBaseModel


class NoticeQuerySet(models.QuerySet):

    def published(self):
        return self.filter(status=Notice.Status.PUBLISHED)

    def latest_published(self, limit=None):
        """Published notices, newest publish date first."""
        queryset = self.published().order_by('-publish_date', '-created_at')
        if limit is not None:
            queryset = queryset[:limit]
        return queryset


class Notice(CoreBaseModel):
    """
    School notice. Only Published notices appear on the public site; a
    Draft may be saved with just a title.
    """
    class Status(models.TextChoices):
        PUBLISHED = 'Published', _('Published')
        DRAFT = 'Draft', _('Draft')

    title = models.CharField(_('title'), max_length=200)
    content = models.TextField(_('content'), blank=True)
    audience = models.CharField(
        _('audience'),
        max_length=100,
        blank=True,
        help_text=_('e.g. All, Parents, Grade 5 Parents')
    )
    publish_date = models.DateField(_('publish date'), null=True, blank=True, db_index=True)
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=Status.choices,
        default=Status.DRAFT,
        db_index=True
    )
    is_urgent = models.BooleanField(_('urgent'), default=False)

    objects = NoticeQuerySet.as_manager()

    class Meta:
        verbose_name = _('Notice')
        verbose_name_plural = _('Notices')
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def is_published(self):
        return self.status == self.Status.PUBLISHED

    @property
    def snippet(self):
        """Start of the content for the notice marquee."""
        length = settings.NOTICES_SNIPPET_LENGTH
        if len(self.content) <= length:
            return self.content
        return f"{self.content[:length]}..."
