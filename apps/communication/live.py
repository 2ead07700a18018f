from django.conf import settings

from apps.core.live import LiveQuery, register

from .models import Notice
from .serializers import NoticeSerializer, PublishedNoticeSerializer

register(LiveQuery('notices', Notice, NoticeSerializer, lambda: Notice.objects.all()))
register(LiveQuery(
    'publishedNotices',
    Notice,
    PublishedNoticeSerializer,
    lambda: Notice.objects.latest_published(settings.NOTICES_PREVIEW_LIMIT),
    public=True,
))
