from django.conf import settings

from .models import Notice


def marquee_notices(request):
    """
    The newest published notices for the scrolling header on every page.
    """
    if request.path.startswith('/admin/'):
        return {}
    return {
        'marquee_notices': Notice.objects.latest_published(settings.NOTICES_MARQUEE_LIMIT),
    }
