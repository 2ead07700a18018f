from django.conf import settings


def school_letterhead(request):
    """School name and address shown in page footers and report cards."""
    return {
        'school_name': settings.SCHOOL_NAME,
        'school_address': settings.SCHOOL_ADDRESS,
    }
