"""
WSGI config for the CampusConnect school portal.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.development')

application = get_wsgi_application()
