from .base import *

DEBUG = True

# Development fallback; production reads SECRET_KEY from the environment only
if not SECRET_KEY:
    SECRET_KEY = 'django-insecure-campusconnect-development-key-change-me'

# Django's test client talks to "testserver"
ALLOWED_HOSTS = ALLOWED_HOSTS + ['testserver']

# Email settings for development
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

# Simple logging for development
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "apps": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
    },
}
