from django.apps import AppConfig


class AssessmentConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.assessment'
    verbose_name = 'Assessment'

    def ready(self):
        from . import live  # noqa: F401
