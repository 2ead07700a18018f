from django.db.models.signals import post_save, post_delete
from django.dispatch import receiver

from .live import notify_model_changed


@receiver(post_save)
def live_query_record_saved(sender, instance, **kwargs):
    """Refresh live queries over the saved record's collection."""
    notify_model_changed(sender)


@receiver(post_delete)
def live_query_record_deleted(sender, instance, **kwargs):
    """Refresh live queries over the deleted record's collection."""
    notify_model_changed(sender)
