# apps/core/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import WebsiteContent


@admin.register(WebsiteContent)
class WebsiteContentAdmin(admin.ModelAdmin):
    """
    Admin interface for WebsiteContent model.
    """
    list_display = ('key', 'updated_at')
    search_fields = ('key',)
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (_('Section'), {
            'fields': ('key', 'data')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def get_readonly_fields(self, request, obj=None):
        """Make key read-only for existing sections."""
        if obj:
            return self.readonly_fields + ('key',)
        return self.readonly_fields
