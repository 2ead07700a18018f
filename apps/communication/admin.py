# apps/communication/admin.py

from django.contrib import admin
from django.contrib import messages
from django.utils.translation import gettext_lazy as _

from .models import Notice


@admin.register(Notice)
class NoticeAdmin(admin.ModelAdmin):
    """
    Admin interface for Notice model.
    """
    list_display = ('title', 'audience', 'publish_date', 'status', 'is_urgent', 'created_at')
    list_filter = ('status', 'is_urgent', 'publish_date')
    search_fields = ('title', 'content', 'audience')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'created_at'

    fieldsets = (
        (_('Notice'), {
            'fields': ('title', 'content', 'audience')
        }),
        (_('Publishing'), {
            'fields': ('publish_date', 'status', 'is_urgent')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['move_to_draft']

    def move_to_draft(self, request, queryset):
        """Admin action to unpublish selected notices."""
        updated = 0
        for notice in queryset:
            notice.status = Notice.Status.DRAFT
            notice.save()
            updated += 1
        self.message_user(request, f'{updated} notices moved to draft.', messages.SUCCESS)
    move_to_draft.short_description = _('Move selected notices to draft')
