# apps/finance/admin.py

from django.contrib import admin
from django.contrib import messages
from django.utils.translation import gettext_lazy as _

from .models import Fee
from .services import apply_fee_rules, FeeValidationError


@admin.register(Fee)
class FeeAdmin(admin.ModelAdmin):
    """
    Admin interface for Fee model.
    """
    list_display = ('fee_title', 'student_name', 'amount_due', 'amount_paid', 'due_date', 'status', 'payment_date')
    list_filter = ('status', 'due_date')
    search_fields = ('fee_title', 'student_name')
    raw_id_fields = ('student',)
    readonly_fields = ('student_name', 'payment_date', 'created_at', 'updated_at')
    date_hierarchy = 'due_date'

    fieldsets = (
        (_('Student'), {
            'fields': ('student', 'student_name')
        }),
        (_('Fee Details'), {
            'fields': ('fee_title', 'amount_due', 'amount_paid', 'due_date', 'status', 'payment_date')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['mark_as_paid']

    def mark_as_paid(self, request, queryset):
        """Admin action to mark selected fees as fully paid."""
        updated = 0
        for fee in queryset:
            fee.status = Fee.Status.PAID
            try:
                apply_fee_rules(fee)
            except FeeValidationError as e:
                self.message_user(request, f'{fee}: {e.messages[0]}', messages.ERROR)
                continue
            fee.save()
            updated += 1
        self.message_user(request, f'{updated} fees marked as paid.', messages.SUCCESS)
    mark_as_paid.short_description = _('Mark selected fees as paid')
