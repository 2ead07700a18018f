# apps/attendance/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import AttendanceRecord


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    """
    Admin interface for AttendanceRecord model.
    """
    list_display = ('student_name', 'date', 'status', 'subject', 'created_at')
    list_filter = ('status', 'date')
    search_fields = ('student_name', 'subject', 'reason')
    raw_id_fields = ('student',)
    readonly_fields = ('student_name', 'created_at', 'updated_at')
    date_hierarchy = 'date'

    fieldsets = (
        (_('Student'), {
            'fields': ('student', 'student_name')
        }),
        (_('Attendance'), {
            'fields': ('date', 'status', 'subject', 'reason')
        }),
    )
