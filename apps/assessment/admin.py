# apps/assessment/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Result


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    """
    Admin interface for Result model.
    """
    list_display = ('student_name', 'subject_name', 'marks', 'term', 'created_at')
    list_filter = ('term', 'subject_name')
    search_fields = ('student_name', 'subject_name', 'term')
    raw_id_fields = ('student',)
    readonly_fields = ('student_name', 'created_at', 'updated_at')
    date_hierarchy = 'created_at'

    fieldsets = (
        (_('Student'), {
            'fields': ('student', 'student_name')
        }),
        (_('Result'), {
            'fields': ('subject_name', 'marks', 'term', 'comments')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
