# apps/academics/admin.py

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from .models import Student, Teacher, SchoolClass, Subject


@admin.register(Student)
class StudentAdmin(admin.ModelAdmin):
    """
    Admin interface for Student model.
    """
    list_display = ('student_id', 'student_name', 'grade_level', 'parent_name', 'parent_email')
    list_filter = ('grade_level', 'created_at')
    search_fields = ('student_id', 'student_name', 'parent_name', 'parent_email')
    readonly_fields = ('created_at', 'updated_at')

    fieldsets = (
        (_('Student Information'), {
            'fields': ('student_name', 'student_id', 'grade_level', 'date_of_birth')
        }),
        (_('Parent Information'), {
            'fields': ('parent_name', 'parent_email')
        }),
        (_('System Metadata'), {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Teacher)
class TeacherAdmin(admin.ModelAdmin):
    """
    Admin interface for Teacher model.
    """
    list_display = ('teacher_id', 'teacher_name', 'department', 'subjects_taught', 'email')
    list_filter = ('department',)
    search_fields = ('teacher_id', 'teacher_name', 'email', 'subjects_taught')
    readonly_fields = ('created_at', 'updated_at')


@admin.register(SchoolClass)
class SchoolClassAdmin(admin.ModelAdmin):
    """
    Admin interface for SchoolClass model.
    """
    list_display = ('class_name', 'grade_level', 'section', 'class_teacher_name', 'capacity')
    list_filter = ('grade_level',)
    search_fields = ('class_name', 'class_teacher_name')
    raw_id_fields = ('class_teacher',)
    readonly_fields = ('class_teacher_name', 'created_at', 'updated_at')


@admin.register(Subject)
class SubjectAdmin(admin.ModelAdmin):
    """
    Admin interface for Subject model.
    """
    list_display = ('subject_code', 'subject_name', 'applicable_grade_levels', 'assigned_teacher_name')
    search_fields = ('subject_code', 'subject_name', 'assigned_teacher_name')
    raw_id_fields = ('assigned_teacher',)
    readonly_fields = ('assigned_teacher_name', 'created_at', 'updated_at')
