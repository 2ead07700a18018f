# apps/academics/views.py

from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import ListView, CreateView, UpdateView, DeleteView

from apps.core.mixins import (
    AdminRequiredMixin, AdminDeleteMixin, AdminSaveMessageMixin, SearchableListMixin
)

from .forms import StudentForm, TeacherForm, SchoolClassForm, SubjectForm
from .models import Student, Teacher, SchoolClass, Subject


# =============================================================================
# STUDENT VIEWS
# =============================================================================

class StudentListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all students with search."""
    model = Student
    template_name = 'academics/students/student_list.html'
    context_object_name = 'students'
    search_fields = ('student_name', 'student_id', 'grade_level', 'parent_email')
    live_collection = 'students'


class StudentCreateView(AdminRequiredMixin, AdminSaveMessageMixin, CreateView):
    """Create a new student record."""
    model = Student
    form_class = StudentForm
    template_name = 'academics/students/student_form.html'
    success_url = reverse_lazy('academics:student_list')
    success_message = _('Student added successfully.')


class StudentUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Update a student record."""
    model = Student
    form_class = StudentForm
    template_name = 'academics/students/student_form.html'
    success_url = reverse_lazy('academics:student_list')
    success_message = _('Student updated successfully.')
    is_update = True


class StudentDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a student. Results, fees and attendance that reference it stay."""
    model = Student
    success_url = reverse_lazy('academics:student_list')


# =============================================================================
# TEACHER VIEWS
# =============================================================================

class TeacherListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all teachers with search."""
    model = Teacher
    template_name = 'academics/teachers/teacher_list.html'
    context_object_name = 'teachers'
    search_fields = ('teacher_name', 'teacher_id', 'department', 'subjects_taught')
    live_collection = 'teachers'


class TeacherCreateView(AdminRequiredMixin, AdminSaveMessageMixin, CreateView):
    """Create a new teacher."""
    model = Teacher
    form_class = TeacherForm
    template_name = 'academics/teachers/teacher_form.html'
    success_url = reverse_lazy('academics:teacher_list')
    success_message = _('Teacher added successfully.')


class TeacherUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Update a teacher."""
    model = Teacher
    form_class = TeacherForm
    template_name = 'academics/teachers/teacher_form.html'
    success_url = reverse_lazy('academics:teacher_list')
    success_message = _('Teacher updated successfully.')
    is_update = True


class TeacherDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a teacher."""
    model = Teacher
    success_url = reverse_lazy('academics:teacher_list')


# =============================================================================
# CLASS VIEWS
# =============================================================================

class SchoolClassListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all classes with search."""
    model = SchoolClass
    template_name = 'academics/classes/class_list.html'
    context_object_name = 'classes'
    search_fields = ('class_name', 'grade_level', 'section', 'class_teacher_name')
    live_collection = 'classes'


class SchoolClassCreateView(AdminRequiredMixin, AdminSaveMessageMixin, CreateView):
    """Create a new class."""
    model = SchoolClass
    form_class = SchoolClassForm
    template_name = 'academics/classes/class_form.html'
    success_url = reverse_lazy('academics:class_list')
    success_message = _('Class added successfully.')


class SchoolClassUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Update a class."""
    model = SchoolClass
    form_class = SchoolClassForm
    template_name = 'academics/classes/class_form.html'
    success_url = reverse_lazy('academics:class_list')
    success_message = _('Class updated successfully.')
    is_update = True


class SchoolClassDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a class."""
    model = SchoolClass
    success_url = reverse_lazy('academics:class_list')


# =============================================================================
# SUBJECT VIEWS
# =============================================================================

class SubjectListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all subjects with search."""
    model = Subject
    template_name = 'academics/subjects/subject_list.html'
    context_object_name = 'subjects'
    search_fields = ('subject_name', 'subject_code', 'applicable_grade_levels', 'assigned_teacher_name')
    live_collection = 'subjects'


class SubjectCreateView(AdminRequiredMixin, AdminSaveMessageMixin, CreateView):
    """Create a new subject."""
    model = Subject
    form_class = SubjectForm
    template_name = 'academics/subjects/subject_form.html'
    success_url = reverse_lazy('academics:subject_list')
    success_message = _('Subject added successfully.')


class SubjectUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Update a subject."""
    model = Subject
    form_class = SubjectForm
    template_name = 'academics/subjects/subject_form.html'
    success_url = reverse_lazy('academics:subject_list')
    success_message = _('Subject updated successfully.')
    is_update = True


class SubjectDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a subject."""
    model = Subject
    success_url = reverse_lazy('academics:subject_list')
