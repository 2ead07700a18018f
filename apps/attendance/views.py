# apps/attendance/views.py

from django.contrib import messages
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import ListView, FormView, UpdateView, DeleteView, TemplateView

from apps.core.mixins import (
    AdminRequiredMixin, AdminDeleteMixin, AdminSaveMessageMixin,
    ParentChildMixin, SearchableListMixin
)

from .forms import AttendanceCreateForm, AttendanceRecordForm
from .models import AttendanceRecord
from .services import record_attendance, summarize_attendance


# =============================================================================
# ADMIN ATTENDANCE VIEWS
# =============================================================================

class AttendanceListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List attendance records with search."""
    model = AttendanceRecord
    template_name = 'attendance/records/record_list.html'
    context_object_name = 'records'
    search_fields = ('student_name', 'status', 'subject')
    live_collection = 'attendanceRecords'


class AttendanceCreateView(AdminRequiredMixin, FormView):
    """Record attendance for a student."""
    form_class = AttendanceCreateForm
    template_name = 'attendance/records/record_form.html'
    success_url = reverse_lazy('attendance:record_list')

    def form_valid(self, form):
        data = form.cleaned_data
        record = record_attendance(
            student=data['student'],
            date=data['date'],
            status=data['status'],
            subject=data.get('subject'),
            reason=data.get('reason'),
        )
        messages.success(self.request, _('Attendance for %(name)s recorded successfully.') % {
            'name': record.student_name
        })
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        messages.error(self.request, _('Please select a student, date, and status.'))
        return super().form_invalid(form)


class AttendanceUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Edit an attendance record."""
    model = AttendanceRecord
    form_class = AttendanceRecordForm
    template_name = 'attendance/records/record_form.html'
    success_url = reverse_lazy('attendance:record_list')
    success_message = _('Attendance record updated successfully.')
    is_update = True


class AttendanceDeleteView(AdminDeleteMixin, DeleteView):
    """Delete an attendance record."""
    model = AttendanceRecord
    success_url = reverse_lazy('attendance:record_list')


# =============================================================================
# PARENT VIEWS
# =============================================================================

class ParentAttendanceView(ParentChildMixin, TemplateView):
    """The child's attendance history with a summary."""
    template_name = 'attendance/parent/attendance.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Attendance')
        if self.child:
            records = list(AttendanceRecord.objects.for_student(self.child))
            context['records'] = records
            context['summary'] = summarize_attendance(records)
        return context
