# apps/attendance/forms.py

from django import forms
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from apps.academics.models import Student

from .models import AttendanceRecord


class AttendanceCreateForm(forms.Form):
    """
    Form for recording attendance. Student, date and status are required.
    """
    student = forms.ModelChoiceField(
        queryset=Student.objects.all(),
        empty_label=_("Select Student"),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    date = forms.DateField(
        label=_('Date'),
        initial=timezone.localdate,
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d')
    )
    status = forms.ChoiceField(
        label=_('Status'),
        choices=[('', _('Select attendance status'))] + list(AttendanceRecord.Status.choices),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    subject = forms.CharField(
        label=_('Subject (Optional)'),
        max_length=100,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Mathematics')})
    )
    reason = forms.CharField(
        label=_('Reason for Absence/Lateness (Optional)'),
        required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3, 'placeholder': _("e.g., Doctor's appointment")})
    )


class AttendanceRecordForm(forms.ModelForm):
    """
    Form for editing an attendance record. The student is fixed.
    """
    class Meta:
        model = AttendanceRecord
        fields = ['date', 'status', 'subject', 'reason']
        widgets = {
            'date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'status': forms.Select(attrs={'class': 'form-control'}),
            'subject': forms.TextInput(attrs={'class': 'form-control'}),
            'reason': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }
