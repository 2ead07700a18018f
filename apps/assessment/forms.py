# apps/assessment/forms.py

from django import forms
from django.forms import formset_factory, BaseFormSet
from django.utils.translation import gettext_lazy as _

from apps.academics.models import Student, Subject

from .models import Result


def subject_choices():
    names = Subject.objects.order_by('subject_name').values_list('subject_name', flat=True).distinct()
    return [('', _('Select Subject'))] + [(name, name) for name in names]


class ResultBatchForm(forms.Form):
    """
    Student and term shared by every subject row of a batch.
    """
    student = forms.ModelChoiceField(
        queryset=Student.objects.all(),
        empty_label=_("Select Student"),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    term = forms.CharField(
        label=_('Term / Session'),
        max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Term 1 - 2024')})
    )

    def clean_term(self):
        return self.cleaned_data['term'].strip()


class ResultEntryForm(forms.Form):
    """
    One subject row: subject, marks/grade and an optional comment.
    """
    subject_name = forms.ChoiceField(
        label=_('Subject'),
        required=False,
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    marks = forms.CharField(
        label=_('Marks / Grade'),
        max_length=20,
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., 85% or A+')})
    )
    comments = forms.CharField(
        label=_('Comments'),
        required=False,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('Optional')})
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.fields['subject_name'].choices = subject_choices()

    def clean(self):
        cleaned_data = super().clean()
        subject = cleaned_data.get('subject_name')
        marks = (cleaned_data.get('marks') or '').strip()
        cleaned_data['marks'] = marks
        if (subject and not marks) or (marks and not subject):
            raise forms.ValidationError(_('Please select a subject and enter marks/grade.'))
        return cleaned_data

    @property
    def is_blank(self):
        data = getattr(self, 'cleaned_data', {})
        return not data.get('subject_name') and not data.get('marks')


class BaseResultEntryFormSet(BaseFormSet):

    def clean(self):
        super().clean()
        if any(self.errors):
            return
        if not self.entries():
            raise forms.ValidationError(_('Please add at least one subject result.'))

    def entries(self):
        """Filled-in rows as dicts for ``record_results``."""
        return [
            {
                'subject_name': form.cleaned_data['subject_name'],
                'marks': form.cleaned_data['marks'],
                'comments': form.cleaned_data.get('comments', ''),
            }
            for form in self.forms
            if hasattr(form, 'cleaned_data') and not form.is_blank
        ]


ResultEntryFormSet = formset_factory(
    ResultEntryForm,
    formset=BaseResultEntryFormSet,
    extra=5,
    max_num=30,
)


class ResultForm(forms.ModelForm):
    """
    Form for editing a single result. The student and the copied student
    name are fixed once the result exists.
    """
    class Meta:
        model = Result
        fields = ['subject_name', 'marks', 'term', 'comments']
        widgets = {
            'subject_name': forms.TextInput(attrs={'class': 'form-control'}),
            'marks': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., 85% or A+')}),
            'term': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Term 1 - 2024')}),
            'comments': forms.Textarea(attrs={'class': 'form-control', 'rows': 3}),
        }
