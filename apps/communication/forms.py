# apps/communication/forms.py

from django import forms
from django.utils.translation import gettext_lazy as _

from .models import Notice


class NoticeForm(forms.ModelForm):
    """
    Form for notices. The submit button picks the status: publishing needs
    title, content, audience and publish date; a draft needs only a title.
    """
    PUBLISH_ACTION = 'publish'
    DRAFT_ACTION = 'draft'

    class Meta:
        model = Notice
        fields = ['title', 'content', 'audience', 'publish_date', 'is_urgent']
        widgets = {
            'title': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Annual Sports Day')}),
            'content': forms.Textarea(attrs={'class': 'form-control', 'rows': 6}),
            'audience': forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., All Parents')}),
            'publish_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'is_urgent': forms.CheckboxInput(attrs={'class': 'form-check-input'}),
        }
        labels = {
            'is_urgent': _('Mark as urgent'),
        }

    def __init__(self, *args, action=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.action = action or self.DRAFT_ACTION

    @property
    def target_status(self):
        if self.action == self.PUBLISH_ACTION:
            return Notice.Status.PUBLISHED
        return Notice.Status.DRAFT

    def clean(self):
        cleaned_data = super().clean()
        if self.target_status == Notice.Status.PUBLISHED:
            for name in ('content', 'audience', 'publish_date'):
                value = cleaned_data.get(name)
                if value is None or (isinstance(value, str) and not value.strip()):
                    self.add_error(name, _('This field is required to publish a notice.'))
        return cleaned_data

    def save(self, commit=True):
        self.instance.status = self.target_status
        return super().save(commit=commit)
