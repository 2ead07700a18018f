# apps/finance/forms.py

from decimal import Decimal

from django import forms
from django.utils.translation import gettext_lazy as _

from apps.academics.models import Student

from .models import Fee


class FeeFormMixin:
    """Amount checks shared by the create and edit forms."""

    def clean(self):
        cleaned_data = super().clean()
        amount_due = cleaned_data.get('amount_due')
        amount_paid = cleaned_data.get('amount_paid')
        if amount_due is not None and amount_paid is not None and amount_paid > amount_due:
            self.add_error('amount_paid', _('Amount paid cannot exceed amount due.'))
        return cleaned_data


class FeeCreateForm(FeeFormMixin, forms.Form):
    """
    Form for adding a fee record. Leave amount paid empty for a Paid fee
    to record it as fully paid.
    """
    student = forms.ModelChoiceField(
        queryset=Student.objects.all(),
        empty_label=_("Select Student"),
        widget=forms.Select(attrs={'class': 'form-control'})
    )
    fee_title = forms.CharField(
        label=_('Fee Title'),
        max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('e.g., Term 1 Tuition Fee')})
    )
    amount_due = forms.DecimalField(
        label=_('Amount Due'),
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0})
    )
    amount_paid = forms.DecimalField(
        label=_('Amount Paid'),
        max_digits=12,
        decimal_places=2,
        min_value=Decimal('0.00'),
        required=False,
        widget=forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0})
    )
    due_date = forms.DateField(
        label=_('Due Date'),
        widget=forms.DateInput(attrs={'class': 'form-control', 'type': 'date'})
    )
    status = forms.ChoiceField(
        label=_('Status'),
        choices=Fee.Status.choices,
        initial=Fee.Status.PENDING,
        widget=forms.Select(attrs={'class': 'form-control'})
    )


class FeeForm(FeeFormMixin, forms.ModelForm):
    """
    Form for editing a fee record. The student is fixed once the fee exists.
    """
    class Meta:
        model = Fee
        fields = ['fee_title', 'amount_due', 'amount_paid', 'due_date', 'status']
        widgets = {
            'fee_title': forms.TextInput(attrs={'class': 'form-control'}),
            'amount_due': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'amount_paid': forms.NumberInput(attrs={'class': 'form-control', 'step': '0.01', 'min': 0}),
            'due_date': forms.DateInput(attrs={'class': 'form-control', 'type': 'date'}, format='%Y-%m-%d'),
            'status': forms.Select(attrs={'class': 'form-control'}),
        }
