# apps/users/forms.py

from django import forms
from django.contrib.auth.forms import PasswordChangeForm
from django.utils.translation import gettext_lazy as _

from .models import User


class LoginForm(forms.Form):
    """
    Email and password sign-in form.
    """
    email = forms.EmailField(
        label=_('Email'),
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': _('you@example.com'),
            'autofocus': True,
        })
    )
    password = forms.CharField(
        label=_('Password'),
        strip=False,
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': _('Enter your password'),
        })
    )


class ParentAccountForm(forms.Form):
    """
    Admin form for creating a parent login.

    The email should be the parent email recorded on the student.
    """
    email = forms.EmailField(
        label=_('Parent Email'),
        help_text=_('Must match the parent email on the student record.'),
        widget=forms.EmailInput(attrs={
            'class': 'form-control',
            'placeholder': _('parent@example.com'),
        })
    )
    password = forms.CharField(
        label=_('Temporary Password'),
        strip=False,
        min_length=8,
        widget=forms.PasswordInput(attrs={
            'class': 'form-control',
            'placeholder': _('At least 8 characters'),
        })
    )


class UserUpdateForm(forms.ModelForm):
    """
    Form for updating the signed-in user's name.
    """
    class Meta:
        model = User
        fields = ['email', 'first_name', 'last_name']
        widgets = {
            'email': forms.EmailInput(attrs={
                'class': 'form-control',
                'readonly': 'readonly'
            }),
            'first_name': forms.TextInput(attrs={
                'class': 'form-control'
            }),
            'last_name': forms.TextInput(attrs={
                'class': 'form-control'
            }),
        }

    def clean_email(self):
        # Email is the login id and the parent link; it is not editable here
        return self.instance.email


class CustomPasswordChangeForm(PasswordChangeForm):
    """
    Password change form with Bootstrap styling.
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        for field_name in self.fields:
            self.fields[field_name].widget.attrs.update({
                'class': 'form-control',
                'placeholder': _(f'Enter {self.fields[field_name].label.lower()}')
            })
