# apps/core/forms.py

from django import forms
from django.utils.translation import gettext_lazy as _

from .content import FEATURES_COUNT


class RecordSearchForm(forms.Form):
    """Free-text search box used on admin list pages."""
    q = forms.CharField(
        required=False,
        label=_('Search'),
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('Search...')})
    )


class ContactForm(forms.Form):
    """
    Public inquiry form. Submissions are logged, not stored.
    """
    name = forms.CharField(
        label=_('Full Name'), min_length=2, max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': 'John Doe'})
    )
    email = forms.EmailField(
        label=_('Email Address'),
        widget=forms.EmailInput(attrs={'class': 'form-control', 'placeholder': 'john.doe@example.com'})
    )
    subject = forms.CharField(
        label=_('Subject'), min_length=5, max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': _('Inquiry about admissions')})
    )
    message = forms.CharField(
        label=_('Message'), min_length=10,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 5})
    )


# =============================================================================
# WEBSITE CONTENT FORMS
# =============================================================================

class WebsiteContentForm(forms.Form):
    """
    Base form for one website section. Field names are the stored keys.
    """

    @classmethod
    def initial_from_content(cls, content):
        return {name: content.get(name, '') for name in cls.base_fields}

    def to_content(self):
        return dict(self.cleaned_data)


class HeroContentForm(WebsiteContentForm):
    title = forms.CharField(
        label=_('Main Title'), max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control'})
    )
    subtitle = forms.CharField(
        label=_('Subtitle / Description'),
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3})
    )
    cta_button_1_text = forms.CharField(
        label=_('Button 1 Text'), max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'})
    )
    cta_button_1_link = forms.CharField(
        label=_('Button 1 Link'), max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': '/about/'})
    )
    cta_button_2_text = forms.CharField(
        label=_('Button 2 Text'), max_length=100,
        widget=forms.TextInput(attrs={'class': 'form-control'})
    )
    cta_button_2_link = forms.CharField(
        label=_('Button 2 Link'), max_length=200,
        widget=forms.TextInput(attrs={'class': 'form-control', 'placeholder': '/contact/'})
    )


class AboutContentForm(WebsiteContentForm):
    page_title = forms.CharField(label=_('Page Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    page_subtitle = forms.CharField(label=_('Page Subtitle'), widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2}))
    story_title = forms.CharField(label=_('Story Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    story_paragraph_1 = forms.CharField(label=_('Story Paragraph 1'), widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 4}))
    story_paragraph_2 = forms.CharField(
        label=_('Story Paragraph 2'), required=False,
        widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 4})
    )
    mission_title = forms.CharField(label=_('Mission Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    mission_statement = forms.CharField(label=_('Mission Statement'), widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))
    vision_title = forms.CharField(label=_('Vision Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    vision_statement = forms.CharField(label=_('Vision Statement'), widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))
    leadership_title = forms.CharField(label=_('Leadership Section Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))


class FeaturesContentForm(WebsiteContentForm):
    """
    Section title plus a fixed number of feature title/description pairs,
    stored as a ``features`` list.
    """
    page_title = forms.CharField(label=_('Section Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for index in range(1, FEATURES_COUNT + 1):
            self.fields[f'feature_{index}_title'] = forms.CharField(
                label=_('Feature %(n)s Title') % {'n': index},
                max_length=200,
                widget=forms.TextInput(attrs={'class': 'form-control'})
            )
            self.fields[f'feature_{index}_description'] = forms.CharField(
                label=_('Feature %(n)s Description') % {'n': index},
                widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 2})
            )

    @classmethod
    def initial_from_content(cls, content):
        initial = {'page_title': content.get('page_title', '')}
        for index, feature in enumerate(content.get('features', [])[:FEATURES_COUNT], start=1):
            initial[f'feature_{index}_title'] = feature.get('title', '')
            initial[f'feature_{index}_description'] = feature.get('description', '')
        return initial

    def to_content(self):
        data = self.cleaned_data
        return {
            'page_title': data['page_title'],
            'features': [
                {
                    'title': data[f'feature_{index}_title'],
                    'description': data[f'feature_{index}_description'],
                }
                for index in range(1, FEATURES_COUNT + 1)
            ],
        }


class ProgramsContentForm(WebsiteContentForm):
    page_title = forms.CharField(label=_('Page Title'), max_length=200, widget=forms.TextInput(attrs={'class': 'form-control'}))
    page_subtitle = forms.CharField(label=_('Page Subtitle'), widget=forms.Textarea(attrs={'class': 'form-control', 'rows': 3}))
