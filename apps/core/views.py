import logging

from django.conf import settings
from django.contrib import messages
from django.shortcuts import render, redirect
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views import View
from django.views.generic import TemplateView, ListView, FormView

from apps.academics.models import Student, Teacher, SchoolClass
from apps.communication.models import Notice

from .content import PROGRAM_LISTINGS, Section, get_section, save_section
from .forms import (
    ContactForm, HeroContentForm, AboutContentForm,
    FeaturesContentForm, ProgramsContentForm
)
from .mixins import AdminRequiredMixin

logger = logging.getLogger(__name__)


# =============================================================================
# PUBLIC WEBSITE
# =============================================================================

class HomeView(TemplateView):
    """Landing page: hero, features and the newest published notices."""
    template_name = 'core/public/home.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['hero'] = get_section(Section.HERO)
        context['features'] = get_section(Section.FEATURES)
        context['latest_notices'] = Notice.objects.latest_published(settings.NOTICES_PREVIEW_LIMIT)
        context['notices_live_collection'] = 'publishedNotices'
        return context


class AboutView(TemplateView):
    template_name = 'core/public/about.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['about'] = get_section(Section.ABOUT)
        return context


class ProgramsView(TemplateView):
    template_name = 'core/public/programs.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['programs'] = get_section(Section.PROGRAMS)
        context['program_listings'] = PROGRAM_LISTINGS
        return context


class FacultyView(ListView):
    """Public list of teaching staff."""
    model = Teacher
    template_name = 'core/public/faculty.html'
    context_object_name = 'teachers'


class ContactView(FormView):
    """
    Contact page. A valid inquiry is logged and acknowledged; there is no
    mailbox behind it.
    """
    form_class = ContactForm
    template_name = 'core/public/contact.html'
    success_url = reverse_lazy('core:contact')

    def form_valid(self, form):
        data = form.cleaned_data
        logger.info(f"Contact inquiry from {data['email']}: {data['subject']}")
        messages.success(
            self.request,
            _("Message sent! Thank you for contacting %(school)s. We'll get back to you shortly.") % {
                'school': settings.SCHOOL_NAME
            }
        )
        return super().form_valid(form)


# =============================================================================
# ADMIN DASHBOARD
# =============================================================================

class AdminDashboardView(AdminRequiredMixin, TemplateView):
    """
    Admin landing page with headline counts.
    """
    template_name = 'core/dashboard/admin_dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update({
            'title': _('Admin Dashboard'),
            'total_students': Student.objects.count(),
            'total_teachers': Teacher.objects.count(),
            'total_classes': SchoolClass.objects.count(),
            'published_notices': Notice.objects.published().count(),
            'recent_notices': Notice.objects.order_by('-created_at')[:5],
        })
        return context


# =============================================================================
# WEBSITE CONTENT EDITORS
# =============================================================================

class WebsiteContentView(AdminRequiredMixin, TemplateView):
    """Index of the editable website sections."""
    template_name = 'core/content/website_content.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Website Content')
        context['sections'] = [
            (Section.HERO.label, 'core:content_hero'),
            (Section.ABOUT.label, 'core:content_about'),
            (Section.FEATURES.label, 'core:content_features'),
            (Section.PROGRAMS.label, 'core:content_programs'),
        ]
        return context


class SectionEditView(AdminRequiredMixin, View):
    """
    Edit one website section. The form starts from the stored content
    layered over the defaults; saving merges into the stored record.
    """
    template_name = 'core/content/section_form.html'
    section = None
    form_class = None
    success_url_name = None

    def render_form(self, request, form):
        context = {
            'title': _('Edit %(section)s') % {'section': self.section.label},
            'form': form,
        }
        return render(request, self.template_name, context)

    def get(self, request):
        initial = self.form_class.initial_from_content(get_section(self.section))
        return self.render_form(request, self.form_class(initial=initial))

    def post(self, request):
        form = self.form_class(request.POST)
        if form.is_valid():
            save_section(self.section, form.to_content())
            messages.success(request, _('%(section)s updated successfully.') % {
                'section': self.section.label
            })
            return redirect(self.success_url_name)

        messages.error(request, _('Please correct the errors below.'))
        return self.render_form(request, form)


class HeroContentEditView(SectionEditView):
    section = Section.HERO
    form_class = HeroContentForm
    success_url_name = 'core:content_hero'


class AboutContentEditView(SectionEditView):
    section = Section.ABOUT
    form_class = AboutContentForm
    success_url_name = 'core:content_about'


class FeaturesContentEditView(SectionEditView):
    section = Section.FEATURES
    form_class = FeaturesContentForm
    success_url_name = 'core:content_features'


class ProgramsContentEditView(SectionEditView):
    section = Section.PROGRAMS
    form_class = ProgramsContentForm
    success_url_name = 'core:content_programs'
