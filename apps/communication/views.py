# apps/communication/views.py

import logging

from django.contrib import messages
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import ListView, CreateView, UpdateView, DeleteView

from apps.core.mixins import AdminRequiredMixin, AdminDeleteMixin, SearchableListMixin

from .forms import NoticeForm
from .models import Notice

logger = logging.getLogger(__name__)


# =============================================================================
# ADMIN NOTICE VIEWS
# =============================================================================

class NoticeFormMixin:
    """Passes the clicked submit button to ``NoticeForm``."""
    model = Notice
    form_class = NoticeForm
    template_name = 'communication/notices/notice_form.html'
    success_url = reverse_lazy('communication:notice_list')

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        if self.request.method == 'POST':
            if NoticeForm.PUBLISH_ACTION in self.request.POST:
                kwargs['action'] = NoticeForm.PUBLISH_ACTION
            else:
                kwargs['action'] = NoticeForm.DRAFT_ACTION
        return kwargs

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Notice saved: {self.object.title} ({self.object.status})")
        if self.object.is_published:
            messages.success(self.request, _('Notice "%(title)s" published.') % {'title': self.object.title})
        else:
            messages.success(self.request, _('Notice "%(title)s" saved as draft.') % {'title': self.object.title})
        return response

    def form_invalid(self, form):
        messages.error(self.request, _('Please correct the errors below.'))
        return super().form_invalid(form)


class NoticeListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all notices, drafts included."""
    model = Notice
    template_name = 'communication/notices/notice_list.html'
    context_object_name = 'notices'
    search_fields = ('title', 'audience', 'content', 'status')
    live_collection = 'notices'


class NoticeCreateView(AdminRequiredMixin, NoticeFormMixin, CreateView):
    """Create a notice as published or draft."""


class NoticeUpdateView(AdminRequiredMixin, NoticeFormMixin, UpdateView):
    """Edit a notice; the submit button sets its status."""


class NoticeDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a notice."""
    model = Notice
    success_url = reverse_lazy('communication:notice_list')


# =============================================================================
# PUBLIC VIEWS
# =============================================================================

class PublicNoticeListView(ListView):
    """Published notices, newest first."""
    template_name = 'communication/notices/public_notice_list.html'
    context_object_name = 'notices'
    paginate_by = 10

    def get_queryset(self):
        return Notice.objects.latest_published()
