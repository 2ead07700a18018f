# apps/core/mixins.py

import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.core.exceptions import PermissionDenied
from django.db.models import Q
from django.shortcuts import redirect
from django.utils.translation import gettext_lazy as _

from apps.users.session import SessionContext

logger = logging.getLogger(__name__)


def get_session_context(request):
    """Session context for ``request``, built on demand if no middleware ran."""
    session = getattr(request, 'session_context', None)
    if session is None:
        session = SessionContext.for_user(getattr(request, 'user', None))
        request.session_context = session
    return session


class RoleRequiredMixin(LoginRequiredMixin, UserPassesTestMixin):
    """
    Base mixin for views restricted to one role.

    Anonymous users are sent to the login page; signed-in users with the
    wrong role get a message and are redirected to their own home page.
    """
    required_role = None

    def test_func(self):
        return get_session_context(self.request).role == self.required_role

    def handle_no_permission(self):
        if not self.request.user.is_authenticated:
            return super().handle_no_permission()
        if self.raise_exception:
            raise PermissionDenied(self.get_permission_denied_message())
        messages.error(self.request, _("You don't have permission to access this page."))
        return redirect(get_session_context(self.request).home_url_name)


class AdminRequiredMixin(RoleRequiredMixin):
    """Mixin to ensure the user holds the admin role."""
    required_role = 'admin'


class ParentRequiredMixin(RoleRequiredMixin):
    """Mixin to ensure the user holds the parent role."""
    required_role = 'parent'


class ParentChildMixin(ParentRequiredMixin):
    """
    Resolve the signed-in parent's child for parent pages.

    ``self.child`` is the first student whose parent email matches the
    user's email, or ``None``; templates show a "no linked student"
    message in that case.
    """
    no_child_message = _(
        "No student record found linked to your email. "
        "Please contact the school administration."
    )

    def dispatch(self, request, *args, **kwargs):
        from apps.academics.services import get_child_for_parent
        if request.user.is_authenticated:
            self.child = get_child_for_parent(request.user)
        else:
            self.child = None
        return super().dispatch(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['child'] = self.child
        context['no_child_message'] = self.no_child_message
        return context


class AdminDeleteMixin(AdminRequiredMixin):
    """
    Confirmation-then-delete for admin pages.

    GET renders the confirmation page, POST hard-deletes the record. Records
    referencing the deleted one are left untouched.
    """
    template_name = 'core/confirm_delete.html'
    cancel_url = None

    def form_valid(self, form):
        label = str(self.object)
        response = super().form_valid(form)
        logger.info(f"{self.model.__name__} deleted: {label}")
        messages.success(self.request, _('%(name)s deleted successfully.') % {
            'name': self.model._meta.verbose_name.title()
        })
        return response

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['verbose_name'] = self.model._meta.verbose_name
        context['cancel_url'] = self.cancel_url or self.get_success_url()
        return context


class SearchableListMixin:
    """
    Filters a list view by the ``q`` query parameter over ``search_fields``.

    ``live_collection`` names the live query the list page subscribes to.
    """
    search_fields = ()
    paginate_by = 25
    live_collection = None

    def get_queryset(self):
        from .forms import RecordSearchForm
        queryset = super().get_queryset()
        form = RecordSearchForm(self.request.GET)
        if form.is_valid() and form.cleaned_data.get('q'):
            term = form.cleaned_data['q']
            query = Q()
            for field in self.search_fields:
                query |= Q(**{f'{field}__icontains': term})
            queryset = queryset.filter(query)
        return queryset

    def get_context_data(self, **kwargs):
        from .forms import RecordSearchForm
        context = super().get_context_data(**kwargs)
        context['search_form'] = RecordSearchForm(self.request.GET)
        context['live_collection'] = self.live_collection
        return context


class AdminSaveMessageMixin:
    """
    Success message and log line for admin create/update forms.
    """
    success_message = None
    is_update = False

    def form_valid(self, form):
        response = super().form_valid(form)
        action = 'updated' if self.is_update else 'created'
        logger.info(f"{self.model.__name__} {action}: {self.object}")
        messages.success(self.request, self.success_message)
        return response

    def form_invalid(self, form):
        messages.error(self.request, _('Please correct the errors below.'))
        return super().form_invalid(form)
