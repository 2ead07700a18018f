# apps/finance/views.py

from django.contrib import messages
from django.db.models import Sum
from django.shortcuts import redirect
from django.urls import reverse_lazy
from django.utils.translation import gettext_lazy as _
from django.views.generic import ListView, FormView, UpdateView, DeleteView, TemplateView

from apps.core.mixins import (
    AdminRequiredMixin, AdminDeleteMixin, ParentChildMixin, SearchableListMixin
)

from .forms import FeeCreateForm, FeeForm
from .models import Fee
from .services import create_fee_record, update_fee_record, FeeValidationError


# =============================================================================
# ADMIN FEE VIEWS
# =============================================================================

class FeeListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all fee records with search."""
    model = Fee
    template_name = 'finance/fees/fee_list.html'
    context_object_name = 'fees'
    search_fields = ('student_name', 'fee_title', 'status')
    live_collection = 'fees'


class FeeCreateView(AdminRequiredMixin, FormView):
    """Add a fee record for a student."""
    form_class = FeeCreateForm
    template_name = 'finance/fees/fee_form.html'
    success_url = reverse_lazy('finance:fee_list')

    def form_valid(self, form):
        data = form.cleaned_data
        try:
            fee = create_fee_record(
                student=data['student'],
                fee_title=data['fee_title'],
                amount_due=data['amount_due'],
                due_date=data['due_date'],
                status=data['status'],
                amount_paid=data.get('amount_paid'),
            )
        except FeeValidationError as e:
            form.add_error('amount_paid', e)
            return self.form_invalid(form)
        messages.success(self.request, _('Fee record for %(name)s added successfully.') % {
            'name': fee.student_name
        })
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        messages.error(self.request, _('Please correct the errors below.'))
        return super().form_invalid(form)


class FeeUpdateView(AdminRequiredMixin, UpdateView):
    """Edit a fee record; status, amount paid and payment date stay consistent."""
    model = Fee
    form_class = FeeForm
    template_name = 'finance/fees/fee_form.html'
    success_url = reverse_lazy('finance:fee_list')

    def form_valid(self, form):
        try:
            self.object = update_fee_record(form.instance)
        except FeeValidationError as e:
            form.add_error('amount_paid', e)
            return self.form_invalid(form)
        messages.success(self.request, _('Fee record updated successfully.'))
        return redirect(self.get_success_url())

    def form_invalid(self, form):
        messages.error(self.request, _('Please correct the errors below.'))
        return super().form_invalid(form)


class FeeDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a fee record."""
    model = Fee
    success_url = reverse_lazy('finance:fee_list')


# =============================================================================
# PARENT VIEWS
# =============================================================================

class ParentFeesView(ParentChildMixin, TemplateView):
    """The child's fee records with totals."""
    template_name = 'finance/parent/fees.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Fee Status')
        if self.child:
            fees = Fee.objects.for_student(self.child).order_by('-due_date', '-created_at')
            totals = fees.aggregate(total_due=Sum('amount_due'), total_paid=Sum('amount_paid'))
            total_due = totals['total_due'] or 0
            total_paid = totals['total_paid'] or 0
            context.update({
                'fees': fees,
                'total_due': total_due,
                'total_paid': total_paid,
                'total_balance': total_due - total_paid,
            })
        return context
