# apps/assessment/views.py

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import render, redirect
from django.urls import reverse_lazy
from django.utils.http import content_disposition_header
from django.utils.translation import gettext_lazy as _
from django.views import View
from django.views.generic import ListView, UpdateView, DeleteView, TemplateView

from apps.core.mixins import (
    AdminRequiredMixin, AdminDeleteMixin, AdminSaveMessageMixin,
    ParentChildMixin, SearchableListMixin
)

from .forms import ResultBatchForm, ResultEntryFormSet, ResultForm
from .models import Result
from .report_cards import ReportCardBlock, ReportExportError, export_report_card
from .services import record_results, summarize_terms, overall_average


def child_results(child):
    """A child's results newest term first, newest entry first within a term."""
    return Result.objects.for_student(child).order_by('-term', '-created_at')


# =============================================================================
# ADMIN RESULT VIEWS
# =============================================================================

class ResultListView(AdminRequiredMixin, SearchableListMixin, ListView):
    """List all results with search."""
    model = Result
    template_name = 'assessment/results/result_list.html'
    context_object_name = 'results'
    search_fields = ('student_name', 'subject_name', 'term', 'marks')
    live_collection = 'results'


class ResultBatchCreateView(AdminRequiredMixin, View):
    """
    Enter several subject results for one student and term at once.
    """
    template_name = 'assessment/results/result_batch_form.html'

    def get(self, request):
        context = {
            'title': _('Add Results'),
            'form': ResultBatchForm(),
            'formset': ResultEntryFormSet(prefix='entries'),
        }
        return render(request, self.template_name, context)

    def post(self, request):
        form = ResultBatchForm(request.POST)
        formset = ResultEntryFormSet(request.POST, prefix='entries')

        if form.is_valid() and formset.is_valid():
            student = form.cleaned_data['student']
            term = form.cleaned_data['term']
            rows = record_results(student, term, formset.entries())
            messages.success(request, _('%(count)s result(s) saved for %(name)s.') % {
                'count': len(rows), 'name': student.student_name
            })
            return redirect('assessment:result_list')

        messages.error(request, _('Please correct the errors below.'))
        context = {
            'title': _('Add Results'),
            'form': form,
            'formset': formset,
        }
        return render(request, self.template_name, context)


class ResultUpdateView(AdminRequiredMixin, AdminSaveMessageMixin, UpdateView):
    """Update a single result."""
    model = Result
    form_class = ResultForm
    template_name = 'assessment/results/result_form.html'
    success_url = reverse_lazy('assessment:result_list')
    success_message = _('Result updated successfully.')
    is_update = True


class ResultDeleteView(AdminDeleteMixin, DeleteView):
    """Delete a result."""
    model = Result
    success_url = reverse_lazy('assessment:result_list')


# =============================================================================
# PARENT VIEWS
# =============================================================================

class ParentGradesView(ParentChildMixin, TemplateView):
    """All of the child's results with an overall average."""
    template_name = 'assessment/parent/grades.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Grades')
        if self.child:
            results = list(child_results(self.child))
            context['results'] = results
            context['overall_average'] = overall_average(results)
        return context


class ParentRemarksView(ParentChildMixin, TemplateView):
    """Teacher comments left on the child's results."""
    template_name = 'assessment/parent/remarks.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Teacher Remarks')
        if self.child:
            context['remarks'] = (
                Result.objects.for_student(self.child)
                .exclude(comments='')
                .order_by('-created_at')
            )
        return context


class ParentReportCardsView(ParentChildMixin, TemplateView):
    """One report card per term, each with a PDF download link."""
    template_name = 'assessment/parent/report_cards.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['title'] = _('Report Cards')
        if self.child:
            summaries = summarize_terms(child_results(self.child))
            context['report_cards'] = [
                ReportCardBlock.build(self.child, summary) for summary in summaries
            ]
        return context


class ReportCardDownloadView(ParentChildMixin, View):
    """
    PDF of one term's report card; the term label comes from ``?term=``.
    Failures leave the parent on the report cards page with an error.
    """

    def get(self, request):
        term = request.GET.get('term', '')
        if self.child is None:
            messages.error(request, self.no_child_message)
            return redirect('assessment:parent_report_cards')

        try:
            report = export_report_card(
                self.child,
                summarize_terms(child_results(self.child)),
                term,
            )
        except ReportExportError as e:
            messages.error(request, _('Could not generate PDF: %(error)s') % {'error': e})
            return redirect('assessment:parent_report_cards')

        response = HttpResponse(report.content, content_type=report.content_type)
        response['Content-Disposition'] = content_disposition_header(True, report.filename)
        return response
