# apps/assessment/urls.py
from django.urls import path
from . import views

app_name = 'assessment'

urlpatterns = [
    # Admin
    path('results/', views.ResultListView.as_view(), name='result_list'),
    path('results/new/', views.ResultBatchCreateView.as_view(), name='result_create'),
    path('results/<uuid:pk>/edit/', views.ResultUpdateView.as_view(), name='result_update'),
    path('results/<uuid:pk>/delete/', views.ResultDeleteView.as_view(), name='result_delete'),

    # Parent
    path('parent/grades/', views.ParentGradesView.as_view(), name='parent_grades'),
    path('parent/remarks/', views.ParentRemarksView.as_view(), name='parent_remarks'),
    path('parent/report-cards/', views.ParentReportCardsView.as_view(), name='parent_report_cards'),
    path('parent/report-cards/download/', views.ReportCardDownloadView.as_view(), name='report_card_download'),
]
