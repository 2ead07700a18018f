# apps/attendance/urls.py
from django.urls import path
from . import views

app_name = 'attendance'

urlpatterns = [
    # Admin
    path('records/', views.AttendanceListView.as_view(), name='record_list'),
    path('records/new/', views.AttendanceCreateView.as_view(), name='record_create'),
    path('records/<uuid:pk>/edit/', views.AttendanceUpdateView.as_view(), name='record_update'),
    path('records/<uuid:pk>/delete/', views.AttendanceDeleteView.as_view(), name='record_delete'),

    # Parent
    path('parent/', views.ParentAttendanceView.as_view(), name='parent_attendance'),
]
