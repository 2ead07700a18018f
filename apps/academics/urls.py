# apps/academics/urls.py
from django.urls import path
from . import views

app_name = 'academics'

urlpatterns = [
    # Students
    path('students/', views.StudentListView.as_view(), name='student_list'),
    path('students/new/', views.StudentCreateView.as_view(), name='student_create'),
    path('students/<uuid:pk>/edit/', views.StudentUpdateView.as_view(), name='student_update'),
    path('students/<uuid:pk>/delete/', views.StudentDeleteView.as_view(), name='student_delete'),

    # Teachers
    path('teachers/', views.TeacherListView.as_view(), name='teacher_list'),
    path('teachers/new/', views.TeacherCreateView.as_view(), name='teacher_create'),
    path('teachers/<uuid:pk>/edit/', views.TeacherUpdateView.as_view(), name='teacher_update'),
    path('teachers/<uuid:pk>/delete/', views.TeacherDeleteView.as_view(), name='teacher_delete'),

    # Classes
    path('classes/', views.SchoolClassListView.as_view(), name='class_list'),
    path('classes/new/', views.SchoolClassCreateView.as_view(), name='class_create'),
    path('classes/<uuid:pk>/edit/', views.SchoolClassUpdateView.as_view(), name='class_update'),
    path('classes/<uuid:pk>/delete/', views.SchoolClassDeleteView.as_view(), name='class_delete'),

    # Subjects
    path('subjects/', views.SubjectListView.as_view(), name='subject_list'),
    path('subjects/new/', views.SubjectCreateView.as_view(), name='subject_create'),
    path('subjects/<uuid:pk>/edit/', views.SubjectUpdateView.as_view(), name='subject_update'),
    path('subjects/<uuid:pk>/delete/', views.SubjectDeleteView.as_view(), name='subject_delete'),
]
