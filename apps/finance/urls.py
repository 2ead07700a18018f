# apps/finance/urls.py
from django.urls import path
from . import views

app_name = 'finance'

urlpatterns = [
    # Admin
    path('fees/', views.FeeListView.as_view(), name='fee_list'),
    path('fees/new/', views.FeeCreateView.as_view(), name='fee_create'),
    path('fees/<uuid:pk>/edit/', views.FeeUpdateView.as_view(), name='fee_update'),
    path('fees/<uuid:pk>/delete/', views.FeeDeleteView.as_view(), name='fee_delete'),

    # Parent
    path('parent/fees/', views.ParentFeesView.as_view(), name='parent_fees'),
]
