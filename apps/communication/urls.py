# apps/communication/urls.py
from django.urls import path
from . import views

app_name = 'communication'

urlpatterns = [
    # Admin
    path('notices/manage/', views.NoticeListView.as_view(), name='notice_list'),
    path('notices/manage/new/', views.NoticeCreateView.as_view(), name='notice_create'),
    path('notices/manage/<uuid:pk>/edit/', views.NoticeUpdateView.as_view(), name='notice_update'),
    path('notices/manage/<uuid:pk>/delete/', views.NoticeDeleteView.as_view(), name='notice_delete'),

    # Public
    path('notices/', views.PublicNoticeListView.as_view(), name='public_notices'),
]
