from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # Public website
    path('', views.HomeView.as_view(), name='home'),
    path('about/', views.AboutView.as_view(), name='about'),
    path('programs/', views.ProgramsView.as_view(), name='programs'),
    path('faculty/', views.FacultyView.as_view(), name='faculty'),
    path('contact/', views.ContactView.as_view(), name='contact'),

    # Admin dashboard
    path('dashboard/', views.AdminDashboardView.as_view(), name='admin_dashboard'),

    # Website content editors
    path('website-content/', views.WebsiteContentView.as_view(), name='website_content'),
    path('website-content/hero/', views.HeroContentEditView.as_view(), name='content_hero'),
    path('website-content/about/', views.AboutContentEditView.as_view(), name='content_about'),
    path('website-content/features/', views.FeaturesContentEditView.as_view(), name='content_features'),
    path('website-content/programs/', views.ProgramsContentEditView.as_view(), name='content_programs'),
]
