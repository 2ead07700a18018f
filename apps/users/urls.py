# apps/users/urls.py
from django.urls import path
from . import views

app_name = 'users'

urlpatterns = [
    # =========================================================================
    # AUTHENTICATION ROUTES
    # =========================================================================
    path('login/', views.custom_login, name='login'),
    path('logout/', views.custom_logout, name='logout'),

    # =========================================================================
    # PROFILE
    # =========================================================================
    path('profile/', views.profile_view, name='profile'),

    # =========================================================================
    # ADMIN: PARENT ACCOUNTS
    # =========================================================================
    path('parents/', views.manage_parents, name='manage_parents'),

    # =========================================================================
    # PARENT PORTAL
    # =========================================================================
    path('parent/dashboard/', views.parent_dashboard, name='parent_dashboard'),
]
