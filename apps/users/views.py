# apps/users/views.py

import logging
from functools import wraps

from django.contrib import messages
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from django.contrib.auth.decorators import login_required
from django.shortcuts import render, redirect
from django.utils.translation import gettext_lazy as _

from apps.core.mixins import get_session_context

from .forms import LoginForm, ParentAccountForm, UserUpdateForm, CustomPasswordChangeForm
from .models import User
from .services import create_parent_user, ParentAccountError
from .session import SessionContext

logger = logging.getLogger(__name__)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================

def admin_required(view_func):
    """Decorator restricting a function view to admin sessions."""
    @wraps(view_func)
    @login_required
    def _wrapped(request, *args, **kwargs):
        if not get_session_context(request).is_admin:
            messages.error(request, _("You don't have permission to access this page."))
            return redirect(get_session_context(request).home_url_name)
        return view_func(request, *args, **kwargs)
    return _wrapped


def parent_required(view_func):
    """Decorator restricting a function view to parent sessions."""
    @wraps(view_func)
    @login_required
    def _wrapped(request, *args, **kwargs):
        if not get_session_context(request).is_parent:
            messages.error(request, _("You don't have permission to access this page."))
            return redirect(get_session_context(request).home_url_name)
        return view_func(request, *args, **kwargs)
    return _wrapped


# =============================================================================
# AUTHENTICATION VIEWS
# =============================================================================

def custom_login(request):
    """
    Email/password login; redirects to the role's home page.
    """
    if request.user.is_authenticated:
        return redirect(get_session_context(request).home_url_name)

    if request.method == 'POST':
        form = LoginForm(request.POST)
        if form.is_valid():
            email = form.cleaned_data['email']
            user = authenticate(
                request,
                email=email,
                password=form.cleaned_data['password'],
            )
            if user is not None:
                login(request, user)
                request.session_context = SessionContext.for_user(user)
                logger.info(f"User {user.email} signed in as {request.session_context.role}")
                messages.success(request, _('Login successful!'))

                next_url = request.POST.get('next') or request.GET.get('next')
                if next_url and next_url.startswith('/') and not next_url.startswith('//'):
                    return redirect(next_url)
                return redirect(request.session_context.home_url_name)

            messages.error(request, _('Invalid email or password.'))
    else:
        form = LoginForm()

    context = {
        'title': _('Login'),
        'form': form,
        'next': request.GET.get('next', ''),
    }
    return render(request, 'users/auth/login.html', context)


def custom_logout(request):
    """
    Sign out and clear the session context.
    """
    if request.user.is_authenticated:
        logger.info(f"User {request.user.email} signed out")
    logout(request)
    request.session_context = SessionContext()
    messages.info(request, _('You have been logged out successfully.'))
    return redirect('core:home')


# =============================================================================
# PROFILE VIEWS
# =============================================================================

@login_required
def profile_view(request):
    """
    Profile page with name update and password change forms.
    """
    user = request.user
    user_form = UserUpdateForm(instance=user)
    password_form = CustomPasswordChangeForm(user)

    if request.method == 'POST':
        action = request.POST.get('action', 'profile')
        if action == 'password':
            password_form = CustomPasswordChangeForm(user, request.POST)
            if password_form.is_valid():
                password_form.save()
                update_session_auth_hash(request, password_form.user)
                logger.info(f"Password changed for {user.email}")
                messages.success(request, _('Password changed successfully!'))
                return redirect('users:profile')
            messages.error(request, _('Please correct the errors below.'))
        else:
            user_form = UserUpdateForm(request.POST, instance=user)
            if user_form.is_valid():
                user_form.save()
                logger.info(f"Profile updated for {user.email}")
                messages.success(request, _('Profile updated successfully!'))
                return redirect('users:profile')
            messages.error(request, _('Please correct the errors below.'))

    context = {
        'title': _('My Profile'),
        'user_form': user_form,
        'password_form': password_form,
    }
    return render(request, 'users/profile/profile.html', context)


# =============================================================================
# ADMIN: PARENT ACCOUNTS
# =============================================================================

@admin_required
def manage_parents(request):
    """
    Create parent logins. Errors are shown with their code.
    """
    if request.method == 'POST':
        form = ParentAccountForm(request.POST)
        if form.is_valid():
            try:
                result = create_parent_user(
                    form.cleaned_data['email'],
                    form.cleaned_data['password'],
                )
            except ParentAccountError as e:
                logger.warning(f"Parent account creation failed: {e}")
                messages.error(request, _('Error creating account: %(error)s') % {'error': e})
            else:
                messages.success(request, result.message)
                return redirect('users:manage_parents')
    else:
        form = ParentAccountForm()

    context = {
        'title': _('Manage Parent Accounts'),
        'form': form,
        'parents': User.objects.filter(role=User.Role.PARENT).order_by('email'),
    }
    return render(request, 'users/manage_parents.html', context)


# =============================================================================
# PARENT DASHBOARD
# =============================================================================

@parent_required
def parent_dashboard(request):
    """
    Parent landing page: the linked child's identity and a quick summary.
    """
    from apps.academics.services import get_child_for_parent
    from apps.assessment.models import Result
    from apps.attendance.models import AttendanceRecord
    from apps.attendance.services import summarize_attendance
    from apps.finance.models import Fee

    child = get_child_for_parent(request.user)
    context = {
        'title': _('Parent Dashboard'),
        'child': child,
    }

    if child is None:
        messages.warning(request, _(
            "No student record found linked to your email. "
            "Please contact the school administration."
        ))
        return render(request, 'users/dashboard/parent_dashboard.html', context)

    results = Result.objects.for_student(child)
    latest_result = results.order_by('-created_at').first()
    latest_remark = results.exclude(comments='').order_by('-created_at').first()
    outstanding_fees = Fee.objects.for_student(child).exclude(status=Fee.Status.PAID)

    context.update({
        'latest_result': latest_result,
        'latest_remark': latest_remark,
        'attendance_summary': summarize_attendance(
            AttendanceRecord.objects.for_student(child)
        ),
        'outstanding_fee_count': outstanding_fees.count(),
    })
    return render(request, 'users/dashboard/parent_dashboard.html', context)
