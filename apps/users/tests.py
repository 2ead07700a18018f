# apps/users/tests.py

from io import StringIO

from django.contrib.auth import authenticate, get_user_model
from django.contrib.messages import get_messages
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase, Client
from django.urls import reverse

from apps.academics.models import Student
from .services import create_parent_user, ParentAccountError
from .session import SessionContext

User = get_user_model()


class ParentAccountServiceTestCase(TestCase):
    """Test cases for parent account creation"""

    def test_create_parent_user(self):
        """A new parent login gets the parent role and a success message"""
        result = create_parent_user('parent@example.com', 'Temp-pass-2024')

        self.assertTrue(result.success)
        self.assertEqual(result.message, 'Account for parent@example.com successfully created.')
        user = User.objects.get(email='parent@example.com')
        self.assertEqual(str(user.id), result.uid)
        self.assertEqual(user.role, User.Role.PARENT)
        self.assertTrue(user.check_password('Temp-pass-2024'))

    def test_missing_arguments(self):
        for email, password in (('', 'Temp-pass-2024'), ('parent@example.com', ''), (None, None)):
            with self.assertRaises(ParentAccountError) as ctx:
                create_parent_user(email, password)
            self.assertEqual(ctx.exception.code, ParentAccountError.INVALID_ARGUMENT)
            self.assertEqual(
                ctx.exception.message,
                'Please provide both parent email and a temporary password.'
            )

    def test_invalid_email(self):
        with self.assertRaises(ParentAccountError) as ctx:
            create_parent_user('not-an-email', 'Temp-pass-2024')
        self.assertEqual(ctx.exception.code, ParentAccountError.INVALID_ARGUMENT)

    def test_duplicate_email_is_case_insensitive(self):
        create_parent_user('parent@example.com', 'Temp-pass-2024')

        with self.assertRaises(ParentAccountError) as ctx:
            create_parent_user('PARENT@example.com', 'Another-pass-2024')
        self.assertEqual(ctx.exception.code, ParentAccountError.ALREADY_EXISTS)
        self.assertEqual(User.objects.filter(email__iexact='parent@example.com').count(), 1)

    def test_weak_password_rejected(self):
        with self.assertRaises(ParentAccountError) as ctx:
            create_parent_user('parent@example.com', '123')
        self.assertEqual(ctx.exception.code, ParentAccountError.INVALID_ARGUMENT)
        self.assertFalse(User.objects.filter(email='parent@example.com').exists())

    def test_error_string_includes_code(self):
        error = ParentAccountError(ParentAccountError.ALREADY_EXISTS, 'An account for a@b.com already exists.')
        self.assertEqual(str(error), 'An account for a@b.com already exists. (Code: already-exists)')


class SessionContextTestCase(TestCase):
    """Test cases for the per-request session context"""

    def test_anonymous_session(self):
        session = SessionContext.for_user(None)
        self.assertFalse(session.is_authenticated)
        self.assertFalse(session.is_admin)
        self.assertFalse(session.is_parent)
        self.assertEqual(session.home_url_name, 'core:home')

    def test_role_comes_from_stored_claim(self):
        admin = User.objects.create_user(email='parent-looking@example.com', password='x', role=User.Role.ADMIN)
        parent = User.objects.create_user(email='admin@example.com', password='x', role=User.Role.PARENT)

        self.assertTrue(SessionContext.for_user(admin).is_admin)
        self.assertEqual(SessionContext.for_user(admin).home_url_name, 'core:admin_dashboard')
        self.assertTrue(SessionContext.for_user(parent).is_parent)
        self.assertEqual(SessionContext.for_user(parent).home_url_name, 'users:parent_dashboard')

    def test_superuser_is_admin(self):
        superuser = User.objects.create_superuser(email='root@example.com', password='x', role=User.Role.PARENT)
        self.assertTrue(SessionContext.for_user(superuser).is_admin)


class EmailBackendTestCase(TestCase):
    """Test cases for email authentication"""

    def setUp(self):
        self.user = User.objects.create_user(email='admin@example.com', password='testpass123', role=User.Role.ADMIN)

    def test_email_match_is_case_insensitive(self):
        self.assertEqual(authenticate(email='ADMIN@Example.com', password='testpass123'), self.user)

    def test_wrong_password(self):
        self.assertIsNone(authenticate(email='admin@example.com', password='wrong'))

    def test_unknown_email(self):
        self.assertIsNone(authenticate(email='nobody@example.com', password='testpass123'))

    def test_inactive_user(self):
        self.user.is_active = False
        self.user.save()
        self.assertIsNone(authenticate(email='admin@example.com', password='testpass123'))


class UserViewsTestCase(TestCase):
    """Test cases for login, logout and parent account views"""

    def setUp(self):
        self.admin_user = User.objects.create_user(
            email='admin@example.com',
            password='testpass123',
            role=User.Role.ADMIN
        )
        self.parent_user = User.objects.create_user(
            email='parent@example.com',
            password='testpass123',
            role=User.Role.PARENT
        )
        self.client = Client()

    def test_login_redirects_admin_to_dashboard(self):
        response = self.client.post(reverse('users:login'), {
            'email': 'admin@example.com',
            'password': 'testpass123',
        })
        self.assertRedirects(response, reverse('core:admin_dashboard'))

    def test_login_redirects_parent_to_parent_dashboard(self):
        response = self.client.post(reverse('users:login'), {
            'email': 'parent@example.com',
            'password': 'testpass123',
        })
        self.assertRedirects(response, reverse('users:parent_dashboard'))

    def test_login_honours_next(self):
        response = self.client.post(reverse('users:login') + '?next=/users/profile/', {
            'email': 'admin@example.com',
            'password': 'testpass123',
        })
        self.assertRedirects(response, reverse('users:profile'))

    def test_invalid_login(self):
        response = self.client.post(reverse('users:login'), {
            'email': 'admin@example.com',
            'password': 'wrong',
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Invalid email or password.')

    def test_logout_clears_session(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('users:logout'))
        self.assertRedirects(response, reverse('core:home'))

        response = self.client.get(reverse('core:admin_dashboard'))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('users:login'), response.url)

    def test_profile_update(self):
        self.client.login(email='parent@example.com', password='testpass123')
        response = self.client.post(reverse('users:profile'), {
            'action': 'profile',
            'email': 'parent@example.com',
            'first_name': 'Ada',
            'last_name': 'Obi',
        })
        self.assertRedirects(response, reverse('users:profile'))
        self.parent_user.refresh_from_db()
        self.assertEqual(self.parent_user.first_name, 'Ada')

    def test_manage_parents_requires_admin(self):
        self.client.login(email='parent@example.com', password='testpass123')
        response = self.client.get(reverse('users:manage_parents'))
        self.assertRedirects(response, reverse('users:parent_dashboard'), fetch_redirect_response=False)

    def test_manage_parents_creates_account(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('users:manage_parents'), {
            'email': 'new.parent@example.com',
            'password': 'Temp-pass-2024',
        })
        self.assertRedirects(response, reverse('users:manage_parents'))
        self.assertTrue(User.objects.filter(email='new.parent@example.com', role=User.Role.PARENT).exists())

    def test_manage_parents_shows_error_code(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('users:manage_parents'), {
            'email': 'PARENT@example.com',
            'password': 'Temp-pass-2024',
        })
        self.assertEqual(response.status_code, 200)
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn(
            'Error creating account: An account for PARENT@example.com already exists. (Code: already-exists)',
            messages
        )


class ParentDashboardTestCase(TestCase):
    """Test cases for the parent dashboard"""

    def setUp(self):
        self.parent_user = User.objects.create_user(
            email='parent@example.com',
            password='testpass123',
            role=User.Role.PARENT
        )
        self.client = Client()
        self.client.login(email='parent@example.com', password='testpass123')

    def test_no_linked_child(self):
        response = self.client.get(reverse('users:parent_dashboard'))
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.context['child'])
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn(
            'No student record found linked to your email. Please contact the school administration.',
            messages
        )

    def test_child_linked_by_parent_email(self):
        Student.objects.create(
            student_name='Chidi Okafor',
            student_id='S001',
            grade_level='Grade 5',
            parent_name='Ngozi Okafor',
            parent_email='Parent@Example.com',
        )
        response = self.client.get(reverse('users:parent_dashboard'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Chidi Okafor')
        self.assertEqual(response.context['child'].get_initials(), 'CO')
        self.assertEqual(response.context['outstanding_fee_count'], 0)

    def test_admin_cannot_open_parent_dashboard(self):
        User.objects.create_user(email='admin@example.com', password='testpass123', role=User.Role.ADMIN)
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.get(reverse('users:parent_dashboard'))
        self.assertRedirects(response, reverse('core:admin_dashboard'))


class CreateAdminCommandTestCase(TestCase):
    """Test cases for the create_admin management command"""

    def test_creates_admin(self):
        out = StringIO()
        call_command('create_admin', 'head@example.com', password='Head-teacher-2024', stdout=out)
        user = User.objects.get(email='head@example.com')
        self.assertEqual(user.role, User.Role.ADMIN)
        self.assertTrue(user.is_staff)
        self.assertIn('Administrator head@example.com created', out.getvalue())

    def test_promotes_existing_user(self):
        User.objects.create_user(email='parent@example.com', password='x', role=User.Role.PARENT)
        call_command('create_admin', 'PARENT@example.com', stdout=StringIO())
        self.assertEqual(User.objects.get(email='parent@example.com').role, User.Role.ADMIN)

    def test_new_admin_needs_password(self):
        with self.assertRaises(CommandError):
            call_command('create_admin', 'head@example.com', stdout=StringIO())
