# apps/finance/tests.py

from datetime import date, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase, Client
from django.urls import reverse
from django.utils import timezone

from apps.academics.models import Student
from .models import Fee
from .services import create_fee_record, update_fee_record, FeeValidationError

User = get_user_model()


class FeeRulesTestCase(TestCase):
    """Test cases for fee status rules"""

    def setUp(self):
        self.student = Student.objects.create(
            student_name='Amara Bello',
            student_id='S1001',
            grade_level='Grade 5',
        )
        self.due_date = date.today() + timedelta(days=30)

    def test_paid_without_amount_is_fully_paid(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', '500.00', self.due_date, status=Fee.Status.PAID)
        self.assertEqual(fee.amount_paid, Decimal('500.00'))
        self.assertIsNotNone(fee.payment_date)
        self.assertEqual(fee.student_name, 'Amara Bello')
        self.assertEqual(fee.balance, Decimal('0.00'))

    def test_pending_defaults_to_nothing_paid(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', 500, self.due_date)
        self.assertEqual(fee.status, Fee.Status.PENDING)
        self.assertEqual(fee.amount_paid, Decimal('0.00'))
        self.assertIsNone(fee.payment_date)

    def test_partially_paid_keeps_amount(self):
        fee = create_fee_record(
            self.student, 'Term 1 Tuition', 500, self.due_date,
            status=Fee.Status.PARTIALLY_PAID, amount_paid=Decimal('200')
        )
        self.assertEqual(fee.amount_paid, Decimal('200'))
        self.assertIsNone(fee.payment_date)

    def test_overpayment_rejected(self):
        with self.assertRaises(FeeValidationError) as ctx:
            create_fee_record(
                self.student, 'Term 1 Tuition', 500, self.due_date,
                status=Fee.Status.PENDING, amount_paid=Decimal('600')
            )
        self.assertEqual(ctx.exception.messages, ['Amount paid cannot exceed amount due.'])
        self.assertFalse(Fee.objects.exists())

    def test_update_to_paid_raises_amount(self):
        fee = create_fee_record(
            self.student, 'Term 1 Tuition', 500, self.due_date,
            status=Fee.Status.PARTIALLY_PAID, amount_paid=Decimal('200')
        )
        update_fee_record(fee, status=Fee.Status.PAID)
        fee.refresh_from_db()
        self.assertEqual(fee.amount_paid, Decimal('500.00'))
        self.assertIsNotNone(fee.payment_date)

    def test_update_keeps_existing_payment_date(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', 500, self.due_date, status=Fee.Status.PAID)
        paid_on = timezone.now() - timedelta(days=10)
        update_fee_record(fee, payment_date=paid_on)
        update_fee_record(fee, fee_title='Term 1 Tuition (revised)')
        fee.refresh_from_db()
        self.assertEqual(fee.payment_date, paid_on)

    def test_update_away_from_paid_clears_payment_date(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', 500, self.due_date, status=Fee.Status.PAID)
        update_fee_record(fee, status=Fee.Status.OVERDUE)
        fee.refresh_from_db()
        self.assertIsNone(fee.payment_date)

    def test_update_overpayment_rejected(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', 500, self.due_date)
        with self.assertRaises(FeeValidationError):
            update_fee_record(fee, amount_paid=Decimal('900'))
        fee.refresh_from_db()
        self.assertEqual(fee.amount_paid, Decimal('0.00'))


class FeeViewsTestCase(TestCase):
    """Test cases for fee admin and parent views"""

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
        self.student = Student.objects.create(
            student_name='Amara Bello',
            student_id='S1001',
            grade_level='Grade 5',
            parent_email='parent@example.com',
        )
        self.client = Client()

    def test_create_paid_fee(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('finance:fee_create'), {
            'student': self.student.pk,
            'fee_title': 'Term 1 Tuition',
            'amount_due': '500.00',
            'amount_paid': '',
            'due_date': date.today().isoformat(),
            'status': Fee.Status.PAID,
        })
        self.assertRedirects(response, reverse('finance:fee_list'))
        fee = Fee.objects.get()
        self.assertEqual(fee.amount_paid, Decimal('500.00'))
        self.assertEqual(fee.student_name, 'Amara Bello')

    def test_create_overpaid_fee_rejected(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('finance:fee_create'), {
            'student': self.student.pk,
            'fee_title': 'Term 1 Tuition',
            'amount_due': '500.00',
            'amount_paid': '700.00',
            'due_date': date.today().isoformat(),
            'status': Fee.Status.PENDING,
        })
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Amount paid cannot exceed amount due.')
        self.assertFalse(Fee.objects.exists())

    def test_edit_fee_to_paid(self):
        fee = create_fee_record(self.student, 'Term 1 Tuition', 500, date.today())
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('finance:fee_update', args=[fee.pk]), {
            'fee_title': 'Term 1 Tuition',
            'amount_due': '500.00',
            'amount_paid': '0.00',
            'due_date': date.today().isoformat(),
            'status': Fee.Status.PAID,
        })
        self.assertRedirects(response, reverse('finance:fee_list'))
        fee.refresh_from_db()
        self.assertEqual(fee.amount_paid, Decimal('500.00'))
        self.assertIsNotNone(fee.payment_date)

    def test_parent_fees_totals(self):
        create_fee_record(self.student, 'Tuition', 500, date.today(), status=Fee.Status.PAID)
        create_fee_record(
            self.student, 'Books', 100, date.today(),
            status=Fee.Status.PARTIALLY_PAID, amount_paid=Decimal('40')
        )
        other = Student.objects.create(student_name='Other Child', student_id='S9', grade_level='Grade 1')
        create_fee_record(other, 'Tuition', 999, date.today())

        self.client.login(email='parent@example.com', password='testpass123')
        response = self.client.get(reverse('finance:parent_fees'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['fees']), 2)
        self.assertEqual(response.context['total_due'], Decimal('600.00'))
        self.assertEqual(response.context['total_paid'], Decimal('540.00'))
        self.assertEqual(response.context['total_balance'], Decimal('60.00'))
