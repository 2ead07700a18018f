# apps/attendance/tests.py

from datetime import date, timedelta
from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase, Client
from django.urls import reverse

from apps.academics.models import Student
from .models import AttendanceRecord
from .services import record_attendance, summarize_attendance

User = get_user_model()


class AttendanceServicesTestCase(TestCase):
    """Test cases for attendance writes and summaries"""

    def setUp(self):
        self.student = Student.objects.create(
            student_name='Amara Bello',
            student_id='S1001',
            grade_level='Grade 5',
        )

    def test_record_carries_student_name(self):
        record = record_attendance(self.student, date.today(), AttendanceRecord.Status.ABSENT, reason='Fever')
        self.assertEqual(record.student_name, 'Amara Bello')
        self.assertEqual(record.student_id, self.student.pk)
        self.assertEqual(record.subject, '')
        self.assertEqual(record.reason, 'Fever')

    def test_summary(self):
        statuses = [
            AttendanceRecord.Status.PRESENT,
            AttendanceRecord.Status.PRESENT,
            AttendanceRecord.Status.LATE,
            AttendanceRecord.Status.ABSENT,
            AttendanceRecord.Status.EXCUSED,
            AttendanceRecord.Status.PRESENT,
        ]
        for offset, status in enumerate(statuses):
            record_attendance(self.student, date.today() - timedelta(days=offset), status)

        summary = summarize_attendance(AttendanceRecord.objects.for_student(self.student))
        self.assertEqual(summary.total, 6)
        self.assertEqual(summary.present, 3)
        self.assertEqual(summary.late, 1)
        self.assertEqual(summary.absent, 1)
        self.assertEqual(summary.excused, 1)
        self.assertEqual(summary.attendance_rate, Decimal('66.7'))

    def test_empty_summary_has_no_rate(self):
        summary = summarize_attendance([])
        self.assertEqual(summary.total, 0)
        self.assertIsNone(summary.attendance_rate)


class AttendanceViewsTestCase(TestCase):
    """Test cases for attendance admin and parent views"""

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

    def test_record_attendance(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('attendance:record_create'), {
            'student': self.student.pk,
            'date': date.today().isoformat(),
            'status': AttendanceRecord.Status.LATE,
            'subject': 'Mathematics',
            'reason': 'Bus delay',
        })
        self.assertRedirects(response, reverse('attendance:record_list'))
        record = AttendanceRecord.objects.get()
        self.assertEqual(record.student_name, 'Amara Bello')
        self.assertEqual(record.status, AttendanceRecord.Status.LATE)

    def test_status_required(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('attendance:record_create'), {
            'student': self.student.pk,
            'date': date.today().isoformat(),
            'status': '',
        })
        self.assertEqual(response.status_code, 200)
        self.assertFalse(AttendanceRecord.objects.exists())

    def test_edit_record(self):
        record = record_attendance(self.student, date.today(), AttendanceRecord.Status.ABSENT)
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('attendance:record_update', args=[record.pk]), {
            'date': date.today().isoformat(),
            'status': AttendanceRecord.Status.EXCUSED,
            'subject': '',
            'reason': 'Medical note received',
        })
        self.assertRedirects(response, reverse('attendance:record_list'))
        record.refresh_from_db()
        self.assertEqual(record.status, AttendanceRecord.Status.EXCUSED)

    def test_parent_attendance(self):
        record_attendance(self.student, date.today(), AttendanceRecord.Status.PRESENT)
        record_attendance(self.student, date.today() - timedelta(days=1), AttendanceRecord.Status.ABSENT)

        self.client.login(email='parent@example.com', password='testpass123')
        response = self.client.get(reverse('attendance:parent_attendance'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['records']), 2)
        self.assertEqual(response.context['summary'].attendance_rate, Decimal('50.0'))

    def test_admin_cannot_open_parent_page(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.get(reverse('attendance:parent_attendance'))
        self.assertRedirects(response, reverse('core:admin_dashboard'))
