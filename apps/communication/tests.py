# apps/communication/tests.py

from datetime import date, timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase, Client
from django.urls import reverse

from .forms import NoticeForm
from .models import Notice

User = get_user_model()


def make_notice(title, days_ago=0, status=Notice.Status.PUBLISHED, content='School will be closed on Friday.'):
    return Notice.objects.create(
        title=title,
        content=content,
        audience='All Parents',
        publish_date=date.today() - timedelta(days=days_ago),
        status=status,
    )


class NoticeFormTestCase(TestCase):
    """Test cases for publish and draft validation"""

    def test_publish_requires_all_fields(self):
        form = NoticeForm(data={'title': 'Sports Day'}, action=NoticeForm.PUBLISH_ACTION)
        self.assertFalse(form.is_valid())
        for name in ('content', 'audience', 'publish_date'):
            self.assertIn(name, form.errors)

    def test_draft_needs_only_title(self):
        form = NoticeForm(data={'title': 'Sports Day'}, action=NoticeForm.DRAFT_ACTION)
        self.assertTrue(form.is_valid(), form.errors)
        notice = form.save()
        self.assertEqual(notice.status, Notice.Status.DRAFT)

    def test_draft_still_needs_title(self):
        form = NoticeForm(data={'content': 'No title'}, action=NoticeForm.DRAFT_ACTION)
        self.assertFalse(form.is_valid())
        self.assertIn('title', form.errors)

    def test_publish(self):
        form = NoticeForm(data={
            'title': 'Sports Day',
            'content': 'Sports day is on Friday.',
            'audience': 'All Parents',
            'publish_date': date.today().isoformat(),
        }, action=NoticeForm.PUBLISH_ACTION)
        self.assertTrue(form.is_valid(), form.errors)
        self.assertEqual(form.save().status, Notice.Status.PUBLISHED)

    def test_blank_content_cannot_publish(self):
        form = NoticeForm(data={
            'title': 'Sports Day',
            'content': '   ',
            'audience': 'All Parents',
            'publish_date': date.today().isoformat(),
        }, action=NoticeForm.PUBLISH_ACTION)
        self.assertFalse(form.is_valid())
        self.assertIn('content', form.errors)


class NoticeModelTestCase(TestCase):
    """Test cases for notice queries and snippets"""

    def test_latest_published_excludes_drafts(self):
        make_notice('Old', days_ago=5)
        make_notice('New', days_ago=1)
        make_notice('Draft', status=Notice.Status.DRAFT)
        self.assertEqual([n.title for n in Notice.objects.latest_published()], ['New', 'Old'])
        self.assertEqual([n.title for n in Notice.objects.latest_published(1)], ['New'])

    def test_snippet(self):
        short = make_notice('Short', content='Closed Friday.')
        self.assertEqual(short.snippet, 'Closed Friday.')
        long = make_notice('Long', content='x' * 80)
        self.assertEqual(long.snippet, 'x' * 50 + '...')


class NoticeViewsTestCase(TestCase):
    """Test cases for notice admin and public views"""

    def setUp(self):
        self.admin_user = User.objects.create_user(
            email='admin@example.com',
            password='testpass123',
            role=User.Role.ADMIN
        )
        self.client = Client()

    def test_save_draft_button(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('communication:notice_create'), {
            'title': 'PTA Meeting',
            'draft': '',
        })
        self.assertRedirects(response, reverse('communication:notice_list'))
        self.assertEqual(Notice.objects.get().status, Notice.Status.DRAFT)

    def test_publish_button_validates(self):
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('communication:notice_create'), {
            'title': 'PTA Meeting',
            'publish': '',
        })
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Notice.objects.exists())

    def test_publish_draft(self):
        notice = Notice.objects.create(title='PTA Meeting')
        self.client.login(email='admin@example.com', password='testpass123')
        response = self.client.post(reverse('communication:notice_update', args=[notice.pk]), {
            'title': 'PTA Meeting',
            'content': 'Meeting in the main hall.',
            'audience': 'All Parents',
            'publish_date': date.today().isoformat(),
            'publish': '',
        })
        self.assertRedirects(response, reverse('communication:notice_list'))
        notice.refresh_from_db()
        self.assertTrue(notice.is_published)

    def test_public_list_shows_only_published(self):
        make_notice('Published Notice')
        make_notice('Hidden Draft', status=Notice.Status.DRAFT)
        response = self.client.get(reverse('communication:public_notices'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Published Notice')
        self.assertNotContains(response, 'Hidden Draft')

    def test_marquee_shows_three_newest(self):
        for days_ago in range(5):
            make_notice(f'Notice {days_ago}', days_ago=days_ago)
        response = self.client.get(reverse('core:home'))
        titles = [n.title for n in response.context['marquee_notices']]
        self.assertEqual(titles, ['Notice 0', 'Notice 1', 'Notice 2'])
