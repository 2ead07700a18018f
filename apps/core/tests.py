# apps/core/tests.py

import os
from datetime import date

from channels.db import database_sync_to_async
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.contrib.messages import get_messages
from django.test import TestCase, TransactionTestCase, Client
from django.urls import reverse
from django.utils.html import escape

from apps.academics.models import Student, Teacher, SchoolClass
from apps.communication.models import Notice
from config.routing import websocket_urlpatterns
from .content import DEFAULT_CONTENT, FEATURES_COUNT, PROGRAM_LISTINGS, Section, get_section, save_section
from .models import WebsiteContent

User = get_user_model()


class WebsiteContentTestCase(TestCase):
    """Test cases for website section storage"""

    def test_missing_section_returns_defaults(self):
        self.assertEqual(get_section(Section.HERO), DEFAULT_CONTENT[Section.HERO])
        self.assertFalse(WebsiteContent.objects.exists())

    def test_save_merges_into_stored_record(self):
        save_section(Section.HERO, {'title': 'Welcome!'})
        save_section(Section.HERO, {'subtitle': 'Learning together.'})

        record = WebsiteContent.objects.get(key=Section.HERO)
        self.assertEqual(record.data, {'title': 'Welcome!', 'subtitle': 'Learning together.'})

        hero = get_section(Section.HERO)
        self.assertEqual(hero['title'], 'Welcome!')
        self.assertEqual(hero['cta_button_1_text'], DEFAULT_CONTENT[Section.HERO]['cta_button_1_text'])

    def test_features_padded_to_fixed_count(self):
        save_section(Section.FEATURES, {'features': [{'title': 'Small Classes', 'description': ''}]})
        features = get_section(Section.FEATURES)['features']
        self.assertEqual(len(features), FEATURES_COUNT)
        self.assertEqual(features[0]['title'], 'Small Classes')
        # Blank stored values fall back to the default text
        self.assertEqual(
            features[0]['description'],
            DEFAULT_CONTENT[Section.FEATURES]['features'][0]['description']
        )

    def test_defaults_not_mutated(self):
        get_section(Section.FEATURES)['features'][0]['title'] = 'Changed'
        self.assertNotEqual(DEFAULT_CONTENT[Section.FEATURES]['features'][0]['title'], 'Changed')


class PublicPagesTestCase(TestCase):
    """Test cases for the public website"""

    def setUp(self):
        self.client = Client()

    def test_home_page(self):
        Notice.objects.create(
            title='Open Day', content='Visit us on Saturday.', audience='Everyone',
            publish_date=date.today(), status=Notice.Status.PUBLISHED
        )
        Notice.objects.create(title='Unfinished Draft')
        response = self.client.get(reverse('core:home'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, DEFAULT_CONTENT[Section.HERO]['title'])
        self.assertEqual([n.title for n in response.context['latest_notices']], ['Open Day'])

    def test_about_and_programs_pages(self):
        save_section(Section.ABOUT, {'story_title': 'How We Began'})
        response = self.client.get(reverse('core:about'))
        self.assertContains(response, 'How We Began')

        response = self.client.get(reverse('core:programs'))
        self.assertContains(response, escape(DEFAULT_CONTENT[Section.PROGRAMS]['page_title']))

    def test_programs_page_lists_programs(self):
        response = self.client.get(reverse('core:programs'))
        self.assertEqual(len(response.context['program_listings']), 4)
        for program in PROGRAM_LISTINGS:
            self.assertContains(response, escape(program['title']))

    def test_faculty_page(self):
        Teacher.objects.create(teacher_name='Dr. Jane Smith', teacher_id='T1', subjects_taught='Physics')
        response = self.client.get(reverse('core:faculty'))
        self.assertContains(response, 'Dr. Jane Smith')

    def test_contact_form(self):
        response = self.client.post(reverse('core:contact'), {
            'name': 'John Doe',
            'email': 'john.doe@example.com',
            'subject': 'Admissions inquiry',
            'message': 'When does registration open?',
        })
        self.assertRedirects(response, reverse('core:contact'))
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertTrue(any(m.startswith('Message sent!') for m in messages))

    def test_contact_form_validation(self):
        response = self.client.post(reverse('core:contact'), {
            'name': 'J',
            'email': 'not-an-email',
            'subject': 'Hi',
            'message': 'Short',
        })
        self.assertEqual(response.status_code, 200)
        self.assertEqual(set(response.context['form'].errors), {'name', 'email', 'subject', 'message'})


class AdminPagesTestCase(TestCase):
    """Test cases for the admin dashboard and website content editors"""

    def setUp(self):
        self.admin_user = User.objects.create_user(
            email='admin@example.com',
            password='testpass123',
            role=User.Role.ADMIN
        )
        self.client = Client()
        self.client.login(email='admin@example.com', password='testpass123')

    def test_dashboard_counts(self):
        Student.objects.create(student_name='A', student_id='S1', grade_level='Grade 1')
        Student.objects.create(student_name='B', student_id='S2', grade_level='Grade 1')
        Teacher.objects.create(teacher_name='T', teacher_id='T1')
        SchoolClass.objects.create(class_name='Grade 1 Red', grade_level='Grade 1')
        Notice.objects.create(
            title='Open Day', content='Saturday.', audience='Everyone',
            publish_date=date.today(), status=Notice.Status.PUBLISHED
        )
        Notice.objects.create(title='Draft')

        response = self.client.get(reverse('core:admin_dashboard'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['total_students'], 2)
        self.assertEqual(response.context['total_teachers'], 1)
        self.assertEqual(response.context['total_classes'], 1)
        self.assertEqual(response.context['published_notices'], 1)

    def test_dashboard_requires_admin(self):
        User.objects.create_user(email='parent@example.com', password='testpass123', role=User.Role.PARENT)
        self.client.login(email='parent@example.com', password='testpass123')
        response = self.client.get(reverse('core:admin_dashboard'))
        self.assertRedirects(response, reverse('users:parent_dashboard'), fetch_redirect_response=False)

    def test_hero_editor_starts_from_defaults(self):
        response = self.client.get(reverse('core:content_hero'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['form'].initial['title'], DEFAULT_CONTENT[Section.HERO]['title'])

    def test_hero_editor_saves(self):
        data = dict(DEFAULT_CONTENT[Section.HERO], title='A New Welcome')
        response = self.client.post(reverse('core:content_hero'), data)
        self.assertRedirects(response, reverse('core:content_hero'))
        self.assertEqual(get_section(Section.HERO)['title'], 'A New Welcome')

    def test_features_editor_saves_list(self):
        data = {'page_title': 'Why Us'}
        for index in range(1, FEATURES_COUNT + 1):
            data[f'feature_{index}_title'] = f'Feature {index}'
            data[f'feature_{index}_description'] = f'Description {index}'
        response = self.client.post(reverse('core:content_features'), data)
        self.assertRedirects(response, reverse('core:content_features'))
        stored = WebsiteContent.objects.get(key=Section.FEATURES).data
        self.assertEqual(stored['page_title'], 'Why Us')
        self.assertEqual([f['title'] for f in stored['features']], ['Feature 1', 'Feature 2', 'Feature 3'])


class LiveQueryConsumerTestCase(TransactionTestCase):
    """Test cases for live query websocket subscriptions"""

    def communicator(self, collection, user=None):
        communicator = WebsocketCommunicator(URLRouter(websocket_urlpatterns), f'/ws/live/{collection}/')
        communicator.scope['user'] = user or AnonymousUser()
        return communicator

    async def test_unknown_collection_rejected(self):
        connected, _ = await self.communicator('nothingHere').connect()
        self.assertFalse(connected)

    async def test_admin_collection_rejects_anonymous(self):
        connected, _ = await self.communicator('students').connect()
        self.assertFalse(connected)

    async def test_admin_collection_rejects_parent(self):
        parent = await database_sync_to_async(User.objects.create_user)(
            email='parent@example.com', password='testpass123', role=User.Role.PARENT
        )
        connected, _ = await self.communicator('students', parent).connect()
        self.assertFalse(connected)

    async def test_public_snapshot_on_connect(self):
        await database_sync_to_async(Notice.objects.create)(
            title='Open Day', content='Visit us.', audience='Everyone',
            publish_date=date.today(), status=Notice.Status.PUBLISHED
        )
        await database_sync_to_async(Notice.objects.create)(title='Draft Only')

        communicator = self.communicator('publishedNotices')
        connected, _ = await communicator.connect()
        self.assertTrue(connected)

        message = await communicator.receive_json_from()
        self.assertEqual(message['type'], 'snapshot')
        self.assertEqual(message['collection'], 'publishedNotices')
        self.assertEqual([r['title'] for r in message['records']], ['Open Day'])
        await communicator.disconnect()

    async def test_snapshot_after_change(self):
        admin = await database_sync_to_async(User.objects.create_user)(
            email='admin@example.com', password='testpass123', role=User.Role.ADMIN
        )
        communicator = self.communicator('students', admin)
        connected, _ = await communicator.connect()
        self.assertTrue(connected)

        first = await communicator.receive_json_from()
        self.assertEqual(first['records'], [])

        await database_sync_to_async(Student.objects.create)(
            student_name='Amara Bello', student_id='S1001', grade_level='Grade 5'
        )
        second = await communicator.receive_json_from(timeout=5)
        self.assertEqual([r['student_name'] for r in second['records']], ['Amara Bello'])
        await communicator.disconnect()

    async def test_refresh_request(self):
        communicator = self.communicator('publishedNotices')
        await communicator.connect()
        await communicator.receive_json_from()

        await communicator.send_json_to({'type': 'refresh'})
        message = await communicator.receive_json_from()
        self.assertEqual(message['type'], 'snapshot')
        await communicator.disconnect()

    async def test_non_object_messages_answered_with_error(self):
        communicator = self.communicator('publishedNotices')
        await communicator.connect()
        await communicator.receive_json_from()

        for frame in ('[1, 2]', '5', 'not json'):
            await communicator.send_to(text_data=frame)
            message = await communicator.receive_json_from()
            self.assertEqual(message['type'], 'error')

        await communicator.send_to(bytes_data=b'\x00\x01')
        message = await communicator.receive_json_from()
        self.assertEqual(message['type'], 'error')

        # The subscription survives bad frames
        await communicator.send_json_to({'type': 'refresh'})
        message = await communicator.receive_json_from()
        self.assertEqual(message['type'], 'snapshot')
        await communicator.disconnect()


class SettingsTestCase(TestCase):
    """Test cases for the settings split"""

    def test_testserver_host_only_in_development(self):
        from config import base, development

        self.assertIn('testserver', development.ALLOWED_HOSTS)
        if 'ALLOWED_HOSTS' not in os.environ:
            self.assertEqual(base.ALLOWED_HOSTS, ['localhost', '127.0.0.1'])
