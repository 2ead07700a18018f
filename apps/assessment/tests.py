# apps/assessment/tests.py

import copy
import re
from datetime import date
from decimal import Decimal
from types import SimpleNamespace

from django.contrib.auth import get_user_model
from django.contrib.messages import get_messages
from django.test import TestCase, Client, SimpleTestCase, override_settings
from django.urls import reverse
from PIL import Image

from apps.academics.models import Student, Subject
from .models import Result
from .report_cards import (
    ExportState, ReportCardBlock, ReportCardExport, ReportCardRow, ReportExportError,
    _Renderer, build_pdf, export_report_card, report_card_filename
)
from .services import parse_marks, summarize_terms, overall_average, record_results, ResultEntry

User = get_user_model()

PAGE_PATTERN = re.compile(rb'/Type /Page[^s]')


def result(marks, term='Term 1', subject='Mathematics', comments=''):
    return SimpleNamespace(marks=marks, term=term, subject_name=subject, comments=comments)


class ParseMarksTestCase(SimpleTestCase):
    """Test cases for reading numeric marks"""

    def test_numeric_marks(self):
        self.assertEqual(parse_marks('88'), Decimal('88'))
        self.assertEqual(parse_marks('88.5'), Decimal('88.5'))
        self.assertEqual(parse_marks(' 92% '), Decimal('92'))
        self.assertEqual(parse_marks('100 %'), Decimal('100'))

    def test_non_numeric_marks(self):
        for marks in ('A+', '', '  ', '%', 'n/a', None, 'NaN', 'Infinity', '92%%'):
            self.assertIsNone(parse_marks(marks), marks)


class SummarizeTermsTestCase(SimpleTestCase):
    """Test cases for grouping results by term"""

    def test_no_results(self):
        self.assertEqual(summarize_terms([]), [])

    def test_groups_sorted_by_term_descending(self):
        summaries = summarize_terms([
            result('80', term='Term 1'),
            result('90', term='Term 3'),
            result('70', term='Term 2'),
        ])
        self.assertEqual([s.term for s in summaries], ['Term 3', 'Term 2', 'Term 1'])

    def test_term_labels_compared_exactly(self):
        summaries = summarize_terms([result('80', term='Term 1'), result('60', term='term 1')])
        self.assertEqual([s.term for s in summaries], ['term 1', 'Term 1'])

    def test_trailing_space_splits_terms(self):
        summaries = summarize_terms([result('80', term='Term 1'), result('60', term='Term 1 ')])
        self.assertEqual([s.term for s in summaries], ['Term 1 ', 'Term 1'])
        self.assertEqual([s.overall_average for s in summaries], [Decimal('60.0'), Decimal('80.0')])

    def test_duplicate_subjects_both_counted(self):
        summary = summarize_terms([result('80', subject='Maths'), result('90', subject='Maths')])[0]
        self.assertEqual([r.subject_name for r in summary.results], ['Maths', 'Maths'])
        self.assertEqual(summary.overall_average, Decimal('85.0'))

    def test_percent_and_letter_marks_mixed(self):
        summary = summarize_terms([result('92%'), result('A+'), result('88%')])[0]
        self.assertEqual(summary.overall_average, Decimal('90.0'))
        self.assertEqual(str(summary.overall_average), '90.0')

    def test_results_keep_query_order(self):
        rows = [result('80', subject='Maths'), result('70', subject='English'), result('60', subject='Art')]
        summary = summarize_terms(rows)[0]
        self.assertEqual([r.subject_name for r in summary.results], ['Maths', 'English', 'Art'])

    def test_average_skips_unparseable_marks(self):
        summary = summarize_terms([result('90%'), result('A+'), result('85')])[0]
        self.assertEqual(summary.overall_average, Decimal('87.5'))
        self.assertEqual(len(summary.results), 3)

    def test_average_rounds_half_up(self):
        summary = summarize_terms([result('88.25'), result('88.3')])[0]
        self.assertEqual(summary.overall_average, Decimal('88.3'))
        summary = summarize_terms([result('1'), result('2'), result('2')])[0]
        self.assertEqual(summary.overall_average, Decimal('1.7'))

    def test_no_numeric_marks_means_no_average(self):
        summary = summarize_terms([result('A'), result('B+')])[0]
        self.assertIsNone(summary.overall_average)
        self.assertFalse(summary.has_average)

    def test_overall_average_across_terms(self):
        rows = [result('80', term='Term 1'), result('90', term='Term 2'), result('Excellent', term='Term 2')]
        self.assertEqual(overall_average(rows), Decimal('85.0'))
        self.assertIsNone(overall_average([]))


class RecordResultsTestCase(TestCase):
    """Test cases for the batch result writer"""

    def setUp(self):
        self.student = Student.objects.create(
            student_name='Amara Bello',
            student_id='S1001',
            grade_level='Grade 5',
        )

    def test_each_entry_carries_student_name(self):
        rows = record_results(self.student, 'Term 1 - 2024', [
            {'subject_name': 'Mathematics', 'marks': '88', 'comments': 'Good work'},
            ResultEntry(subject_name='English', marks='A'),
        ])
        self.assertEqual(len(rows), 2)
        saved = Result.objects.filter(student_id=self.student.pk)
        self.assertEqual(saved.count(), 2)
        for row in saved:
            self.assertEqual(row.student_name, 'Amara Bello')
            self.assertEqual(row.term, 'Term 1 - 2024')

    def test_empty_batch_rejected(self):
        with self.assertRaises(ValueError):
            record_results(self.student, 'Term 1', [])
        self.assertFalse(Result.objects.exists())

    def test_name_copy_not_resynced(self):
        record_results(self.student, 'Term 1', [{'subject_name': 'Mathematics', 'marks': '88'}])
        self.student.student_name = 'Amara Bello-Okoro'
        self.student.save()
        self.assertEqual(Result.objects.get().student_name, 'Amara Bello')


class ReportCardTestCase(SimpleTestCase):
    """Test cases for report card content and PDF export"""

    def setUp(self):
        self.student = SimpleNamespace(student_name='Amara Bello', grade_level='')
        self.summary = summarize_terms([
            result('88', subject='Mathematics', comments='Excellent'),
            result('B', subject='English'),
        ])[0]
        self.block = ReportCardBlock.build(self.student, self.summary, issued_on=date(2024, 7, 15))

    def test_filename(self):
        self.assertEqual(report_card_filename('Amara Bello', 'Term 1 - 2024'), 'Report-Card-Amara_Bello-Term_1_-_2024.pdf')
        self.assertEqual(report_card_filename('Amara   Bello', 'Term\t1'), 'Report-Card-Amara_Bello-Term_1.pdf')
        self.assertEqual(report_card_filename('', 'Term 1'), 'Report-Card-Student-Term_1.pdf')

    @override_settings(SCHOOL_NAME='Test Academy', SCHOOL_ADDRESS='1 School Road')
    def test_block_fallbacks(self):
        block = ReportCardBlock.build(self.student, self.summary, issued_on=date(2024, 7, 15))
        self.assertEqual(block.school_name, 'Test Academy')
        self.assertEqual(block.grade_level, 'N/A')
        self.assertEqual([row.comments for row in block.rows], ['Excellent', 'N/A'])
        self.assertEqual(block.overall_average, Decimal('88.0'))
        self.assertEqual(block.filename, 'Report-Card-Amara_Bello-Term_1.pdf')

    def test_export_is_deterministic(self):
        first = ReportCardExport(self.block).run()
        second = ReportCardExport(self.block).run()
        self.assertTrue(first.content.startswith(b'%PDF'))
        self.assertEqual(first.content, second.content)
        self.assertEqual(first.filename, 'Report-Card-Amara_Bello-Term_1.pdf')
        self.assertEqual(first.content_type, 'application/pdf')

    def test_export_leaves_content_unchanged(self):
        block_before = copy.deepcopy(self.block)
        results_before = list(self.summary.results)
        average_before = self.summary.overall_average

        ReportCardExport(self.block).run()

        self.assertEqual(self.block, block_before)
        self.assertEqual(self.summary.results, results_before)
        self.assertEqual(self.summary.overall_average, average_before)

    def test_long_subject_wraps_inside_its_cell(self):
        renderer = _Renderer(self.block)
        row = ReportCardRow(
            subject='Integrated Environmental and Agricultural Science Studies',
            marks='Pneumonoultramicroscopicsilicovolcanoconiosis',
            comments='Good',
        )
        subject_lines, marks_lines, _ = renderer.cell_lines(row)
        subject_width, marks_width, _ = renderer.column_widths()
        self.assertGreater(len(subject_lines), 1)
        self.assertGreater(len(marks_lines), 1)
        self.assertEqual(''.join(marks_lines), row.marks)
        for line in subject_lines:
            self.assertLessEqual(renderer.body_font.getlength(line), subject_width)
        for line in marks_lines:
            self.assertLessEqual(renderer.body_font.getlength(line), marks_width)

        short_row = ReportCardRow(subject='Art', marks='90', comments='Good')
        self.assertGreater(renderer.row_height(row), renderer.row_height(short_row))

    def test_export_transitions(self):
        export = ReportCardExport(self.block)
        export.run()
        self.assertEqual(export.transitions, [
            ExportState.IDLE, ExportState.CAPTURING, ExportState.PACKAGING, ExportState.DONE
        ])

    def test_failed_export_returns_to_idle(self):
        def broken(block):
            raise RuntimeError('canvas unavailable')

        export = ReportCardExport(self.block, rasterize=broken)
        with self.assertRaises(ReportExportError):
            export.run()
        self.assertEqual(export.state, ExportState.IDLE)
        self.assertEqual(export.transitions, [
            ExportState.IDLE, ExportState.CAPTURING, ExportState.FAILED, ExportState.IDLE
        ])

    def test_missing_block_fails(self):
        export = ReportCardExport(None)
        with self.assertRaises(ReportExportError):
            export.run()
        self.assertEqual(export.state, ExportState.IDLE)

    def test_unknown_term(self):
        with self.assertRaises(ReportExportError) as ctx:
            export_report_card(self.student, [self.summary], 'Term 9')
        self.assertEqual(str(ctx.exception), "No results found for term 'Term 9'.")

    def test_short_image_fits_one_page(self):
        pdf = build_pdf(Image.new('RGB', (100, 100), 'white'))
        self.assertEqual(len(PAGE_PATTERN.findall(pdf)), 1)

    def test_tall_image_continues_on_next_pages(self):
        # 100x400 scaled to A4 width is about 2.8 pages high
        pdf = build_pdf(Image.new('RGB', (100, 400), 'white'))
        self.assertEqual(len(PAGE_PATTERN.findall(pdf)), 3)


class ResultViewsTestCase(TestCase):
    """Test cases for admin result views"""

    def setUp(self):
        self.admin_user = User.objects.create_user(
            email='admin@example.com',
            password='testpass123',
            role=User.Role.ADMIN
        )
        self.student = Student.objects.create(
            student_name='Amara Bello',
            student_id='S1001',
            grade_level='Grade 5',
        )
        Subject.objects.create(subject_name='Mathematics', subject_code='MATH1', applicable_grade_levels='Grade 5')
        Subject.objects.create(subject_name='English', subject_code='ENG1', applicable_grade_levels='Grade 5')
        self.client = Client()
        self.client.login(email='admin@example.com', password='testpass123')

    def batch_data(self, rows):
        data = {
            'student': self.student.pk,
            'term': 'Term 1 - 2024',
            'entries-TOTAL_FORMS': 5,
            'entries-INITIAL_FORMS': 0,
            'entries-MIN_NUM_FORMS': 0,
            'entries-MAX_NUM_FORMS': 30,
        }
        for index, (subject, marks, comments) in enumerate(rows):
            data[f'entries-{index}-subject_name'] = subject
            data[f'entries-{index}-marks'] = marks
            data[f'entries-{index}-comments'] = comments
        return data

    def test_batch_create(self):
        response = self.client.post(reverse('assessment:result_create'), self.batch_data([
            ('Mathematics', '88%', 'Strong'),
            ('English', 'A', ''),
        ]))
        self.assertRedirects(response, reverse('assessment:result_list'))
        self.assertEqual(Result.objects.filter(student_name='Amara Bello', term='Term 1 - 2024').count(), 2)

    def test_batch_requires_a_row(self):
        response = self.client.post(reverse('assessment:result_create'), self.batch_data([]))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(Result.objects.exists())

    def test_half_filled_row_rejected(self):
        response = self.client.post(reverse('assessment:result_create'), self.batch_data([
            ('Mathematics', '', ''),
        ]))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Please select a subject and enter marks/grade.')
        self.assertFalse(Result.objects.exists())


class ParentReportCardViewsTestCase(TestCase):
    """Test cases for parent grade and report card pages"""

    def setUp(self):
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
        record_results(self.student, 'Term 1 - 2024', [
            {'subject_name': 'Mathematics', 'marks': '80', 'comments': 'Keep it up'},
            {'subject_name': 'English', 'marks': '90'},
        ])
        record_results(self.student, 'Term 2 - 2024', [
            {'subject_name': 'Mathematics', 'marks': 'A'},
        ])
        self.client = Client()
        self.client.login(email='parent@example.com', password='testpass123')

    def test_grades_page(self):
        response = self.client.get(reverse('assessment:parent_grades'))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.context['results']), 3)
        self.assertEqual(response.context['overall_average'], Decimal('85.0'))

    def test_remarks_page(self):
        response = self.client.get(reverse('assessment:parent_remarks'))
        self.assertEqual([r.comments for r in response.context['remarks']], ['Keep it up'])

    def test_report_cards_page(self):
        response = self.client.get(reverse('assessment:parent_report_cards'))
        self.assertEqual(response.status_code, 200)
        blocks = response.context['report_cards']
        self.assertEqual([b.term for b in blocks], ['Term 2 - 2024', 'Term 1 - 2024'])
        self.assertFalse(blocks[0].has_average)
        self.assertEqual(blocks[1].overall_average, Decimal('85.0'))
        self.assertContains(response, 'Overall Average: 85.0%')

    def test_download(self):
        response = self.client.get(reverse('assessment:report_card_download'), {'term': 'Term 1 - 2024'})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertIn('Report-Card-Amara_Bello-Term_1_-_2024.pdf', response['Content-Disposition'])
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_download_unknown_term(self):
        response = self.client.get(reverse('assessment:report_card_download'), {'term': 'Term 5'})
        self.assertRedirects(response, reverse('assessment:parent_report_cards'), fetch_redirect_response=False)
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        self.assertIn("Could not generate PDF: No results found for term 'Term 5'.", messages)

    def test_no_linked_child(self):
        self.student.parent_email = 'someone.else@example.com'
        self.student.save()
        response = self.client.get(reverse('assessment:parent_report_cards'))
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.context['child'])
