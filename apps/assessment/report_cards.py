"""
Report card rendering and PDF export.

A report card covers one term of one student. The same ``ReportCardBlock``
feeds the on-screen template and the export: the block is drawn into a
Pillow image at twice its on-screen size, and the image is placed on A4
pages with ReportLab, continuing onto further pages when it is taller than
one page. ReportLab runs in invariant mode, so exporting the same block
twice gives byte-identical files.
"""

import enum
import io
import logging
import re
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from django.conf import settings
from django.utils import timezone
from PIL import Image, ImageDraw, ImageFont
from reportlab.lib.pagesizes import A4
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

logger = logging.getLogger(__name__)

RENDER_SCALE = 2
BLOCK_WIDTH = 800
NOT_AVAILABLE = 'N/A'


class ReportExportError(Exception):
    """The report card could not be produced; nothing was written."""


def report_card_filename(student_name, term):
    """
    ``Report-Card-<StudentName>-<Term>.pdf`` with each whitespace run
    replaced by ``_``. Two terms that normalize alike get the same name.
    """
    name = re.sub(r'\s+', '_', student_name or '') or 'Student'
    term = re.sub(r'\s+', '_', term or '')
    return f"Report-Card-{name}-{term}.pdf"


@dataclass(frozen=True)
class ReportCardRow:
    subject: str
    marks: str
    comments: str


@dataclass(frozen=True)
class ReportCardBlock:
    """Everything printed on one report card."""
    school_name: str
    school_address: str
    student_name: str
    grade_level: str
    term: str
    issued_on: date
    rows: List[ReportCardRow] = field(default_factory=list)
    overall_average: Optional[object] = None

    @classmethod
    def build(cls, student, summary, issued_on=None):
        """Block for ``student`` from one ``TermSummary``."""
        rows = [
            ReportCardRow(
                subject=result.subject_name,
                marks=result.marks,
                comments=result.comments or NOT_AVAILABLE,
            )
            for result in summary.results
        ]
        return cls(
            school_name=settings.SCHOOL_NAME,
            school_address=settings.SCHOOL_ADDRESS,
            student_name=student.student_name,
            grade_level=student.grade_level or NOT_AVAILABLE,
            term=summary.term,
            issued_on=issued_on or timezone.localdate(),
            rows=rows,
            overall_average=summary.overall_average,
        )

    @property
    def has_average(self):
        return self.overall_average is not None

    @property
    def filename(self):
        return report_card_filename(self.student_name, self.term)


@dataclass(frozen=True)
class ReportCardFile:
    filename: str
    content: bytes
    content_type: str = 'application/pdf'


# =============================================================================
# RASTERIZING
# =============================================================================

def _font(size):
    return ImageFont.load_default(size=size * RENDER_SCALE)


def _wrap(text, font, width):
    """
    Split ``text`` into lines no wider than ``width`` pixels. A word wider
    than ``width`` on its own is broken between characters.
    """
    lines = []
    for paragraph in str(text).splitlines() or ['']:
        current = ''
        for word in paragraph.split(' '):
            candidate = f"{current} {word}".strip()
            if font.getlength(candidate) <= width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = ''
            for char in word:
                if current and font.getlength(current + char) > width:
                    lines.append(current)
                    current = char
                else:
                    current += char
        lines.append(current)
    return lines


class _Renderer:
    """Draws a ``ReportCardBlock``; all sizes are in on-screen pixels."""

    margin = 40
    line_gap = 6
    cell_padding = 8
    columns = (220, 130)

    def __init__(self, block):
        self.block = block
        self.title_font = _font(22)
        self.heading_font = _font(16)
        self.body_font = _font(12)
        self.small_font = _font(10)

    def s(self, value):
        return int(value * RENDER_SCALE)

    def line_height(self, font):
        return font.getbbox("Ayg|")[3] + self.s(self.line_gap)

    def column_widths(self):
        """Usable text width of the subject, marks and comments cells."""
        comments = BLOCK_WIDTH - 2 * self.margin - sum(self.columns)
        return tuple(self.s(width - 2 * self.cell_padding) for width in (*self.columns, comments))

    def cell_lines(self, row):
        """Wrapped lines of each cell of ``row``."""
        return tuple(
            _wrap(text, self.body_font, width)
            for text, width in zip((row.subject, row.marks, row.comments), self.column_widths())
        )

    def row_height(self, row):
        lines = max(len(cell) for cell in self.cell_lines(row))
        return lines * self.line_height(self.body_font) + self.s(2 * self.cell_padding)

    def measure(self):
        s = self.s
        height = s(self.margin)
        height += self.line_height(self.title_font) + self.line_height(self.heading_font)
        height += self.line_height(self.small_font) + s(20)
        height += 2 * self.line_height(self.body_font) + s(20)
        height += self.line_height(self.body_font) + s(2 * self.cell_padding)
        for row in self.block.rows:
            height += self.row_height(row)
        height += s(20)
        if self.block.has_average:
            height += self.line_height(self.heading_font) + self.line_height(self.body_font)
        height += s(70) + self.line_height(self.small_font)
        height += s(self.margin)
        return height

    def _centered(self, draw, y, text, font):
        width = font.getlength(text)
        draw.text(((self.s(BLOCK_WIDTH) - width) / 2, y), text, fill='black', font=font)
        return y + self.line_height(font)

    def render(self):
        s = self.s
        block = self.block
        image = Image.new('RGB', (s(BLOCK_WIDTH), self.measure()), 'white')
        draw = ImageDraw.Draw(image)
        left = s(self.margin)
        right = s(BLOCK_WIDTH - self.margin)

        # Letterhead
        y = s(self.margin)
        y = self._centered(draw, y, "ACADEMIC REPORT CARD", self.title_font)
        y = self._centered(draw, y, block.school_name, self.heading_font)
        y = self._centered(draw, y, block.school_address, self.small_font)
        y += s(8)
        draw.line((left, y, right, y), fill='black', width=s(1))
        y += s(12)

        # Identity
        middle = left + (right - left) // 2
        body = self.body_font
        draw.text((left, y), f"Student Name: {block.student_name}", fill='black', font=body)
        draw.text((middle, y), f"Grade Level: {block.grade_level}", fill='black', font=body)
        y += self.line_height(body)
        draw.text((left, y), f"Term: {block.term}", fill='black', font=body)
        draw.text((middle, y), f"Date Issued: {block.issued_on.strftime('%d %B %Y')}", fill='black', font=body)
        y += self.line_height(body) + s(20)

        # Results table
        x_marks = left + s(self.columns[0])
        x_comments = x_marks + s(self.columns[1])
        pad = s(self.cell_padding)
        header_bottom = y + self.line_height(body) + 2 * pad
        draw.rectangle((left, y, right, header_bottom), fill=(235, 235, 235), outline='black')
        for x, label in ((left, "Subject"), (x_marks, "Marks/Grade"), (x_comments, "Comments")):
            draw.text((x + pad, y + pad), label, fill='black', font=body)
        y = header_bottom
        for row in block.rows:
            bottom = y + self.row_height(row)
            draw.rectangle((left, y, right, bottom), outline='black')
            for x, lines in zip((left, x_marks, x_comments), self.cell_lines(row)):
                for index, line in enumerate(lines):
                    draw.text((x + pad, y + pad + index * self.line_height(body)), line, fill='black', font=body)
            y = bottom
        for x in (x_marks, x_comments):
            draw.line((x, header_bottom - self.line_height(body) - 2 * pad, x, y), fill='black', width=1)
        y += s(20)

        # Summary
        if block.has_average:
            draw.text((left, y), "Term Summary", fill='black', font=self.heading_font)
            y += self.line_height(self.heading_font)
            draw.text((left, y), f"Overall Average: {block.overall_average}%", fill='black', font=body)
            y += self.line_height(body)

        # Signatures
        y += s(60)
        signature_width = s(220)
        draw.line((left, y, left + signature_width, y), fill='black', width=s(1))
        draw.line((right - signature_width, y, right, y), fill='black', width=s(1))
        y += s(10)
        draw.text((left, y), "Class Teacher's Signature", fill='black', font=self.small_font)
        draw.text((right - signature_width, y), "Principal's Signature", fill='black', font=self.small_font)
        return image


def render_report_card(block) -> Image.Image:
    """Raster image of ``block`` at ``RENDER_SCALE`` times on-screen size."""
    return _Renderer(block).render()


# =============================================================================
# PDF PACKAGING
# =============================================================================

def build_pdf(image) -> bytes:
    """
    Place ``image`` on A4 portrait pages at full page width.

    An image taller than one page is continued on following pages, each
    page showing the next page-height slice.
    """
    page_width, page_height = A4
    image_width, image_height = image.size
    draw_height = image_height * page_width / image_width
    reader = ImageReader(image)

    buffer = io.BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4, invariant=1, pageCompression=1)
    pdf.setTitle('Academic Report Card')

    offset = 0.0
    while True:
        pdf.drawImage(reader, 0, page_height - draw_height + offset, width=page_width, height=draw_height)
        pdf.showPage()
        offset += page_height
        if offset >= draw_height - 0.5:
            break
    pdf.save()
    return buffer.getvalue()


# =============================================================================
# EXPORT
# =============================================================================

class ExportState(enum.Enum):
    IDLE = 'idle'
    CAPTURING = 'capturing'
    PACKAGING = 'packaging'
    DONE = 'done'
    FAILED = 'failed'


class ReportCardExport:
    """
    One export of a report card block.

    ``run`` moves through idle, capturing, packaging and done. On error it
    passes through failed back to idle and raises ``ReportExportError``;
    calling ``run`` again repeats the same steps. Separate exports share
    no state.
    """

    def __init__(self, block, rasterize=render_report_card, package=build_pdf):
        self.block = block
        self.rasterize = rasterize
        self.package = package
        self.state = ExportState.IDLE
        self.transitions = [ExportState.IDLE]

    def _enter(self, state):
        self.state = state
        self.transitions.append(state)

    def run(self) -> ReportCardFile:
        if self.block is None:
            self._fail(ReportExportError("Report card content is not available."))
        self._enter(ExportState.CAPTURING)
        try:
            image = self.rasterize(self.block)
            self._enter(ExportState.PACKAGING)
            content = self.package(image)
        except Exception as e:
            self._fail(e)
        self._enter(ExportState.DONE)
        logger.info(f"Report card exported: {self.block.filename} ({len(content)} bytes)")
        return ReportCardFile(filename=self.block.filename, content=content)

    def _fail(self, error):
        if self.state != ExportState.CAPTURING and self.state != ExportState.PACKAGING:
            self._enter(ExportState.CAPTURING)
        self._enter(ExportState.FAILED)
        logger.error(f"Report card export failed: {error}")
        self._enter(ExportState.IDLE)
        if isinstance(error, ReportExportError):
            raise error
        raise ReportExportError(f"Could not generate the report card: {error}") from error


def export_report_card(student, summaries, term, issued_on=None) -> ReportCardFile:
    """
    Export the report card of ``term`` from ``summaries`` for ``student``.
    Raises ``ReportExportError`` when the term has no summary.
    """
    summary = next((s for s in summaries if s.term == term), None)
    if summary is None:
        raise ReportExportError(f"No results found for term '{term}'.")
    block = ReportCardBlock.build(student, summary, issued_on=issued_on)
    return ReportCardExport(block).run()
