"""
Result aggregation and the batch result writer.

Marks are free text. A mark counts towards an average only when it parses
as a finite decimal after removing one trailing ``%`` ("92%", "88.5",
"100 %"); anything else ("A+", "", "n/a") stays on the report but is left
out of both the sum and the count.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, List, Optional

from django.db import transaction

from apps.academics.services import student_snapshot

from .models import Result

logger = logging.getLogger(__name__)

ONE_PLACE = Decimal('0.1')


def parse_marks(marks) -> Optional[Decimal]:
    """
    Numeric value of a marks string, or ``None`` when it is not a number.
    """
    if marks is None:
        return None
    text = str(marks).strip()
    if text.endswith('%'):
        text = text[:-1].rstrip()
    if not text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def average_marks(results) -> Optional[Decimal]:
    """
    Mean of the parseable marks, rounded half up to one decimal place.
    ``None`` when no mark parses.
    """
    values = [v for v in (parse_marks(r.marks) for r in results) if v is not None]
    if not values:
        return None
    return (sum(values) / len(values)).quantize(ONE_PLACE, rounding=ROUND_HALF_UP)


@dataclass
class TermSummary:
    """Results of one term, in query order, with their average."""
    term: str
    results: List = field(default_factory=list)
    overall_average: Optional[Decimal] = None

    @property
    def has_average(self):
        return self.overall_average is not None


def summarize_terms(results: Iterable) -> List[TermSummary]:
    """
    Group results by exact term label and average each group.

    Groups come back sorted by term label, descending. Labels are compared
    as plain strings, so "Term 1" and "term 1" are separate groups and the
    order is not chronological.
    """
    groups = OrderedDict()
    for result in results:
        groups.setdefault(result.term, []).append(result)

    summaries = [
        TermSummary(term=term, results=items, overall_average=average_marks(items))
        for term, items in groups.items()
    ]
    summaries.sort(key=lambda summary: summary.term, reverse=True)
    return summaries


def overall_average(results) -> Optional[Decimal]:
    """Average over every result regardless of term."""
    return average_marks(list(results))


@dataclass(frozen=True)
class ResultEntry:
    subject_name: str
    marks: str
    comments: str = ''


def record_results(student, term, entries) -> List[Result]:
    """
    Write one Result per entry for ``student`` and ``term``.

    Every row carries the student's current name. The rows are written in
    a single transaction: either all are saved or none.
    """
    snapshot = student_snapshot(student)
    rows = []
    for entry in entries:
        if isinstance(entry, dict):
            entry = ResultEntry(**entry)
        rows.append(Result(
            student_id=snapshot.student_id,
            student_name=snapshot.student_name,
            subject_name=entry.subject_name,
            marks=entry.marks,
            term=term,
            comments=entry.comments or '',
        ))

    if not rows:
        raise ValueError("At least one subject result is required.")

    with transaction.atomic():
        for row in rows:
            row.save()

    logger.info(f"Recorded {len(rows)} result(s) for {snapshot.student_name} ({term})")
    return rows
