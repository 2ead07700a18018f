"""
Attendance writes and the summary shown to parents.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from apps.academics.services import student_snapshot

from .models import AttendanceRecord

logger = logging.getLogger(__name__)


def record_attendance(student, date, status, subject='', reason=''):
    """Create an attendance record carrying the student's current name."""
    snapshot = student_snapshot(student)
    record = AttendanceRecord.objects.create(
        student_id=snapshot.student_id,
        student_name=snapshot.student_name,
        date=date,
        status=status,
        subject=subject or '',
        reason=reason or '',
    )
    logger.info(f"Attendance recorded: {record}")
    return record


@dataclass(frozen=True)
class AttendanceSummary:
    total: int
    present: int
    absent: int
    late: int
    excused: int

    @property
    def attendance_rate(self) -> Optional[Decimal]:
        """Share of records marked Present or Late, in percent; ``None`` without records."""
        if not self.total:
            return None
        rate = Decimal(self.present + self.late) * 100 / Decimal(self.total)
        return rate.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)


def summarize_attendance(records) -> AttendanceSummary:
    counts = {status: 0 for status in AttendanceRecord.Status.values}
    total = 0
    for record in records:
        total += 1
        if record.status in counts:
            counts[record.status] += 1
    return AttendanceSummary(
        total=total,
        present=counts[AttendanceRecord.Status.PRESENT],
        absent=counts[AttendanceRecord.Status.ABSENT],
        late=counts[AttendanceRecord.Status.LATE],
        excused=counts[AttendanceRecord.Status.EXCUSED],
    )
