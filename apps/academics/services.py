"""
Lookups shared by the writers of student- and teacher-referencing records.

Records that reference a student (results, fees, attendance) or a teacher
(classes, subjects) store a copy of the display name next to the reference
so list pages need no join. The copy is taken at write time and is not
updated when the student or teacher is renamed later; lists may show the
old name until the record itself is edited.
"""

import logging
from typing import NamedTuple, Optional

from .models import Student, Teacher

logger = logging.getLogger(__name__)


class StudentSnapshot(NamedTuple):
    student_id: object
    student_name: str


class TeacherSnapshot(NamedTuple):
    teacher_id: object
    teacher_name: str


def student_snapshot(student: Student) -> StudentSnapshot:
    """Reference id and display name to copy onto a new record."""
    return StudentSnapshot(student.pk, student.student_name)


def teacher_snapshot(teacher: Optional[Teacher]) -> TeacherSnapshot:
    """Reference id and display name for an optional teacher assignment."""
    if teacher is None:
        return TeacherSnapshot(None, '')
    return TeacherSnapshot(teacher.pk, teacher.teacher_name)


def get_child_for_parent(user) -> Optional[Student]:
    """
    The student linked to a parent login, matched on the parent email.

    Several students may share one parent email; the first by name is
    returned.
    """
    if not getattr(user, 'email', None):
        return None
    child = Student.objects.filter(parent_email__iexact=user.email).first()
    if child is None:
        logger.info(f"No student linked to parent {user.email}")
    return child
