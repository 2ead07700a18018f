"""
Parent account provisioning used by the admin "manage parents" page.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import DatabaseError

logger = logging.getLogger(__name__)
User = get_user_model()


@dataclass(frozen=True)
class ParentAccountResult:
    success: bool
    message: str
    uid: Optional[str] = None


class ParentAccountError(Exception):
    """
    Parent account creation failed.

    ``code`` is one of ``invalid-argument``, ``already-exists`` or
    ``internal`` and is shown to the admin together with the message.
    """
    INVALID_ARGUMENT = 'invalid-argument'
    ALREADY_EXISTS = 'already-exists'
    INTERNAL = 'internal'

    def __init__(self, code, message):
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self):
        return f"{self.message} (Code: {self.code})"


def create_parent_user(email, password) -> ParentAccountResult:
    """
    Create a parent login for ``email`` with a temporary ``password``.

    The parent is linked to a student only through the student's parent
    email, so the address should match the one recorded on the student.
    """
    if not email or not password:
        raise ParentAccountError(
            ParentAccountError.INVALID_ARGUMENT,
            "Please provide both parent email and a temporary password.",
        )

    try:
        validate_email(email)
    except ValidationError:
        raise ParentAccountError(
            ParentAccountError.INVALID_ARGUMENT,
            f"'{email}' is not a valid email address.",
        )

    if User.objects.filter(email__iexact=email).exists():
        raise ParentAccountError(
            ParentAccountError.ALREADY_EXISTS,
            f"An account for {email} already exists.",
        )

    try:
        validate_password(password)
    except ValidationError as e:
        raise ParentAccountError(ParentAccountError.INVALID_ARGUMENT, ' '.join(e.messages))

    try:
        user = User.objects.create_user(email=email, password=password, role=User.Role.PARENT)
    except DatabaseError as e:
        logger.error(f"Error creating parent account for {email}: {e}")
        raise ParentAccountError(
            ParentAccountError.INTERNAL,
            "An internal error occurred while creating the account.",
        ) from e

    logger.info(f"Parent account created for {email}")
    return ParentAccountResult(
        success=True,
        message=f"Account for {email} successfully created.",
        uid=str(user.id),
    )
