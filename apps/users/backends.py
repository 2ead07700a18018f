"""
Authentication backend for email-based login.
"""

import logging

from django.contrib.auth.backends import ModelBackend
from django.contrib.auth import get_user_model

logger = logging.getLogger(__name__)
User = get_user_model()


class EmailBackend(ModelBackend):
    """
    Authenticate with an email address and password.
    Email matching is case-insensitive.
    """

    def authenticate(self, request, username=None, password=None, **kwargs):
        """
        Authenticate user with email and password.

        Args:
            request: The request object
            username: The email address (Django passes USERNAME_FIELD as ``username``)
            password: User password
            **kwargs: May carry ``email`` instead of ``username``

        Returns:
            User object if authentication succeeds, None otherwise
        """
        email = username or kwargs.get('email')
        if not email or password is None:
            return None

        try:
            user = User.objects.get(email__iexact=email)
        except User.DoesNotExist:
            # Run the default password hasher once to reduce timing
            # differences between an existing and non-existing user
            User().set_password(password)
            logger.info(f"Failed sign-in for unknown email {email}")
            return None
        except User.MultipleObjectsReturned:
            user = User.objects.filter(email=email).first()
            if user is None:
                return None

        if user.check_password(password) and self.user_can_authenticate(user):
            return user
        logger.info(f"Failed sign-in for {email}")
        return None
