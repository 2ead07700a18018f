"""
Per-request session context: who is signed in and with which role.

The context is derived from the authenticated user on every request (see
``SessionContextMiddleware``), so it is populated by signing in and empty
again after signing out. Views, templates and consumers read it from the
request or scope instead of from module-level state.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionContext:
    user: Optional[object] = None
    role: Optional[str] = None

    @classmethod
    def for_user(cls, user):
        if user is None or not getattr(user, 'is_authenticated', False):
            return cls()
        from .models import User
        role = User.Role.ADMIN if user.is_superuser else user.role
        return cls(user=user, role=role)

    @property
    def is_authenticated(self):
        return self.user is not None

    @property
    def is_admin(self):
        from .models import User
        return self.role == User.Role.ADMIN

    @property
    def is_parent(self):
        from .models import User
        return self.role == User.Role.PARENT

    @property
    def home_url_name(self):
        """URL name of the landing page for this session."""
        if self.is_admin:
            return 'core:admin_dashboard'
        if self.is_parent:
            return 'users:parent_dashboard'
        return 'core:home'
