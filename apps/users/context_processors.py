from .session import SessionContext


def session_context(request):
    """
    Context processor exposing the current session and role flags to templates.
    """
    session = getattr(request, 'session_context', None) or SessionContext.for_user(
        getattr(request, 'user', None)
    )
    return {
        'session_context': session,
        'is_admin': session.is_admin,
        'is_parent': session.is_parent,
    }
