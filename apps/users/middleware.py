from .session import SessionContext


class SessionContextMiddleware:
    """
    Attach ``request.session_context`` built from ``request.user``.
    Must run after ``AuthenticationMiddleware``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.session_context = SessionContext.for_user(getattr(request, 'user', None))
        return self.get_response(request)
