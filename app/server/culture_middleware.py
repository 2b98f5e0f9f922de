"""Explicit culture selection from the query string or a cookie."""

from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.i18n import LanguageTag

CULTURE_QUERY_PARAM = "culture"
CULTURE_COOKIE = "i18n.culture"


class CultureMiddleware(BaseHTTPMiddleware):
    """Stores an explicitly requested culture on ``request.state.culture``.

    The ``culture`` query parameter wins over the ``i18n.culture`` cookie.
    Invalid language tags are ignored.
    """

    def __init__(self, app, query_param=CULTURE_QUERY_PARAM, cookie_name=CULTURE_COOKIE):
        super().__init__(app)
        self.query_param = query_param
        self.cookie_name = cookie_name

    async def dispatch(self, request, call_next):
        requested = request.query_params.get(self.query_param) or request.cookies.get(
            self.cookie_name
        )
        if requested and LanguageTag.is_valid(requested):
            request.state.culture = requested
        response = await call_next(request)
        return response
