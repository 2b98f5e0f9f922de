"""Response body localization middleware."""

import codecs
import time
from typing import Iterable, Optional

from fastapi import Request, Response
from starlette.datastructures import MutableHeaders
from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.i18n import LocalizationManager
from infrastructure.logging import bind_request_context, get_module_logger

logger = get_module_logger()

VALID_CONTENT_TYPES = (
    "text/html",
    "text/json",
    "application/json",
    "application/javascript",
)
EXCLUDED_URL_FRAGMENTS = ("/lib/", "/styles/", "/fonts/", "/images/")
TIMING_HEADER = "X-I18nMiddleware-Ms"
DEFAULT_CHARSET = "utf-8"


def response_charset(content_type: Optional[str]) -> str:
    """Charset named by a content-type header, or UTF-8 when absent or unknown."""
    for parameter in (content_type or "").split(";")[1:]:
        name, _, value = parameter.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
            try:
                return codecs.lookup(charset).name
            except LookupError:
                break
    return DEFAULT_CHARSET


class I18nMiddleware(BaseHTTPMiddleware):
    """Replaces the nuggets in textual response bodies.

    The culture comes from ``request.state.culture`` when an upstream
    handler set one, otherwise ``default_culture`` is used.
    """

    def __init__(
        self,
        app,
        manager: LocalizationManager,
        default_culture: str = "en",
        is_development: bool = False,
        content_types: Iterable[str] = VALID_CONTENT_TYPES,
        excluded_url_fragments: Iterable[str] = EXCLUDED_URL_FRAGMENTS,
    ):
        super().__init__(app)
        if manager is None:
            raise ValueError("manager is required")
        self.manager = manager
        self.default_culture = default_culture
        self.is_development = is_development
        self.content_types = tuple(content_types)
        self.excluded_url_fragments = tuple(excluded_url_fragments)

    def is_excluded(self, path: str) -> bool:
        lowered = path.lower()
        return any(fragment in lowered for fragment in self.excluded_url_fragments)

    def is_translatable(self, content_type: Optional[str]) -> bool:
        if not content_type:
            return False
        media_type = content_type.split(";", 1)[0].strip().lower()
        return media_type in self.content_types

    def resolve_culture(self, request: Request) -> str:
        return getattr(request.state, "culture", None) or self.default_culture

    async def dispatch(self, request: Request, call_next):
        culture = self.resolve_culture(request)
        with bind_request_context(
            correlation_id=request.headers.get("x-correlation-id"),
            culture=culture,
            request_path=request.url.path,
        ):
            return await self._localize(request, call_next, culture)

    async def _localize(self, request: Request, call_next, culture: str):
        response = await call_next(request)
        content_type = response.headers.get("content-type")
        if self.is_excluded(request.url.path) or not self.is_translatable(content_type):
            return response

        started = time.perf_counter()
        body = b"".join([chunk async for chunk in response.body_iterator])
        charset = response_charset(content_type)
        try:
            text = body.decode(charset)
            translated = self.manager.translate(culture, text)
            content = translated.encode(charset)
        except UnicodeError as error:
            logger.warning(
                "response_localization_skipped",
                culture=culture,
                path=request.url.path,
                charset=charset,
                error=str(error),
            )
            return Response(
                content=body,
                status_code=response.status_code,
                headers=MutableHeaders(raw=list(response.raw_headers)),
                background=response.background,
            )

        # Repeated headers such as Set-Cookie must all survive.
        headers = MutableHeaders(
            raw=[
                (key, value)
                for key, value in response.raw_headers
                if key.lower() != b"content-length"
            ]
        )
        if self.is_development:
            elapsed_ms = (time.perf_counter() - started) * 1000
            headers[TIMING_HEADER] = f"{elapsed_ms:.0f}"

        logger.debug(
            "response_localized",
            culture=culture,
            path=request.url.path,
            original_length=len(text),
            localized_length=len(translated),
        )
        return Response(
            content=content,
            status_code=response.status_code,
            headers=headers,
            background=response.background,
        )
