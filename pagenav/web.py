"""FastAPI integration.

``CurrentUrlMiddleware`` makes the request URL available to
:func:`pagenav.urls.current_request_url`, so ``Pagination.initialize()`` can be
called without passing a URL. ``pagination_dependency`` builds a ready
:class:`~pagenav.pagination.Pagination` per request::

    app.add_middleware(CurrentUrlMiddleware)

    @app.get("/items", response_class=HTMLResponse)
    async def items(request: Request, pagination: Pagination = Depends(pagination_dependency(page_size=20))):
        if not request.state.pagination_total_known:
            pagination.set_total_count(count_items())
        return render(load_items(pagination.offset, pagination.length), pagination.links())
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from .core.config import get_config
from .pagination import Pagination
from .styles import Framework
from .urls import reset_current_request_url, set_current_request_url

logger = logging.getLogger(__name__)


class CurrentUrlMiddleware(BaseHTTPMiddleware):
    """Records the full request URL for the duration of each request."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = set_current_request_url(str(request.url))
        try:
            return await call_next(request)
        finally:
            reset_current_request_url(token)


def pagination_dependency(
    query_key: str | None = None,
    page_size: int | None = None,
    framework: Framework | str | None = None,
) -> Callable[[Request], Pagination]:
    """Return a FastAPI dependency yielding an initialized :class:`Pagination`.

    Arguments left as ``None`` are taken from :func:`~pagenav.core.config.get_config`
    when the dependency runs. The dependency has already called
    ``initialize()``; check ``pagination.number_pages``/``is_last_page`` or call
    ``set_total_count()`` as usual. The boolean result of ``initialize()`` is
    stored on ``request.state.pagination_total_known``.
    """

    # Load the profile now so threadpool workers only ever read the cached config.
    get_config()

    def dependency(request: Request) -> Pagination:
        cfg = get_config()
        pagination = Pagination(cfg.framework if framework is None else framework)
        known = pagination.initialize(
            cfg.query_key if query_key is None else query_key,
            cfg.page_size if page_size is None else page_size,
            str(request.url),
        )
        request.state.pagination_total_known = known
        logger.debug("Paginating %s: %r (total known: %s)", request.url.path, pagination, known)
        return pagination

    return dependency
