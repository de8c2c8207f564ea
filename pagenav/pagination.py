"""Query-string pagination state.

Usage::

    from pagenav import Pagination

    pagination = Pagination("bootstrap")
    if not pagination.initialize("page", 10, url):
        pagination.set_total_count(count_records())
    records = load_records(pagination.offset, pagination.length)
    html = pagination.links() + pagination.pager()

The page number travels in the URL as ``"<current>of<total>"`` (for example
``?page=3of12``). When that value names a page before the last one, the total
is already known and :meth:`Pagination.initialize` returns ``True`` so callers
can skip counting their records.
"""

from __future__ import annotations

import logging
import re

from .exceptions import InvalidArgumentError
from .rendering import PagerTarget, format_template, render_links, render_pager
from .styles import Framework, StyleConfig, get_style
from .types import LinksStyle, PagerStyle
from .urls import QueryStringUrlHelper, UrlHelper

logger = logging.getLogger(__name__)

# At most 18 digits per number; longer runs are treated as malformed.
_PAGE_VALUE_RE = re.compile(r"^\s*([0-9]{1,18})(?:of([0-9]{1,18}))?\s*$")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Pagination:
    """Pagination state for one request.

    Instances are mutated by :meth:`initialize` and :meth:`set_total_count` and
    must not be shared between concurrent requests.
    """

    def __init__(self, framework: Framework | str = Framework.BOOTSTRAP, urls: UrlHelper | None = None) -> None:
        self._urls = urls or QueryStringUrlHelper()
        self._style: StyleConfig = get_style(framework)
        self._query_key: str | None = None
        self._base_url = ""
        self._page_size = 10
        self._offset = 0
        self._current = 1
        self._total = 1

    def initialize(self, query_key: str = "page", page_size: int = 10, url: str | None = None) -> bool:
        """Read the current page from *url* and report whether a total count is needed.

        Args:
            query_key: The query parameter holding the page, eg. ``"page"``.
            page_size: How many records to show per page.
            url: The URL to paginate. Defaults to the current request URL.

        Returns:
            ``True`` when the URL already names a page before the last one, so
            calling :meth:`set_total_count` is optional. ``False`` means the
            total is unknown and should be supplied.
        """
        if not isinstance(query_key, str) or not query_key:
            raise InvalidArgumentError("query_key", query_key, "must be a non-empty string")
        if not _is_int(page_size) or page_size < 1:
            raise InvalidArgumentError("page_size", page_size, "must be a positive integer")
        if url is None:
            url = self._urls.current_request_url()

        params = self._urls.parse_query_params(url)
        self._query_key = query_key
        self._base_url = url
        self._page_size = page_size
        self._offset = 0
        self._current = 1
        self._total = 1

        raw = params.get(query_key)
        if raw is None:
            return False
        match = _PAGE_VALUE_RE.match(raw)
        if match is None:
            logger.debug("Ignoring malformed %r query value %r", query_key, raw)
            return False

        current = int(match.group(1))
        if current <= 1:
            return False
        self._current = current
        self._offset = (current - 1) * page_size
        total = int(match.group(2)) if match.group(2) else 0
        if total and current < total:
            self._total = total
            return True
        return False

    def set_total_count(self, count: int) -> None:
        """Set the number of pages from the total number of records."""
        if self._query_key is None:
            return
        if not _is_int(count) or count < 0:
            raise InvalidArgumentError("count", count, "must be a non-negative integer")
        self._total = -(-count // self._page_size) if count > self._page_size else 1

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        """Whether :meth:`initialize` has been called."""
        return self._query_key is not None

    @property
    def query_key(self) -> str | None:
        return self._query_key

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def offset(self) -> int:
        """How many records to skip, starting at 0."""
        return self._offset if self.is_active else 0

    @property
    def length(self) -> int | None:
        """How many records to display; pairs with :attr:`offset` for slicing."""
        return self._page_size if self.is_active else None

    @property
    def limit(self) -> str:
        """A ``" LIMIT offset, length"`` clause, or ``""`` when inactive."""
        if not self.is_active:
            return ""
        return f" LIMIT {self._offset}, {self._page_size}"

    @property
    def last_page(self) -> bool:
        return self.is_active and self._current == self._total

    is_last_page = last_page

    @property
    def current_page(self) -> int:
        return self._current if self.is_active else 1

    @property
    def number_pages(self) -> int:
        return self._total if self.is_active else 1

    total_pages = number_pages

    @property
    def previous_url(self) -> str | None:
        if self.is_active and self._current > 1:
            return self.page_url(self._current - 1)
        return None

    @property
    def next_url(self) -> str | None:
        if self.is_active and self._current < self._total:
            return self.page_url(self._current + 1)
        return None

    @property
    def style(self) -> StyleConfig:
        return self._style

    @property
    def links_style(self) -> LinksStyle:
        return self._style.links

    @property
    def pager_style(self) -> PagerStyle:
        return self._style.pager

    # ------------------------------------------------------------------
    # URLs and rendering
    # ------------------------------------------------------------------

    def page_url(self, num: int) -> str:
        """Return the URL for page *num*; the parameter is dropped on page 1."""
        if self._query_key is None:
            return self._base_url
        if num == 1:
            return self._urls.with_param_removed(self._base_url, self._query_key)
        return self._urls.with_param_set(self._base_url, self._query_key, f"{num}of{self._total}")

    def html(self, kind: Framework | str = Framework.BOOTSTRAP, **options: str | None) -> None:
        """Customize the links and pager templates.

        Args:
            kind: A framework preset name, which replaces both bundles, or
                ``"links"`` / ``"pager"`` to merge *options* into that bundle.
            **options: Role templates to override, eg.
                ``wrapper='<ul class="pagination pagination-sm">{{ value }}</ul>'``.
                ``None`` renders the bare value (or drops previous/next/dots).
        """
        if kind == "links":
            self._style = self._style.override_links(**options)
        elif kind == "pager":
            self._style = self._style.override_pager(**options)
        else:
            self._style = get_style(kind)

    def format(self, template: object, value: str | int, url: str | int | None = None) -> str | int:
        return format_template(template, value, url, self.page_url)

    def links(self, pad: int = 3) -> str:
        return render_links(self, self._style.links, pad)

    def pager(self, previous: PagerTarget = "Previous", next: PagerTarget = "Next") -> str:
        return render_pager(self, self._style.pager, previous, next)

    def __repr__(self) -> str:
        return (
            f"Pagination(query_key={self._query_key!r}, page={self.current_page}, "
            f"pages={self.number_pages}, page_size={self._page_size})"
        )
