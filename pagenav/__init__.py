"""pagenav: query-string pagination state and HTML page navigation."""

from .exceptions import InvalidArgumentError
from .pagination import Pagination
from .rendering import format_template, link_window, render_links, render_pager
from .styles import Framework, StyleConfig, get_style
from .types import LinksStyle, PageLink, PagerStyle

__all__ = [
    "Framework",
    "InvalidArgumentError",
    "LinksStyle",
    "PageLink",
    "PagerStyle",
    "Pagination",
    "StyleConfig",
    "format_template",
    "get_style",
    "link_window",
    "render_links",
    "render_pager",
]
