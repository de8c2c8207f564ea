"""Page navigation HTML rendering.

Builds the numbered page-link list and the previous/next pager from a
:class:`~pagenav.pagination.Pagination` and a pair of style bundles.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Union

from .exceptions import InvalidArgumentError
from .types import LinksStyle, PageLink, PagerStyle

if TYPE_CHECKING:
    from .pagination import Pagination

PagerTarget = Union[str, PageLink, Mapping[str, str], None]

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(value|url)\s*\}\}")


def _is_page_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def format_template(
    template: object,
    value: str | int,
    url: str | int | None = None,
    page_url: Callable[[int], str] | None = None,
) -> str | int:
    """Substitute ``{{ value }}`` and ``{{ url }}`` in *template*.

    A template that is not a string (``None``) yields *value* unchanged. An
    integer *url*, or an integer *value* with no *url*, is a page number and is
    turned into a link with *page_url*.
    """
    if not isinstance(template, str):
        return value
    if url is None and _is_page_number(value):
        url = value
    if _is_page_number(url) and page_url is not None:
        url = page_url(url)  # type: ignore[arg-type]
    # One pass, so a value that itself contains "{{ url }}" is left as written.
    replacements = {"value": str(value), "url": "" if url is None else str(url)}
    return _PLACEHOLDER_RE.sub(lambda match: replacements[match.group(1)], template)


def link_window(current: int, total: int, pad: int) -> tuple[int, int]:
    """Return the ``(begin, end)`` page numbers shown around *current*.

    The window keeps ``2 * pad + 1`` slots where possible by shifting away from
    the first or last page, and shrinks only when there are fewer pages.
    """
    begin = current - pad
    end = current + pad
    if begin < 1:
        begin = 1
        end = pad * 2 + 1
    if end > total:
        end = total
        begin = max(1, end - pad * 2)
    return begin, end


def render_links(state: Pagination, style: LinksStyle, pad: int = 3) -> str:
    """Render numbered page links for *state*.

    Args:
        state: Initialized pagination state.
        style: Templates for the link list.
        pad: Neighbouring links shown on each side of the current page. The
            window is shifted near either end so the link count stays steady.

    Returns:
        The wrapped link list, or ``""`` when there is only one page.
    """
    if not _is_page_number(pad) or pad < 0:
        raise InvalidArgumentError("pad", pad, "must be a non-negative integer")
    if not state.is_active or state.number_pages == 1:
        return ""

    current = state.current_page
    total = state.number_pages
    begin, end = link_window(current, total, pad)

    def fmt(template: str | None, value: str | int, url: int | None = None) -> str:
        return str(format_template(template, value, url, state.page_url))

    links: list[str] = []
    if style.previous and current > 1:
        links.append(fmt(style.link, style.previous, current - 1))
    if style.dots and begin > 1:
        links.append(fmt(style.link, 1))
        if begin == 3:
            links.append(fmt(style.link, 2))
        elif begin != 2:
            links.append(fmt(style.disabled, style.dots))
    for num in range(begin, end + 1):
        links.append(fmt(style.active if num == current else style.link, num))
    if style.dots and end < total:
        if end == total - 2:
            links.append(fmt(style.link, total - 1))
        elif end != total - 1:
            links.append(fmt(style.disabled, style.dots))
        links.append(fmt(style.link, total))
    if style.next and current < total:
        links.append(fmt(style.link, style.next, current + 1))

    return "\n" + fmt(style.wrapper, "\n\t" + "\n\t".join(links)) + "\n"


def _explicit_target(target: object) -> PageLink | None:
    if isinstance(target, PageLink):
        return target
    if isinstance(target, Mapping):
        if target.get("url") is not None and target.get("title") is not None:
            return PageLink(url=str(target["url"]), title=str(target["title"]))
    return None


def render_pager(
    state: Pagination,
    style: PagerStyle,
    previous: PagerTarget = "Previous",
    next: PagerTarget = "Next",
) -> str:
    """Render previous/next pager links.

    Each side takes either a label, shown only when that direction exists, or
    an explicit :class:`PageLink` (or ``{"url": ..., "title": ...}`` mapping)
    that is rendered as given, so no pagination state is needed. Falsy values
    omit that side.
    """
    links = ""
    if previous:
        if isinstance(previous, str):
            if state.is_active and state.number_pages > 1 and state.current_page > 1:
                links += str(format_template(style.previous, previous, state.current_page - 1, state.page_url))
        else:
            target = _explicit_target(previous)
            if target is not None:
                links += str(format_template(style.previous, target.title, target.url))
    if next:
        if isinstance(next, str):
            if state.is_active and state.current_page < state.number_pages:
                links += str(format_template(style.next, next, state.current_page + 1, state.page_url))
        else:
            target = _explicit_target(next)
            if target is not None:
                links += str(format_template(style.next, target.title, target.url))

    if not links:
        return ""
    return "\n" + str(format_template(style.wrapper, links))
