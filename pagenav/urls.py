"""Query-string helpers used to derive page URLs.

The host framework may provide its own implementation by subclassing
:class:`UrlHelper`; the default works on plain URL strings with
``urllib.parse``. The "current request URL" is context-local so concurrent
requests served from one event loop never see each other's URL.
"""

from __future__ import annotations

import urllib.parse
from abc import ABC, abstractmethod
from contextvars import ContextVar, Token

_current_url: ContextVar[str] = ContextVar("pagenav_current_url", default="")


def current_request_url() -> str:
    """Return the URL of the request being served, or ``""`` outside a request."""
    return _current_url.get()


def set_current_request_url(url: str) -> Token[str]:
    """Record *url* as the current request URL; returns a token for resetting."""
    return _current_url.set(url)


def reset_current_request_url(token: Token[str]) -> None:
    _current_url.reset(token)


def _segments(query: str) -> list[tuple[str, str]]:
    """Split a query into ``(decoded key, raw segment)`` pairs, dropping empty segments."""
    segments: list[tuple[str, str]] = []
    for segment in query.split("&"):
        if segment:
            segments.append((urllib.parse.unquote_plus(segment.split("=", 1)[0]), segment))
    return segments


def _rebuild(url: str, key: str, value: str | None) -> str:
    # Untouched parameters keep their raw text; only the rewritten one is encoded.
    parts = urllib.parse.urlsplit(url)
    kept: list[str] = []
    replaced = False
    for name, segment in _segments(parts.query):
        if name != key:
            kept.append(segment)
        elif value is not None and not replaced:
            kept.append(urllib.parse.urlencode([(key, value)]))
            replaced = True
    if value is not None and not replaced:
        kept.append(urllib.parse.urlencode([(key, value)]))
    return urllib.parse.urlunsplit(parts._replace(query="&".join(kept)))


def parse_query_params(url: str) -> dict[str, str]:
    """Return the query parameters of *url*; the last occurrence of a key wins."""
    query = urllib.parse.urlsplit(url).query
    return dict(urllib.parse.parse_qsl(query, keep_blank_values=True))


def with_param_removed(url: str, key: str) -> str:
    """Return *url* without any ``key`` query parameter."""
    return _rebuild(url, key, None)


def with_param_set(url: str, key: str, value: str) -> str:
    """Return *url* with ``key`` set to *value*.

    An existing parameter keeps its position (duplicates collapse into it);
    otherwise the parameter is appended.
    """
    return _rebuild(url, key, value)


class UrlHelper(ABC):
    """URL operations a :class:`~pagenav.pagination.Pagination` depends on."""

    @abstractmethod
    def parse_query_params(self, url: str) -> dict[str, str]:
        ...

    @abstractmethod
    def with_param_removed(self, url: str, key: str) -> str:
        ...

    @abstractmethod
    def with_param_set(self, url: str, key: str, value: str) -> str:
        ...

    @abstractmethod
    def current_request_url(self) -> str:
        ...


class QueryStringUrlHelper(UrlHelper):
    """Default :class:`UrlHelper` backed by the module-level functions."""

    def parse_query_params(self, url: str) -> dict[str, str]:
        return parse_query_params(url)

    def with_param_removed(self, url: str, key: str) -> str:
        return with_param_removed(url, key)

    def with_param_set(self, url: str, key: str, value: str) -> str:
        return with_param_set(url, key, value)

    def current_request_url(self) -> str:
        return current_request_url()
