"""Shared Pydantic models for pagenav.

Style bundles are frozen so a render call always sees one consistent set of
templates. Swap a bundle (``model_copy(update=...)``) to change styles between
calls.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LinksStyle(BaseModel):
    """Templates for the numbered page-link list.

    ``previous``, ``next`` and ``dots`` hold the arrow/ellipsis text rendered
    inside the ``link`` / ``disabled`` templates. Setting one of them to
    ``None`` removes that element from the output.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    wrapper: str | None = Field(description="Wraps the joined link fragments.")
    link: str | None = Field(description="A clickable page link.")
    active: str | None = Field(description="The current page.")
    disabled: str | None = Field(description="A non-clickable slot (the dots gap).")
    previous: str | None = Field(default=None, description="Previous-page arrow text.")
    next: str | None = Field(default=None, description="Next-page arrow text.")
    dots: str | None = Field(default=None, description="Elided-pages marker.")


class PagerStyle(BaseModel):
    """Templates for the previous/next pager."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    wrapper: str | None
    previous: str | None
    next: str | None


class PageLink(BaseModel):
    """An explicit pager target, rendered regardless of pagination state."""

    url: str
    title: str
