"""CSS-framework presets for the page-link list and the pager.

Every preset is the bootstrap baseline with a set of role overrides applied.
Put ``{{ value }}`` and ``{{ url }}`` where those should go in a template.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from .exceptions import InvalidArgumentError
from .types import LinksStyle, PagerStyle


class Framework(str, Enum):
    """Supported CSS frameworks."""

    BOOTSTRAP = "bootstrap"
    ZURB_FOUNDATION = "zurb_foundation"
    SEMANTIC_UI = "semantic_ui"
    MATERIALIZE = "materialize"
    UIKIT = "uikit"

    @classmethod
    def parse(cls, value: Framework | str) -> Framework:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise InvalidArgumentError("framework", value, f"expected one of: {choices}") from None


# http://getbootstrap.com/components/#pagination
BOOTSTRAP_LINKS: dict[str, str | None] = {
    "wrapper": '<ul class="pagination">{{ value }}</ul>',
    "link": '<li><a href="{{ url }}">{{ value }}</a></li>',
    "active": '<li class="active"><span>{{ value }}</span></li>',
    "disabled": '<li class="disabled"><span>{{ value }}</span></li>',
    "previous": "&laquo;",
    "next": "&raquo;",
    "dots": "&hellip;",
}

BOOTSTRAP_PAGER: dict[str, str | None] = {
    "wrapper": '<ul class="pager">{{ value }}</ul>',
    "previous": '<li class="previous"><a href="{{ url }}">&laquo; {{ value }}</a></li>',
    "next": '<li class="next"><a href="{{ url }}">{{ value }} &raquo;</a></li>',
}

_LINKS_OVERRIDES: dict[Framework, dict[str, str | None]] = {
    # http://foundation.zurb.com/docs/components/pagination.html
    Framework.ZURB_FOUNDATION: {
        "active": '<li class="current"><a href="">{{ value }}</a></li>',
        "disabled": '<li class="unavailable"><a href="">{{ value }}</a></li>',
    },
    # http://semantic-ui.com/collections/menu.html#pagination
    Framework.SEMANTIC_UI: {
        "wrapper": '<div class="ui pagination menu">{{ value }}</div>',
        "link": '<a class="item" href="{{ url }}">{{ value }}</a>',
        "active": '<div class="active item">{{ value }}</div>',
        "disabled": '<div class="disabled item">{{ value }}</div>',
        "previous": '<i class="left arrow icon"></i>',
        "next": '<i class="right arrow icon"></i>',
    },
    # http://materializecss.com/pagination.html
    Framework.MATERIALIZE: {
        "link": '<li class="waves-effect"><a href="{{ url }}">{{ value }}</a></li>',
        "active": '<li class="active"><a href="#!">{{ value }}</a></li>',
        "disabled": '<li class="disabled"><a href="#!">{{ value }}</a></li>',
        "previous": '<i class="material-icons">keyboard_arrow_left</i>',
        "next": '<i class="material-icons">keyboard_arrow_right</i>',
    },
    # http://getuikit.com/docs/pagination.html
    Framework.UIKIT: {
        "wrapper": '<ul class="uk-pagination">{{ value }}</ul>',
        "active": '<li class="uk-active"><span>{{ value }}</span></li>',
        "disabled": '<li class="uk-disabled"><span>{{ value }}</span></li>',
        "previous": '<i class="uk-icon-angle-double-left"></i>',
        "next": '<i class="uk-icon-angle-double-right"></i>',
    },
}

_PAGER_OVERRIDES: dict[Framework, dict[str, str | None]] = {
    Framework.UIKIT: {
        "wrapper": '<ul class="uk-pagination">{{ value }}</ul>',
        "previous": (
            '<li class="uk-pagination-previous"><a href="{{ url }}">'
            '<i class="uk-icon-angle-double-left"></i> {{ value }}</a></li>'
        ),
        "next": (
            '<li class="uk-pagination-next"><a href="{{ url }}">'
            '{{ value }} <i class="uk-icon-angle-double-right"></i></a></li>'
        ),
    },
}


def _check_roles(kind: str, allowed: set[str], roles: dict[str, object]) -> None:
    unknown = sorted(set(roles) - allowed)
    if unknown:
        raise InvalidArgumentError(
            f"{kind} role", unknown[0], f"expected one of: {', '.join(sorted(allowed))}"
        )
    for role, template in roles.items():
        if template is not None and not isinstance(template, str):
            raise InvalidArgumentError(f"{kind} role {role!r}", template, "template must be a string or None")


@dataclass(frozen=True)
class StyleConfig:
    """The links and pager template bundles used for one render call."""

    links: LinksStyle
    pager: PagerStyle

    def override_links(self, **roles: str | None) -> StyleConfig:
        """Return a copy with the given links roles replaced."""
        _check_roles("links", set(LinksStyle.model_fields), roles)
        return StyleConfig(links=self.links.model_copy(update=roles), pager=self.pager)

    def override_pager(self, **roles: str | None) -> StyleConfig:
        """Return a copy with the given pager roles replaced."""
        _check_roles("pager", set(PagerStyle.model_fields), roles)
        return StyleConfig(links=self.links, pager=self.pager.model_copy(update=roles))


@lru_cache(maxsize=None)
def _preset(framework: Framework) -> StyleConfig:
    links = {**BOOTSTRAP_LINKS, **_LINKS_OVERRIDES.get(framework, {})}
    pager = {**BOOTSTRAP_PAGER, **_PAGER_OVERRIDES.get(framework, {})}
    return StyleConfig(links=LinksStyle(**links), pager=PagerStyle(**pager))


def get_style(framework: Framework | str = Framework.BOOTSTRAP) -> StyleConfig:
    """Return the preset style for *framework* (bootstrap baseline plus overrides)."""
    return _preset(Framework.parse(framework))
