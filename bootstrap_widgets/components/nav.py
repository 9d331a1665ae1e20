"""
Navigation links and the Nav component

    Nav.widget().styles(NavStyle.TABS).current_path("/home").items(
        NavLink.to("Home", "/home"),
        NavLink.to("Disabled", "#", disabled=True),
    )

The active link is derived from `current_path` using a best-prefix match:
an exact url match wins, otherwise the longest url whose path segments
prefix `current_path` (`/` and `#` never match by prefix).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from .. import html as h
from ..errors import WidgetConfigError
from .base import Widget
from .dropdown import Dropdown
from .enums import NavLayout, NavStyle

logger = logging.getLogger("bootstrap_widgets.nav")

_ACTIVE_AND_DISABLED = "The nav link cannot be active and disabled at the same time."


@dataclass(frozen=True)
class NavLink:
    """A `.nav-link` anchor, optionally wrapped in a `<li class="nav-item">`."""

    label: Any = ""
    url: Optional[str] = None
    active: bool = False
    disabled: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)
    item_attributes: Dict[str, Any] = field(default_factory=dict)
    encode_label: bool = True
    wrap_item: bool = False

    def __post_init__(self) -> None:
        if self.active and self.disabled:
            raise WidgetConfigError(_ACTIVE_AND_DISABLED, option="active")

    @classmethod
    def to(
        cls,
        label: Any = "",
        url: Optional[str] = None,
        active: bool = False,
        disabled: bool = False,
        attributes: Optional[Dict[str, Any]] = None,
        encode_label: bool = True,
    ) -> "NavLink":
        return cls(label, url, active, disabled, dict(attributes or {}), {}, encode_label)

    @classmethod
    def item(
        cls,
        label: Any = "",
        url: Optional[str] = None,
        active: bool = False,
        disabled: bool = False,
        attributes: Optional[Dict[str, Any]] = None,
        link_attributes: Optional[Dict[str, Any]] = None,
        encode_label: bool = True,
    ) -> "NavLink":
        """Link wrapped in a list item; `attributes` apply to the `<li>`."""
        return cls(
            label,
            url,
            active,
            disabled,
            dict(link_attributes or {}),
            dict(attributes or {}),
            encode_label,
            wrap_item=True,
        )

    def with_active(self, enabled: bool) -> "NavLink":
        return replace(self, active=enabled)

    def with_disabled(self, enabled: bool) -> "NavLink":
        return replace(self, disabled=enabled)

    def render_link(self) -> str:
        attributes = dict(self.attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "nav-link")
        if self.active:
            attributes = h.add_css_class(attributes, "active")
            attributes["aria-current"] = "page"
        if self.disabled:
            attributes = h.add_css_class(attributes, "disabled")
            attributes["aria-disabled"] = "true"
        attributes = h.add_css_class(attributes, user_classes)
        attributes["href"] = self.url
        return h.tag("a", self.label, attributes, encode_content=self.encode_label)

    def render_item(self) -> str:
        attributes = dict(self.item_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "nav-item", user_classes)
        return h.tag("li", f"\n{self.render_link()}\n", attributes)

    def render(self) -> str:
        return self.render_item() if self.wrap_item else self.render_link()

    def __html__(self) -> str:
        return self.render()


NavItem = Union[NavLink, Dropdown]


class Nav(Widget):
    """Base navigation (`<ul class="nav">`) built from links and dropdowns"""

    id_prefix = "nav-"

    def __init__(self) -> None:
        super().__init__()
        self._items: List[NavItem] = []
        self._styles: List[Union[NavStyle, NavLayout]] = []
        self._current_path: Optional[str] = None
        self._activate_items = True
        self._tag = "ul"

    def items(self, *items: NavItem) -> "Nav":
        return self._with(items=list(items))

    def styles(self, *styles: Union[NavStyle, NavLayout]) -> "Nav":
        return self._with(styles=list(styles))

    def current_path(self, path: Optional[str]) -> "Nav":
        return self._with(current_path=path)

    def activate_items(self, enabled: bool = True) -> "Nav":
        """Whether `current_path` marks a matching link as active."""
        return self._with(activate_items=enabled)

    def tag(self, tag: str) -> "Nav":
        return self._with(tag=self._check_tag(tag))

    def render(self) -> str:
        if not self._items:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        base = None if NavStyle.NAVBAR in self._styles else "nav"
        attributes = h.add_css_class(attributes, base, *self._styles, user_classes)

        as_list = self._tag in ("ul", "ol")
        explicit = [item for item in self._items if isinstance(item, NavLink) and item.active]
        if len(explicit) > 1:
            raise WidgetConfigError('Only one "link" can be active.', option="items")
        active_url = None if explicit else self._active_url()
        rendered = []
        for item in self._items:
            if isinstance(item, Dropdown):
                rendered.append(item.render_nav_item())
                continue
            if active_url is not None and item.url == active_url and not item.disabled:
                item = item.with_active(True)
                active_url = None
            rendered.append(item.render_item() if as_list else item.render_link())
        inner = "\n".join(part for part in rendered if part)
        return h.tag(self._tag, f"\n{inner}\n", attributes)

    def _active_url(self) -> Optional[str]:
        if not self._activate_items or not self._current_path:
            return None
        urls = [
            item.url
            for item in self._items
            if isinstance(item, NavLink) and item.url and not item.disabled
        ]
        if self._current_path in urls:
            return self._current_path
        best: Optional[str] = None
        for url in urls:
            if url in ("/", "#") or not self._current_path.startswith(url.rstrip("/") + "/"):
                continue
            if best is None or len(url) > len(best):
                best = url
        if best is None:
            logger.debug("no nav link matches current path %s", self._current_path)
        return best
