"""
Dropdown component

    Dropdown.widget().toggler_content("Actions").items(
        DropdownItem.link("Edit", "/edit"),
        DropdownItem.divider(),
        DropdownItem.link("Delete", "/delete"),
    )

Inside a `Nav` the same widget renders as a `nav-item dropdown` list item.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Union

from .. import html as h
from ..errors import WidgetConfigError
from .base import Widget
from .enums import (
    ButtonSize,
    ButtonVariant,
    DropdownAlignment,
    DropdownAutoClose,
    DropdownDirection,
    DropdownItemType,
    Theme,
)

_ACTIVE_AND_DISABLED = "The dropdown item cannot be active and disabled at the same time."
_EMPTY_HEADER_TAG = "The header tag cannot be empty."


@dataclass(frozen=True)
class DropdownItem:
    """One entry of a dropdown menu.

    `attributes` apply to the surrounding `<li>`, `item_attributes` to the
    inner element (link, button, header, ...).
    """

    type: DropdownItemType
    content: Any = ""
    url: str = ""
    active: bool = False
    disabled: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)
    item_attributes: Dict[str, Any] = field(default_factory=dict)
    header_tag: str = "h6"
    encode: bool = True

    def __post_init__(self) -> None:
        if self.active and self.disabled:
            raise WidgetConfigError(_ACTIVE_AND_DISABLED, option="active")
        if self.header_tag == "":
            raise WidgetConfigError(_EMPTY_HEADER_TAG, option="header_tag")

    @classmethod
    def button(cls, content: Any = "", attributes=None, item_attributes=None) -> "DropdownItem":
        return cls(DropdownItemType.BUTTON, content, attributes=dict(attributes or {}), item_attributes=dict(item_attributes or {}))

    @classmethod
    def divider(cls, attributes=None, item_attributes=None) -> "DropdownItem":
        return cls(DropdownItemType.DIVIDER, attributes=dict(attributes or {}), item_attributes=dict(item_attributes or {}))

    @classmethod
    def header(cls, content: Any = "", header_tag: str = "h6", attributes=None, item_attributes=None) -> "DropdownItem":
        return cls(
            DropdownItemType.HEADER,
            content,
            header_tag=header_tag,
            attributes=dict(attributes or {}),
            item_attributes=dict(item_attributes or {}),
        )

    @classmethod
    def link(
        cls,
        content: Any = "",
        url: str = "#",
        active: bool = False,
        disabled: bool = False,
        attributes=None,
        item_attributes=None,
    ) -> "DropdownItem":
        return cls(
            DropdownItemType.LINK,
            content,
            url,
            active,
            disabled,
            dict(attributes or {}),
            dict(item_attributes or {}),
        )

    @classmethod
    def list_content(cls, content: Any = "", attributes=None) -> "DropdownItem":
        return cls(DropdownItemType.LIST_CONTENT, content, attributes=dict(attributes or {}), encode=False)

    @classmethod
    def text(cls, content: Any = "", attributes=None, item_attributes=None) -> "DropdownItem":
        return cls(DropdownItemType.TEXT, content, attributes=dict(attributes or {}), item_attributes=dict(item_attributes or {}))

    def with_active(self, enabled: bool) -> "DropdownItem":
        return replace(self, active=enabled)

    def with_disabled(self, enabled: bool) -> "DropdownItem":
        return replace(self, disabled=enabled)

    def with_content(self, content: Any, encode: bool = True) -> "DropdownItem":
        return replace(self, content=content, encode=encode)

    def with_header_tag(self, tag: str) -> "DropdownItem":
        return replace(self, header_tag=tag)

    def with_url(self, url: str) -> "DropdownItem":
        return replace(self, url=url)

    def render(self) -> str:
        return h.tag("li", f"\n{self._render_inner()}\n", self.attributes)

    def __html__(self) -> str:
        return self.render()

    def _render_inner(self) -> str:
        attributes = dict(self.item_attributes)
        user_classes = attributes.pop("class", None)
        body = h.content(self.content, self.encode)

        if self.type is DropdownItemType.DIVIDER:
            return h.tag("hr", attributes=h.add_css_class(attributes, "dropdown-divider", user_classes))
        if self.type is DropdownItemType.HEADER:
            return h.tag(self.header_tag, body, h.add_css_class(attributes, "dropdown-header", user_classes))
        if self.type is DropdownItemType.TEXT:
            return h.tag("span", body, h.add_css_class(attributes, "dropdown-item-text", user_classes))
        if self.type is DropdownItemType.BUTTON:
            attributes["type"] = "button"
            return h.tag("button", body, h.add_css_class(attributes, "dropdown-item", user_classes))
        if self.type is DropdownItemType.LINK:
            attributes = h.add_css_class(attributes, "dropdown-item", user_classes)
            attributes["href"] = self.url
            if self.active:
                attributes = h.add_css_class(attributes, "active")
                attributes["aria-current"] = "true"
            if self.disabled:
                attributes = h.add_css_class(attributes, "disabled")
                attributes["aria-disabled"] = "true"
            return h.tag("a", body, attributes)
        return body


class Dropdown(Widget):
    """Toggleable menu (`<div class="dropdown">`)"""

    id_prefix = "dropdown-"

    def __init__(self) -> None:
        super().__init__()
        self._items: List[DropdownItem] = []
        self._items_attributes: Dict[str, Any] = {}
        self._toggler_content: Any = "Dropdown button"
        self._encode_toggler = True
        self._toggler_attributes: Dict[str, Any] = {}
        self._toggler_tag = "button"
        self._toggler_variant: Optional[ButtonVariant] = ButtonVariant.SECONDARY
        self._toggler_size: Optional[ButtonSize] = None
        self._toggler_url = "#"
        self._direction = DropdownDirection.DOWN
        self._alignment: List[DropdownAlignment] = []
        self._split = False
        self._theme: Optional[Union[Theme, str]] = None
        self._auto_close: Optional[DropdownAutoClose] = None
        self._container = True

    def items(self, *items: DropdownItem) -> "Dropdown":
        return self._with(items=list(items))

    def items_attributes(self, attributes: Dict[str, Any]) -> "Dropdown":
        """Attributes of the `<ul class="dropdown-menu">` element."""
        return self._with(items_attributes=dict(attributes))

    def toggler_content(self, content: Any, encode: bool = True) -> "Dropdown":
        return self._with(toggler_content=content, encode_toggler=encode)

    def toggler_attributes(self, attributes: Dict[str, Any]) -> "Dropdown":
        return self._with(toggler_attributes=dict(attributes))

    def toggler_tag(self, tag: str) -> "Dropdown":
        return self._with(toggler_tag=self._check_tag(tag, "Toggler tag cannot be empty string."))

    def toggler_variant(self, variant: Optional[ButtonVariant]) -> "Dropdown":
        return self._with(toggler_variant=variant)

    def toggler_size(self, size: Optional[ButtonSize]) -> "Dropdown":
        return self._with(toggler_size=size)

    def toggler_url(self, url: str) -> "Dropdown":
        return self._with(toggler_url=url)

    def direction(self, direction: DropdownDirection) -> "Dropdown":
        return self._with(direction=direction)

    def alignment(self, *alignment: DropdownAlignment) -> "Dropdown":
        return self._with(alignment=list(alignment))

    def split(self, enabled: bool = True) -> "Dropdown":
        """Render a separate action button next to a caret-only toggler."""
        return self._with(split=enabled)

    def theme(self, theme: Optional[Union[Theme, str]]) -> "Dropdown":
        return self._with(theme=theme)

    def auto_close(self, value: Optional[DropdownAutoClose]) -> "Dropdown":
        return self._with(auto_close=value)

    def container(self, enabled: bool = True) -> "Dropdown":
        """Without container only toggler and menu are rendered."""
        return self._with(container=enabled)

    # -- rendering ----------------------------------------------------------

    def render(self) -> str:
        if not self._items:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        classes = [self._direction, user_classes]
        if self._split:
            classes.insert(0, "btn-group")
        attributes = h.add_css_class(attributes, *classes)
        inner = h.join_lines(self._render_split_button(), self._render_toggler(), self._render_menu())
        if not self._container:
            return inner
        return h.tag("div", f"\n{inner}\n", attributes)

    def render_nav_item(self) -> str:
        """Render as `<li class="nav-item dropdown">` for use inside a `Nav`."""
        if not self._items:
            return ""
        attributes = h.merge_defaults(
            self._toggler_attributes,
            {
                "href": self._toggler_url,
                "role": "button",
                "data-bs-toggle": "dropdown",
                "aria-expanded": "false",
            },
        )
        user_classes = attributes.pop("class", None)
        attributes = {"class": ["nav-link", "dropdown-toggle"], **attributes}
        attributes = h.add_css_class(attributes, user_classes)
        toggler = h.tag("a", self._toggler_content, attributes, encode_content=self._encode_toggler)
        return h.tag("li", f"\n{toggler}\n{self._render_menu()}\n", {"class": ["nav-item", "dropdown"]})

    def _render_toggler(self) -> str:
        defaults: Dict[str, Any] = {
            "data-bs-toggle": "dropdown",
            "aria-expanded": "false",
        }
        if self._toggler_tag == "button":
            defaults = {"type": "button", **defaults}
        elif self._toggler_tag == "a":
            defaults = {"href": self._toggler_url, "role": "button", **defaults}
        if self._auto_close is not None:
            defaults["data-bs-auto-close"] = self._auto_close.value
        attributes = h.merge_defaults(self._toggler_attributes, defaults)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(
            attributes,
            "btn" if self._toggler_variant else None,
            self._toggler_variant,
            self._toggler_size,
            "dropdown-toggle",
            "dropdown-toggle-split" if self._split else None,
            user_classes,
        )
        content = self._toggler_content
        encode = self._encode_toggler
        if self._split:
            content, encode = '<span class="visually-hidden">Toggle Dropdown</span>', False
        return h.tag(self._toggler_tag, content, attributes, encode_content=encode)

    def _render_split_button(self) -> str:
        if not self._split:
            return ""
        attributes = h.add_css_class({"type": "button"}, "btn", self._toggler_variant, self._toggler_size)
        return h.tag("button", self._toggler_content, attributes, encode_content=self._encode_toggler)

    def _render_menu(self) -> str:
        attributes = dict(self._items_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "dropdown-menu", *self._alignment, user_classes)
        if self._theme is not None:
            attributes["data-bs-theme"] = self._theme.value if isinstance(self._theme, Theme) else self._theme
        items = "\n".join(item.render() for item in self._items)
        return h.tag("ul", f"\n{items}\n", attributes)
