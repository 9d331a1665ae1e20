"""
NavBar component

A block widget: `begin()` opens the navbar up to the collapsible area, the
caller renders its content (usually a `Nav` with `NavStyle.NAVBAR`), and
`end()` closes everything again.

    navbar = NavBar.widget().id("main-nav").brand_text("Shop").brand_url("/")
    html = navbar.begin() + nav.render() + navbar.end()
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from .. import html as h
from .base import BlockWidget
from .enums import NavBarExpand, NavBarPlacement, Theme


class NavBar(BlockWidget):
    """Responsive navigation header"""

    id_prefix = "navbar-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._tag = "nav"
        self._brand: Any = ""
        self._brand_text: Any = ""
        self._brand_url = ""
        self._brand_image: Any = ""
        self._brand_image_attributes: Dict[str, Any] = {}
        self._brand_attributes: Dict[str, Any] = {}
        self._expand: Optional[NavBarExpand] = NavBarExpand.LG
        self._container = False
        self._container_attributes: Dict[str, Any] = {}
        self._inner_container = True
        self._inner_container_attributes: Dict[str, Any] = {}
        self._toggler: Any = ""
        self._toggler_attributes: Dict[str, Any] = {}

    def tag(self, tag: str) -> "NavBar":
        return self._with(tag=self._check_tag(tag))

    def brand(self, brand: Any) -> "NavBar":
        """Use `brand` verbatim instead of the generated brand element."""
        return self._with(brand=brand)

    def brand_text(self, text: Any) -> "NavBar":
        return self._with(brand_text=text)

    def brand_url(self, url: str) -> "NavBar":
        return self._with(brand_url=url)

    def brand_image(self, image: Any) -> "NavBar":
        """Image url, or a widget/markup object rendered as-is."""
        return self._with(brand_image=image)

    def brand_image_attributes(self, attributes: Dict[str, Any]) -> "NavBar":
        return self._with(brand_image_attributes=dict(attributes))

    def brand_attributes(self, attributes: Dict[str, Any]) -> "NavBar":
        return self._with(brand_attributes=dict(attributes))

    def expand(self, expand: Optional[NavBarExpand]) -> "NavBar":
        return self._with(expand=expand)

    def placement(self, placement: NavBarPlacement) -> "NavBar":
        return self.add_class(placement)

    def theme(self, theme: Union[Theme, str, None]) -> "NavBar":
        if isinstance(theme, Theme):
            theme = theme.value
        return self.attribute("data-bs-theme", theme or None)

    def container(self, enabled: bool = True) -> "NavBar":
        return self._with(container=enabled)

    def container_attributes(self, attributes: Dict[str, Any]) -> "NavBar":
        return self._with(container_attributes=dict(attributes))

    def inner_container(self, enabled: bool = True) -> "NavBar":
        return self._with(inner_container=enabled)

    def inner_container_attributes(self, attributes: Dict[str, Any]) -> "NavBar":
        return self._with(inner_container_attributes=dict(attributes))

    def toggler(self, toggler: Any) -> "NavBar":
        return self._with(toggler=toggler)

    def toggler_attributes(self, attributes: Dict[str, Any]) -> "NavBar":
        return self._with(toggler_attributes=dict(attributes))

    def add_toggler_class(self, *classes: Any) -> "NavBar":
        return self._with(toggler_attributes=h.add_css_class(self._toggler_attributes, *classes))

    def begin(self) -> str:
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        collapse_id = self._resolve_id(required=True)
        attributes.pop("id", None)
        attributes = h.add_css_class(attributes, "navbar", self._expand, user_classes)

        parts = []
        if self._container:
            parts.append(h.open_tag("div", _with_default_class(self._container_attributes, "container")))
        parts.append(h.open_tag(self._tag, attributes))
        if self._inner_container:
            parts.append(
                h.open_tag("div", _with_default_class(self._inner_container_attributes, "container-fluid"))
            )
        brand = self._render_brand()
        if brand:
            parts.append(brand)
        parts.append(self._render_toggler(collapse_id))
        parts.append(h.open_tag("div", {"id": collapse_id, "class": "collapse navbar-collapse"}))
        return "\n".join(parts) + "\n"

    def end(self) -> str:
        closing = "\n</div>"
        if self._inner_container:
            closing += "\n</div>"
        closing += f"\n{h.close_tag(self._tag)}"
        if self._container:
            closing += "\n</div>"
        return closing

    def _render_brand(self) -> str:
        if self._brand != "":
            return h.raw(self._brand)
        if self._brand_image == "" and self._brand_text == "":
            return ""

        inner = ""
        if hasattr(self._brand_image, "__html__"):
            inner = f"\n{h.raw(self._brand_image)}\n"
        elif self._brand_image != "":
            image_attributes = {"src": self._brand_image, **self._brand_image_attributes}
            inner = f"\n{h.tag('img', attributes=image_attributes)}\n"
        if self._brand_text != "":
            inner += h.encode(self._brand_text)
        if self._brand_url and self._brand_image != "" and self._brand_text != "":
            inner += "\n"

        attributes = dict(self._brand_attributes)
        user_classes = attributes.pop("class", None)
        if self._brand_url:
            attributes = h.add_css_class(attributes, "navbar-brand", user_classes)
            attributes["href"] = self._brand_url
            return h.tag("a", inner, attributes)
        attributes = h.add_css_class(attributes, "navbar-brand mb-0 h1", user_classes)
        return h.tag("span", inner, attributes)

    def _render_toggler(self, collapse_id: str) -> str:
        if self._toggler != "":
            return h.raw(self._toggler)
        attributes = dict(self._toggler_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "navbar-toggler", user_classes)
        attributes["type"] = "button"
        attributes = h.merge_defaults(
            attributes,
            {
                "data-bs-toggle": "collapse",
                "data-bs-target": f"#{collapse_id}",
                "aria-controls": collapse_id,
                "aria-expanded": "false",
                "aria-label": "Toggle navigation",
            },
        )
        return h.tag("button", '\n<span class="navbar-toggler-icon"></span>\n', attributes)


def _with_default_class(attributes: Dict[str, Any], default: str) -> Dict[str, Any]:
    """User classes replace the default container class."""
    result = dict(attributes)
    classes = result.pop("class", None) or default
    return h.add_css_class(result, classes)
