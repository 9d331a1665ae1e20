"""
Offcanvas component

Hidden sidebar that slides in from an edge of the viewport. Block widget:

    offcanvas = Offcanvas.widget().id("filters").title("Filters").toggler_content("Open filters")
    html = offcanvas.begin() + form_html + offcanvas.end()
"""
from __future__ import annotations

from typing import Any, Dict, Optional, Union

from .. import html as h
from .base import BlockWidget
from .enums import Breakpoint, OffcanvasPlacement, Theme


class Offcanvas(BlockWidget):
    """Bootstrap `.offcanvas`"""

    id_prefix = "offcanvas-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._placement = OffcanvasPlacement.START
        self._responsive: Optional[Breakpoint] = None
        self._backdrop = False
        self._backdrop_static = False
        self._scrollable = False
        self._show = False
        self._title: Any = ""
        self._title_attributes: Dict[str, Any] = {}
        self._header_attributes: Dict[str, Any] = {}
        self._body_attributes: Dict[str, Any] = {}
        self._toggler: Any = ""
        self._toggler_content: Any = ""
        self._toggler_attributes: Dict[str, Any] = {}

    def placement(self, placement: OffcanvasPlacement) -> "Offcanvas":
        return self._with(placement=placement)

    def responsive(self, breakpoint: Optional[Breakpoint]) -> "Offcanvas":
        """Offcanvas below `breakpoint`, regular content above it."""
        return self._with(responsive=breakpoint)

    def backdrop(self, enabled: bool = True) -> "Offcanvas":
        return self._with(backdrop=enabled)

    def backdrop_static(self, enabled: bool = True) -> "Offcanvas":
        return self._with(backdrop_static=enabled)

    def scrollable(self, enabled: bool = True) -> "Offcanvas":
        return self._with(scrollable=enabled)

    def show(self, enabled: bool = True) -> "Offcanvas":
        return self._with(show=enabled)

    def theme(self, theme: Union[Theme, str, None]) -> "Offcanvas":
        if isinstance(theme, Theme):
            theme = theme.value
        return self.attribute("data-bs-theme", theme or None)

    def title(self, title: Any) -> "Offcanvas":
        return self._with(title=title)

    def title_attributes(self, attributes: Dict[str, Any]) -> "Offcanvas":
        return self._with(title_attributes=dict(attributes))

    def header_attributes(self, attributes: Dict[str, Any]) -> "Offcanvas":
        return self._with(header_attributes=dict(attributes))

    def body_attributes(self, attributes: Dict[str, Any]) -> "Offcanvas":
        return self._with(body_attributes=dict(attributes))

    def toggler(self, toggler: Any) -> "Offcanvas":
        """Custom toggler markup rendered before the offcanvas."""
        return self._with(toggler=toggler)

    def toggler_content(self, content: Any) -> "Offcanvas":
        return self._with(toggler_content=content)

    def toggler_attributes(self, attributes: Dict[str, Any]) -> "Offcanvas":
        return self._with(toggler_attributes=dict(attributes))

    def add_toggler_attribute(self, name: str, value: Any) -> "Offcanvas":
        return self._with(toggler_attributes={**self._toggler_attributes, name: value})

    def add_toggler_class(self, *classes: Any) -> "Offcanvas":
        return self._with(toggler_attributes=h.add_css_class(self._toggler_attributes, *classes))

    def begin(self) -> str:
        offcanvas_id = self._resolve_id(required=True)
        parts = []
        if not self._show:
            if self._toggler != "":
                parts.append(h.raw(self._toggler) + "\n")
            if self._toggler_content != "":
                parts.append(self._render_toggler(offcanvas_id) + "\n")
        parts.append(self._render_offcanvas(offcanvas_id))
        return "".join(parts)

    def end(self) -> str:
        return "</div>\n</div>"

    def _render_offcanvas(self, offcanvas_id: str) -> str:
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        base = f"offcanvas-{self._responsive.value}" if self._responsive else "offcanvas"
        attributes = h.add_css_class(attributes, base, self._placement, user_classes)
        if self._scrollable:
            attributes["data-bs-scroll"] = "true"
            if not self._backdrop:
                attributes["data-bs-backdrop"] = "false"
        if self._backdrop and not self._backdrop_static:
            attributes["data-bs-backdrop"] = "true"
        if self._backdrop_static:
            attributes["data-bs-backdrop"] = "static"
        attributes["aria-labelledby"] = f"{offcanvas_id}-label"
        attributes["id"] = offcanvas_id
        attributes["tabindex"] = "-1"
        if self._show:
            attributes = h.add_css_class(attributes, "show")

        body = h.open_tag("div", h.add_css_class(self._body_attributes, "offcanvas-body"))
        return f"{h.open_tag('div', attributes)}\n{self._render_header(offcanvas_id)}\n{body}\n"

    def _render_header(self, offcanvas_id: str) -> str:
        title_attributes = dict(self._title_attributes)
        title_attributes["id"] = f"{offcanvas_id}-label"
        title_attributes = h.add_css_class(title_attributes, "offcanvas-title")
        title = h.tag("h5", self._title, title_attributes, encode_content=True)
        close = h.tag(
            "button",
            "",
            {
                "type": "button",
                "class": "btn-close",
                "data-bs-dismiss": "offcanvas",
                "aria-label": "Close",
            },
        )
        return h.tag(
            "div",
            f"\n{title}\n{close}\n",
            h.add_css_class(self._header_attributes, "offcanvas-header"),
        )

    def _render_toggler(self, offcanvas_id: str) -> str:
        attributes = dict(self._toggler_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "btn", "btn-primary", user_classes)
        attributes["type"] = "button"
        attributes = h.merge_defaults(
            attributes,
            {
                "aria-controls": offcanvas_id,
                "data-bs-toggle": "offcanvas",
                "data-bs-target": f"#{offcanvas_id}",
            },
        )
        return h.tag("button", self._toggler_content, attributes, encode_content=True)
