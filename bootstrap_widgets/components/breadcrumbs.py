"""
Breadcrumb component

Renders the Bootstrap breadcrumb trail either from explicit links

    Breadcrumbs.widget().links(
        BreadcrumbLink.to("Home", "/"),
        BreadcrumbLink.to("Library", active=True),
    )

or derived from a request path with `Breadcrumbs.from_path("/courses/42")`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping, Optional, Union

from .. import html as h
from ..errors import WidgetConfigError
from .base import Widget

logger = logging.getLogger("bootstrap_widgets.breadcrumbs")


@dataclass(frozen=True)
class BreadcrumbLink:
    """One crumb. Without `url` only the label is rendered."""

    label: Any
    url: Optional[str] = None
    active: bool = False
    attributes: Dict[str, Any] = field(default_factory=dict)
    encode_label: bool = True

    @classmethod
    def to(
        cls,
        label: Any,
        url: Optional[str] = None,
        active: bool = False,
        attributes: Optional[Dict[str, Any]] = None,
        encode_label: bool = True,
    ) -> "BreadcrumbLink":
        return cls(label, url, active, dict(attributes or {}), encode_label)

    def with_active(self, enabled: bool) -> "BreadcrumbLink":
        return replace(self, active=enabled)

    def with_url(self, url: Optional[str]) -> "BreadcrumbLink":
        return replace(self, url=url)

    def rendered_label(self) -> str:
        return h.content(self.label, self.encode_label)


class Breadcrumbs(Widget):
    """Server-rendered breadcrumb trail"""

    id_prefix = "breadcrumb-"

    def __init__(self) -> None:
        super().__init__()
        self._links: List[BreadcrumbLink] = []
        self._item_active_class = "active"
        self._item_attributes: Dict[str, Any] = {}
        self._link_attributes: Dict[str, Any] = {}
        self._list_attributes: Dict[str, Any] = {}
        self._list_id: Union[bool, str] = True
        self._list_tag_name = "ol"

    @classmethod
    def from_path(
        cls,
        path: str,
        labels: Optional[Mapping[str, str]] = None,
        home_label: str = "Home",
    ) -> "Breadcrumbs":
        """Build crumbs from the segments of a URL path.

        `labels` maps concrete paths (`/courses`) to display labels; other
        segments are humanised (`my-course` -> `My Course`, `42` -> `ID 42`).
        The crumb for `path` itself is the active one.
        """
        labels = labels or {}
        clean = _sanitize_path(path)
        crumbs = [BreadcrumbLink.to(labels.get("/", home_label), "/")]
        current = ""
        for segment in [part for part in clean.strip("/").split("/") if part]:
            current = f"{current}/{segment}"
            crumbs.append(BreadcrumbLink.to(labels.get(current) or _humanize(segment), current))
        last = crumbs[-1]
        crumbs[-1] = replace(last, url=None, active=True)
        logger.debug("breadcrumbs for %s: %d crumbs", clean, len(crumbs))
        return cls().links(*crumbs)

    def links(self, *links: BreadcrumbLink) -> "Breadcrumbs":
        return self._with(links=list(links))

    def aria_label(self, value: str) -> "Breadcrumbs":
        return self.attribute("aria-label", value)

    def divider(self, value: str) -> "Breadcrumbs":
        if value == "":
            raise WidgetConfigError('The "divider" cannot be empty.', option="divider")
        return self.attribute("style", {"--bs-breadcrumb-divider": f"'{value}'"})

    def item_active_class(self, value: str) -> "Breadcrumbs":
        return self._with(item_active_class=value)

    def item_attributes(self, attributes: Dict[str, Any]) -> "Breadcrumbs":
        return self._with(item_attributes=dict(attributes))

    def link_attributes(self, attributes: Dict[str, Any]) -> "Breadcrumbs":
        return self._with(link_attributes=dict(attributes))

    def list_attributes(self, attributes: Dict[str, Any]) -> "Breadcrumbs":
        return self._with(list_attributes=dict(attributes))

    def list_id(self, value: Union[bool, str]) -> "Breadcrumbs":
        return self._with(list_id=value)

    def list_tag_name(self, value: str) -> "Breadcrumbs":
        return self._with(list_tag_name=self._check_tag(value, "List tag cannot be empty."))

    def render(self) -> str:
        if not self._links:
            return ""
        attributes = dict(self._attributes)
        attributes.setdefault("aria-label", "breadcrumb")
        attributes["id"] = self._resolve_id()
        return h.tag("nav", f"\n{self._render_list()}\n", attributes)

    def _render_list(self) -> str:
        active = [link for link in self._links if link.active]
        if len(active) > 1:
            raise WidgetConfigError('Only one "link" can be active.', option="links")

        attributes = dict(self._list_attributes)
        user_classes = attributes.pop("class", None)
        explicit_id = attributes.pop("id", None)
        if self._list_id is True:
            list_id = explicit_id or h.generate_id(self.id_prefix)
        else:
            list_id = self._list_id or None
        attributes = {"id": list_id, **h.add_css_class(attributes, "breadcrumb", user_classes)}

        items = "\n".join(self._render_item(link) for link in self._links)
        return h.tag(self._list_tag_name, f"\n{items}\n", attributes)

    def _render_item(self, link: BreadcrumbLink) -> str:
        attributes = dict(self._item_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "breadcrumb-item", user_classes)
        if link.active:
            attributes = h.add_css_class(attributes, self._item_active_class)
            attributes["aria-current"] = "page"
        return h.tag("li", self._render_link(link), attributes)

    def _render_link(self, link: BreadcrumbLink) -> str:
        label = link.rendered_label()
        if link.url is None:
            return label
        attributes = {**self._link_attributes, **link.attributes, "href": link.url}
        return h.tag("a", label, attributes)


def _sanitize_path(path: str) -> str:
    clean = (path or "/").split("?")[0].split("#")[0]
    return clean or "/"


def _humanize(segment: str) -> str:
    cleaned = segment.replace("-", " ").replace("_", " ")
    if cleaned.isdigit():
        return f"ID {cleaned}"
    words = [word.capitalize() for word in cleaned.split() if word]
    return " ".join(words) if words else segment
