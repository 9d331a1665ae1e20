"""
Accordion component

    Accordion.widget().id("faq").items(
        AccordionItem.to("Shipping", "We ship worldwide.", active=True),
        AccordionItem.to("Returns", "30 days."),
    )
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, List, Union

from .. import html as h
from .base import Widget


@dataclass(frozen=True)
class AccordionItem:
    """Header/body pair. `id` is the id of the collapsible body element."""

    header: Any
    body: Any
    id: Union[bool, str] = True
    encode_header: bool = True
    encode_body: bool = True
    active: bool = False

    @classmethod
    def to(
        cls,
        header: Any = "",
        body: Any = "",
        id: Union[bool, str] = True,
        encode_header: bool = True,
        encode_body: bool = True,
        active: bool = False,
    ) -> "AccordionItem":
        return cls(header, body, id, encode_header, encode_body, active)

    def with_active(self, enabled: bool) -> "AccordionItem":
        return replace(self, active=enabled)

    def resolve_id(self) -> str:
        if self.id is True or not self.id:
            return h.generate_id("collapse-")
        return str(self.id)


class Accordion(Widget):
    """Vertically collapsing panels (`<div class="accordion">`)"""

    id_prefix = "accordion-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._items: List[AccordionItem] = []
        self._always_open = False
        self._flush = False
        self._header_tag = "h2"
        self._header_attributes: Dict[str, Any] = {}
        self._toggler_tag = "button"
        self._toggler_attributes: Dict[str, Any] = {}
        self._body_attributes: Dict[str, Any] = {}
        self._collapse_attributes: Dict[str, Any] = {}

    def items(self, *items: AccordionItem) -> "Accordion":
        return self._with(items=list(items))

    def always_open(self, enabled: bool = True) -> "Accordion":
        """Keep opened items open when another one is opened."""
        return self._with(always_open=enabled)

    def flush(self, enabled: bool = True) -> "Accordion":
        return self._with(flush=enabled)

    def header_tag(self, tag: str) -> "Accordion":
        return self._with(header_tag=self._check_tag(tag, "Header tag cannot be empty string."))

    def header_attributes(self, attributes: Dict[str, Any]) -> "Accordion":
        return self._with(header_attributes=dict(attributes))

    def toggler_tag(self, tag: str) -> "Accordion":
        return self._with(toggler_tag=self._check_tag(tag, "Toggler tag cannot be empty string."))

    def toggler_attributes(self, attributes: Dict[str, Any]) -> "Accordion":
        return self._with(toggler_attributes=dict(attributes))

    def add_toggler_attribute(self, name: str, value: Any) -> "Accordion":
        return self._with(toggler_attributes={**self._toggler_attributes, name: value})

    def add_toggler_class(self, *classes: Any) -> "Accordion":
        return self._with(toggler_attributes=h.add_css_class(self._toggler_attributes, *classes))

    def add_toggler_css_style(self, style: Any, overwrite: bool = True) -> "Accordion":
        return self._with(toggler_attributes=h.add_css_style(self._toggler_attributes, style, overwrite))

    def body_attributes(self, attributes: Dict[str, Any]) -> "Accordion":
        return self._with(body_attributes=dict(attributes))

    def collapse_attributes(self, attributes: Dict[str, Any]) -> "Accordion":
        return self._with(collapse_attributes=dict(attributes))

    def render(self) -> str:
        if not self._items:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        accordion_id = self._resolve_id(required=True)
        attributes["id"] = accordion_id
        attributes = h.add_css_class(
            attributes, "accordion", "accordion-flush" if self._flush else None, user_classes
        )
        items = "\n".join(self._render_item(item, accordion_id) for item in self._items)
        return h.tag("div", f"\n{items}\n", attributes)

    def _render_item(self, item: AccordionItem, accordion_id: str) -> str:
        collapse_id = item.resolve_id()
        header = h.tag(
            self._header_tag,
            f"\n{self._render_toggler(item, collapse_id)}\n",
            h.add_css_class(self._header_attributes, "accordion-header"),
        )

        collapse_attributes = dict(self._collapse_attributes)
        user_classes = collapse_attributes.pop("class", None)
        collapse_attributes["id"] = collapse_id
        collapse_attributes = h.add_css_class(
            collapse_attributes,
            "accordion-collapse",
            "collapse",
            "show" if item.active else None,
            user_classes,
        )
        if not self._always_open:
            collapse_attributes["data-bs-parent"] = f"#{accordion_id}"

        body = h.tag(
            "div",
            f"\n{h.content(item.body, item.encode_body)}\n",
            h.add_css_class(self._body_attributes, "accordion-body"),
        )
        collapse = h.tag("div", f"\n{body}\n", collapse_attributes)
        return h.tag("div", f"\n{header}\n{collapse}\n", {"class": "accordion-item"})

    def _render_toggler(self, item: AccordionItem, collapse_id: str) -> str:
        attributes = dict(self._toggler_attributes)
        user_classes = attributes.pop("class", None)
        if self._toggler_tag == "button":
            attributes["type"] = "button"
        attributes = h.add_css_class(
            attributes,
            "accordion-button",
            None if item.active else "collapsed",
            user_classes,
        )
        attributes = h.merge_defaults(
            attributes,
            {
                "data-bs-toggle": "collapse",
                "data-bs-target": f"#{collapse_id}",
                "aria-expanded": "true" if item.active else "false",
                "aria-controls": collapse_id,
            },
        )
        return h.tag(
            self._toggler_tag,
            f"\n{h.content(item.header, item.encode_header)}\n",
            attributes,
        )
