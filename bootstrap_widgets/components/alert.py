"""
Alert component

Renders a Bootstrap alert box with optional heading and dismiss button:

    Alert.widget().body("Saved.").variant(Variant.SUCCESS).dismissable(True)
"""
from __future__ import annotations

import re
from typing import Any, Dict, Optional

from .. import html as h
from .base import Widget
from .enums import Variant

_DOUBLE_NEWLINE = re.compile(r"\n{2}")


class Alert(Widget):
    """Contextual feedback message (`<div class="alert ..." role="alert">`)"""

    id_prefix = "alert-"

    def __init__(self) -> None:
        super().__init__()
        self._body: Any = ""
        self._encode_body = True
        self._header: Optional[Any] = None
        self._encode_header = True
        self._header_tag = "h4"
        self._header_attributes: Dict[str, Any] = {}
        self._variant = Variant.SECONDARY
        self._dismissable = False
        self._fade = False
        self._close_button_attributes: Dict[str, Any] = {}
        self._close_button_label: Any = ""
        self._close_button_tag = "button"
        self._template = "\n{header}\n{body}\n{toggle}\n"

    def body(self, value: Any, encode: bool = True) -> "Alert":
        return self._with(body=value, encode_body=encode)

    def header(self, value: Optional[Any], encode: bool = True) -> "Alert":
        return self._with(header=value, encode_header=encode)

    def header_tag(self, tag: str) -> "Alert":
        return self._with(header_tag=self._check_tag(tag, "Header tag cannot be empty string."))

    def header_attributes(self, attributes: Dict[str, Any]) -> "Alert":
        return self._with(header_attributes=dict(attributes))

    def variant(self, variant: Variant) -> "Alert":
        return self._with(variant=variant)

    def dismissable(self, enabled: bool = True) -> "Alert":
        return self._with(dismissable=enabled)

    def fade(self, enabled: bool = True) -> "Alert":
        return self._with(fade=enabled)

    def close_button_attributes(self, attributes: Dict[str, Any]) -> "Alert":
        return self._with(close_button_attributes=dict(attributes))

    def close_button_label(self, label: Any) -> "Alert":
        return self._with(close_button_label=label)

    def close_button_tag(self, tag: str) -> "Alert":
        return self._with(close_button_tag=self._check_tag(tag))

    def template(self, template: str) -> "Alert":
        """Layout of the alert content using `{header}`, `{body}` and `{toggle}`."""
        return self._with(template=template)

    def render(self) -> str:
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "alert", f"alert-{self._variant.value}", user_classes)
        attributes["role"] = "alert"
        attributes["id"] = self._resolve_id()

        toggle = ""
        if self._dismissable:
            attributes = h.add_css_class(attributes, "alert-dismissible")
            toggle = self._render_toggle()
        if self._fade:
            attributes = h.add_css_class(attributes, "fade", "show")

        inner = (
            self._template.replace("{header}", self._render_header())
            .replace("{body}", h.content(self._body, self._encode_body))
            .replace("{toggle}", toggle)
        )
        inner = _DOUBLE_NEWLINE.sub("\n", inner)
        return h.tag("div", inner, attributes)

    def _render_header(self) -> str:
        if self._header is None:
            return ""
        attributes = h.add_css_class(self._header_attributes, "alert-heading")
        return h.tag(self._header_tag, self._header, attributes, encode_content=self._encode_header)

    def _render_toggle(self) -> str:
        attributes = dict(self._close_button_attributes)
        if self._close_button_tag == "button":
            attributes["type"] = "button"
        attributes = h.add_css_class(attributes, "btn-close")
        attributes["data-bs-dismiss"] = "alert"
        attributes["aria-label"] = "Close"
        return h.tag(self._close_button_tag, self._close_button_label, attributes, encode_content=True)
