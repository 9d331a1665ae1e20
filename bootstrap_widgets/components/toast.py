"""
Toast component

Lightweight notification. Block widget whose content is the toast body:

    toast = Toast.widget().id("saved").title("Saved").date_time("just now")
    html = toast.begin() + "Your changes were stored." + toast.end()
"""
from __future__ import annotations

from typing import Any, Dict

from .. import html as h
from .base import BlockWidget


class Toast(BlockWidget):
    id_prefix = "toast-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._title: Any = ""
        self._title_tag = "strong"
        self._title_attributes: Dict[str, Any] = {}
        self._date_time: Any = ""
        self._date_time_attributes: Dict[str, Any] = {}
        self._header_attributes: Dict[str, Any] = {}
        self._body_attributes: Dict[str, Any] = {}
        self._close_button_attributes: Dict[str, Any] = {}

    def title(self, title: Any) -> "Toast":
        return self._with(title=title)

    def title_tag(self, tag: str) -> "Toast":
        return self._with(title_tag=self._check_tag(tag))

    def title_attributes(self, attributes: Dict[str, Any]) -> "Toast":
        return self._with(title_attributes=dict(attributes))

    def date_time(self, value: Any) -> "Toast":
        return self._with(date_time=value)

    def date_time_attributes(self, attributes: Dict[str, Any]) -> "Toast":
        return self._with(date_time_attributes=dict(attributes))

    def header_attributes(self, attributes: Dict[str, Any]) -> "Toast":
        return self._with(header_attributes=dict(attributes))

    def body_attributes(self, attributes: Dict[str, Any]) -> "Toast":
        return self._with(body_attributes=dict(attributes))

    def close_button_attributes(self, attributes: Dict[str, Any]) -> "Toast":
        return self._with(close_button_attributes=dict(attributes))

    def begin(self) -> str:
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        attributes = h.add_css_class(attributes, user_classes, "toast")
        attributes["role"] = "alert"
        attributes["aria-live"] = "assertive"
        attributes["aria-atomic"] = "true"

        body = h.open_tag("div", h.add_css_class(self._body_attributes, "toast-body"))
        return f"{h.open_tag('div', attributes)}\n{self._render_header()}\n{body}"

    def end(self) -> str:
        return "\n</div></div>"

    def _render_header(self) -> str:
        title = h.tag(
            self._title_tag,
            self._title,
            h.add_css_class(self._title_attributes, "me-auto"),
            encode_content=True,
        )
        lines = [title]
        if self._date_time != "":
            lines.append(h.tag("small", self._date_time, self._date_time_attributes, encode_content=True))
        close_attributes = h.add_css_class(self._close_button_attributes, "btn-close")
        close_attributes.update(
            {"type": "button", "data-bs-dismiss": "toast", "aria-label": "Close"}
        )
        lines.append(h.tag("button", "", close_attributes))
        header = "\n".join(lines)
        return h.tag("div", f"\n{header}\n", h.add_css_class(self._header_attributes, "toast-header"))
