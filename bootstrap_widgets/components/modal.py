"""
Modal component

Block widget rendering a dialog with header, body and optional footer:

    modal = Modal.widget().id("confirm").title("Delete file?").footer(buttons).toggle_button("Delete")
    html = modal.begin() + "This cannot be undone." + modal.end()
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from .. import html as h
from .base import BlockWidget
from .enums import ModalFullscreen, ModalSize


class Modal(BlockWidget):
    """Bootstrap `.modal` dialog"""

    id_prefix = "modal-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._title: Optional[Any] = None
        self._title_tag = "h5"
        self._title_attributes: Dict[str, Any] = {}
        self._header_attributes: Dict[str, Any] = {}
        self._dialog_attributes: Dict[str, Any] = {}
        self._content_attributes: Dict[str, Any] = {}
        self._body_attributes: Dict[str, Any] = {}
        self._footer: Optional[Any] = None
        self._footer_attributes: Dict[str, Any] = {}
        self._size: Optional[ModalSize] = None
        self._fullscreen: Optional[ModalFullscreen] = None
        self._fade = True
        self._static_backdrop = False
        self._scrollable = False
        self._centered = False
        self._close_button = True
        self._toggle_label: Optional[Any] = None
        self._toggle_attributes: Dict[str, Any] = {}

    def title(self, title: Optional[Any]) -> "Modal":
        return self._with(title=title)

    def title_tag(self, tag: str) -> "Modal":
        return self._with(title_tag=self._check_tag(tag))

    def title_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(title_attributes=dict(attributes))

    def header_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(header_attributes=dict(attributes))

    def dialog_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(dialog_attributes=dict(attributes))

    def content_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(content_attributes=dict(attributes))

    def body_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(body_attributes=dict(attributes))

    def footer(self, content: Optional[Any]) -> "Modal":
        """Footer markup (inserted as HTML, usually buttons)."""
        return self._with(footer=content)

    def footer_attributes(self, attributes: Dict[str, Any]) -> "Modal":
        return self._with(footer_attributes=dict(attributes))

    def size(self, size: Optional[ModalSize]) -> "Modal":
        return self._with(size=size)

    def fullscreen(self, fullscreen: Optional[ModalFullscreen]) -> "Modal":
        return self._with(fullscreen=fullscreen)

    def fade(self, enabled: bool = True) -> "Modal":
        return self._with(fade=enabled)

    def static_backdrop(self, enabled: bool = True) -> "Modal":
        """Clicking outside the dialog does not close it."""
        return self._with(static_backdrop=enabled)

    def scrollable(self, enabled: bool = True) -> "Modal":
        return self._with(scrollable=enabled)

    def centered(self, enabled: bool = True) -> "Modal":
        return self._with(centered=enabled)

    def close_button(self, enabled: bool = True) -> "Modal":
        return self._with(close_button=enabled)

    def toggle_button(self, label: Optional[Any] = "Show", attributes: Optional[Dict[str, Any]] = None) -> "Modal":
        """Render a button opening the modal in front of it (None removes it)."""
        return self._with(toggle_label=label, toggle_attributes=dict(attributes or {}))

    def title_id(self, modal_id: str) -> str:
        return self._title_attributes.get("id") or f"{modal_id}-label"

    def begin(self) -> str:
        modal_id = self._resolve_id(required=True)
        attributes = {
            "role": "dialog",
            "tabindex": "-1",
            "aria-hidden": "true",
            **self._attributes,
        }
        user_classes = attributes.pop("class", None)
        attributes["id"] = modal_id
        attributes = h.add_css_class(attributes, "modal", "fade" if self._fade else None, user_classes)
        if self._title is not None and "aria-label" not in attributes:
            attributes.setdefault("aria-labelledby", self.title_id(modal_id))
        if self._static_backdrop:
            attributes["data-bs-backdrop"] = "static"

        dialog_attributes = dict(self._dialog_attributes)
        dialog_classes = dialog_attributes.pop("class", None)
        dialog_attributes = h.add_css_class(
            dialog_attributes,
            "modal-dialog",
            self._size,
            self._fullscreen,
            "modal-dialog-scrollable" if self._scrollable else None,
            "modal-dialog-centered" if self._centered else None,
            dialog_classes,
        )
        content_attributes = h.add_css_class(self._content_attributes, "modal-content")
        body_attributes = h.add_css_class(self._body_attributes, "modal-body")

        parts = [
            self._render_toggle(modal_id),
            h.open_tag("div", attributes),
            h.open_tag("div", dialog_attributes),
            h.open_tag("div", content_attributes),
            self._render_header(modal_id),
            h.open_tag("div", body_attributes),
        ]
        return h.join_lines(*parts) + "\n"

    def end(self) -> str:
        footer = ""
        if self._footer is not None:
            footer = h.tag("div", h.raw(self._footer), h.add_css_class(self._footer_attributes, "modal-footer")) + "\n"
        return f"\n</div>\n{footer}</div>\n</div>\n</div>"

    def _render_header(self, modal_id: str) -> str:
        title = ""
        if self._title is not None:
            title_attributes = dict(self._title_attributes)
            title_attributes["id"] = self.title_id(modal_id)
            title_attributes = h.add_css_class(title_attributes, "modal-title")
            title = h.tag(self._title_tag, self._title, title_attributes, encode_content=True)
        close = ""
        if self._close_button:
            close = h.tag(
                "button",
                "",
                {
                    "type": "button",
                    "class": "btn-close",
                    "data-bs-dismiss": "modal",
                    "aria-label": "Close",
                },
            )
        if not title and not close:
            return ""
        return h.tag(
            "div",
            f"\n{h.join_lines(title, close)}\n",
            h.add_css_class(self._header_attributes, "modal-header"),
        )

    def _render_toggle(self, modal_id: str) -> str:
        if self._toggle_label is None:
            return ""
        attributes = dict(self._toggle_attributes)
        user_classes = attributes.pop("class", None)
        attributes = h.add_css_class(attributes, "btn", "btn-primary", user_classes)
        attributes["type"] = "button"
        attributes = h.merge_defaults(
            attributes,
            {"data-bs-toggle": "modal", "data-bs-target": f"#{modal_id}"},
        )
        return h.tag("button", self._toggle_label, attributes, encode_content=True)
