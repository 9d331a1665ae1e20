"""
Button component

A single Bootstrap button. Depending on its `ButtonType` the button renders as
`<button>`, `<a role="button">` or `<input>`:

    Button.widget().label("Save").variant(ButtonVariant.PRIMARY)
    Button.link("Docs", "/docs")
    Button.submit_input("Send")
"""
from __future__ import annotations

from typing import Any, Optional

from .. import html as h
from .base import Widget
from .enums import ButtonSize, ButtonType, ButtonVariant

_INPUT_TYPES = {
    ButtonType.RESET_INPUT: "reset",
    ButtonType.SUBMIT_INPUT: "submit",
}


class Button(Widget):
    """Bootstrap `.btn`"""

    id_prefix = "btn-"

    def __init__(self) -> None:
        super().__init__()
        self._label: Any = ""
        self._encode_label = True
        self._variant = ButtonVariant.SECONDARY
        self._size: Optional[ButtonSize] = None
        self._type = ButtonType.BUTTON
        self._url: Optional[str] = None
        self._active = False
        self._disabled = False

    # -- factories ----------------------------------------------------------

    @classmethod
    def link(cls, label: Any = "", url: Optional[str] = None) -> "Button":
        return cls().type(ButtonType.LINK).label(label).url(url)

    @classmethod
    def reset(cls, label: Any = "Reset") -> "Button":
        return cls().type(ButtonType.RESET).label(label)

    @classmethod
    def submit(cls, label: Any = "Submit") -> "Button":
        return cls().type(ButtonType.SUBMIT).label(label)

    @classmethod
    def reset_input(cls, value: str = "Reset") -> "Button":
        return cls().type(ButtonType.RESET_INPUT).label(value)

    @classmethod
    def submit_input(cls, value: str = "Submit") -> "Button":
        return cls().type(ButtonType.SUBMIT_INPUT).label(value)

    # -- setters ------------------------------------------------------------

    def label(self, value: Any, encode: bool = True) -> "Button":
        return self._with(label=value, encode_label=encode)

    def variant(self, variant: ButtonVariant) -> "Button":
        return self._with(variant=variant)

    def size(self, size: Optional[ButtonSize]) -> "Button":
        return self._with(size=size)

    def large(self) -> "Button":
        return self.size(ButtonSize.LARGE)

    def small(self) -> "Button":
        return self.size(ButtonSize.SMALL)

    def type(self, button_type: ButtonType) -> "Button":
        return self._with(type=button_type)

    def url(self, url: Optional[str]) -> "Button":
        return self._with(url=url)

    def active(self, enabled: bool = True) -> "Button":
        return self._with(active=enabled)

    def disabled(self, enabled: bool = True) -> "Button":
        return self._with(disabled=enabled)

    def toggle(self) -> "Button":
        """Turn the button into a toggle button (`data-bs-toggle="button"`)."""
        return self.attribute("data-bs-toggle", "button")

    def aria_expanded(self, value: bool = True) -> "Button":
        return self.attribute("aria-expanded", "true" if value else "false")

    # -- rendering ----------------------------------------------------------

    def render(self) -> str:
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        attributes = h.add_css_class(attributes, "btn", self._variant, user_classes, self._size)

        is_link = self._type is ButtonType.LINK
        if self._active:
            attributes["aria-pressed"] = "true"
            attributes["data-bs-toggle"] = "button"
            attributes = h.add_css_class(attributes, "active")
        if self._disabled:
            if is_link:
                attributes["aria-disabled"] = "true"
                attributes = h.add_css_class(attributes, "disabled")
            else:
                attributes["disabled"] = True

        if is_link:
            attributes["href"] = self._url
            attributes.setdefault("role", "button")
            return h.tag("a", self._label, attributes, encode_content=self._encode_label)

        if self._type in _INPUT_TYPES:
            attributes["type"] = _INPUT_TYPES[self._type]
            attributes["value"] = h.raw(self._label) if self._label != "" else None
            return h.tag("input", attributes=attributes)

        attributes["type"] = self._type.value
        return h.tag("button", self._label, attributes, encode_content=self._encode_label)
