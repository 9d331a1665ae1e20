"""
Button groups and toolbars

    ButtonGroup.widget().buttons(Button.widget().label("Left"), Button.widget().label("Right"))
    ButtonToolbar.widget().groups(first_group, second_group)
"""
from __future__ import annotations

from typing import Any, Optional

from .. import html as h
from .base import Widget
from .enums import ButtonSize

_GROUP_SIZES = {
    ButtonSize.LARGE: "btn-group-lg",
    ButtonSize.SMALL: "btn-group-sm",
}


class ButtonGroup(Widget):
    """Row (or column) of buttons sharing one `.btn-group` container"""

    id_prefix = "btn-group-"

    def __init__(self) -> None:
        super().__init__()
        self._buttons: list = []
        self._vertical = False
        self._size: Optional[ButtonSize] = None
        self._aria_label: Optional[str] = None

    def buttons(self, *buttons: Any) -> "ButtonGroup":
        return self._with(buttons=list(buttons))

    def vertical(self, enabled: bool = True) -> "ButtonGroup":
        return self._with(vertical=enabled)

    def size(self, size: Optional[ButtonSize]) -> "ButtonGroup":
        return self._with(size=size)

    def aria_label(self, label: Optional[str]) -> "ButtonGroup":
        return self._with(aria_label=label)

    def render(self) -> str:
        if not self._buttons:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        attributes = h.add_css_class(
            attributes,
            "btn-group-vertical" if self._vertical else "btn-group",
            _GROUP_SIZES.get(self._size) if self._size else None,
            user_classes,
        )
        if self._aria_label is not None:
            attributes["aria-label"] = self._aria_label
        attributes["role"] = "group"
        inner = "\n".join(h.raw(button) for button in self._buttons)
        return h.tag("div", f"\n{inner}\n", attributes)


class ButtonToolbar(Widget):
    """Container combining several button groups (`role="toolbar"`)"""

    id_prefix = "btn-toolbar-"

    def __init__(self) -> None:
        super().__init__()
        self._groups: list = []
        self._aria_label: Optional[str] = None

    def groups(self, *groups: Any) -> "ButtonToolbar":
        return self._with(groups=list(groups))

    def aria_label(self, label: Optional[str]) -> "ButtonToolbar":
        return self._with(aria_label=label)

    def render(self) -> str:
        if not self._groups:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        attributes["id"] = self._resolve_id()
        attributes = h.add_css_class(attributes, "btn-toolbar", user_classes)
        if self._aria_label is not None:
            attributes["aria-label"] = self._aria_label
        attributes["role"] = "toolbar"
        inner = "\n".join(h.raw(group) for group in self._groups)
        return h.tag("div", f"\n{inner}\n", attributes)
