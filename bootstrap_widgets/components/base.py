"""
Base Widget class for all Bootstrap components

Widgets are immutable configuration objects. Every fluent setter returns a
modified copy, so a configured widget can be shared and specialised freely:

    primary = Button.widget().variant(ButtonVariant.PRIMARY)
    save = primary.label("Save")      # `primary` is unchanged

Rendering produces plain HTML strings. Widgets also implement `__html__`, so
they can be nested into each other (and into markup-aware templates) without
being escaped twice.
"""
from __future__ import annotations

import copy
import html
from typing import Any, Dict, Optional, Union

from .. import html as h
from ..errors import WidgetConfigError


class Widget:
    """Base class for all widgets

    Subclasses set `id_prefix` (used when an id is generated) and implement
    `render()`. Block widgets (NavBar, Modal, ...) implement `begin()` and
    `end()` and inherit `render(content)` from `BlockWidget`.
    """

    id_prefix = "w"

    def __init__(self) -> None:
        self._attributes: Dict[str, Any] = {}
        self._id: Union[bool, str] = False

    @classmethod
    def widget(cls, **kwargs: Any):
        """Create a fresh widget (reads nicer at the start of a chain)."""
        return cls(**kwargs)

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    @staticmethod
    def escape(text: Optional[str]) -> str:
        """Escape HTML entities (None becomes an empty string)."""
        return html.escape(str(text)) if text is not None else ""

    # ------------------------------------------------------------------ #
    # Copy-on-write
    # ------------------------------------------------------------------ #

    def _clone(self):
        new = copy.copy(self)
        for key, value in vars(self).items():
            if isinstance(value, (dict, list)):
                setattr(new, key, copy.copy(value))
        return new

    def _with(self, **changes: Any):
        new = self._clone()
        for key, value in changes.items():
            setattr(new, f"_{key}", value)
        return new

    # ------------------------------------------------------------------ #
    # Shared setters
    # ------------------------------------------------------------------ #

    def add_attributes(self, attributes: Dict[str, Any]):
        """Merge `attributes` into the existing ones."""
        return self._with(attributes={**self._attributes, **attributes})

    def attributes(self, attributes: Dict[str, Any]):
        """Replace all attributes."""
        return self._with(attributes=dict(attributes))

    def attribute(self, name: str, value: Any):
        return self._with(attributes={**self._attributes, name: value})

    def add_class(self, *classes: Any):
        return self._with(attributes=h.add_css_class(self._attributes, *classes))

    def class_(self, *classes: Any):
        """Replace all user classes."""
        attributes = dict(self._attributes)
        attributes.pop("class", None)
        return self._with(attributes=h.add_css_class(attributes, *classes))

    def add_css_style(self, style: Any, overwrite: bool = True):
        return self._with(attributes=h.add_css_style(self._attributes, style, overwrite))

    def id(self, value: Union[bool, str]):
        """`True` generates an id, a string is used as-is, `False`/"" removes it."""
        return self._with(id=value)

    # ------------------------------------------------------------------ #
    # Helpers
    # ------------------------------------------------------------------ #

    def _resolve_id(self, required: bool = False) -> Optional[str]:
        explicit = self._attributes.get("id")
        if explicit:
            return str(explicit)
        if self._id is True:
            return h.generate_id(self.id_prefix)
        if self._id:
            return str(self._id)
        if required:
            raise WidgetConfigError('The "id" must be specified.', option="id")
        return None

    @staticmethod
    def _check_tag(value: str, message: str = "Tag cannot be empty string.") -> str:
        if value == "":
            raise WidgetConfigError(message, option="tag")
        return value


class BlockWidget(Widget):
    """Widget rendered as an opening part, caller content and a closing part."""

    def begin(self) -> str:
        raise NotImplementedError("Subclasses must implement begin()")

    def end(self) -> str:
        raise NotImplementedError("Subclasses must implement end()")

    def render(self, content: Any = "") -> str:
        return f"{self.begin()}{h.raw(content)}{self.end()}"
