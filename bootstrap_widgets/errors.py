"""
Error types raised by the widget library.

Configuration problems are detected as early as possible (inside the fluent
setter that receives the bad value) and surface as `WidgetConfigError`.
`WidgetRenderError` is reserved for states that can only be detected while
assembling markup.
"""
from __future__ import annotations


class WidgetConfigError(ValueError):
    """Invalid widget configuration (empty tag, conflicting flags, missing id)."""

    def __init__(self, message: str, *, option: str | None = None) -> None:
        super().__init__(message)
        self.option = option


class WidgetRenderError(RuntimeError):
    """Widget configuration that cannot be turned into valid markup."""
