"""
Carousel component

    Carousel.widget().id("gallery").items(
        CarouselItem.to('<img src="/a.png" class="d-block w-100">', caption="<h5>A</h5>"),
        CarouselItem.to('<img src="/b.png" class="d-block w-100">'),
    )

Slide content and captions are inserted as HTML.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .. import html as h
from ..errors import WidgetConfigError, WidgetRenderError
from .base import Widget

DEFAULT_CONTROLS = (
    '<span class="carousel-control-prev-icon" aria-hidden="true"></span>'
    '<span class="visually-hidden">Previous</span>',
    '<span class="carousel-control-next-icon" aria-hidden="true"></span>'
    '<span class="visually-hidden">Next</span>',
)


@dataclass(frozen=True)
class CarouselItem:
    content: Any
    caption: Optional[Any] = None
    caption_attributes: Dict[str, Any] = field(default_factory=dict)
    attributes: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.content is None or self.content == "":
            raise WidgetConfigError('The "content" option is required.', option="content")

    @classmethod
    def to(
        cls,
        content: Any,
        caption: Optional[Any] = None,
        caption_attributes: Optional[Dict[str, Any]] = None,
        attributes: Optional[Dict[str, Any]] = None,
    ) -> "CarouselItem":
        return cls(content, caption, dict(caption_attributes or {}), dict(attributes or {}))


class Carousel(Widget):
    """Slideshow (`<div class="carousel slide">`)"""

    id_prefix = "carousel-"

    def __init__(self) -> None:
        super().__init__()
        self._id = True
        self._items: List[CarouselItem] = []
        self._controls: List[Any] = list(DEFAULT_CONTROLS)
        self._show_indicators = True
        self._crossfade = False
        self._ride: Optional[str] = "carousel"
        self._interval: Optional[int] = None
        self._touch = True

    def items(self, *items: CarouselItem) -> "Carousel":
        return self._with(items=list(items))

    def controls(self, *controls: Any) -> "Carousel":
        """Content of the previous/next controls; no arguments removes them."""
        return self._with(controls=list(controls))

    def without_controls(self) -> "Carousel":
        return self._with(controls=[])

    def show_indicators(self, enabled: bool = True) -> "Carousel":
        return self._with(show_indicators=enabled)

    def without_indicators(self) -> "Carousel":
        return self.show_indicators(False)

    def crossfade(self, enabled: bool = True) -> "Carousel":
        return self._with(crossfade=enabled)

    def ride(self, value: Optional[str]) -> "Carousel":
        """`"carousel"` autoplays on load, `"true"` after the first interaction, None disables."""
        return self._with(ride=value)

    def interval(self, milliseconds: Optional[int]) -> "Carousel":
        return self._with(interval=milliseconds)

    def touch(self, enabled: bool = True) -> "Carousel":
        return self._with(touch=enabled)

    def render(self) -> str:
        if not self._items:
            return ""
        attributes = dict(self._attributes)
        user_classes = attributes.pop("class", None)
        carousel_id = self._resolve_id(required=True)
        attributes["id"] = carousel_id
        attributes = h.add_css_class(
            attributes, "carousel", "slide", "carousel-fade" if self._crossfade else None, user_classes
        )
        attributes["data-bs-ride"] = self._ride
        if self._interval is not None:
            attributes["data-bs-interval"] = str(self._interval)
        if not self._touch:
            attributes["data-bs-touch"] = "false"

        inner = (
            self._render_indicators(carousel_id)
            + self._render_items()
            + self._render_controls(carousel_id)
        )
        return h.tag("div", inner, attributes)

    def _render_indicators(self, carousel_id: str) -> str:
        if not self._show_indicators:
            return ""
        indicators = []
        for index, _ in enumerate(self._items):
            attributes = {
                "class": "active" if index == 0 else None,
                "data-bs-target": f"#{carousel_id}",
                "data-bs-slide-to": str(index),
            }
            indicators.append(h.tag("li", "", attributes))
        return h.tag("ol", "\n".join(indicators), {"class": "carousel-indicators"})

    def _render_items(self) -> str:
        slides = []
        for index, item in enumerate(self._items):
            attributes = dict(item.attributes)
            user_classes = attributes.pop("class", None)
            attributes = h.add_css_class(
                attributes, "carousel-item", "active" if index == 0 else None, user_classes
            )
            inner = h.raw(item.content) + "\n"
            if item.caption is not None:
                caption_attributes = dict(item.caption_attributes)
                caption_classes = caption_attributes.pop("class", None)
                caption_attributes = h.add_css_class(caption_attributes, caption_classes, "carousel-caption")
                inner += h.tag("div", item.caption, caption_attributes)
            slides.append(h.tag("div", inner, attributes))
        return h.tag("div", "\n".join(slides), {"class": "carousel-inner"})

    def _render_controls(self, carousel_id: str) -> str:
        if not self._controls:
            return ""
        if len(self._controls) != 2:
            raise WidgetRenderError(
                "The number of controls must be 2 (previous and next) or 0 to hide them."
            )
        previous, following = self._controls
        return "\n".join(
            (
                h.tag(
                    "a",
                    previous,
                    {
                        "class": "carousel-control-prev",
                        "href": f"#{carousel_id}",
                        "data-bs-slide": "prev",
                        "role": "button",
                    },
                ),
                h.tag(
                    "a",
                    following,
                    {
                        "class": "carousel-control-next",
                        "href": f"#{carousel_id}",
                        "data-bs-slide": "next",
                        "role": "button",
                    },
                ),
            )
        )
