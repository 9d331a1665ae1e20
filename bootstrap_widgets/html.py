"""
Low-level HTML helpers shared by all widgets.

The helpers work on plain attribute dictionaries ("attribute bags"). They never
mutate their input: every function returns a new dictionary so widgets can keep
their configuration immutable.

Rendering rules:
- Well-known attributes are emitted first, in a fixed order, so output is
  stable regardless of the order in which widgets assemble their bags.
- `True` renders a bare attribute, `False` and `None` drop it.
- `class` may be a list, `style` may be a dict, `data` expands to `data-*`.
"""
from __future__ import annotations

import html
import itertools
import json
import logging
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional

from .errors import WidgetConfigError

logger = logging.getLogger("bootstrap_widgets.html")

ATTRIBUTE_ORDER = (
    "type",
    "id",
    "class",
    "name",
    "value",
    "href",
    "loading",
    "src",
    "srcset",
    "form",
    "action",
    "method",
    "selected",
    "checked",
    "readonly",
    "disabled",
    "multiple",
    "size",
    "maxlength",
    "minlength",
    "width",
    "height",
    "rows",
    "cols",
    "alt",
    "title",
    "rel",
    "media",
)

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "source",
        "track",
        "wbr",
    }
)

_id_counter = itertools.count()


def generate_id(prefix: str = "w") -> str:
    """Return a unique id such as `w0`, `alert-1`, ..."""
    value = f"{prefix}{next(_id_counter)}"
    logger.debug("generated id %s", value)
    return value


def reset_id_counter(value: int = 0) -> None:
    """Restart id generation at `value` (tests rely on deterministic ids)."""
    global _id_counter
    _id_counter = itertools.count(value)


def encode(content: Any) -> str:
    """Escape text content; objects providing `__html__` are trusted."""
    if content is None:
        return ""
    if hasattr(content, "__html__"):
        return str(content.__html__())
    return html.escape(str(content), quote=False)


def raw(content: Any) -> str:
    """Insert content without escaping (widgets, markup or plain HTML strings)."""
    if content is None:
        return ""
    if hasattr(content, "__html__"):
        return str(content.__html__())
    return str(content)


def content(value: Any, encode_content: bool = True) -> str:
    return encode(value) if encode_content else raw(value)


def _normalize_class(value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        value = value.value
    if value is None or value == "":
        return None
    return str(value)


def _class_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, Enum):
        return _class_list(value.value)
    if isinstance(value, str):
        return [part for part in value.split(" ") if part]
    if isinstance(value, Iterable):
        result = []
        for item in value:
            result.extend(_class_list(_normalize_class(item)))
        return result
    return [str(value)]


def add_css_class(attributes: Optional[Mapping[str, Any]], *classes: Any) -> Dict[str, Any]:
    """Append classes to the bag's `class` entry (skip empties, drop duplicates)."""
    result = dict(attributes or {})
    merged = _class_list(result.get("class"))
    for item in classes:
        for name in _class_list(item):
            if name not in merged:
                merged.append(name)
    if merged:
        result["class"] = merged
    else:
        result.pop("class", None)
    return result


def parse_style(style: Any) -> Dict[str, str]:
    """Turn `"color: red; margin: 0"` or a dict into an ordered dict."""
    if not style:
        return {}
    if isinstance(style, Mapping):
        return {str(k): str(v) for k, v in style.items()}
    parsed: Dict[str, str] = {}
    for declaration in str(style).split(";"):
        if ":" not in declaration:
            continue
        key, value = declaration.split(":", 1)
        if key.strip():
            parsed[key.strip()] = value.strip()
    return parsed


def add_css_style(
    attributes: Optional[Mapping[str, Any]], style: Any, overwrite: bool = True
) -> Dict[str, Any]:
    """Merge CSS declarations into the bag's `style` entry.

    With `overwrite=False` declarations that already exist are kept.
    """
    result = dict(attributes or {})
    merged = parse_style(result.get("style"))
    for key, value in parse_style(style).items():
        if overwrite or key not in merged:
            merged[key] = value
    if merged:
        result["style"] = merged
    return result


def merge_defaults(attributes: Optional[Mapping[str, Any]], defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """Return `attributes` with `defaults` appended for keys the caller did not set.

    A key explicitly set to `None` stays `None` and thereby suppresses the default.
    """
    result = dict(attributes or {})
    for key, value in defaults.items():
        if key not in result:
            result[key] = value
    return result


def _render_value(name: str, value: Any) -> Optional[str]:
    if isinstance(value, Enum):
        value = value.value
    if name == "class":
        value = " ".join(_class_list(value))
    elif name == "style" and isinstance(value, Mapping):
        value = " ".join(f"{k}: {v};" for k, v in value.items())
    elif isinstance(value, (list, tuple, dict)):
        value = json.dumps(value, separators=(",", ":"))
    return html.escape(str(value), quote=True)


def render_attributes(attributes: Optional[Mapping[str, Any]]) -> str:
    """Render an attribute bag, every pair prefixed by a single space."""
    if not attributes:
        return ""
    expanded: Dict[str, Any] = {}
    for name, value in attributes.items():
        if name == "data" and isinstance(value, Mapping):
            for key, data_value in value.items():
                expanded[f"data-{key}"] = data_value
        else:
            expanded[name] = value

    ordered = [name for name in ATTRIBUTE_ORDER if name in expanded]
    ordered.extend(name for name in expanded if name not in ATTRIBUTE_ORDER)

    parts = []
    for name in ordered:
        value = expanded[name]
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {name}")
            continue
        rendered = _render_value(name, value)
        if name == "class" and not rendered:
            continue
        parts.append(f' {name}="{rendered}"')
    return "".join(parts)


def _check_tag(name: str) -> None:
    if not name:
        raise WidgetConfigError("Tag cannot be empty string.", option="tag")


def open_tag(name: str, attributes: Optional[Mapping[str, Any]] = None) -> str:
    _check_tag(name)
    return f"<{name}{render_attributes(attributes)}>"


def close_tag(name: str) -> str:
    _check_tag(name)
    if name in VOID_ELEMENTS:
        return ""
    return f"</{name}>"


def tag(
    name: str,
    inner: Any = "",
    attributes: Optional[Mapping[str, Any]] = None,
    encode_content: bool = False,
) -> str:
    """Render a complete element. Void elements ignore `inner`."""
    opened = open_tag(name, attributes)
    if name in VOID_ELEMENTS:
        return opened
    return f"{opened}{content(inner, encode_content)}{close_tag(name)}"


def join_lines(*parts: str) -> str:
    """Join non-empty parts with newlines."""
    return "\n".join(part for part in parts if part)
