"""
Markdown bodies for alerts, modals, toasts and accordion items.

A widget body sits below the widget's own title (`<h5 class="modal-title">`,
`<strong class="me-auto">` in a toast), so Markdown headings are shifted down
to `h5`/`h6` and thematic breaks are not recognised at all. Raw HTML in the
source stays text. bleach then checks the result against the tags a body may
contain and the value is returned as `Markup`, which widgets insert verbatim:

    Alert.widget().body(render_markdown_safe("**Saved.** See [log](/log)."))
"""
from __future__ import annotations

import bleach
from markdown_it import MarkdownIt
from markupsafe import Markup

BODY_HEADING_LEVEL = 5

_BODY_TAGS = frozenset(
    {"p", "br", "strong", "em", "code", "pre", "blockquote", "a", "h5", "h6"}
    | {"ul", "ol", "li"}
    | {"table", "thead", "tbody", "tr", "th", "td"}
)

_BODY_ATTRIBUTES = {
    "a": ["href", "title"],
}

_LINK_PROTOCOLS = frozenset({"http", "https", "mailto"})

_MD = (
    MarkdownIt("commonmark", {"html": False, "typographer": False, "breaks": True})
    .enable("table")
    .disable("hr")
)


def _shift_headings(tokens) -> None:
    for token in tokens:
        if token.type in ("heading_open", "heading_close"):
            level = int(token.tag[1]) + BODY_HEADING_LEVEL - 1
            token.tag = f"h{min(level, 6)}"


def render_markdown_safe(src) -> Markup:
    """Render a Markdown widget body.

    `# A` becomes `<h5>A</h5>`, anything from `##` on becomes `<h6>`.
    Empty or None input gives an empty `Markup`.
    """
    if not src:
        return Markup("")

    env: dict = {}
    tokens = _MD.parse(str(src), env)
    _shift_headings(tokens)
    rendered = _MD.renderer.render(tokens, _MD.options, env)
    cleaned = bleach.clean(
        rendered,
        tags=_BODY_TAGS,
        attributes=_BODY_ATTRIBUTES,
        protocols=_LINK_PROTOCOLS,
        strip=False,
    )
    return Markup(cleaned.strip())
