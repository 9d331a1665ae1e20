"""
Page layout for the gallery

Wraps rendered widgets into a complete Bootstrap page: CDN assets, a NavBar
listing all examples and breadcrumbs derived from the request path. Both the
navigation and the breadcrumbs are built with the widgets themselves.
"""
from __future__ import annotations

from typing import Optional

from ..assets import BootstrapCdnAsset
from ..components import Breadcrumbs, Nav, NavBar, NavLink, NavStyle, Widget
from .catalog import EXAMPLES_BY_SLUG, EXAMPLES


class Page(Widget):
    """Main layout component that assembles the complete page"""

    def __init__(
        self,
        title: str,
        content: str,
        current_path: str = "/",
        site_title: str = "Bootstrap Widgets",
        asset: Optional[BootstrapCdnAsset] = None,
    ):
        """
        Args:
            title: Page title (will be escaped)
            content: Main content HTML (pre-rendered widgets)
            current_path: Current URL path for active navigation highlighting
            site_title: Brand text and title suffix
            asset: Bootstrap CDN files to load (defaults to the pinned version)
        """
        super().__init__()
        self.title = title
        self.content = content
        self.current_path = current_path or "/"
        self.site_title = site_title
        self.asset = asset or BootstrapCdnAsset()

    def render(self) -> str:
        """Render the complete HTML document including navigation."""
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{self.escape(self.title)} - {self.escape(self.site_title)}</title>
    {self.asset.css_tag()}
</head>
<body>
{self._render_navbar()}
<main id="main-content" class="container py-4">
{self.render_fragment()}
</main>
{self.asset.js_tag()}
</body>
</html>"""

    def render_fragment(self) -> str:
        """Return only the children of <main> (used for HX-Request swaps)."""
        labels = {"/widgets": "Widgets"}
        labels.update({f"/widgets/{slug}": example.title for slug, example in EXAMPLES_BY_SLUG.items()})
        breadcrumbs = Breadcrumbs.from_path(self.current_path, labels=labels).render()
        return f"""{breadcrumbs}
<h1>{self.escape(self.title)}</h1>
{self.content}"""

    def _render_navbar(self) -> str:
        navbar = (
            NavBar.widget()
            .id("gallery-navbar")
            .brand_text(self.site_title)
            .brand_url("/")
            .add_class("bg-body-tertiary")
        )
        nav = Nav.widget().styles(NavStyle.NAVBAR).current_path(self.current_path).items(
            *(NavLink.to(example.title, f"/widgets/{example.slug}") for example in EXAMPLES)
        )
        return navbar.render(nav)
