"""
Bootstrap CDN asset references.

The widgets only emit markup; pages still need the Bootstrap CSS and JS
bundle. `BootstrapCdnAsset` pins the jsDelivr files with subresource
integrity hashes so browsers refuse tampered copies.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import html as h

BOOTSTRAP_VERSION = "5.3.8"
CSS_INTEGRITY = "sha384-sRIl4kxILFvY47J16cr9ZwB07vP4J8+LH7qKQnuqkuIAvNWLzeN8tE5YBujZqJLB"
JS_INTEGRITY = "sha384-FKyoEForCGlyvwx9Hj09JcYn3nv7wiPVlz7YYwJrWVcXK/BmnVDxM+D2scQbITxI"


@dataclass(frozen=True)
class BootstrapCdnAsset:
    version: str = BOOTSTRAP_VERSION
    css_integrity: Optional[str] = CSS_INTEGRITY
    js_integrity: Optional[str] = JS_INTEGRITY
    crossorigin: str = "anonymous"

    @property
    def base_url(self) -> str:
        return f"https://cdn.jsdelivr.net/npm/bootstrap@{self.version}/dist"

    @property
    def css_url(self) -> str:
        return f"{self.base_url}/css/bootstrap.min.css"

    @property
    def js_url(self) -> str:
        return f"{self.base_url}/js/bootstrap.bundle.min.js"

    @property
    def is_pinned(self) -> bool:
        """True when both files carry an integrity hash."""
        return bool(self.css_integrity and self.js_integrity)

    def css_tag(self) -> str:
        return h.tag(
            "link",
            attributes={
                "href": self.css_url,
                "rel": "stylesheet",
                "integrity": self.css_integrity,
                "crossorigin": self.crossorigin,
            },
        )

    def js_tag(self) -> str:
        return h.tag(
            "script",
            attributes={
                "src": self.js_url,
                "integrity": self.js_integrity,
                "crossorigin": self.crossorigin,
            },
        )


def cdn_asset_for_version(version: str) -> BootstrapCdnAsset:
    """Asset for `version`; SRI hashes are only known for the bundled version."""
    if version == BOOTSTRAP_VERSION:
        return BootstrapCdnAsset()
    return BootstrapCdnAsset(version=version, css_integrity=None, js_integrity=None)
