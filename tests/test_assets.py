from __future__ import annotations

from bootstrap_widgets.assets import (
    BOOTSTRAP_VERSION,
    CSS_INTEGRITY,
    JS_INTEGRITY,
    BootstrapCdnAsset,
    cdn_asset_for_version,
)


def test_default_asset_is_pinned():
    asset = BootstrapCdnAsset()
    assert asset.is_pinned
    assert asset.css_url == f"https://cdn.jsdelivr.net/npm/bootstrap@{BOOTSTRAP_VERSION}/dist/css/bootstrap.min.css"
    assert asset.js_url.endswith("/js/bootstrap.bundle.min.js")


def test_asset_tags_carry_integrity():
    asset = BootstrapCdnAsset()
    assert asset.css_tag() == (
        f'<link href="{asset.css_url}" rel="stylesheet" integrity="{CSS_INTEGRITY}" crossorigin="anonymous">'
    )
    assert asset.js_tag() == f'<script src="{asset.js_url}" integrity="{JS_INTEGRITY}" crossorigin="anonymous"></script>'


def test_unknown_version_is_not_pinned():
    asset = cdn_asset_for_version("5.0.0")
    assert not asset.is_pinned
    assert "bootstrap@5.0.0" in asset.css_url
    assert "integrity" not in asset.css_tag()


def test_bundled_version_lookup():
    assert cdn_asset_for_version(BOOTSTRAP_VERSION) == BootstrapCdnAsset()
