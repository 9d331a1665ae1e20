"""
Configuration and startup checks for the widget gallery.

Settings come from environment variables so the same code runs in local
development, CI and a deployed gallery. `ensure_safe_config_on_startup()`
aborts startup in production-like environments when the page assets would be
loaded without integrity protection or debug output is enabled.

Variables:
- BOOTSTRAP_WIDGETS_ENV: dev (default), test, stage/staging, prod/production.
- BOOTSTRAP_WIDGETS_CDN_VERSION: Bootstrap version loaded from jsDelivr.
- BOOTSTRAP_WIDGETS_GALLERY_TITLE: title shown by the gallery pages.
- BOOTSTRAP_WIDGETS_DEBUG: "true" enables FastAPI debug tracebacks.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from .assets import BOOTSTRAP_VERSION, BootstrapCdnAsset, cdn_asset_for_version


def _is_prod_like(env: str) -> bool:
    env_l = (env or "").lower()
    return env_l in {"prod", "production", "stage", "staging"}


def _flag(name: str, default: str = "false") -> bool:
    return (os.getenv(name, default) or "").strip().lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    environment: str
    cdn_version: str
    gallery_title: str
    debug: bool

    @property
    def is_prod_like(self) -> bool:
        return _is_prod_like(self.environment)

    @property
    def asset(self) -> BootstrapCdnAsset:
        return cdn_asset_for_version(self.cdn_version)


def load_settings() -> Settings:
    """Read settings from the environment (no caching, tests use monkeypatch)."""
    return Settings(
        environment=(os.getenv("BOOTSTRAP_WIDGETS_ENV", "dev") or "dev").strip().lower(),
        cdn_version=(os.getenv("BOOTSTRAP_WIDGETS_CDN_VERSION", BOOTSTRAP_VERSION) or BOOTSTRAP_VERSION).strip(),
        gallery_title=(os.getenv("BOOTSTRAP_WIDGETS_GALLERY_TITLE", "Bootstrap Widgets") or "").strip(),
        debug=_flag("BOOTSTRAP_WIDGETS_DEBUG"),
    )


def ensure_safe_config_on_startup() -> None:
    """Fail fast on unsafe production configuration.

    Development stays permissive. In prod-like environments:
    - the CDN assets must be pinned with SRI hashes (unknown versions are not),
    - debug tracebacks must be disabled.
    """
    settings = load_settings()
    if not settings.is_prod_like:
        return

    if not settings.asset.is_pinned:
        raise SystemExit(
            "Refusing to start: BOOTSTRAP_WIDGETS_CDN_VERSION="
            f"{settings.cdn_version} has no known integrity hash in production."
        )

    if settings.debug:
        raise SystemExit(
            "Refusing to start: BOOTSTRAP_WIDGETS_DEBUG must be false in production/staging."
        )
