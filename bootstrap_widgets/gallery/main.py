"""
FastAPI gallery app showing every widget on a Bootstrap page.

Run locally with `uvicorn bootstrap_widgets.gallery.main:app --reload`.
"""
from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from .. import config as cfg
from .catalog import EXAMPLES, EXAMPLES_BY_SLUG
from .layout import Page

logger = logging.getLogger("bootstrap_widgets.gallery")


def _should_load_dotenv() -> bool:
    """Decide if we should load a local .env file.

    - Never load under pytest to avoid contaminating test env.
    - Allow explicit opt-out via BOOTSTRAP_WIDGETS_ENABLE_DOTENV (default true
      outside pytest).
    """
    if "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST"):
        return False
    flag = (os.getenv("BOOTSTRAP_WIDGETS_ENABLE_DOTENV", "true") or "").strip().lower()
    return flag in ("1", "true", "yes")


if _should_load_dotenv():
    load_dotenv()

# Fail fast on unsafe production settings before the app is built.
cfg.ensure_safe_config_on_startup()
SETTINGS = cfg.load_settings()

app = FastAPI(
    title=SETTINGS.gallery_title,
    description="Server-rendered Bootstrap 5 widget gallery",
    version="0.1.0",
    debug=SETTINGS.debug,
)


def _page_response(request: Request, page: Page, *, status_code: int = 200) -> HTMLResponse:
    """Render a Page, returning only the main fragment for HTMX navigation."""
    if request.headers.get("HX-Request"):
        body = page.render_fragment()
    else:
        body = page.render()
    return HTMLResponse(content=body, status_code=status_code)


def _new_page(request: Request, title: str, content: str) -> Page:
    settings = cfg.load_settings()
    return Page(
        title=title,
        content=content,
        current_path=request.url.path,
        site_title=settings.gallery_title,
        asset=settings.asset,
    )


@app.get("/healthz", response_class=PlainTextResponse)
async def healthz():
    return PlainTextResponse("ok")


@app.get("/", response_class=HTMLResponse)
@app.get("/widgets", response_class=HTMLResponse)
async def index(request: Request):
    items = "\n".join(
        f'<li class="list-group-item"><a href="/widgets/{example.slug}">{Page.escape(example.title)}</a></li>'
        for example in EXAMPLES
    )
    content = f'<ul class="list-group">\n{items}\n</ul>'
    return _page_response(request, _new_page(request, "Widgets", content))


@app.get("/widgets/{name}", response_class=HTMLResponse)
async def widget_page(request: Request, name: str):
    example = EXAMPLES_BY_SLUG.get(name)
    if example is None:
        logger.info("unknown widget requested: %s", name)
        raise HTTPException(status_code=404, detail="Unknown widget")
    return _page_response(request, _new_page(request, example.title, example.render()))


@app.get("/widgets/{name}/fragment", response_class=HTMLResponse)
async def widget_fragment(name: str):
    """Rendered widget markup without any page chrome."""
    example = EXAMPLES_BY_SLUG.get(name)
    if example is None:
        raise HTTPException(status_code=404, detail="Unknown widget")
    return HTMLResponse(content=example.render())
