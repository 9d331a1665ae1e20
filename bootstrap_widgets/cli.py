"""Command line entry point for the widget gallery.

Why:
    Rendering an example to STDOUT makes it easy to diff markup after a widget
    change or paste it into a static page without starting the web app.
"""
from __future__ import annotations

import click

from . import config as cfg
from .gallery.catalog import EXAMPLES, EXAMPLES_BY_SLUG
from .gallery.layout import Page


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
def cli() -> None:
    """Bootstrap widget gallery tools."""


@cli.command("list")
def list_examples() -> None:
    """Print the slug and title of every gallery example."""
    for example in EXAMPLES:
        click.echo(f"{example.slug}\t{example.title}")


@cli.command()
@click.argument("slug", type=click.Choice(sorted(EXAMPLES_BY_SLUG)))
@click.option("--page", is_flag=True, default=False, help="Wrap the example into a complete HTML document.")
@click.option(
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    show_default=True,
    help="Target file ('-' writes to STDOUT).",
)
def render(slug: str, page: bool, output) -> None:
    """Render the example SLUG.

    Parameters:
        slug: Gallery example to render (see `list`).
        page: When true, emit the full page with CDN assets and navigation.
        output: File to write; defaults to STDOUT.
    """
    example = EXAMPLES_BY_SLUG[slug]
    markup = example.render()
    if page:
        settings = cfg.load_settings()
        markup = Page(
            title=example.title,
            content=markup,
            current_path=f"/widgets/{slug}",
            site_title=settings.gallery_title,
            asset=settings.asset,
        ).render()
    click.echo(markup, file=output)


@cli.command("check-config")
def check_config() -> None:
    """Run the startup guard and print the effective settings."""
    cfg.ensure_safe_config_on_startup()
    settings = cfg.load_settings()
    click.echo(f"environment: {settings.environment}")
    click.echo(f"bootstrap: {settings.cdn_version} (pinned: {'yes' if settings.asset.is_pinned else 'no'})")
    click.echo(f"debug: {'on' if settings.debug else 'off'}")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", type=int, default=8000, show_default=True)
@click.option("--reload", is_flag=True, default=False, help="Restart on code changes (development).")
def serve(host: str, port: int, reload: bool) -> None:
    """Start the gallery web app with uvicorn."""
    import uvicorn

    click.echo(f"Serving gallery on http://{host}:{port}")
    uvicorn.run("bootstrap_widgets.gallery.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":  # pragma: no cover
    cli()
