# bootstrap-widgets
# Server-side rendering of Bootstrap 5 components from immutable Python builders

from .assets import BootstrapCdnAsset
from .components import *  # noqa: F401,F403
from .components import __all__ as _components_all
from .errors import WidgetConfigError, WidgetRenderError
from .markdown import render_markdown_safe

__version__ = "0.1.0"

__all__ = [
    *_components_all,
    "BootstrapCdnAsset",
    "WidgetConfigError",
    "WidgetRenderError",
    "render_markdown_safe",
]
