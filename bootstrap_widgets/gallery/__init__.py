# Widget gallery (FastAPI demo app)

from .layout import Page

__all__ = ["Page"]
