"""Renderers for Listing models."""

from .html import DEFAULT_CSS
from .html import SERVER_INFO
from .html import render_html
from .json import render_json

__all__ = [
    "DEFAULT_CSS",
    "SERVER_INFO",
    "render_html",
    "render_json",
]
