"""Core functionality for markup-escape.

This module contains errors, configuration and protocols shared by the
escaper, the escaping policy and the template renderers.
"""

from markup_escape.core.config import EscapeConfig
from markup_escape.core.errors import ConversionError
from markup_escape.core.errors import MarkupError
from markup_escape.core.protocols import HTMLRenderable
from markup_escape.core.protocols import is_html_renderable

__all__ = [
    "ConversionError",
    "EscapeConfig",
    "HTMLRenderable",
    "MarkupError",
    "is_html_renderable",
]
