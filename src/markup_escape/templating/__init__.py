"""Template rendering with HTML escaping of interpolated values."""

from markup_escape.enums import EscapeMode
from markup_escape.enums import TemplateFormat
from markup_escape.templating.engines import FStringRenderer
from markup_escape.templating.engines import Jinja2Renderer
from markup_escape.templating.engines import MissingVariableError
from markup_escape.templating.engines import get_renderer
from markup_escape.templating.observability import render_with_observability
from markup_escape.templating.types import TemplateRenderer

__all__ = [
    "EscapeMode",
    "FStringRenderer",
    "Jinja2Renderer",
    "MissingVariableError",
    "TemplateFormat",
    "TemplateRenderer",
    "get_renderer",
    "render_with_observability",
]
