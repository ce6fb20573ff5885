"""Engine registry for template renderers."""

from markup_escape.enums import EscapeMode
from markup_escape.enums import TemplateFormat
from markup_escape.templating.engines.f_string import FStringRenderer
from markup_escape.templating.engines.f_string import MissingVariableError
from markup_escape.templating.engines.jinja2 import Jinja2Renderer
from markup_escape.templating.types import TemplateRenderer

__all__ = [
    "FStringRenderer",
    "Jinja2Renderer",
    "MissingVariableError",
    "get_renderer",
]


def get_renderer(
    fmt: TemplateFormat, escape_mode: EscapeMode = EscapeMode.NONE
) -> TemplateRenderer:
    """Get a template renderer for the specified format.

    Args:
        fmt: Template format to get renderer for
        escape_mode: Whether the renderer HTML-escapes interpolated values

    Returns:
        Renderer instance for the specified format

    Raises:
        ValueError: When format is not supported

    """
    match fmt:
        case TemplateFormat.F_STRING:
            return FStringRenderer(escape_mode=escape_mode)
        case TemplateFormat.JINJA2:
            return Jinja2Renderer(escape_mode=escape_mode)
    msg = f"Unsupported template format: {fmt!s}"
    raise ValueError(msg)
