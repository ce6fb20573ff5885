"""Type-safe enumerations for markup-escape."""

from enum import StrEnum


class EscapeDecision(StrEnum):
    """How the escaping policy handles a value."""

    BYPASS = "bypass"
    SELF_RENDERED = "self-rendered"
    ESCAPE = "escape"


class EscapeMode(StrEnum):
    """Escape modes for template rendering."""

    NONE = "none"
    HTML = "html"


class TemplateFormat(StrEnum):
    """Supported template rendering formats."""

    F_STRING = "f-string"
    JINJA2 = "jinja2"
