"""Core types and protocols for template rendering."""

from collections.abc import Mapping
from typing import Protocol

from markup_escape.enums import EscapeMode


class TemplateRenderer(Protocol):
    """Protocol for template rendering engines."""

    escape_mode: EscapeMode

    def render(self, template: object, variables: Mapping[str, object]) -> str:
        """Render a template with the provided variables."""
        ...
