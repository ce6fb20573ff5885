"""F-string template engine using string.Formatter."""

from collections.abc import Mapping
import string
from typing import Any

from markupsafe import EscapeFormatter

from markup_escape.enums import EscapeMode
from markup_escape.markup import Markup
from markup_escape.markup import policy_for
from markup_escape.policy import EscapingPolicy


class MissingVariableError(KeyError):
    """Raised when a required template variable is missing."""

    def __init__(self, variable: str, template: str) -> None:
        """Initialize with variable name and template."""
        self.variable = variable
        self.template = template
        super().__init__(
            f"Missing required variable '{variable}' for template: {template[:100]}"
        )


class PolicyFormatter(EscapeFormatter):
    """Escape each replacement field through an escaping policy.

    Fields without a format spec reach the policy as raw values, so scalar
    bypass and ``none_as_empty`` apply. Fields with a spec are formatted
    first and the formatted text is escaped.
    """

    def __init__(self, policy: EscapingPolicy[Markup]) -> None:
        """Initialize with the policy applied to each field."""
        super().__init__(policy.escape_value)

    def format_field(self, value: Any, format_spec: str) -> str:
        if not format_spec:
            return str(self.escape(value))
        return super().format_field(value, format_spec)


class FStringRenderer:
    """Render f-string style templates, optionally escaping every field."""

    def __init__(
        self,
        *,
        escape_mode: EscapeMode = EscapeMode.NONE,
        policy: EscapingPolicy[Markup] | None = None,
    ) -> None:
        """Initialize the f-string renderer.

        Args:
            escape_mode: Whether interpolated values are HTML-escaped
            policy: Escaping policy for HTML mode, defaults to the Markup one

        """
        self.escape_mode = escape_mode
        self.policy = policy or policy_for(Markup)
        self._formatter: string.Formatter
        if escape_mode is EscapeMode.HTML:
            self._formatter = PolicyFormatter(self.policy)
        else:
            self._formatter = string.Formatter()

    def render(self, template: object, variables: Mapping[str, object]) -> str:
        """Render f-string template with variables.

        Args:
            template: Template string with {variable} or {variable:format_spec}
            variables: Mapping of variable names to values

        Returns:
            Rendered string; a Markup instance in HTML mode

        Raises:
            MissingVariableError: When a required variable is missing
            TypeError: When template is not a string

        """
        if not isinstance(template, str):
            msg = f"F-string template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        try:
            result = self._formatter.vformat(template, (), variables)
        except KeyError as e:
            var_name = str(e).strip("'\"")
            raise MissingVariableError(var_name, template) from e

        if self.escape_mode is EscapeMode.HTML:
            return self.policy.mark_safe(result)
        return result
