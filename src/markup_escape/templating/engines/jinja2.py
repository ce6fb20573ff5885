"""Jinja2 template engine with sandboxed environment."""

from collections.abc import Mapping

from jinja2 import Environment
from jinja2 import StrictUndefined
from jinja2 import Undefined
from jinja2.sandbox import SandboxedEnvironment

from markup_escape.enums import EscapeMode
from markup_escape.markup import Markup
from markup_escape.markup import policy_for
from markup_escape.policy import EscapingPolicy


class Jinja2Renderer:
    """Render Jinja2 templates with sandboxed environment."""

    def __init__(
        self,
        *,
        escape_mode: EscapeMode = EscapeMode.NONE,
        policy: EscapingPolicy[Markup] | None = None,
    ) -> None:
        """Initialize the Jinja2 renderer.

        In HTML mode the escaping policy is installed as the environment's
        ``finalize`` hook, so each ``{{ ... }}`` output is escaped exactly
        once. Autoescaping is switched on as well so macro, call and
        ``{% set %}`` block output comes back as safe markup and is not
        escaped again. Values that are already safe, including Jinja's own
        ``|safe`` results, pass through untouched.

        Args:
            escape_mode: Whether expression output is HTML-escaped
            policy: Escaping policy, defaults to the Markup one

        """
        self.escape_mode = escape_mode
        self.policy = policy or policy_for(Markup)
        finalize = self._escape_output if escape_mode is EscapeMode.HTML else None
        self._env: Environment = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=escape_mode is EscapeMode.HTML,
            finalize=finalize,
        )
        self._env.filters["escape_html"] = self.policy.escape_value
        self._env.filters["mark_safe"] = self.policy.mark_safe

    def render(self, template: object, variables: Mapping[str, object]) -> str:
        """Render Jinja2 template with variables.

        Args:
            template: Template string with Jinja2 syntax
            variables: Mapping of variable names to values

        Returns:
            Rendered string; a Markup instance in HTML mode

        Raises:
            TypeError: When template is not a string
            jinja2.TemplateError: When template syntax is invalid or variables are
                missing

        """
        if not isinstance(template, str):
            msg = f"Jinja2 template must be str, got {type(template).__name__}"
            raise TypeError(msg)

        tmpl = self._env.from_string(template)
        result = tmpl.render(variables)

        if self.escape_mode is EscapeMode.HTML:
            return self.policy.mark_safe(result)
        return result

    def _escape_output(self, value: object) -> object:
        """Escape one expression result, surfacing undefined variables first."""
        if isinstance(value, Undefined):
            value = str(value)
        return self.policy.escape_value(value)
