"""Escaping policy: decides per value whether and how to escape."""

from typing import Any
from typing import assert_never

from markup_escape.core.config import EscapeConfig
from markup_escape.core.errors import ConversionError
from markup_escape.core.protocols import is_html_renderable
from markup_escape.enums import EscapeDecision
from markup_escape.escape.scanner import escape_text
from markup_escape.escape.table import HTML_ESCAPE_TABLE
from markup_escape.escape.table import EscapeTable
from markup_escape.text import coerce_to_text

# Exact types whose default str() never contains an escapable character.
_SCALAR_TYPES = frozenset({int, float, bool, type(None)})


class EscapingPolicy[S: str]:
    """Turn arbitrary values into safe text of a given type.

    Each value takes exactly one path, see ``decide``:

    - scalars are wrapped in ``safe_type`` without being scanned;
    - objects with ``__html__`` render themselves and are returned as is;
    - everything else is converted to text, escaped, and wrapped.

    Because safe values take the second path, escaping is idempotent at
    this level even though ``escape_text`` is not.
    """

    def __init__(
        self,
        safe_type: type[S],
        config: EscapeConfig | None = None,
        *,
        table: EscapeTable = HTML_ESCAPE_TABLE,
    ) -> None:
        """Initialize the policy.

        Args:
            safe_type: Text type results are wrapped in; its instances must
                provide ``__html__`` so they are never escaped twice
            config: Escaping options, defaults to ``EscapeConfig()``
            table: Escape table applied to text

        """
        self.safe_type = safe_type
        self.config = config or EscapeConfig()
        self.table = table

    def decide(self, value: Any) -> EscapeDecision:
        """Return how a value would be handled by ``escape_value``."""
        if self.config.scalar_bypass and type(value) in _SCALAR_TYPES:
            return EscapeDecision.BYPASS
        if is_html_renderable(value):
            return EscapeDecision.SELF_RENDERED
        return EscapeDecision.ESCAPE

    def escape_value(self, value: Any) -> S | str:
        """Escape a value for insertion into HTML.

        Args:
            value: Any object

        Returns:
            Safe text. For objects with ``__html__`` this is whatever that
            method returns.

        Raises:
            ConversionError: When converting the value to text fails

        """
        if value is None and self.config.none_as_empty:
            return self.safe_type("")

        decision = self.decide(value)
        match decision:
            case EscapeDecision.BYPASS:
                return self.safe_type(str(value))
            case EscapeDecision.SELF_RENDERED:
                try:
                    return value.__html__()
                except Exception as e:
                    raise ConversionError(value, f"__html__ failed: {e}") from e
            case EscapeDecision.ESCAPE:
                text = coerce_to_text(value)
                return self.safe_type(escape_text(text, self.table))
            case _:
                assert_never(decision)

    def escape_silent(self, value: Any) -> S | str:
        """Like ``escape_value`` but ``None`` becomes empty safe text."""
        if value is None:
            return self.safe_type("")
        return self.escape_value(value)

    def mark_safe(self, value: Any) -> S:
        """Wrap a value as safe text without escaping it."""
        return self.safe_type(coerce_to_text(value))

    def __repr__(self) -> str:
        return (
            f"EscapingPolicy(safe_type={self.safe_type.__name__}, "
            f"config={self.config!r})"
        )
