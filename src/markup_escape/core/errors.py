"""Custom exceptions for markup-escape.

The escaper itself is total over text and never raises; these exceptions
cover converting arbitrary values to text before they reach it.
"""


class MarkupError(Exception):
    """Base exception for markup-escape errors."""


class ConversionError(MarkupError, TypeError):
    """Raised when a value cannot be converted to text.

    This occurs when a value's ``__str__`` or ``__html__`` raises while the
    escaping policy or ``coerce_to_text`` converts it. The original error is
    chained as ``__cause__``.
    """

    def __init__(self, value: object, reason: str) -> None:
        """Initialize with the offending value and failure reason."""
        self.value_type = type(value).__name__
        super().__init__(f"Cannot convert {self.value_type} to text: {reason}")
