"""Soft text coercion."""

from markup_escape.core.errors import ConversionError


def coerce_to_text(value: object) -> str:
    """Return a value as text without losing a safe-markup type.

    Any ``str`` instance, including ``Markup``, is returned unchanged so
    composing values keeps their safety marker. Everything else goes
    through ``str()``.

    Args:
        value: Any object

    Returns:
        The value itself if it is text, else its ``str()`` form

    Raises:
        ConversionError: When the value's ``__str__`` raises

    """
    if isinstance(value, str):
        return value
    try:
        return str(value)
    except Exception as e:
        raise ConversionError(value, str(e)) from e
