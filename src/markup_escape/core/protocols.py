"""Protocols and type guards for self-rendering values.

An object that knows how to render itself as safe HTML exposes
``__html__``. The escaping policy uses these helpers to pick between
rendering such an object verbatim and escaping its text form.
"""

from typing import Any
from typing import Protocol
from typing import TypeGuard
from typing import runtime_checkable


@runtime_checkable
class HTMLRenderable(Protocol):
    """Protocol for objects that render themselves as safe HTML.

    ``__html__`` must return text that is already safe to insert into
    markup verbatim. Jinja2, MarkupSafe and this package all honour it.
    """

    def __html__(self) -> str:
        """Return the HTML representation of the object."""
        ...


def is_html_renderable(value: Any) -> TypeGuard[HTMLRenderable]:
    """Check if a value renders itself as safe HTML.

    Args:
        value: Any object

    Returns:
        True if the value exposes ``__html__``

    """
    return isinstance(value, HTMLRenderable)
