"""The ``Markup`` safe text type.

``Markup`` is MarkupSafe's safe string with escaping routed through an
``EscapingPolicy``. Every MarkupSafe operation that escapes an operand
(``+``, ``%``, ``join``, ``format``, ``replace``, ...) calls ``escape`` on
the instance's class, so all of them go through ``escape_text``.
"""

import functools
from typing import Any
from typing import Self

import markupsafe

from markup_escape.policy import EscapingPolicy


class Markup(markupsafe.Markup):
    """Text that is safe to insert into HTML.

    Passing an object to the constructor marks its text as safe without
    escaping it. Use ``Markup.escape`` to escape untrusted text.

        >>> Markup("<em>Hello</em> ") + "<foo>"
        Markup('<em>Hello</em> &lt;foo&gt;')
    """

    __slots__ = ()

    @classmethod
    def escape(cls, s: Any, /) -> Self:
        """Escape a value and return it as an instance of this class.

        Values that are already safe are returned without escaping.
        """
        rv = policy_for(cls).escape_value(s)

        if rv.__class__ is not cls:
            return cls(rv)

        return rv


@functools.cache
def policy_for[S: Markup](safe_type: type[S]) -> EscapingPolicy[S]:
    """Return the shared escaping policy that wraps results in ``safe_type``."""
    return EscapingPolicy(safe_type)


def escape(s: Any) -> Markup:
    """Convert ``&``, ``<``, ``>``, ``'`` and ``"`` in a value to HTML-safe
    sequences and mark the result as ``Markup``.

    Numbers, booleans and ``None`` are wrapped without scanning; objects
    with ``__html__`` render themselves.
    """
    return Markup.escape(s)


def escape_silent(s: Any) -> Markup:
    """Like ``escape`` but ``None`` becomes an empty ``Markup``."""
    return Markup(policy_for(Markup).escape_silent(s))
