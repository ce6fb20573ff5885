"""markup-escape - HTML escaping with a safe Markup string type.

The escaper replaces ``"``, ``'``, ``&``, ``<`` and ``>`` with character
references. Its results are wrapped in ``Markup``, a ``str`` subclass that
marks text as safe, so already-escaped values are never escaped twice.
"""

from markup_escape.core import ConversionError
from markup_escape.core import EscapeConfig
from markup_escape.core import HTMLRenderable
from markup_escape.core import MarkupError
from markup_escape.core import is_html_renderable
from markup_escape.enums import EscapeDecision
from markup_escape.escape import HTML_ESCAPE_TABLE
from markup_escape.escape import EscapeEntry
from markup_escape.escape import EscapeTable
from markup_escape.escape import ScanResult
from markup_escape.escape import escape_text
from markup_escape.escape import scan_text
from markup_escape.markup import Markup
from markup_escape.markup import escape
from markup_escape.markup import escape_silent
from markup_escape.markup import policy_for
from markup_escape.policy import EscapingPolicy
from markup_escape.project_info import ProjectInfo
from markup_escape.project_info import get_project_info
from markup_escape.text import coerce_to_text

# Public API - supports both direct and module imports
__all__ = [
    "HTML_ESCAPE_TABLE",
    "ConversionError",
    "EscapeConfig",
    "EscapeDecision",
    "EscapeEntry",
    "EscapeTable",
    "EscapingPolicy",
    "HTMLRenderable",
    "Markup",
    "MarkupError",
    "ProjectInfo",
    "ScanResult",
    "coerce_to_text",
    "escape",
    "escape_silent",
    "escape_text",
    "get_project_info",
    "is_html_renderable",
    "policy_for",
    "scan_text",
]
__version__ = get_project_info().version
