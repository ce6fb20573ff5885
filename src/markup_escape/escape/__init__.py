"""Character escaping primitives."""

from markup_escape.escape.scanner import ScanResult
from markup_escape.escape.scanner import escape_text
from markup_escape.escape.scanner import scan_text
from markup_escape.escape.table import HTML_ESCAPE_TABLE
from markup_escape.escape.table import EscapeEntry
from markup_escape.escape.table import EscapeTable

__all__ = [
    "HTML_ESCAPE_TABLE",
    "EscapeEntry",
    "EscapeTable",
    "ScanResult",
    "escape_text",
    "scan_text",
]
