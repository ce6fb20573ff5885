"""Two-pass HTML escaper.

The first pass counts matches and the total length they add. When there are
none, the input is returned as is. Otherwise the second pass fills a piece
list of exactly ``2 * matches + 1`` slots (the unmatched run before each
match, the match's replacement, and the trailing run) which is joined once.
"""

from typing import NamedTuple

from markup_escape.escape.table import HTML_ESCAPE_TABLE
from markup_escape.escape.table import EscapeTable


class ScanResult(NamedTuple):
    """Outcome of the scan pass over a text."""

    match_count: int
    total_delta: int

    def output_length(self, input_length: int) -> int:
        """Return the exact length of the escaped output."""
        return input_length + self.total_delta


def scan_text(text: str, table: EscapeTable = HTML_ESCAPE_TABLE) -> ScanResult:
    """Count the characters of a text that need escaping.

    Args:
        text: Text to scan
        table: Escape table to match against

    Returns:
        Number of matched characters and the length they add when replaced

    """
    entries = table.entries
    limit = table.limit
    match_count = 0
    total_delta = 0

    for char in text:
        if ord(char) < limit and (entry := entries.get(char)) is not None:
            match_count += 1
            total_delta += entry.delta

    return ScanResult(match_count, total_delta)


def escape_text(text: str, table: EscapeTable = HTML_ESCAPE_TABLE) -> str:
    """Replace the characters of a text found in an escape table.

    With the default table ``"``, ``'``, ``&``, ``<`` and ``>`` become
    ``&#34;``, ``&#39;``, ``&amp;``, ``&lt;`` and ``&gt;``. Every other
    codepoint is copied verbatim. The result is plain text; wrapping it as
    safe markup is up to the caller.

    Args:
        text: Text to escape
        table: Escape table to apply

    Returns:
        The escaped text, or ``text`` itself when nothing needed escaping

    """
    scan = scan_text(text, table)
    if scan.match_count == 0:
        return text

    entries = table.entries
    limit = table.limit
    pieces = [""] * (2 * scan.match_count + 1)
    slot = 0
    run_start = 0

    for index, char in enumerate(text):
        if ord(char) < limit and (entry := entries.get(char)) is not None:
            pieces[slot] = text[run_start:index]
            pieces[slot + 1] = entry.replacement
            slot += 2
            run_start = index + 1

    pieces[slot] = text[run_start:]
    return "".join(pieces)
