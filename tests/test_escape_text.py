"""Tests for the two-pass escaper."""

import pytest

from markup_escape.escape import HTML_ESCAPE_TABLE
from markup_escape.escape import EscapeEntry
from markup_escape.escape import EscapeTable
from markup_escape.escape import ScanResult
from markup_escape.escape import escape_text
from markup_escape.escape import scan_text

CODEPOINT_LIMIT = 0x110000
SWEEP_CHUNK = 0x1000


def _reference_escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("'", "&#39;")
        .replace('"', "&#34;")
    )


class TestEscapeText:
    """Test escape_text output."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Tom & Jerry", "Tom &amp; Jerry"),
            ('<b>"quote"</b>', "&lt;b&gt;&#34;quote&#34;&lt;/b&gt;"),
            ("O'Brien", "O&#39;Brien"),
            ("<>&'\"", "&lt;&gt;&amp;&#39;&#34;"),
            ("<start", "&lt;start"),
            ("end>", "end&gt;"),
            ("a<<b", "a&lt;&lt;b"),
            ("\U0001f600<é>", "\U0001f600&lt;é&gt;"),
            ("＜＞", "＜＞"),
        ],
    )
    def test_literal_scenarios(self, text: str, expected: str) -> None:
        """Test known inputs produce exact output."""
        assert escape_text(text) == expected

    def test_clean_input_returned_unchanged(self) -> None:
        """Test text without escapable characters is returned as is."""
        text = "hello world"
        assert escape_text(text) is text

    def test_empty_input(self) -> None:
        """Test the empty string."""
        text = ""
        assert escape_text(text) is text

    def test_result_is_plain_str(self) -> None:
        """Test escaping produces plain text, not a marked type."""
        assert type(escape_text("<")) is str

    def test_raw_reapplication_escapes_again(self) -> None:
        """Test escaping twice escapes the ampersands added the first time."""
        once = escape_text("Tom & Jerry")
        twice = escape_text(once)
        assert once == "Tom &amp; Jerry"
        assert twice == "Tom &amp;amp; Jerry"
        assert twice != once

    def test_reapplication_on_clean_text_is_stable(self) -> None:
        """Test clean text stays identical under repeated escaping."""
        text = "nothing to see"
        assert escape_text(escape_text(text)) == escape_text(text) == text

    @pytest.mark.parametrize(
        "text", ["", "plain", "a & b", "<<>>", "'\"", "x < y && y > z", "é<ü"]
    )
    def test_length_invariant(self, text: str) -> None:
        """Test output length equals input length plus summed deltas."""
        expected = len(text) + sum(HTML_ESCAPE_TABLE.delta(c) for c in text)
        assert len(escape_text(text)) == expected
        assert scan_text(text).output_length(len(text)) == expected

    def test_custom_table(self) -> None:
        """Test escaping with a caller-supplied table."""
        table = EscapeTable([EscapeEntry(char="*", replacement="\\*")])
        assert escape_text("a*b*c", table) == "a\\*b\\*c"
        assert escape_text("<a>", table) == "<a>"

    def test_full_codepoint_range(self) -> None:
        """Test every codepoint against a replace-chain reference."""
        for start in range(0, CODEPOINT_LIMIT, SWEEP_CHUNK):
            text = "".join(map(chr, range(start, start + SWEEP_CHUNK)))
            assert escape_text(text) == _reference_escape(text)

    def test_codepoints_above_table_interleaved_with_matches(self) -> None:
        """Test high codepoints interleaved with escapable characters."""
        text = "".join(chr(c) + "<" for c in range(0x10FF00, CODEPOINT_LIMIT))
        assert escape_text(text) == _reference_escape(text)


class TestScanText:
    """Test the scan pass."""

    def test_counts_matches_and_delta(self) -> None:
        """Test match count and total delta."""
        assert scan_text("<a href='x'>") == ScanResult(match_count=4, total_delta=14)

    def test_no_matches(self) -> None:
        """Test a clean text."""
        assert scan_text("clean") == ScanResult(0, 0)
        assert scan_text("") == ScanResult(0, 0)
