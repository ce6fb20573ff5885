"""Escape tables mapping single characters to their replacements."""

from collections.abc import Iterable
from collections.abc import Iterator
from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class EscapeEntry(BaseModel):
    """A single character and the text that replaces it."""

    model_config = ConfigDict(frozen=True)

    char: str = Field(min_length=1, max_length=1)
    replacement: str

    @property
    def delta(self) -> int:
        """Length the replacement adds over the single original character."""
        return len(self.replacement) - 1


class EscapeTable:
    """Immutable lookup from characters to escape entries.

    Only characters below ``limit`` are ever looked up in the mapping, so a
    lookup is a single comparison for the vast majority of codepoints.
    """

    __slots__ = ("_entries", "limit")

    def __init__(self, entries: Iterable[EscapeEntry]) -> None:
        """Build the table.

        Args:
            entries: Escape entries, one per character

        Raises:
            ValueError: When two entries map the same character

        """
        by_char: dict[str, EscapeEntry] = {}
        for entry in entries:
            if entry.char in by_char:
                msg = f"Duplicate escape entry for {entry.char!r}"
                raise ValueError(msg)
            by_char[entry.char] = entry

        self._entries: Mapping[str, EscapeEntry] = MappingProxyType(by_char)
        self.limit: int = max((ord(c) for c in by_char), default=-1) + 1

    @property
    def entries(self) -> Mapping[str, EscapeEntry]:
        """Read-only view of the entries keyed by character."""
        return self._entries

    def lookup(self, char: str) -> EscapeEntry | None:
        """Return the entry for a character, or None if it is not escaped."""
        if ord(char) >= self.limit:
            return None
        return self._entries.get(char)

    def delta(self, char: str) -> int:
        """Return the length delta of a character, 0 when not escaped."""
        entry = self.lookup(char)
        return entry.delta if entry is not None else 0

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str) or len(char) != 1:
            return False
        return self.lookup(char) is not None

    def __iter__(self) -> Iterator[EscapeEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        chars = "".join(self._entries)
        return f"EscapeTable({chars!r})"


HTML_ESCAPE_TABLE = EscapeTable(
    [
        EscapeEntry(char='"', replacement="&#34;"),
        EscapeEntry(char="'", replacement="&#39;"),
        EscapeEntry(char="&", replacement="&amp;"),
        EscapeEntry(char="<", replacement="&lt;"),
        EscapeEntry(char=">", replacement="&gt;"),
    ]
)
