"""Position-tracked cursor over template source.

The cursor never interprets text encodings: bytes input is handed to it as a
latin-1 string, one character per byte, so offsets are byte offsets.

Patterns are passed in per call. Anything derived from the delimiters is
rebuilt by the caller whenever the delimiter pair changes; ``re`` keeps its
own compile cache.

Thread Safety:
Cursor instances are single-use. Create one per source string.

"""

from __future__ import annotations

import re

type Pattern = re.Pattern[str] | str


def _compile(pattern: Pattern) -> re.Pattern[str]:
    return pattern if isinstance(pattern, re.Pattern) else re.compile(pattern)


class Cursor:
    """Mutable offset over an immutable source string.

    Usage:
            >>> cursor = Cursor("Hi {{thing}}!")
            >>> cursor.scan_until_exclusive(r"\\{\\{")
            'Hi '
            >>> cursor.pos
            3

    """

    __slots__ = ("_source", "_source_len", "pos")

    def __init__(self, source: str) -> None:
        self._source = source
        self._source_len = len(source)
        self.pos = 0

    @property
    def source(self) -> str:
        return self._source

    @property
    def eos(self) -> bool:
        """Whether the whole source has been consumed."""
        return self.pos >= self._source_len

    @property
    def at_line_start(self) -> bool:
        """Whether the cursor sits at offset 0 or right after a newline."""
        return self.pos == 0 or self._source[self.pos - 1] == "\n"

    def match(self, pattern: Pattern) -> re.Match[str] | None:
        """Match ``pattern`` anchored at the cursor, advancing on success."""
        m = _compile(pattern).match(self._source, self.pos)
        if m is not None:
            self.pos = m.end()
        return m

    def check(self, pattern: Pattern) -> re.Match[str] | None:
        """Match ``pattern`` anchored at the cursor without advancing."""
        return _compile(pattern).match(self._source, self.pos)

    def skip(self, pattern: Pattern) -> int:
        """Advance past an anchored match of ``pattern``.

        Returns:
            Number of characters consumed (0 when nothing matched)
        """
        start = self.pos
        return self.pos - start if self.match(pattern) else 0

    def scan_until_exclusive(self, pattern: Pattern) -> str | None:
        """Consume text up to, but not including, the next match of ``pattern``.

        The cursor moves to the start of the match. When ``pattern`` does not
        occur in the rest of the source, nothing is consumed and None is
        returned; the caller decides what the remainder means.
        """
        m = _compile(pattern).search(self._source, self.pos)
        if m is None:
            return None
        text = self._source[self.pos : m.start()]
        self.pos = m.start()
        return text

    def remaining(self) -> str:
        return self._source[self.pos :]

    def terminate(self) -> None:
        """Move the cursor to the end of the source."""
        self.pos = self._source_len
