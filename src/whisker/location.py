"""Source position tracking for error messages.

Positions are resolved lazily: the parser only carries absolute offsets and
calls locate() when it is about to raise, so the success path never counts
lines.

Thread Safety:
SourcePosition is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourcePosition:
    """Resolved position of an offset in template source.

    Attributes:
        lineno: Line number (1-indexed)
        column: Column of the last consumed character on the line (0-indexed)
        line: The full source line, without its newline
        offset: Absolute offset in the source buffer

    Examples:
            >>> locate("Hi\\n{{#a}}", 7)
        SourcePosition(lineno=2, column=3, line='{{#a}}', offset=7)

    """

    lineno: int
    column: int
    line: str
    offset: int = 0

    def __str__(self) -> str:
        return f"{self.lineno}:{self.column}"


def locate(source: str, offset: int) -> SourcePosition:
    """Resolve an absolute offset into line, column and source line.

    The column points at the last character consumed before ``offset`` on
    its line, so a caret rendered under it marks the end of what the parser
    already read.

    Args:
        source: Template source
        offset: Absolute offset (clamped to the source bounds)

    Returns:
        SourcePosition for the offset
    """
    offset = max(0, min(offset, len(source)))
    lineno = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    line_end = source.find("\n", offset)
    if line_end == -1:
        line_end = len(source)
    line = source[line_start:line_end]
    if line.endswith("\r"):
        line = line[:-1]
    column = max(offset - line_start - 1, 0)
    return SourcePosition(lineno=lineno, column=column, line=line, offset=offset)
