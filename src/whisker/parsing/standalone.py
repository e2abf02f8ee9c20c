"""Standalone-line handling.

A block tag that is the only thing on its line leaves no trace in the
output: the indentation before it and the newline after it are dropped.
Any other tag that opened its line gets its indentation back as static
text.
"""

from whisker.nodes import Node, Static
from whisker.parsing.patterns import NEWLINE, STANDALONE_SIGILS
from whisker.parsing.protocols import ParserHost


class StandaloneMixin:
    """Mixin deciding whitespace elision around a finished tag.

    Required Host Attributes:
        - _cursor: Cursor

    Required Host Methods:
        - _restore(text) -> str

    """

    def _finish_line(
        self: ParserHost,
        sigil: str | None,
        start_of_line: bool,
        padding: str,
        buffer: list[Node],
        insert_at: int,
    ) -> None:
        """Elide a standalone line or give withheld padding back.

        Args:
            sigil: Sigil of the tag just closed (None for a bare name)
            start_of_line: Whether the tag's padding started its line
            padding: Indentation withheld before the tag
            buffer: Buffer that was active when the tag began
            insert_at: Index in ``buffer`` the padding belongs at
        """
        if not start_of_line:
            return

        cursor = self._cursor
        if sigil in STANDALONE_SIGILS and (cursor.eos or cursor.skip(NEWLINE)):
            return

        # Padding is given back at end of input too; only block tags drop it
        if padding:
            buffer.insert(insert_at, Static(self._restore(padding)))
