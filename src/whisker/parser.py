"""Scanner-driven parser producing the token tree.

The top-level loop alternates between recognizing a tag at the cursor and
consuming static text up to the next one, until the source is exhausted.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `TagScanningMixin`: Tag recognition and dispatch by sigil
- `ArgumentParsingMixin`: Call arguments inside interpolation tags
- `StandaloneMixin`: Standalone-line whitespace elision

Thread Safety:
- Parser instances hold all per-compile state (cursor, delimiters, section
  stack) and are single-use; create one per compile
- Configuration is read from ContextVar (thread-local) when the parser is
  created
- The resulting tree is immutable and safe to share across threads

"""

from __future__ import annotations

from dataclasses import replace
from typing import NoReturn

from whisker.config import get_parse_config
from whisker.cursor import Cursor
from whisker.errors import TemplateSyntaxError
from whisker.location import locate
from whisker.nodes import Multi, Node, Static
from whisker.parsing import (
    ArgumentParsingMixin,
    SectionStack,
    StandaloneMixin,
    TagScanningMixin,
)
from whisker.parsing.patterns import TagPatterns
from whisker.utils.logger import get_logger

logger = get_logger(__name__)

# Byte-transparent view of bytes input: one character per byte
_SCAN_ENCODING = "latin-1"


class Parser(
    TagScanningMixin,
    ArgumentParsingMixin,
    StandaloneMixin,
):
    """Parser for mustache templates.

    Usage:
            >>> parser = Parser("Hi {{thing}}!")
            >>> parser.parse()
        Multi(children=(Static(text='Hi '), Interpolation(callee=Fetch(path=('thing',)), ...), Static(text='!')))

    Bytes input is scanned byte by byte without decoding; static text and
    raw section text are restored to ``encoding`` (UTF-8 by default) when
    they are emitted.

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        compile. Delimiter changes made by a template only affect the parser
        instance that saw them.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_encoding",
        "_cursor",
        "_patterns",
        "_sections",
        "_root",
        "_max_argument_scans",
    )

    def __init__(
        self,
        source: str | bytes,
        source_file: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """Initialize parser with template source.

        Initial delimiters and the argument scan bound are read from the
        active ParseConfig. Use parse_config_context() before creating a
        Parser if you need non-default configuration.

        Args:
            source: Template source
            source_file: Optional template file path for error messages
            encoding: Encoding of bytes input (ignored for str input)

        """
        self._reinit(source, source_file, encoding)

    def _reinit(
        self,
        source: str | bytes,
        source_file: str | None = None,
        encoding: str | None = None,
    ) -> None:
        """Reinitialize parser for reuse.

        Resets all per-compile state. Delimiters revert to the active
        config, whatever the previous template changed them to.

        """
        if isinstance(source, bytes):
            self._encoding: str | None = encoding or "utf-8"
            source = source.decode(_SCAN_ENCODING)
        else:
            self._encoding = None

        config = get_parse_config()
        self._source = source
        self._source_file = source_file
        self._cursor = Cursor(source)
        self._patterns = TagPatterns.build(
            self._to_scan(config.open_delimiter),
            self._to_scan(config.close_delimiter),
            ascii=self._encoding is not None,
        )
        self._max_argument_scans = config.max_argument_scans
        self._root: list[Node] = []
        self._sections = SectionStack(self._root)

    @property
    def delimiters(self) -> tuple[str, str]:
        """The delimiter pair currently in effect."""
        return (self._restore(self._patterns.otag), self._restore(self._patterns.ctag))

    def parse(self) -> Multi:
        """Compile the whole source into a token tree.

        Returns:
            The root Multi node

        Raises:
            TemplateSyntaxError: The template is malformed; no partial tree
                is returned
        """
        cursor = self._cursor
        while not cursor.eos:
            if not self._scan_tag():
                self._scan_text()

        frame = self._sections.pop()
        if frame is not None:
            self._error(f'Unclosed section "{frame.name}"', frame.offset)

        return Multi(tuple(self._root))

    def _scan_text(self) -> None:
        """Consume static text up to the next tag, or to the end."""
        cursor = self._cursor
        text = cursor.scan_until_exclusive(self._patterns.text_stop)
        if text is None:
            text = cursor.remaining()
            cursor.terminate()
        if text:
            self._sections.buffer.append(Static(self._restore(text)))

    def _set_delimiters(self, otag: str, ctag: str) -> None:
        self._patterns = TagPatterns.build(otag, ctag, ascii=self._encoding is not None)
        logger.debug(
            "Delimiters changed to %r %r at offset %d",
            self._restore(otag),
            self._restore(ctag),
            self._cursor.pos,
        )

    # =========================================================================
    # Encoding boundary
    # =========================================================================

    def _to_scan(self, text: str) -> str:
        """Bring configured text into the scanned representation."""
        if self._encoding is None:
            return text
        return text.encode(self._encoding).decode(_SCAN_ENCODING)

    def _restore(self, text: str) -> str:
        """Bring scanned text back to the template's declared encoding.

        Raises:
            TemplateSyntaxError: The bytes are not valid in the declared
                encoding
        """
        if self._encoding is None:
            return text
        try:
            return text.encode(_SCAN_ENCODING).decode(self._encoding)
        except UnicodeDecodeError as e:
            self._error(f"Invalid {self._encoding} byte sequence: {e.reason}")

    # =========================================================================
    # Errors
    # =========================================================================

    def _error(self, message: str, offset: int | None = None) -> NoReturn:
        """Raise a TemplateSyntaxError located at ``offset``.

        The position is resolved here, only once something went wrong.

        Args:
            message: Error description
            offset: Source offset to report (default: the cursor)
        """
        position = locate(self._source, self._cursor.pos if offset is None else offset)
        if self._encoding is not None:
            line = position.line.encode(_SCAN_ENCODING).decode(self._encoding, errors="replace")
            position = replace(position, line=line)
        raise TemplateSyntaxError(message, position, self._source_file)
