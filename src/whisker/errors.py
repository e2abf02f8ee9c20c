"""Exception classes for Whisker.

Every compile failure surfaces as a single error kind, TemplateSyntaxError,
carrying the line, column and source line of the offending tag.
"""

from __future__ import annotations

from whisker.location import SourcePosition


class WhiskerError(Exception):
    """Base exception for all Whisker errors.

    Subclass this for specific error categories.
    """

    pass


class TemplateSyntaxError(WhiskerError):
    """Error during template compilation.

    Raised when the parser comes across unclosed tags or sections, illegal
    content in tags, or anything of that sort. The compile call that raised
    it produces no tree at all.

    The string form points at the failure with a caret under the source
    line, leading indentation stripped:

        Unclosed section "a"
          Line 1
            {{#a}}text
               ^

    """

    def __init__(
        self,
        message: str,
        position: SourcePosition,
        source_file: str | None = None,
    ) -> None:
        """Initialize syntax error from a resolved position.

        Args:
            message: Error description
            position: Where the error occurred
            source_file: Template file path (optional)
        """
        self.message = message
        self.position = position
        self.lineno = position.lineno
        self.column = position.column
        self.line = position.line
        self.source_file = source_file

        self.stripped_line = self.line.strip()
        indent = len(self.line) - len(self.line.lstrip())
        self.stripped_column = max(self.column - indent, 0)

        super().__init__(self._format())

    def _format(self) -> str:
        header = self.message
        if self.source_file:
            header = f"{self.source_file}: {header}"
        return (
            f"{header}\n"
            f"  Line {self.lineno}\n"
            f"    {self.stripped_line}\n"
            f"    {' ' * self.stripped_column}^\n"
        )
