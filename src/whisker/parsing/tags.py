"""Tag recognition and dispatch by sigil.

A tag is an optional run of horizontal whitespace, the open delimiter, an
optional sigil, the content, and the close delimiter. The sigil selects
what the tag does:

    {{name}}        escaped interpolation
    {{{name}}}      unescaped interpolation ({{&name}} too)
    {{#name}}       section
    {{^name}}       inverted section
    {{/name}}       closes the innermost section
    {{>name}}       partial ({{<name}} too)
    {{! text }}     comment
    {{=<% %>=}}     delimiter change
"""

from whisker.nodes import Fetch, Interpolation, Partial, Static
from whisker.parsing.patterns import ANY_CONTENT, SIGIL, literal
from whisker.parsing.protocols import ParserHost
from whisker.parsing.sections import SectionFrame


class TagScanningMixin:
    """Mixin recognizing one tag at the cursor.

    Required Host Attributes:
        - _source: str
        - _cursor: Cursor
        - _patterns: TagPatterns (the delimiter pair in effect)
        - _sections: SectionStack

    Required Host Methods:
        - _error(message, offset=None) -> NoReturn
        - _restore(text) -> str
        - _set_delimiters(otag, ctag)
        - _scan_arguments(patterns, balance) (ArgumentParsingMixin)
        - _finish_line(...) (StandaloneMixin)

    """

    def _scan_tag(self: ParserHost) -> bool:
        """Scan one tag at the cursor.

        Returns:
            False, consuming nothing, when no tag starts at the cursor

        Raises:
            TemplateSyntaxError: The tag is malformed or closes the wrong
                section
        """
        cursor = self._cursor
        sections = self._sections

        start_of_line = cursor.at_line_start
        buffer = sections.buffer
        insert_at = len(buffer)

        # The pair in effect now closes this tag, even if the tag itself
        # changes the delimiters
        current = self._patterns

        m = cursor.match(current.open)
        if m is None:
            return False
        padding = m.group(1)
        tag_start = m.end() - len(current.otag)

        # Whitespace before a tag in the middle of a line is plain content
        if not start_of_line:
            if padding:
                buffer.append(Static(self._restore(padding)))
            padding = ""

        sigil_match = cursor.match(SIGIL)
        sigil = sigil_match.group() if sigil_match is not None else None
        cursor.skip(current.whitespace)

        if sigil in ANY_CONTENT:
            content = cursor.scan_until_exclusive(current.content_end(sigil))
            if content is None:
                self._error("Unclosed tag")
        else:
            content = cursor.match(current.content).group()

        if not content:
            self._error("Illegal content in tag")

        name = self._restore(content)
        fetch = Fetch.from_content(name)
        escaped: bool | None = None
        balance = sigil

        match sigil:
            case "#" | "^":
                sections.push(
                    SectionFrame(
                        name=name,
                        callee=fetch,
                        inverted=sigil == "^",
                        offset=cursor.pos,
                        parent=buffer,
                    )
                )
            case "/":
                frame = sections.pop()
                if frame is None:
                    self._error(f'Closing unopened "{name}"')
                if frame.name != name:
                    self._error(f'Unclosed section "{frame.name}"', frame.offset)
                body_start = frame.body_start if frame.body_start is not None else tag_start
                raw = self._restore(self._source[body_start:tag_start])
                frame.parent.append(frame.close(raw, self.delimiters))
            case "!":
                pass
            case "=":
                delimiters = current.separator.split(content, 1)
                if len(delimiters) != 2 or current.separator.search(delimiters[1]):
                    self._error("Invalid delimiter change")
                self._set_delimiters(*delimiters)
            case ">" | "<":
                buffer.append(Partial(name=name, padding=padding))
            case "{" | "&":
                escaped = False
                balance = "}" if sigil == "{" else sigil
            case _:
                escaped = True

        cursor.skip(current.whitespace)

        if escaped is not None:
            args = self._scan_arguments(current, balance)
            buffer.append(Interpolation(callee=fetch, args=args, escaped=escaped))
        else:
            if sigil:
                cursor.skip(literal(sigil))
            if cursor.match(current.close) is None:
                self._error("Unclosed tag")

        self._finish_line(sigil, start_of_line, padding, buffer, insert_at)

        # The body of a just-opened section starts once its tag, and any
        # standalone newline after it, is consumed
        frame = sections.peek()
        if frame is not None and frame.body_start is None:
            frame.body_start = cursor.pos

        return True
