"""Argument parsing for interpolation tags.

After the callee name an interpolation tag may carry call arguments:

    {{truncate name}}
    {{truncate name 10 "..."}}
    {{truncate 'some text', 10}}
    {{truncate name count=10 ellipsis="..."}}

Positional arguments come first; keyword arguments, once started, collect
into one trailing HashArgs.
"""

from whisker.nodes import Argument, Fetch, HashArgs, HashValue, Number, Static
from whisker.parsing.patterns import TagPatterns, literal
from whisker.parsing.protocols import ParserHost

_NUMBER_TAIL: frozenset[str] = frozenset("0123456789.")


class ArgumentParsingMixin:
    """Mixin scanning call arguments up to the close delimiter.

    Required Host Attributes:
        - _cursor: Cursor
        - _max_argument_scans: int

    Required Host Methods:
        - _error(message, offset=None) -> NoReturn
        - _restore(text) -> str

    """

    def _scan_arguments(
        self: ParserHost,
        patterns: TagPatterns,
        balance: str | None,
    ) -> tuple[Argument, ...]:
        """Scan arguments until the close delimiter of ``patterns``.

        Every attempt either closes the tag, consumes one argument, or
        fails; the number of attempts is bounded so malformed input can
        never keep the scan going.

        Args:
            patterns: Patterns of the delimiter pair that closes this tag
            balance: Balancing sigil skipped before the close (``}`` for
                triple mustaches)

        Returns:
            Arguments in source order

        Raises:
            TemplateSyntaxError: The close delimiter was not reached
        """
        cursor = self._cursor
        balance_pattern = literal(balance) if balance else None
        args: list[Argument] = []
        pairs: list[tuple[str, HashValue]] | None = None

        for _ in range(self._max_argument_scans):
            if balance_pattern is not None:
                cursor.skip(balance_pattern)

            if cursor.match(patterns.close):
                if pairs is not None:
                    args.append(HashArgs(tuple(pairs)))
                return tuple(args)

            if (m := cursor.match(patterns.quoted)) is not None:
                quoted = m.group(1) if m.group(1) is not None else m.group(2)
                arg: Argument = Static(self._restore(quoted))
            elif (m := cursor.match(patterns.number)) is not None:
                arg = Number(m.group(1))
            elif (m := cursor.match(patterns.bare_token)) is not None:
                arg = Fetch.from_content(self._restore(m.group(1)))
            elif (m := cursor.match(patterns.hash_pair)) is not None:
                if pairs is None:
                    pairs = []
                pairs.append((self._restore(m.group(1)), self._hash_value(m.group(2))))
                continue
            else:
                self._error("Unclosed tag")

            if pairs is not None:
                self._error("Positional argument after keyword arguments")
            args.append(arg)

        self._error("Unclosed tag")

    def _hash_value(self: ParserHost, value: str) -> HashValue:
        """Classify the value of a ``key=value`` argument.

        Quoted values are static text, values ending in a digit or a dot are
        numbers, anything else is a path.
        """
        value = self._restore(value)
        if len(value) >= 2 and value[0] in "\"'" and value[-1] == value[0]:
            return Static(value[1:-1])
        if value[-1] in _NUMBER_TAIL:
            return Number(value)
        return Fetch.from_content(value)
