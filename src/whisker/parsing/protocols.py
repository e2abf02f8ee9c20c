"""Protocols defining the parser mixin contracts.

Each mixin documents its "Required Host Attributes/Methods"; this module
turns those requirements into type-checkable Protocol classes.

Usage:
    Mixin methods that call across mixin boundaries can annotate `self`
    as the protocol they require::

        def _scan_arguments(self: ParserHost, ...) -> tuple[Argument, ...]:
            cursor = self._cursor  # type-checked via ParserHost
            ...

Thread Safety:
    Protocols are purely structural and add no runtime overhead.
"""

from typing import NoReturn, Protocol, runtime_checkable

from whisker.cursor import Cursor
from whisker.nodes import HashValue, Node
from whisker.parsing.patterns import TagPatterns
from whisker.parsing.sections import SectionStack


@runtime_checkable
class ParserHost(Protocol):
    """Contract every scanning mixin relies on.

    Provided by: Parser
    Required by: TagScanningMixin, ArgumentParsingMixin, StandaloneMixin
    """

    _source: str
    _cursor: Cursor
    _patterns: TagPatterns
    _sections: SectionStack
    _root: list[Node]
    _max_argument_scans: int

    @property
    def delimiters(self) -> tuple[str, str]: ...

    def _error(self, message: str, offset: int | None = None) -> NoReturn: ...
    def _restore(self, text: str) -> str: ...
    def _set_delimiters(self, otag: str, ctag: str) -> None: ...
    def _hash_value(self, value: str) -> HashValue: ...
