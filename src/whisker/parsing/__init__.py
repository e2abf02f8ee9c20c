"""Scanning subsystem for the Whisker parser.

Provides mixin classes for modular scanning functionality:
- `TagScanningMixin`: Recognizes one tag and dispatches on its sigil
- `ArgumentParsingMixin`: Call arguments inside interpolation tags
- `StandaloneMixin`: Whitespace elision around block tags on their own line

Architecture:
The parser uses a mixin-based design for separation of concerns. Each
mixin handles one aspect of the tag grammar; the Parser class owns all
per-compile state and composes them.

Example:
    >>> from whisker.parsing import (
    ...     ArgumentParsingMixin,
    ...     StandaloneMixin,
    ...     TagScanningMixin,
    ... )
    >>> class Parser(TagScanningMixin, ArgumentParsingMixin, StandaloneMixin):
    ...     pass

"""

from whisker.parsing.arguments import ArgumentParsingMixin
from whisker.parsing.protocols import ParserHost
from whisker.parsing.sections import SectionFrame, SectionStack
from whisker.parsing.standalone import StandaloneMixin
from whisker.parsing.tags import TagScanningMixin

__all__ = [
    "ArgumentParsingMixin",
    "ParserHost",
    "SectionFrame",
    "SectionStack",
    "StandaloneMixin",
    "TagScanningMixin",
]
