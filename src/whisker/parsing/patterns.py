"""Patterns and character sets for tag scanning.

Fixed patterns are compiled once at module level. Patterns that embed a
delimiter, or match whitespace and word characters, live on TagPatterns,
which the parser rebuilds from scratch every time the delimiter pair
changes; no pattern outlives the pair it was built for.

Usage:
    from whisker.parsing.patterns import SIGIL, TagPatterns

    patterns = TagPatterns.build("{{", "}}")
    if cursor.match(patterns.close):
        ...
"""

import re
from dataclasses import dataclass

# Sigils that select a tag kind; "{" opens a triple mustache
SIGIL = re.compile(r"[#^/=!<>&{]")

# Sigils whose content may contain anything up to the close delimiter
ANY_CONTENT: frozenset[str] = frozenset("!=")

# Sigils eligible for standalone-line elision
STANDALONE_SIGILS: frozenset[str] = frozenset("#^/<>=!")

NEWLINE = re.compile(r"\r?\n")

# Arguments may be separated by whitespace and one optional comma
_SEP = r"\s*(?:,\s*)?"


def literal(thing: str) -> re.Pattern[str]:
    """Pattern matching ``thing`` literally."""
    return re.compile(re.escape(thing))


@dataclass(frozen=True, slots=True)
class TagPatterns:
    """Compiled patterns for one delimiter pair.

    Bytes input is scanned with ``ascii=True``: ``\\w`` and ``\\s`` then
    only match ASCII, so a pattern can never stop inside a multibyte
    character.

    Attributes:
        open: Optional horizontal whitespace (group 1) then the open delimiter
        close: The close delimiter
        text_stop: Where static text ends; the indentation before a
            delimiter that opens its line belongs to the tag
        comment_end: End of a comment body (``\\s*!?`` + close)
        delimiters_end: End of a delimiter-change body (``\\s*=?`` + close)
        content: Characters allowed in a tag name
        whitespace: Optional whitespace run
        separator: Whitespace separating the two halves of a delimiter change
        quoted: Quoted literal argument (group 1 or 2 holds the text)
        number: Numeral argument
        bare_token: Path argument; no whitespace, ``=`` or close characters
        hash_pair: One ``key=value`` argument; quoted values may hold spaces

    """

    otag: str
    ctag: str
    open: re.Pattern[str]
    close: re.Pattern[str]
    text_stop: re.Pattern[str]
    comment_end: re.Pattern[str]
    delimiters_end: re.Pattern[str]
    content: re.Pattern[str]
    whitespace: re.Pattern[str]
    separator: re.Pattern[str]
    quoted: re.Pattern[str]
    number: re.Pattern[str]
    bare_token: re.Pattern[str]
    hash_pair: re.Pattern[str]

    @classmethod
    def build(cls, otag: str, ctag: str, *, ascii: bool = False) -> "TagPatterns":
        flags = re.ASCII if ascii else 0
        o = re.escape(otag)
        c = re.escape(ctag)
        # Arguments end at whitespace, a comma or the close delimiter
        boundary = r"(?=\s|,|" + c + r")"
        excluded = re.escape("".join(sorted(set(ctag) | {"=", ","})))
        value = r"""("[^"]*"|'[^']*'|(?:(?!\s|,|""" + c + r").)+)"
        return cls(
            otag=otag,
            ctag=ctag,
            open=re.compile(r"([ \t]*)" + o),
            close=re.compile(c),
            text_stop=re.compile(r"(?:^[ \t]*)?" + o, re.MULTILINE),
            comment_end=re.compile(r"\s*!?" + c, flags),
            delimiters_end=re.compile(r"\s*=?" + c, flags),
            content=re.compile(r"[\w?!/.\-]*", flags),
            whitespace=re.compile(r"\s*", flags),
            separator=re.compile(r"\s+", flags),
            quoted=re.compile(_SEP + r"""(?:"([^"]*)"|'([^']*)')\s*""", flags),
            number=re.compile(_SEP + r"([\d.]+)" + boundary + r"\s*", flags),
            bare_token=re.compile(
                _SEP + r"([^\s" + excluded + r"]+)" + boundary + r"\s*", flags
            ),
            hash_pair=re.compile(_SEP + r"([^\s=,]+)=" + value + r"\s*", flags),
        )

    @property
    def delimiters(self) -> tuple[str, str]:
        return (self.otag, self.ctag)

    def content_end(self, sigil: str) -> re.Pattern[str]:
        """End pattern for an any-content tag body."""
        return self.comment_end if sigil == "!" else self.delimiters_end
