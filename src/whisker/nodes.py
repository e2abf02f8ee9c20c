"""Typed token tree nodes for Whisker.

All nodes are frozen dataclasses with slots for:
- Immutability: the tree is built once per compile and handed to the
  renderer wholesale; nothing mutates it afterwards
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Node Hierarchy:
Node (base)
├── Multi              ordered children; the root of every tree
├── Static             literal text run
├── Number             numeric literal argument
├── Fetch              dotted context path (always nested)
├── HashArgs           trailing key=value arguments
├── Interpolation      {{name}}, {{{name}}}, {{&name}}
├── Section            {{#name}}...{{/name}}
├── InvertedSection    {{^name}}...{{/name}}
└── Partial            {{>name}}

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all token tree nodes."""


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Multi(Node):
    """Ordered sequence of nodes in document order.

    The compile result is always exactly one Multi; section bodies are
    Multi nodes too.

    """

    children: tuple[Node, ...] = ()

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self):
        return iter(self.children)

    def __getitem__(self, index: int) -> Node:
        return self.children[index]


# =============================================================================
# Leaves
# =============================================================================


@dataclass(frozen=True, slots=True)
class Static(Node):
    """Literal text, emitted verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class Number(Node):
    """Numeric argument literal.

    Kept as the source text (``"10"``, ``"2.5"``); conversion belongs to
    the renderer.

    """

    literal: str


@dataclass(frozen=True, slots=True)
class Fetch(Node):
    """Dotted path resolved against the render context.

    ``{{user.name}}`` fetches ``("user", "name")``. The implicit iterator
    ``{{.}}`` fetches the empty path.

    """

    path: tuple[str, ...]

    @classmethod
    def from_content(cls, content: str) -> Fetch:
        """Split tag content on dots, dropping trailing empty segments."""
        segments = content.split(".")
        while segments and not segments[-1]:
            segments.pop()
        return cls(tuple(segments))

    @property
    def name(self) -> str:
        return ".".join(self.path) or "."


type HashValue = Static | Number | Fetch


@dataclass(frozen=True, slots=True)
class HashArgs(Node):
    """Keyword arguments of a call, in source order.

    Template: {{truncate name count=10 ellipsis="..."}}
    Pairs: (("count", Number("10")), ("ellipsis", Static("...")))

    """

    pairs: tuple[tuple[str, HashValue], ...] = ()

    def keys(self) -> tuple[str, ...]:
        return tuple(key for key, _ in self.pairs)


type Argument = Static | Number | Fetch | HashArgs


# =============================================================================
# Tags
# =============================================================================


@dataclass(frozen=True, slots=True)
class Interpolation(Node):
    """Variable interpolation, optionally a call with arguments.

    Template: {{name}} (escaped), {{{name}}} or {{&name}} (unescaped)
    Calls: {{truncate name 10}}, {{link "home" class="nav"}}

    """

    callee: Fetch
    args: tuple[Argument, ...] = ()
    escaped: bool = True


@dataclass(frozen=True, slots=True)
class Section(Node):
    """Block rendered for each truthy value of ``callee``.

    Attributes:
        callee: Path of the value controlling the block
        body: Compiled block content
        raw: Verbatim source between the opening and closing tags
        delimiters: Delimiter pair in effect when the section closed

    """

    callee: Fetch
    body: Multi
    raw: str
    delimiters: tuple[str, str] = ("{{", "}}")


@dataclass(frozen=True, slots=True)
class InvertedSection(Node):
    """Block rendered only when ``callee`` is falsy or empty.

    Fields mirror Section.

    """

    callee: Fetch
    body: Multi
    raw: str
    delimiters: tuple[str, str] = ("{{", "}}")


@dataclass(frozen=True, slots=True)
class Partial(Node):
    """Reference to another template.

    ``padding`` is the indentation captured before a standalone partial
    tag; the renderer prefixes each line of the expanded partial with it.

    """

    name: str
    padding: str = ""
