"""Section stack for nesting validation and output buffer switching.

Each open section owns the buffer its body is compiled into. Opening a
section pushes a frame and makes its buffer the active one; closing pops the
frame, freezes the body and places the finished node in the parent buffer.
The active buffer is always derived from the stack, never stored on its own.

Usage:
    stack = SectionStack(root)

    stack.push(SectionFrame(name="items", callee=fetch, inverted=False,
                            offset=pos, parent=stack.buffer))
    stack.buffer.append(Static("..."))   # lands in the section body

    frame = stack.pop()                  # back to the parent buffer
"""

from __future__ import annotations

from dataclasses import dataclass, field

from whisker.nodes import Fetch, InvertedSection, Multi, Node, Section


@dataclass(slots=True)
class SectionFrame:
    """An open section awaiting its closing tag.

    Attributes:
        name: Tag content of the opening tag; the closing tag must repeat it
        callee: Path fetched by the section
        inverted: Whether this is an inverted section (``^``)
        offset: Source offset used to report an unclosed section
        parent: Buffer the finished section node is appended to
        buffer: Body nodes compiled so far
        body_start: Offset right after the opening tag (and its elided
            newline, if standalone); None until the opening tag is finished

    """

    name: str
    callee: Fetch
    inverted: bool
    offset: int
    parent: list[Node]
    buffer: list[Node] = field(default_factory=list)
    body_start: int | None = None

    def close(self, raw: str, delimiters: tuple[str, str]) -> Section | InvertedSection:
        """Freeze the body into a section node."""
        node_cls = InvertedSection if self.inverted else Section
        return node_cls(
            callee=self.callee,
            body=Multi(tuple(self.buffer)),
            raw=raw,
            delimiters=delimiters,
        )


class SectionStack:
    """Stack of open sections over a root buffer."""

    __slots__ = ("_frames", "_root")

    def __init__(self, root: list[Node]) -> None:
        self._root = root
        self._frames: list[SectionFrame] = []

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    @property
    def buffer(self) -> list[Node]:
        """The buffer new nodes are appended to."""
        return self._frames[-1].buffer if self._frames else self._root

    def push(self, frame: SectionFrame) -> None:
        self._frames.append(frame)

    def pop(self) -> SectionFrame | None:
        """Remove and return the innermost frame, or None if none is open."""
        return self._frames.pop() if self._frames else None

    def peek(self) -> SectionFrame | None:
        return self._frames[-1] if self._frames else None
