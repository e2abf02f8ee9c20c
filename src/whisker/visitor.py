"""Token tree Visitor and Transformer for Whisker.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen trees.

Example, collecting every path a template reads:

    class PathCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.paths: list[tuple[str, ...]] = []

        def visit_fetch(self, node: Fetch) -> None:
            self.paths.append(node.path)

    collector = PathCollector()
    collector.visit(tree)

Example, dropping every partial:

    def drop_partials(node: Node) -> Node | None:
        return None if isinstance(node, Partial) else node

    new_tree = transform(tree, drop_partials)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from whisker.nodes import (
    Fetch,
    HashArgs,
    Interpolation,
    InvertedSection,
    Multi,
    Node,
    Number,
    Partial,
    Section,
    Static,
)


class BaseVisitor[T]:
    """Base tree visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call: Multi children,
    the callee and arguments of an Interpolation, the values of HashArgs,
    and the callee and body of sections.

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method, then walk children."""
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method."""
        return None  # type: ignore[return-value]

    def visit_multi(self, node: Multi) -> T:
        return self.visit_default(node)

    def visit_static(self, node: Static) -> T:
        return self.visit_default(node)

    def visit_number(self, node: Number) -> T:
        return self.visit_default(node)

    def visit_fetch(self, node: Fetch) -> T:
        return self.visit_default(node)

    def visit_hash_args(self, node: HashArgs) -> T:
        return self.visit_default(node)

    def visit_interpolation(self, node: Interpolation) -> T:
        return self.visit_default(node)

    def visit_section(self, node: Section) -> T:
        return self.visit_default(node)

    def visit_inverted_section(self, node: InvertedSection) -> T:
        return self.visit_default(node)

    def visit_partial(self, node: Partial) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        match node:
            case Multi():
                return self.visit_multi(node)
            case Static():
                return self.visit_static(node)
            case Number():
                return self.visit_number(node)
            case Fetch():
                return self.visit_fetch(node)
            case HashArgs():
                return self.visit_hash_args(node)
            case Interpolation():
                return self.visit_interpolation(node)
            case Section():
                return self.visit_section(node)
            case InvertedSection():
                return self.visit_inverted_section(node)
            case Partial():
                return self.visit_partial(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        match node:
            case Multi(children=children):
                for child in children:
                    self.visit(child)
            case Interpolation(callee=callee, args=args):
                self.visit(callee)
                for arg in args:
                    self.visit(arg)
            case HashArgs(pairs=pairs):
                for _, value in pairs:
                    self.visit(value)
            case Section(callee=callee, body=body) | InvertedSection(callee=callee, body=body):
                self.visit(callee)
                self.visit(body)
            case _:
                pass  # Leaf nodes: no children


def transform(root: Multi, fn: Callable[[Node], Node | None]) -> Multi:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up on the nodes of Multi
    containers (top-level content and section bodies): children are
    transformed first, then the parent with its new children. Callees and
    arguments are left to ``fn`` itself.

    Return ``None`` from ``fn`` to remove a node from its container. The
    root cannot be removed; returning None for it raises TypeError.

    Args:
        root: The tree to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Multi with the transformation applied.

    """
    result = _transform_node(root, fn)
    if result is None or not isinstance(result, Multi):
        msg = "transform fn must return a Multi for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    return fn(_transform_children(node, fn))


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    match node:
        case Multi(children=children):
            new_children = tuple(
                result for child in children
                if (result := _transform_node(child, fn)) is not None
            )
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Section(body=body) | InvertedSection(body=body):
            new_body = _transform_children(body, fn)
            if new_body != body:
                return dataclasses.replace(node, body=new_body)
        case _:
            pass  # Leaf nodes: return as-is

    return node
