"""Mutable stylesheet tree: Root, AtRule, StyleRule, Declaration, Comment.

Every node knows its parent. Attaching a node that already belongs to a
tree detaches it from the old parent first, so a node is never reachable
from two places at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator

INDENT = "  "


@dataclass(frozen=True)
class SourceLocation:
    """Where a node came from: input name and 1-based line."""

    input: str | None = None
    line: int | None = None


@dataclass(eq=False)
class Node:
    """Base class for every tree node."""

    source: SourceLocation | None = field(default=None, kw_only=True)
    parent: Container | None = field(default=None, kw_only=True, repr=False)

    def remove(self) -> None:
        """Detach this node from its parent. No-op when already detached."""
        if self.parent is not None:
            self.parent.remove_child(self)

    def clone(self, source: SourceLocation | None = None) -> Node:
        """Return a detached copy, optionally re-pointing every source location."""
        raise NotImplementedError

    def to_css(self, depth: int = 0) -> str:
        raise NotImplementedError

    def _source_for(self, source: SourceLocation | None) -> SourceLocation | None:
        return source if source is not None else self.source


@dataclass(eq=False)
class Declaration(Node):
    """A single ``prop: value`` pair."""

    prop: str = ""
    value: str = ""
    important: bool = False

    def clone(self, source: SourceLocation | None = None) -> Declaration:
        return Declaration(
            prop=self.prop,
            value=self.value,
            important=self.important,
            source=self._source_for(source),
        )

    def to_css(self, depth: int = 0) -> str:
        important = " !important" if self.important else ""
        return f"{INDENT * depth}{self.prop}: {self.value}{important};"


@dataclass(eq=False)
class Comment(Node):
    """A ``/* ... */`` comment."""

    text: str = ""

    def clone(self, source: SourceLocation | None = None) -> Comment:
        return Comment(text=self.text, source=self._source_for(source))

    def to_css(self, depth: int = 0) -> str:
        return f"{INDENT * depth}/* {self.text} */"


@dataclass(eq=False)
class Container(Node):
    """A node holding an ordered list of children."""

    nodes: list[Node] | None = field(default_factory=list)

    def __post_init__(self) -> None:
        children = list(self.nodes) if self.nodes is not None else None
        if children is not None:
            self.nodes = []
            self.append(*children)

    # --- navigation -----------------------------------------------------------

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self.nodes or []))

    def __len__(self) -> int:
        return len(self.nodes or [])

    def index(self, child: Node) -> int:
        for i, node in enumerate(self.nodes or []):
            if node is child:
                return i
        raise ValueError("node is not a child of this container")

    def walk(self) -> Iterator[Node]:
        """Depth-first traversal of every descendant."""
        for node in self:
            yield node
            if isinstance(node, Container):
                yield from node.walk()

    def walk_at_rules(self, name: str) -> Iterator[AtRule]:
        """Yield every descendant at-rule with the given name."""
        for node in self.walk():
            if isinstance(node, AtRule) and node.name == name:
                yield node

    # --- mutation -------------------------------------------------------------

    def append(self, *nodes: Node) -> None:
        """Attach nodes at the end of this container."""
        if self.nodes is None:
            self.nodes = []
        for node in nodes:
            self._adopt(node)
            self.nodes.append(node)

    def insert_before(self, existing: Node, nodes: Iterable[Node]) -> None:
        """Attach nodes immediately before *existing*, preserving their order."""
        for node in nodes:
            self._adopt(node)
            assert self.nodes is not None
            self.nodes.insert(self.index(existing), node)

    def remove_child(self, child: Node) -> None:
        assert self.nodes is not None
        del self.nodes[self.index(child)]
        child.parent = None

    def _adopt(self, node: Node) -> None:
        if node.parent is not None:
            node.remove()
        node.parent = self

    def _clone_children(self, source: SourceLocation | None) -> list[Node] | None:
        if self.nodes is None:
            return None
        return [child.clone(source) for child in self.nodes]

    def _children_css(self, depth: int) -> str:
        return "\n".join(child.to_css(depth) for child in self.nodes or [])


@dataclass(eq=False)
class StyleRule(Container):
    """``selector { declarations }``."""

    selector: str = ""

    def clone(self, source: SourceLocation | None = None) -> StyleRule:
        return StyleRule(
            selector=self.selector,
            nodes=self._clone_children(source),
            source=self._source_for(source),
        )

    def to_css(self, depth: int = 0) -> str:
        pad = INDENT * depth
        if not self.nodes:
            return f"{pad}{self.selector} {{\n{pad}}}"
        return f"{pad}{self.selector} {{\n{self._children_css(depth + 1)}\n{pad}}}"


@dataclass(eq=False)
class AtRule(Container):
    """``@name params;`` or ``@name params { ... }``.

    ``nodes`` is ``None`` for the statement form (no block).
    """

    name: str = ""
    params: str = ""

    def clone(self, source: SourceLocation | None = None) -> AtRule:
        return AtRule(
            name=self.name,
            params=self.params,
            nodes=self._clone_children(source),
            source=self._source_for(source),
        )

    def to_css(self, depth: int = 0) -> str:
        pad = INDENT * depth
        head = f"{pad}@{self.name} {self.params}" if self.params else f"{pad}@{self.name}"
        if self.nodes is None:
            return f"{head};"
        if not self.nodes:
            return f"{head} {{\n{pad}}}"
        return f"{head} {{\n{self._children_css(depth + 1)}\n{pad}}}"


@dataclass(eq=False)
class Root(Container):
    """Top of a parsed stylesheet."""

    def clone(self, source: SourceLocation | None = None) -> Root:
        return Root(nodes=self._clone_children(source), source=self._source_for(source))

    def to_css(self, depth: int = 0) -> str:
        body = self._children_css(depth)
        return f"{body}\n" if body else ""
