"""Lark-based parser turning stylesheet source into a document tree."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from breeze.document.nodes import AtRule, Comment, Declaration, Node, Root, SourceLocation, StyleRule
from breeze.errors import ParseError

__all__ = ["parse_css"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_AT_RULE_RE = re.compile(r"^@(?P<name>[\w-]+)\s*(?P<params>.*)$", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!\s*important$", re.IGNORECASE)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


class CssTransformer(Transformer):  # type: ignore[type-arg]
    """Transform the coarse parse tree into document nodes."""

    def __init__(self, input_name: str | None = None) -> None:
        super().__init__()
        self._input = input_name

    def _location(self, token: Token) -> SourceLocation:
        return SourceLocation(input=self._input, line=token.line)

    def _children(self, items: list[object]) -> list[Node]:
        children: list[Node] = []
        for item in items:
            if isinstance(item, Token) and item.type == "COMMENT":
                text = str(item)[2:-2].strip()
                children.append(Comment(text=text, source=self._location(item)))
            elif isinstance(item, Node):
                children.append(item)
        return children

    # ---- structural ----

    def block(self, items: list[object]) -> Node:
        prelude = items[0]
        assert isinstance(prelude, Token)
        text = str(prelude).strip()
        children = self._children(items[1:])
        match = _AT_RULE_RE.match(text)
        if match:
            return AtRule(
                name=match.group("name"),
                params=match.group("params").strip(),
                nodes=children,
                source=self._location(prelude),
            )
        return StyleRule(selector=text, nodes=children, source=self._location(prelude))

    def statement(self, items: list[Token]) -> Node:
        prelude = items[0]
        text = str(prelude).strip()
        match = _AT_RULE_RE.match(text)
        if match:
            return AtRule(
                name=match.group("name"),
                params=match.group("params").strip(),
                nodes=None,
                source=self._location(prelude),
            )
        if ":" not in text:
            raise ParseError(
                f"Expected a declaration, got {text!r}",
                line=prelude.line,
                column=prelude.column,
            )
        prop, value = text.split(":", 1)
        value = value.strip()
        important = bool(_IMPORTANT_RE.search(value))
        if important:
            value = _IMPORTANT_RE.sub("", value)
        return Declaration(
            prop=prop.strip(),
            value=value,
            important=important,
            source=self._location(prelude),
        )

    def start(self, items: list[object]) -> Root:
        return Root(nodes=self._children(items), source=SourceLocation(input=self._input, line=1))


def parse_css(source: str, input: str | None = None) -> Root:
    """Parse stylesheet source into a Root node.

    *input* names the source (usually a file path) and is recorded on every
    node's SourceLocation.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ParseError(str(e), line=line, column=column) from e
    try:
        return CssTransformer(input).transform(tree)
    except VisitError as e:
        if isinstance(e.orig_exc, ParseError):
            raise e.orig_exc from None
        raise
