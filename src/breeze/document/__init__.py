from breeze.document.nodes import (
    AtRule,
    Comment,
    Container,
    Declaration,
    Node,
    Root,
    SourceLocation,
    StyleRule,
)
from breeze.document.parser import parse_css

__all__ = [
    "parse_css",
    "AtRule",
    "Comment",
    "Container",
    "Declaration",
    "Node",
    "Root",
    "SourceLocation",
    "StyleRule",
]
