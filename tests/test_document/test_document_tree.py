"""Tests for the stylesheet parser and document tree."""

from pathlib import Path

import pytest

from breeze.document import (
    AtRule,
    Comment,
    Declaration,
    Root,
    SourceLocation,
    StyleRule,
    parse_css,
)
from breeze.errors import ParseError

FIXTURES = Path(__file__).parent.parent / "fixtures"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _rule(selector: str, **declarations: str) -> StyleRule:
    return StyleRule(
        selector=selector,
        nodes=[Declaration(prop=p.replace("_", "-"), value=v) for p, v in declarations.items()],
    )


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParseCss:
    def test_style_rule(self) -> None:
        root = parse_css("a { color: red; }")
        (rule,) = root.nodes or []
        assert isinstance(rule, StyleRule)
        assert rule.selector == "a"
        (decl,) = rule.nodes or []
        assert isinstance(decl, Declaration)
        assert (decl.prop, decl.value, decl.important) == ("color", "red", False)

    def test_last_declaration_without_semicolon(self) -> None:
        root = parse_css(".a { color: red; margin: 0 }")
        rule = root.nodes[0]  # type: ignore[index]
        assert [d.prop for d in rule] == ["color", "margin"]  # type: ignore[attr-defined]

    def test_important(self) -> None:
        root = parse_css("a { color: red !important; }")
        decl = next(iter(root.nodes[0]))  # type: ignore[index,arg-type]
        assert decl.important is True
        assert decl.value == "red"

    def test_statement_at_rule(self) -> None:
        root = parse_css("@tailwind base;")
        (at_rule,) = root.nodes or []
        assert isinstance(at_rule, AtRule)
        assert at_rule.name == "tailwind"
        assert at_rule.params == "base"
        assert at_rule.nodes is None

    def test_block_at_rule(self) -> None:
        root = parse_css("@media (min-width: 1px) { .a { color: red } }")
        (media,) = root.nodes or []
        assert isinstance(media, AtRule)
        assert media.params == "(min-width: 1px)"
        (inner,) = media.nodes or []
        assert isinstance(inner, StyleRule)
        assert inner.parent is media

    def test_comment(self) -> None:
        root = parse_css("/* hello */\na { color: red; }")
        assert isinstance(root.nodes[0], Comment)  # type: ignore[index]
        assert root.nodes[0].text == "hello"  # type: ignore[index,union-attr]

    def test_source_location(self) -> None:
        root = parse_css("a {\n  color: red;\n}", input="app.css")
        rule = root.nodes[0]  # type: ignore[index]
        decl = rule.nodes[0]  # type: ignore[union-attr]
        assert rule.source == SourceLocation(input="app.css", line=1)
        assert decl.source == SourceLocation(input="app.css", line=2)

    def test_fixture(self) -> None:
        root = parse_css((FIXTURES / "input.css").read_text())
        markers = [n.params for n in root.walk_at_rules("tailwind")]
        assert markers == ["base", "components", "utilities", "variants"]

    def test_data_uri_value(self) -> None:
        root = parse_css('.a { background: url("data:image/png;base64,AAAA"); color: red }')
        rule = root.nodes[0]  # type: ignore[index]
        assert [(d.prop, d.value) for d in rule] == [  # type: ignore[attr-defined]
            ("background", 'url("data:image/png;base64,AAAA")'),
            ("color", "red"),
        ]

    def test_unquoted_url_with_semicolon(self) -> None:
        root = parse_css(".a { background: url(data:image/svg+xml;utf8,x); }")
        decl = next(iter(root.nodes[0]))  # type: ignore[index,arg-type]
        assert decl.value == "url(data:image/svg+xml;utf8,x)"

    @pytest.mark.parametrize("content", ['";"', '"}"', "'{'", '"a\\"b;"'])
    def test_quoted_punctuation_in_value(self, content: str) -> None:
        root = parse_css(f".a::before {{ content: {content}; }}")
        rule = root.nodes[0]  # type: ignore[index]
        assert rule.selector == ".a::before"  # type: ignore[union-attr]
        (decl,) = rule.nodes or []  # type: ignore[union-attr]
        assert decl.value == content

    def test_quoted_semicolon_in_at_rule_params(self) -> None:
        root = parse_css('@import url("a;b.css");\na { color: red }')
        at_rule = root.nodes[0]  # type: ignore[index]
        assert isinstance(at_rule, AtRule)
        assert at_rule.params == 'url("a;b.css")'
        assert isinstance(root.nodes[1], StyleRule)  # type: ignore[index]

    def test_nested_parens_in_value(self) -> None:
        root = parse_css(".a { width: calc(100% - (2 * 1rem)); }")
        decl = next(iter(root.nodes[0]))  # type: ignore[index,arg-type]
        assert decl.value == "calc(100% - (2 * 1rem))"

    def test_missing_colon_raises(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_css("a {\n  color\n}")
        assert exc_info.value.line == 2

    def test_unbalanced_braces_raise(self) -> None:
        with pytest.raises(ParseError):
            parse_css("a { color: red;")

    def test_empty_source(self) -> None:
        root = parse_css("")
        assert len(root) == 0
        assert root.to_css() == ""


# ---------------------------------------------------------------------------
# Tree operations
# ---------------------------------------------------------------------------


class TestTreeOperations:
    def test_append_sets_parent(self) -> None:
        root = Root()
        rule = _rule(".a", color="red")
        root.append(rule)
        assert rule.parent is root
        assert root.index(rule) == 0

    def test_append_moves_node_between_parents(self) -> None:
        first, second = Root(), Root()
        rule = _rule(".a", color="red")
        first.append(rule)
        second.append(rule)
        assert len(first) == 0
        assert rule.parent is second

    def test_insert_before_keeps_order(self) -> None:
        root = parse_css("@tailwind utilities;")
        marker = root.nodes[0]  # type: ignore[index]
        root.insert_before(marker, [_rule(".a", color="red"), _rule(".b", color="blue")])
        assert [getattr(n, "selector", None) for n in root] == [".a", ".b", None]

    def test_remove(self) -> None:
        root = parse_css("a { color: red; } b { color: blue; }")
        first = root.nodes[0]  # type: ignore[index]
        first.remove()
        assert first.parent is None
        assert [n.selector for n in root] == ["b"]  # type: ignore[attr-defined]
        first.remove()

    def test_walk_is_depth_first(self) -> None:
        root = parse_css("@media print { a { color: red; } } b { margin: 0; }")
        kinds = [type(n).__name__ for n in root.walk()]
        assert kinds == ["AtRule", "StyleRule", "Declaration", "StyleRule", "Declaration"]

    def test_clone_repoints_source(self) -> None:
        rule = parse_css("a { color: red; }", input="a.css").nodes[0]  # type: ignore[index]
        location = SourceLocation(input="generated", line=9)
        copy = rule.clone(location)
        assert copy is not rule
        assert copy.parent is None
        assert copy.source == location
        assert all(child.source == location for child in copy)  # type: ignore[attr-defined]
        assert all(child.parent is copy for child in copy)  # type: ignore[attr-defined]

    def test_clone_keeps_statement_form(self) -> None:
        at_rule = AtRule(name="import", params='"x.css"', nodes=None)
        assert at_rule.clone().nodes is None


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------


class TestToCss:
    def test_rule(self) -> None:
        root = Root(nodes=[_rule(".a", color="red", margin_top="0")])
        assert root.to_css() == ".a {\n  color: red;\n  margin-top: 0;\n}\n"

    def test_nested_at_rule(self) -> None:
        media = AtRule(name="media", params="(min-width: 768px)", nodes=[_rule(".b", color="red")])
        assert media.to_css() == "@media (min-width: 768px) {\n  .b {\n    color: red;\n  }\n}"

    def test_statement_at_rule(self) -> None:
        assert AtRule(name="tailwind", params="base").to_css() == "@tailwind base;"

    def test_important_and_comment(self) -> None:
        decl = Declaration(prop="color", value="red", important=True)
        assert decl.to_css() == "color: red !important;"
        assert Comment(text="note").to_css() == "/* note */"
