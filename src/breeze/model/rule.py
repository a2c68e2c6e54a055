"""Rule model: Layer, SortKey, RuleFragment and Rule."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum
from typing import NamedTuple

from breeze.document.nodes import AtRule, Declaration, Node, SourceLocation, StyleRule


class Layer(IntEnum):
    """Output bucket, in emission order."""

    BASE = 0
    COMPONENTS = 1
    UTILITIES = 2
    VARIANTS = 3

    @property
    def marker(self) -> str:
        """Params of the ``@tailwind`` directive that marks this layer."""
        return self.name.lower()


class SortKey(NamedTuple):
    """Composite ordering value, compared field by field.

    ``variant_rank`` holds the rank of every applied variant, most
    significant first, so stacking more variants always sorts later than
    any of its prefixes.
    """

    layer: int
    variant_rank: tuple[tuple[int, int], ...]
    registration_order: int
    sequence: int


@dataclass(frozen=True)
class AtRuleSpec:
    """An at-rule wrapper such as ``@media (min-width: 768px)``."""

    name: str
    params: str


@dataclass(frozen=True)
class RuleFragment:
    """One generated style rule, optionally nested in at-rules.

    ``at_rules`` is ordered outermost first.
    """

    selector: str
    declarations: tuple[tuple[str, str], ...]
    at_rules: tuple[AtRuleSpec, ...] = ()

    @classmethod
    def create(
        cls,
        selector: str,
        declarations: dict[str, str],
        at_rules: tuple[AtRuleSpec, ...] = (),
    ) -> RuleFragment:
        return cls(selector=selector, declarations=tuple(declarations.items()), at_rules=at_rules)

    def with_selector(self, selector: str) -> RuleFragment:
        return replace(self, selector=selector)

    def wrapped_in(self, at_rule: AtRuleSpec) -> RuleFragment:
        """Return a copy nested inside *at_rule*, outside any existing wrappers."""
        return replace(self, at_rules=(at_rule, *self.at_rules))

    def to_node(self, source: SourceLocation | None = None) -> Node:
        """Build fresh, detached document nodes for this fragment."""
        node: Node = StyleRule(
            selector=self.selector,
            nodes=[Declaration(prop=p, value=v, source=source) for p, v in self.declarations],
            source=source,
        )
        for at_rule in reversed(self.at_rules):
            node = AtRule(name=at_rule.name, params=at_rule.params, nodes=[node], source=source)
        return node


@dataclass(frozen=True)
class Rule:
    """A generated fragment paired with the key that orders it."""

    sort: SortKey
    fragment: RuleFragment
    layer: Layer
    candidate: str

    @property
    def ordering(self) -> tuple[object, ...]:
        """Total output order.

        Rules of equal rank (two arbitrary values of one utility, say) fall
        back to the candidate text before the insertion sequence, so output
        order does not depend on when a candidate was first seen.
        """
        sort = self.sort
        return (sort.layer, sort.variant_rank, sort.registration_order, self.candidate, sort.sequence)
