"""breeze model layer -- public type re-exports."""

from breeze.model.candidate import WILDCARD, ParsedCandidate, parse_candidate
from breeze.model.rule import AtRuleSpec, Layer, Rule, RuleFragment, SortKey

__all__ = [
    # candidate
    "WILDCARD",
    "ParsedCandidate",
    "parse_candidate",
    # rule
    "AtRuleSpec",
    "Layer",
    "Rule",
    "RuleFragment",
    "SortKey",
]
