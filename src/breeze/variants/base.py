"""Base protocol and categories for variants."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

from breeze.model.rule import RuleFragment


class VariantCategory(IntEnum):
    """Cross-category precedence, lowest first.

    When several variants stack on one candidate, the rule's rank is led by
    its highest category, so a breakpoint always outranks a dark-mode
    variant, which outranks a pseudo-class, whatever order they were
    registered or written in.
    """

    PSEUDO = 0
    GROUP = 1
    DIRECTION = 2
    MOTION = 3
    DARK = 4
    SCREEN = 5


class Variant(Protocol):
    """A named fragment-to-fragment transform.

    ``apply`` returns None when the variant has nothing to target in the
    fragment's selector; the candidate then contributes no rule. With a
    *target*, only that class is rewritten and ``rename(target)`` is the class
    the next variant in the chain targets.
    """

    name: str
    category: VariantCategory

    def rename(self, class_name: str) -> str: ...

    def apply(self, fragment: RuleFragment, target: str | None = None) -> RuleFragment | None: ...
