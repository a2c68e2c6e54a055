"""The three variant kinds: pseudo-class, ancestor-scoped and innermost-class.

Each kind renames classes to ``<name><separator><class>``. When ``apply`` is
given a *target* class name only occurrences of that class are rewritten, so
stacked variants never rename an ancestor an inner variant already added.
"""

from __future__ import annotations

from dataclasses import dataclass

from breeze.model.rule import AtRuleSpec, RuleFragment
from breeze.variants.base import VariantCategory
from breeze.variants.selector import prepend_ancestor, rewrite_classes


@dataclass(frozen=True)
class PseudoClassRewrite:
    """Rename every class and attach a pseudo-class to it.

    ``hover`` turns ``.flex`` into ``.hover\\:flex:hover``.
    """

    name: str
    pseudo: str
    separator: str = ":"
    category: VariantCategory = VariantCategory.PSEUDO

    def rename(self, class_name: str) -> str:
        return f"{self.name}{self.separator}{class_name}"

    def apply(self, fragment: RuleFragment, target: str | None = None) -> RuleFragment | None:
        selector = rewrite_classes(fragment.selector, self.rename, pseudo=self.pseudo, target=target)
        if selector is None:
            return None
        return fragment.with_selector(selector)


@dataclass(frozen=True)
class AllSelectorsRewrite:
    """Rename every class and scope the selector under an ancestor.

    Used for ``group-*``, ``ltr``/``rtl`` and class-based dark mode, e.g.
    ``.flex`` -> ``.group:hover .group-hover\\:flex``.
    """

    name: str
    ancestor: str
    separator: str = ":"
    category: VariantCategory = VariantCategory.GROUP

    def rename(self, class_name: str) -> str:
        return f"{self.name}{self.separator}{class_name}"

    def apply(self, fragment: RuleFragment, target: str | None = None) -> RuleFragment | None:
        selector = rewrite_classes(fragment.selector, self.rename, target=target)
        if selector is None:
            return None
        return fragment.with_selector(prepend_ancestor(selector, self.ancestor))


@dataclass(frozen=True)
class InnermostClassRewrite:
    """Rename only the trailing class and wrap the rule in an at-rule.

    Used for breakpoints, reduced motion and media-based dark mode.
    """

    name: str
    at_rule: AtRuleSpec
    separator: str = ":"
    category: VariantCategory = VariantCategory.SCREEN

    def rename(self, class_name: str) -> str:
        return f"{self.name}{self.separator}{class_name}"

    def apply(self, fragment: RuleFragment, target: str | None = None) -> RuleFragment | None:
        selector = rewrite_classes(fragment.selector, self.rename, last_only=True, target=target)
        if selector is None:
            return None
        return fragment.with_selector(selector).wrapped_in(self.at_rule)
