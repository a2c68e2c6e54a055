"""Rule generation: candidate -> ordered rules, memoized in the class cache."""

from __future__ import annotations

from typing import Iterable, Sequence

from breeze.engine.context import Context
from breeze.model.candidate import parse_candidate
from breeze.model.rule import Layer, Rule, RuleFragment, SortKey
from breeze.variants.base import VariantCategory
from breeze.variants.registry import RegisteredVariant
from breeze.variants.selector import class_selector


def generate_rules(candidates: Iterable[str], context: Context) -> list[Rule]:
    """Rules for every candidate, generating and caching the unseen ones.

    New candidates are resolved in sorted order so sequence numbers do not
    depend on discovery order. Newly generated rules are merged into the
    context's rule cache.
    """
    rules: list[Rule] = []
    for candidate in sorted(candidates):
        cached = context.class_cache.get(candidate)
        if cached is None:
            cached = resolve_candidate(candidate, context)
            context.class_cache[candidate] = cached
            for rule in cached:
                context.rule_cache[rule] = None
        rules.extend(cached)
    return rules


def resolve_candidate(candidate: str, context: Context) -> tuple[Rule, ...]:
    """Generate the rules for one candidate; empty when it names nothing."""
    config = context.config
    parsed = parse_candidate(candidate, config.separator, config.prefix)
    if parsed is None:
        return ()

    variants: list[RegisteredVariant] = []
    for name in parsed.variants:
        entry = context.variants.get(name)
        if entry is None:
            return ()
        variants.append(entry)

    responsive = any(v.variant.category is VariantCategory.SCREEN for v in variants)
    variant_rank = tuple(sorted((v.rank for v in variants), reverse=True))

    rules: list[Rule] = []
    for match in context.utilities.resolve(parsed):
        if not match.allows(parsed.variants):
            continue
        fragments = apply_variants(match.fragments, parsed.base, variants)
        if fragments is None:
            continue
        layer = Layer.VARIANTS if responsive else match.layer
        for fragment in fragments:
            sort = SortKey(layer, variant_rank, match.order, context.next_sequence())
            rules.append(Rule(sort=sort, fragment=fragment, layer=match.layer, candidate=candidate))
    return tuple(rules)


def apply_variants(
    fragments: Sequence[RuleFragment],
    base: str,
    variants: Sequence[RegisteredVariant],
) -> list[RuleFragment] | None:
    """Fill in the class selector and apply variants innermost first.

    Each variant rewrites only the class the previous one produced, starting
    from *base*. Returns None as soon as any variant finds nothing to target.
    """
    class_name = class_selector(base)
    result: list[RuleFragment] = []
    for fragment in fragments:
        current = fragment.with_selector(fragment.selector.replace("&", class_name))
        target = base
        for entry in reversed(variants):
            applied = entry.variant.apply(current, target)
            if applied is None:
                return None
            current = applied
            target = entry.variant.rename(target)
        result.append(current)
    return result
