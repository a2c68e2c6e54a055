"""Stylesheet assembly: sort, partition into layers, splice into the document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from breeze.document.nodes import AtRule, Root
from breeze.engine.context import Context
from breeze.model.rule import Layer, Rule

DIRECTIVE = "tailwind"


@dataclass(frozen=True)
class Stylesheet:
    """Generated rules partitioned into the four output layers, each sorted."""

    base: tuple[Rule, ...] = ()
    components: tuple[Rule, ...] = ()
    utilities: tuple[Rule, ...] = ()
    variants: tuple[Rule, ...] = ()

    def bucket(self, layer: Layer) -> tuple[Rule, ...]:
        return getattr(self, layer.marker)

    def __len__(self) -> int:
        return len(self.base) + len(self.components) + len(self.utilities) + len(self.variants)


def build_stylesheet(rules: Iterable[Rule], context: Context) -> Stylesheet:
    """Sort *rules* by key and partition them into layers.

    Rules at or above the minimum screen key go to the variants bucket
    whatever their nominal layer.
    """
    buckets: dict[Layer, list[Rule]] = {layer: [] for layer in Layer}
    threshold = context.minimum_screen
    for rule in sorted(rules, key=lambda r: r.ordering):
        if rule.sort >= threshold:
            buckets[Layer.VARIANTS].append(rule)
        else:
            buckets[rule.layer].append(rule)
    return Stylesheet(
        base=tuple(buckets[Layer.BASE]),
        components=tuple(buckets[Layer.COMPONENTS]),
        utilities=tuple(buckets[Layer.UTILITIES]),
        variants=tuple(buckets[Layer.VARIANTS]),
    )


def assemble(context: Context) -> Stylesheet:
    """Return the assembled stylesheet, rebuilding only after class-cache growth."""
    if context.stylesheet_stale:
        context.stylesheet_cache = build_stylesheet(context.rule_cache, context)
        context.stylesheet_cache_size = len(context.class_cache)
    return context.stylesheet_cache  # type: ignore[return-value]


def find_layer_markers(root: Root) -> dict[Layer, AtRule]:
    """Map each layer to the first ``@tailwind <layer>`` directive in *root*."""
    markers: dict[Layer, AtRule] = {}
    names = {layer.marker: layer for layer in Layer}
    for at_rule in root.walk_at_rules(DIRECTIVE):
        layer = names.get(at_rule.params.strip())
        if layer is not None and layer not in markers:
            markers[layer] = at_rule
    return markers


def expand_layer_directives(
    root: Root,
    stylesheet: Stylesheet,
    markers: dict[Layer, AtRule] | None = None,
) -> Root:
    """Replace each layer marker with that layer's generated rules.

    A missing marker drops its layer, except variants, which are appended
    to the end of the document instead.
    """
    if markers is None:
        markers = find_layer_markers(root)

    for layer in Layer:
        rules = stylesheet.bucket(layer)
        marker = markers.get(layer)
        if marker is not None:
            nodes = [rule.fragment.to_node(marker.source) for rule in rules]
            assert marker.parent is not None
            marker.parent.insert_before(marker, nodes)
            marker.remove()
        elif layer is Layer.VARIANTS:
            root.append(*[rule.fragment.to_node(root.source) for rule in rules])
    return root
