"""Built-in variants: pseudo-classes, groups, direction, motion, dark mode, screens."""

from __future__ import annotations

from breeze.config import BreezeConfig, DarkMode
from breeze.model.rule import AtRuleSpec
from breeze.variants.base import VariantCategory
from breeze.variants.media import build_media_query, sorted_screens
from breeze.variants.registry import VariantRegistry
from breeze.variants.rewrites import AllSelectorsRewrite, InnermostClassRewrite, PseudoClassRewrite
from breeze.variants.selector import class_selector

# (variant name, pseudo-class) in registration order
PSEUDO_CLASS_VARIANTS: tuple[tuple[str, str], ...] = (
    ("first", "first-child"),
    ("last", "last-child"),
    ("odd", "nth-child(odd)"),
    ("even", "nth-child(even)"),
    ("visited", "visited"),
    ("checked", "checked"),
    ("focus-within", "focus-within"),
    ("hover", "hover"),
    ("focus", "focus"),
    ("focus-visible", "focus-visible"),
    ("active", "active"),
    ("disabled", "disabled"),
)


def register_core_variants(registry: VariantRegistry, config: BreezeConfig) -> VariantRegistry:
    """Register the built-in variants in precedence order."""
    separator = config.separator

    for name, pseudo in PSEUDO_CLASS_VARIANTS:
        registry.register(PseudoClassRewrite(name=name, pseudo=pseudo, separator=separator))

    group = class_selector(f"{config.prefix}group")
    for name, pseudo in PSEUDO_CLASS_VARIANTS:
        registry.register(
            AllSelectorsRewrite(
                name=f"group-{name}",
                ancestor=f"{group}:{pseudo}",
                separator=separator,
                category=VariantCategory.GROUP,
            )
        )

    for direction in ("ltr", "rtl"):
        registry.register(
            AllSelectorsRewrite(
                name=direction,
                ancestor=f'[dir="{direction}"]',
                separator=separator,
                category=VariantCategory.DIRECTION,
            )
        )

    for name, preference in (("motion-safe", "no-preference"), ("motion-reduce", "reduce")):
        registry.register(
            InnermostClassRewrite(
                name=name,
                at_rule=AtRuleSpec("media", f"(prefers-reduced-motion: {preference})"),
                separator=separator,
                category=VariantCategory.MOTION,
            )
        )

    if config.dark_mode is DarkMode.CLASS:
        registry.register(
            AllSelectorsRewrite(
                name="dark",
                ancestor=class_selector(f"{config.prefix}dark"),
                separator=separator,
                category=VariantCategory.DARK,
            )
        )
    elif config.dark_mode is DarkMode.MEDIA:
        registry.register(
            InnermostClassRewrite(
                name="dark",
                at_rule=AtRuleSpec("media", "(prefers-color-scheme: dark)"),
                separator=separator,
                category=VariantCategory.DARK,
            )
        )

    for screen, value in sorted_screens(config.screens):
        registry.register(
            InnermostClassRewrite(
                name=screen,
                at_rule=AtRuleSpec("media", build_media_query(value)),
                separator=separator,
                category=VariantCategory.SCREEN,
            )
        )

    return registry


def build_core_variants(config: BreezeConfig) -> VariantRegistry:
    """Return a fresh registry holding the built-in variants."""
    return register_core_variants(VariantRegistry(), config)
