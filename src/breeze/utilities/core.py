"""Built-in utility plugins.

Each plugin is a function ``(registry, config) -> None``; ``CORE_PLUGINS``
lists them in registration order, which is also their cascade order.
"""

from __future__ import annotations

from typing import Callable

from breeze.config import BreezeConfig
from breeze.model.rule import AtRuleSpec, Layer, RuleFragment
from breeze.theme import flatten_colors
from breeze.utilities.registry import UtilityRegistry
from breeze.variants.media import build_media_query, screen_min_width, sorted_screens

Plugin = Callable[[UtilityRegistry, BreezeConfig], None]

_SIDES: dict[str, tuple[str, ...]] = {
    "": ("",),
    "x": ("-left", "-right"),
    "y": ("-top", "-bottom"),
    "t": ("-top",),
    "r": ("-right",),
    "b": ("-bottom",),
    "l": ("-left",),
}


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


def preflight(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_global(
        [
            RuleFragment.create(
                "*, ::before, ::after",
                {
                    "box-sizing": "border-box",
                    "border-width": "0",
                    "border-style": "solid",
                    "border-color": "currentColor",
                },
            ),
            RuleFragment.create(
                "html",
                {
                    "line-height": "1.5",
                    "-webkit-text-size-adjust": "100%",
                    "font-family": "system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif",
                },
            ),
            RuleFragment.create("body", {"margin": "0", "line-height": "inherit"}),
            RuleFragment.create(
                "img, svg, video, canvas",
                {"display": "block", "max-width": "100%"},
            ),
        ],
        layer=Layer.BASE,
    )


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


def container(registry: UtilityRegistry, config: BreezeConfig) -> None:
    """``container``: full width, capped at each breakpoint's minimum width."""
    fragments = [RuleFragment.create("&", {"width": "100%"})]
    for _, value in sorted_screens(config.screens):
        width = screen_min_width(value)
        if width <= 0 or not isinstance(value, (str, dict)):
            continue
        raw = value if isinstance(value, str) else value.get("min", value.get("min-width"))
        fragments.append(
            RuleFragment.create(
                "&",
                {"max-width": str(raw)},
                at_rules=(AtRuleSpec("media", build_media_query(value)),),
            )
        )
    registry.add_static("container", fragments, layer=Layer.COMPONENTS, variants=config.screens.keys())


# ---------------------------------------------------------------------------
# Utilities
# ---------------------------------------------------------------------------


def display(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_utilities(
        {
            "block": {"display": "block"},
            "inline-block": {"display": "inline-block"},
            "inline": {"display": "inline"},
            "flex": {"display": "flex"},
            "inline-flex": {"display": "inline-flex"},
            "table": {"display": "table"},
            "grid": {"display": "grid"},
            "inline-grid": {"display": "inline-grid"},
            "contents": {"display": "contents"},
            "hidden": {"display": "none"},
        }
    )


def position(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_utilities(
        {
            "static": {"position": "static"},
            "fixed": {"position": "fixed"},
            "absolute": {"position": "absolute"},
            "relative": {"position": "relative"},
            "sticky": {"position": "sticky"},
        }
    )


def z_index(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_dynamic(
        "z",
        config.theme_section("zIndex"),
        lambda value: {"z-index": value},
        negative=True,
    )


def _spacing_plugin(prefix: str, prop: str, *, negative: bool, extra: dict[str, str]) -> Plugin:
    def plugin(registry: UtilityRegistry, config: BreezeConfig) -> None:
        values = {**config.theme_section("spacing"), **extra}
        for side, suffixes in _SIDES.items():
            props = [f"{prop}{suffix}" for suffix in suffixes]
            registry.add_dynamic(
                f"{prefix}{side}",
                values,
                lambda value, props=props: {p: value for p in props},
                negative=negative,
            )

    return plugin


margin = _spacing_plugin("m", "margin", negative=True, extra={"auto": "auto"})
padding = _spacing_plugin("p", "padding", negative=False, extra={})


def width(registry: UtilityRegistry, config: BreezeConfig) -> None:
    values = {
        **config.theme_section("spacing"),
        "auto": "auto",
        "1/2": "50%",
        "1/3": "33.333333%",
        "2/3": "66.666667%",
        "1/4": "25%",
        "3/4": "75%",
        "full": "100%",
        "screen": "100vw",
    }
    registry.add_dynamic("w", values, lambda value: {"width": value})


def background_repeat(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_utilities(
        {
            "bg-repeat": {"background-repeat": "repeat"},
            "bg-no-repeat": {"background-repeat": "no-repeat"},
            "bg-repeat-x": {"background-repeat": "repeat-x"},
            "bg-repeat-y": {"background-repeat": "repeat-y"},
            "bg-repeat-round": {"background-repeat": "round"},
            "bg-repeat-space": {"background-repeat": "space"},
        }
    )


def background_color(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_dynamic(
        "bg",
        flatten_colors(config.theme_section("colors")),
        lambda value: {"background-color": value},
        color=True,
        opacity=config.theme_section("opacity"),
    )


def text_color(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_dynamic(
        "text",
        flatten_colors(config.theme_section("colors")),
        lambda value: {"color": value},
        color=True,
        opacity=config.theme_section("opacity"),
    )


def opacity(registry: UtilityRegistry, config: BreezeConfig) -> None:
    registry.add_dynamic("opacity", config.theme_section("opacity"), lambda value: {"opacity": value})


def box_shadow(registry: UtilityRegistry, config: BreezeConfig) -> None:
    def build(value: str) -> dict[str, str]:
        return {
            "--tw-box-shadow": "0 0 #0000" if value == "none" else value,
            "box-shadow": ", ".join(
                [
                    "var(--tw-ring-offset-shadow, 0 0 #0000)",
                    "var(--tw-ring-shadow, 0 0 #0000)",
                    "var(--tw-box-shadow)",
                ]
            ),
        }

    registry.add_dynamic("shadow", config.theme_section("boxShadow"), build)


CORE_PLUGINS: tuple[Plugin, ...] = (
    # Base
    preflight,
    # Components
    container,
    # Utilities
    position,
    z_index,
    margin,
    display,
    width,
    background_repeat,
    background_color,
    padding,
    text_color,
    opacity,
    box_shadow,
)


def register_core_utilities(registry: UtilityRegistry, config: BreezeConfig) -> UtilityRegistry:
    """Run every core plugin against *registry*."""
    for plugin in CORE_PLUGINS:
        plugin(registry, config)
    return registry


def build_core_utilities(config: BreezeConfig) -> UtilityRegistry:
    """Return a fresh registry holding the core utilities."""
    return register_core_utilities(UtilityRegistry(), config)
