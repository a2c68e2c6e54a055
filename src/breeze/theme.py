"""Default theme values used when a configuration does not override them."""

from __future__ import annotations

import copy
from typing import Any

DEFAULT_SCREENS: dict[str, Any] = {
    "sm": "640px",
    "md": "768px",
    "lg": "1024px",
    "xl": "1280px",
    "2xl": "1536px",
}

_SHADES = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900")


def _palette(*hexes: str) -> dict[str, str]:
    return dict(zip(_SHADES, hexes))


DEFAULT_COLORS: dict[str, Any] = {
    "transparent": "transparent",
    "current": "currentColor",
    "black": "#000000",
    "white": "#ffffff",
    "gray": _palette(
        "#f9fafb", "#f3f4f6", "#e5e7eb", "#d1d5db", "#9ca3af",
        "#6b7280", "#4b5563", "#374151", "#1f2937", "#111827",
    ),
    "red": _palette(
        "#fef2f2", "#fee2e2", "#fecaca", "#fca5a5", "#f87171",
        "#ef4444", "#dc2626", "#b91c1c", "#991b1b", "#7f1d1d",
    ),
    "yellow": _palette(
        "#fffbeb", "#fef3c7", "#fde68a", "#fcd34d", "#fbbf24",
        "#f59e0b", "#d97706", "#b45309", "#92400e", "#78350f",
    ),
    "green": _palette(
        "#ecfdf5", "#d1fae5", "#a7f3d0", "#6ee7b7", "#34d399",
        "#10b981", "#059669", "#047857", "#065f46", "#064e3b",
    ),
    "blue": _palette(
        "#eff6ff", "#dbeafe", "#bfdbfe", "#93c5fd", "#60a5fa",
        "#3b82f6", "#2563eb", "#1d4ed8", "#1e40af", "#1e3a8a",
    ),
    "indigo": _palette(
        "#eef2ff", "#e0e7ff", "#c7d2fe", "#a5b4fc", "#818cf8",
        "#6366f1", "#4f46e5", "#4338ca", "#3730a3", "#312e81",
    ),
}

DEFAULT_SPACING: dict[str, str] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "8": "2rem",
    "10": "2.5rem",
    "12": "3rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "32": "8rem",
    "40": "10rem",
    "48": "12rem",
    "64": "16rem",
    "96": "24rem",
}

DEFAULT_OPACITY: dict[str, str] = {
    "0": "0",
    "5": "0.05",
    "10": "0.1",
    "20": "0.2",
    "25": "0.25",
    "30": "0.3",
    "40": "0.4",
    "50": "0.5",
    "60": "0.6",
    "70": "0.7",
    "75": "0.75",
    "80": "0.8",
    "90": "0.9",
    "95": "0.95",
    "100": "1",
}

DEFAULT_BOX_SHADOW: dict[str, str] = {
    "sm": "0 1px 2px 0 rgba(0, 0, 0, 0.05)",
    "DEFAULT": "0 1px 3px 0 rgba(0, 0, 0, 0.1), 0 1px 2px 0 rgba(0, 0, 0, 0.06)",
    "md": "0 4px 6px -1px rgba(0, 0, 0, 0.1), 0 2px 4px -1px rgba(0, 0, 0, 0.06)",
    "lg": "0 10px 15px -3px rgba(0, 0, 0, 0.1), 0 4px 6px -2px rgba(0, 0, 0, 0.05)",
    "xl": "0 20px 25px -5px rgba(0, 0, 0, 0.1), 0 10px 10px -5px rgba(0, 0, 0, 0.04)",
    "2xl": "0 25px 50px -12px rgba(0, 0, 0, 0.25)",
    "inner": "inset 0 2px 4px 0 rgba(0, 0, 0, 0.06)",
    "none": "none",
}

DEFAULT_Z_INDEX: dict[str, str] = {
    "auto": "auto",
    "0": "0",
    "10": "10",
    "20": "20",
    "30": "30",
    "40": "40",
    "50": "50",
}

DEFAULT_THEME: dict[str, Any] = {
    "screens": DEFAULT_SCREENS,
    "colors": DEFAULT_COLORS,
    "spacing": DEFAULT_SPACING,
    "opacity": DEFAULT_OPACITY,
    "boxShadow": DEFAULT_BOX_SHADOW,
    "zIndex": DEFAULT_Z_INDEX,
}


def default_theme() -> dict[str, Any]:
    """Return a deep copy of the default theme, safe to mutate."""
    return copy.deepcopy(DEFAULT_THEME)


def flatten_colors(colors: dict[str, Any]) -> dict[str, str]:
    """Flatten nested colour palettes: ``{"red": {"500": x}}`` -> ``{"red-500": x}``.

    A nested ``DEFAULT`` shade is addressed by the bare palette name.
    """
    flat: dict[str, str] = {}
    for name, value in colors.items():
        if isinstance(value, dict):
            for shade, color in flatten_colors(value).items():
                key = name if shade == "DEFAULT" else f"{name}-{shade}"
                flat[key] = color
        else:
            flat[name] = str(value)
    return flat
