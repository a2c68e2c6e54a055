"""Media query construction and breakpoint ordering."""

from __future__ import annotations

import re
from typing import Any

from breeze.errors import ConfigError

_FEATURES = {"min": "min-width", "max": "max-width"}
_LENGTH_RE = re.compile(r"^\s*(?P<number>-?\d*\.?\d+)\s*(?P<unit>[a-zA-Z%]*)")
_FONT_RELATIVE = {"em": 16.0, "rem": 16.0}


def _as_list(screen: Any) -> list[Any]:
    if isinstance(screen, (str, dict)):
        return [screen]
    if isinstance(screen, (list, tuple)):
        return list(screen)
    raise ConfigError(f"Invalid screen value: {screen!r}", key="screens")


def build_media_query(screen: Any) -> str:
    """Compile a breakpoint value into media query params.

    ``"768px"`` -> ``(min-width: 768px)``; ``{"min": a, "max": b}`` ->
    ``(min-width: a) and (max-width: b)``; ``{"raw": q}`` -> ``q``; a list
    joins its entries with ``, ``.
    """
    queries: list[str] = []
    for entry in _as_list(screen):
        if isinstance(entry, str):
            entry = {"min": entry}
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid screen value: {entry!r}", key="screens")
        if "raw" in entry:
            queries.append(str(entry["raw"]))
            continue
        features = [f"({_FEATURES.get(feature, feature)}: {value})" for feature, value in entry.items()]
        queries.append(" and ".join(features))
    return ", ".join(queries)


def _length(value: Any) -> float | None:
    match = _LENGTH_RE.match(str(value))
    if not match:
        return None
    return float(match.group("number")) * _FONT_RELATIVE.get(match.group("unit").lower(), 1.0)


def screen_min_width(screen: Any) -> float:
    """Effective minimum width of a breakpoint, 0 when it has none."""
    widths: list[float] = []
    for entry in _as_list(screen):
        if isinstance(entry, str):
            entry = {"min": entry}
        if isinstance(entry, dict):
            raw = entry.get("min", entry.get("min-width"))
            if raw is not None:
                width = _length(raw)
                if width is not None:
                    widths.append(width)
    return min(widths) if widths else 0.0


def sorted_screens(screens: dict[str, Any]) -> list[tuple[str, Any]]:
    """Breakpoints by ascending effective minimum width; ties keep config order."""
    return sorted(screens.items(), key=lambda item: screen_min_width(item[1]))
