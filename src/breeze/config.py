"""Compiler configuration: separator, prefix, dark mode strategy and theme."""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Iterable

from breeze.errors import ConfigError
from breeze.theme import default_theme

Extractor = Callable[[str], Iterable[str]]


class DarkMode(Enum):
    """Strategy used by the ``dark`` variant."""

    OFF = "off"
    CLASS = "class"
    MEDIA = "media"

    @classmethod
    def parse(cls, value: object) -> DarkMode:
        """Parse a config value; ``False``/``None`` disable dark mode."""
        if isinstance(value, DarkMode):
            return value
        if value is None or value is False:
            return cls.OFF
        if isinstance(value, str):
            try:
                return cls(value.lower())
            except ValueError:
                pass
        raise ConfigError(f"Invalid darkMode value: {value!r}", key="darkMode")


@dataclass(frozen=True)
class BreezeConfig:
    """Read-only settings shared by every stage of a build."""

    separator: str = ":"
    prefix: str = ""
    dark_mode: DarkMode = DarkMode.OFF
    theme: dict[str, Any] = field(default_factory=default_theme)
    content: tuple[str, ...] = ()
    extractors: dict[str, Extractor] = field(default_factory=dict)
    default_extractor: Extractor | None = None
    debug: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.separator, str) or not self.separator:
            raise ConfigError("separator must be a non-empty string", key="separator")
        if not isinstance(self.prefix, str):
            raise ConfigError("prefix must be a string", key="prefix")

    @property
    def screens(self) -> dict[str, Any]:
        """Breakpoint table in configuration order."""
        return self.theme.get("screens", {})

    def theme_section(self, name: str) -> dict[str, Any]:
        """Return a theme section, or an empty mapping when absent."""
        section = self.theme.get(name, {})
        return section if isinstance(section, dict) else {}

    # --- identity -------------------------------------------------------------

    def fingerprint(self) -> str:
        """Stable digest identifying this configuration.

        Callables contribute their identity, so two configs holding distinct
        extractor functions never share a fingerprint.
        """
        payload = {
            "separator": self.separator,
            "prefix": self.prefix,
            "darkMode": self.dark_mode.value,
            "theme": self.theme,
            "content": list(self.content),
            "extractors": {ext: _callable_id(fn) for ext, fn in self.extractors.items()},
            "defaultExtractor": _callable_id(self.default_extractor),
        }
        raw = json.dumps(payload, sort_keys=True, default=str)
        return hashlib.sha256(raw.encode("utf-8")).hexdigest()

    def __hash__(self) -> int:
        return hash(self.fingerprint())

    # --- construction ---------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BreezeConfig:
        """Build a config from the camelCase JSON form.

        Top-level ``theme`` keys replace the defaults; keys under
        ``theme.extend`` are merged into them.
        """
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a JSON object")

        theme = default_theme()
        user_theme = data.get("theme") or {}
        if not isinstance(user_theme, dict):
            raise ConfigError("theme must be an object", key="theme")
        for key, value in user_theme.items():
            if key != "extend":
                theme[key] = value
        extend = user_theme.get("extend") or {}
        if not isinstance(extend, dict):
            raise ConfigError("theme.extend must be an object", key="theme.extend")
        for key, value in extend.items():
            if not isinstance(value, dict):
                raise ConfigError(f"theme.extend.{key} must be an object", key=key)
            merged = dict(theme.get(key) or {})
            merged.update(value)
            theme[key] = merged

        content = data.get("content", [])
        if isinstance(content, str):
            content = [content]
        if not isinstance(content, list) or not all(isinstance(c, str) for c in content):
            raise ConfigError("content must be a list of glob patterns", key="content")

        return cls(
            separator=data.get("separator", ":"),
            prefix=data.get("prefix", ""),
            dark_mode=DarkMode.parse(data.get("darkMode")),
            theme=theme,
            content=tuple(content),
            debug=bool(data.get("debug", False)),
        )


def load_config(path: str | Path) -> BreezeConfig:
    """Read a JSON configuration file."""
    config_path = Path(path)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc
    return BreezeConfig.from_dict(data)


def _callable_id(fn: Extractor | None) -> str | None:
    if fn is None:
        return None
    name = getattr(fn, "__qualname__", type(fn).__name__)
    return f"{getattr(fn, '__module__', '')}.{name}@{id(fn):x}"
