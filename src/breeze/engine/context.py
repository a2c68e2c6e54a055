"""Long-lived build context: registries, caches and pending sources."""

from __future__ import annotations

import itertools
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from breeze.config import BreezeConfig
from breeze.events.bus import EventBus
from breeze.events.debug import attach_debug_logging
from breeze.model.rule import Layer, Rule, SortKey
from breeze.utilities.core import build_core_utilities
from breeze.utilities.registry import UtilityRegistry
from breeze.variants.core import build_core_variants
from breeze.variants.registry import VariantRegistry

if TYPE_CHECKING:
    from breeze.engine.assemble import Stylesheet


@dataclass(frozen=True)
class RawContent:
    """In-memory source text, scanned on every invocation."""

    content: str
    extension: str | None = None


class Context:
    """State carried across rebuilds for one configuration.

    Owns the variant and utility registries and four caches:

    * ``content_match_cache``: line text -> candidate tokens found on it.
    * ``class_cache``: candidate -> rules generated for it (possibly none).
    * ``rule_cache``: every rule ever generated, deduplicated, in insertion order.
    * ``stylesheet_cache``: the last assembled output, valid while the class
      cache has not grown since it was built.

    The class and rule caches only ever grow. A Context is driven by a single
    caller; it is not safe for concurrent invocations.
    """

    def __init__(
        self,
        config: BreezeConfig | None = None,
        *,
        utilities: UtilityRegistry | None = None,
        variants: VariantRegistry | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or BreezeConfig()
        self.utilities = utilities if utilities is not None else build_core_utilities(self.config)
        self.variants = variants if variants is not None else build_core_variants(self.config)
        self.event_bus = event_bus or EventBus()
        if self.config.debug:
            attach_debug_logging(self.event_bus)

        self.content_match_cache: dict[str, frozenset[str]] = {}
        self.class_cache: dict[str, tuple[Rule, ...]] = {}
        self.rule_cache: dict[Rule, None] = {}
        self.stylesheet_cache: Stylesheet | None = None
        self.stylesheet_cache_size = -1

        self.changed_files: set[Path] = set()
        self.raw_content: list[RawContent] = []
        self._mtimes: dict[Path, float] = {}
        self._sequence = itertools.count()

    # --- ordering -------------------------------------------------------------

    def next_sequence(self) -> int:
        """Next value of the insertion sequence used as final tie-break."""
        return next(self._sequence)

    @property
    def minimum_screen(self) -> SortKey:
        """Sort keys at or above this one belong in the variants bucket."""
        return SortKey(Layer.VARIANTS, (), 0, 0)

    @property
    def stylesheet_stale(self) -> bool:
        """True when the class cache grew since the last assembly."""
        return self.stylesheet_cache is None or self.stylesheet_cache_size != len(self.class_cache)

    # --- sources --------------------------------------------------------------

    def mark_changed(self, *paths: str | Path) -> None:
        """Queue files for scanning on the next invocation."""
        for path in paths:
            self.changed_files.add(Path(path))

    def collect_changed_files(self, paths: Iterable[str | Path]) -> set[Path]:
        """Queue every file whose modification time moved since last seen.

        Returns the newly queued paths.
        """
        changed: set[Path] = set()
        for path in map(Path, paths):
            mtime = path.stat().st_mtime
            if self._mtimes.get(path) != mtime:
                self._mtimes[path] = mtime
                changed.add(path)
        self.changed_files.update(changed)
        return changed

    def add_raw_content(self, content: str, extension: str | None = None) -> None:
        """Register in-memory content scanned on every invocation."""
        self.raw_content.append(RawContent(content=content, extension=extension))

    def __repr__(self) -> str:
        return (
            f"Context(classes={len(self.class_cache)}, rules={len(self.rule_cache)}, "
            f"lines={len(self.content_match_cache)}, changed={len(self.changed_files)})"
        )


class ContextPool:
    """Contexts keyed by configuration fingerprint.

    Identical configurations share one Context and its caches; distinct
    ones never do.
    """

    def __init__(self) -> None:
        self._contexts: dict[str, Context] = {}

    def get(self, config: BreezeConfig, **kwargs: object) -> Context:
        """Return the Context for *config*, creating it on first use."""
        key = config.fingerprint()
        context = self._contexts.get(key)
        if context is None:
            context = Context(config, **kwargs)  # type: ignore[arg-type]
            self._contexts[key] = context
        return context

    def discard(self, config: BreezeConfig) -> None:
        """Drop the Context for *config*. No-op if not found."""
        self._contexts.pop(config.fingerprint(), None)

    def __contains__(self, config: BreezeConfig) -> bool:
        return config.fingerprint() in self._contexts

    def __len__(self) -> int:
        return len(self._contexts)
