"""Candidate extraction: source text -> candidate tokens, memoized per line."""

from __future__ import annotations

import re
from typing import Callable, Iterable

from breeze.config import BreezeConfig, Extractor

BROAD_MATCH_RE = re.compile(r"""[^<>"'`\s]*[^<>"'`\s:]""")
INNER_MATCH_RE = re.compile(r"""[^<>"'`\s.(){}\[\]#=%]*[^<>"'`\s.(){}\[\]#=%:]""")

# Svelte's `class:name={expr}` directive binds a class, it does not write one.
_SVELTE_CLASS_DIRECTIVE_RE = re.compile(r"(?:^|\s)class:")


def builtin_extractor(extension: str | None = None) -> Extractor:
    """The fallback extractor: a broad pass and an inner pass, unioned."""

    def extract(content: str) -> list[str]:
        if extension == "svelte":
            content = _SVELTE_CLASS_DIRECTIVE_RE.sub(" ", content)
        return BROAD_MATCH_RE.findall(content) + INNER_MATCH_RE.findall(content)

    return extract


def get_extractor(config: BreezeConfig, extension: str | None) -> Extractor:
    """Pick the extractor for a file extension.

    Resolution order:
    1. An extractor registered for the extension
    2. The configured default extractor
    3. The built-in extractor
    """
    if not extension:
        return config.default_extractor or builtin_extractor()
    specific = config.extractors.get(extension)
    if specific is not None:
        return specific
    return config.default_extractor or builtin_extractor(extension)


def extract(content: str, extension: str | None = None, config: BreezeConfig | None = None) -> set[str]:
    """Every candidate token in *content*, without caching."""
    extractor = get_extractor(config or BreezeConfig(), extension)
    return set(extractor(content))


def get_class_candidates(
    content: str,
    extractor: Callable[[str], Iterable[str]],
    content_match_cache: dict[str, frozenset[str]],
    candidates: set[str],
    seen: set[str],
) -> None:
    """Add the candidates found in *content* to *candidates*.

    Lines already in *seen* (this invocation) are skipped; lines already in
    the cache replay their memoized tokens without calling the extractor.
    """
    for line in content.split("\n"):
        line = line.strip()

        if line in seen:
            continue
        seen.add(line)

        matches = content_match_cache.get(line)
        if matches is None:
            matches = frozenset(extractor(line))
            content_match_cache[line] = matches
        candidates.update(matches)
