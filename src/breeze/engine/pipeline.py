"""One build invocation: extract, generate, assemble, splice."""

from __future__ import annotations

import logging
import time

from breeze.document.nodes import Root
from breeze.engine.assemble import assemble, expand_layer_directives, find_layer_markers
from breeze.engine.context import Context
from breeze.engine.extract import get_class_candidates, get_extractor
from breeze.engine.generate import generate_rules
from breeze.events import types as events
from breeze.model.candidate import WILDCARD

logger = logging.getLogger(__name__)


def expand_at_rules(context: Context, root: Root) -> Root:
    """Run one invocation against *root*, mutating it in place.

    Documents without any layer marker are returned untouched. Pending
    changed files are cleared only once the whole pass has succeeded, so a
    failure leaves them queued for the next invocation.
    """
    markers = find_layer_markers(root)
    if not markers:
        logger.debug("No layer directives found, skipping")
        return root

    bus = context.event_bus
    started = time.perf_counter()
    bus.emit(
        events.BuildStarted(
            changed_files=len(context.changed_files),
            raw_content=len(context.raw_content),
        )
    )

    # Find potential classes in changed files and raw content
    candidates: set[str] = {WILDCARD}
    seen: set[str] = set()
    for path in sorted(context.changed_files):
        content = path.read_text(encoding="utf-8")
        extractor = get_extractor(context.config, path.suffix[1:] or None)
        get_class_candidates(content, extractor, context.content_match_cache, candidates, seen)
    for raw in context.raw_content:
        extractor = get_extractor(context.config, raw.extension)
        get_class_candidates(raw.content, extractor, context.content_match_cache, candidates, seen)
    extracted = time.perf_counter()
    bus.emit(
        events.CandidatesExtracted(
            candidates=len(candidates),
            cache_entries=len(context.content_match_cache),
            elapsed=extracted - started,
        )
    )

    # Generate rules for new candidates
    class_count = len(context.class_cache)
    rules = generate_rules(candidates, context)
    generated = time.perf_counter()
    bus.emit(
        events.RulesGenerated(
            rules=len(rules),
            new_classes=len(context.class_cache) - class_count,
            elapsed=generated - extracted,
        )
    )

    # Sort and partition, only when something new was generated
    rebuilt = context.stylesheet_stale
    stylesheet = assemble(context)
    bus.emit(
        events.StylesheetAssembled(
            rebuilt=rebuilt,
            rules=len(stylesheet),
            elapsed=time.perf_counter() - generated,
        )
    )

    expand_layer_directives(root, stylesheet, markers)

    context.changed_files.clear()
    bus.emit(events.BuildCompleted(elapsed=time.perf_counter() - started))
    return root
