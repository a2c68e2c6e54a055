from breeze.engine.assemble import (
    Stylesheet,
    assemble,
    build_stylesheet,
    expand_layer_directives,
    find_layer_markers,
)
from breeze.engine.context import Context, ContextPool, RawContent
from breeze.engine.extract import builtin_extractor, extract, get_class_candidates, get_extractor
from breeze.engine.generate import generate_rules, resolve_candidate
from breeze.engine.pipeline import expand_at_rules

__all__ = [
    "Context",
    "ContextPool",
    "RawContent",
    "Stylesheet",
    "assemble",
    "build_stylesheet",
    "builtin_extractor",
    "expand_at_rules",
    "expand_layer_directives",
    "extract",
    "find_layer_markers",
    "generate_rules",
    "get_class_candidates",
    "get_extractor",
    "resolve_candidate",
]
