from breeze.variants.base import Variant, VariantCategory
from breeze.variants.core import build_core_variants, register_core_variants
from breeze.variants.media import build_media_query, screen_min_width, sorted_screens
from breeze.variants.registry import RegisteredVariant, VariantRegistry
from breeze.variants.rewrites import AllSelectorsRewrite, InnermostClassRewrite, PseudoClassRewrite
from breeze.variants.selector import escape_class_name, update_all_classes, update_last_classes

__all__ = [
    "Variant",
    "VariantCategory",
    "VariantRegistry",
    "RegisteredVariant",
    "PseudoClassRewrite",
    "AllSelectorsRewrite",
    "InnermostClassRewrite",
    "build_core_variants",
    "register_core_variants",
    "build_media_query",
    "screen_min_width",
    "sorted_screens",
    "escape_class_name",
    "update_all_classes",
    "update_last_classes",
]
