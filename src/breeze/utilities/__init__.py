from breeze.utilities.core import CORE_PLUGINS, build_core_utilities, register_core_utilities
from breeze.utilities.registry import (
    DynamicUtility,
    StaticUtility,
    UtilityMatch,
    UtilityRegistry,
)

__all__ = [
    "CORE_PLUGINS",
    "build_core_utilities",
    "register_core_utilities",
    "DynamicUtility",
    "StaticUtility",
    "UtilityMatch",
    "UtilityRegistry",
]
