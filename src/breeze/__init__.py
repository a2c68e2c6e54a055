"""breeze -- incremental, cache-driven utility-first stylesheet compiler."""

__version__ = "0.1.0"

from breeze.config import BreezeConfig, DarkMode, load_config  # noqa: E402
from breeze.document import parse_css  # noqa: E402
from breeze.engine import Context, ContextPool, expand_at_rules  # noqa: E402

__all__ = [
    "__version__",
    "BreezeConfig",
    "DarkMode",
    "load_config",
    "parse_css",
    "Context",
    "ContextPool",
    "expand_at_rules",
]
