"""variantcore - resolve variant-prefixed utility class tokens.

A token such as ``sm:dark:hover:bg-blue-500`` is split into variant names and
a base class, each name is resolved against a :class:`VariantRegistry`, the
combination is validated and scored, and a :class:`ParseResult` carries the
resulting selector and media query.
"""

__version__ = "0.1.0"

from variantcore.config import EngineConfig, build_engine, load_config  # noqa: E402
from variantcore.engine import VariantEngine, resolve_token  # noqa: E402
from variantcore.model import (  # noqa: E402
    CssStrategy,
    CustomVariant,
    Interaction,
    ParsedVariant,
    ParseResult,
    VariantCombination,
    VariantDefinition,
    VariantKind,
)
from variantcore.parser import (  # noqa: E402
    ConfigError,
    DeclarationError,
    InvalidCombinationError,
    InvalidCustomVariantNameError,
    TokenSyntaxError,
    UnknownVariantError,
    VariantError,
    split_token,
)
from variantcore.registry import VariantRegistry  # noqa: E402

__all__ = [
    "__version__",
    "VariantEngine",
    "VariantRegistry",
    "resolve_token",
    "split_token",
    "EngineConfig",
    "load_config",
    "build_engine",
    "VariantKind",
    "VariantDefinition",
    "CustomVariant",
    "ParsedVariant",
    "VariantCombination",
    "ParseResult",
    "Interaction",
    "CssStrategy",
    "VariantError",
    "TokenSyntaxError",
    "UnknownVariantError",
    "InvalidCombinationError",
    "InvalidCustomVariantNameError",
    "DeclarationError",
    "ConfigError",
]
