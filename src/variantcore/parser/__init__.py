"""Token splitting, variant resolution and declaration-file parsing."""

from variantcore.parser.declarations import (
    Declarations,
    load_declarations,
    parse_declarations,
)
from variantcore.parser.errors import (
    ConfigError,
    DeclarationError,
    InvalidCombinationError,
    InvalidCustomVariantNameError,
    TokenSyntaxError,
    UnknownVariantError,
    VariantError,
)
from variantcore.parser.resolver import resolve_variant, resolve_variants
from variantcore.parser.splitter import SEPARATOR, split_token

__all__ = [
    "split_token",
    "SEPARATOR",
    "resolve_variant",
    "resolve_variants",
    "Declarations",
    "parse_declarations",
    "load_declarations",
    "VariantError",
    "TokenSyntaxError",
    "UnknownVariantError",
    "InvalidCombinationError",
    "InvalidCustomVariantNameError",
    "DeclarationError",
    "ConfigError",
]
