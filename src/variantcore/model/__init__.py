"""variantcore model layer -- public type re-exports."""

from variantcore.model.definition import CustomVariant, VariantDefinition
from variantcore.model.diagnostic import Diagnostic, Severity
from variantcore.model.kind import KIND_PRIORITY, VariantKind
from variantcore.model.variant import (
    CssStrategy,
    Interaction,
    ParsedVariant,
    ParseResult,
    VariantCombination,
)

__all__ = [
    # kinds
    "VariantKind",
    "KIND_PRIORITY",
    # definitions
    "VariantDefinition",
    "CustomVariant",
    # diagnostic
    "Severity",
    "Diagnostic",
    # resolution artifacts
    "Interaction",
    "CssStrategy",
    "ParsedVariant",
    "VariantCombination",
    "ParseResult",
]
