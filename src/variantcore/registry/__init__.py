"""Variant registry: standard definitions, custom variants and breakpoints."""

from variantcore.registry.names import is_valid_variant_name, validate_variant_name
from variantcore.registry.registry import RegistrySnapshot, VariantRegistry
from variantcore.registry.standard import (
    DEFAULT_BREAKPOINTS,
    breakpoint_media_query,
    standard_definitions,
)

__all__ = [
    "VariantRegistry",
    "RegistrySnapshot",
    "DEFAULT_BREAKPOINTS",
    "breakpoint_media_query",
    "standard_definitions",
    "is_valid_variant_name",
    "validate_variant_name",
]
