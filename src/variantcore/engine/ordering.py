"""Canonical rendering order of a combination's variants.

Variants are ordered by descending priority (the same weight used for
specificity). Python's sort is stable, so ties keep token order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from variantcore.engine.specificity import priority_of
from variantcore.model.variant import ParsedVariant

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = ["order_variants"]


def order_variants(
    variants: Iterable[ParsedVariant], snapshot: RegistrySnapshot | None = None
) -> list[ParsedVariant]:
    """Return *variants* in canonical order (highest priority first)."""
    return sorted(variants, key=lambda v: -priority_of(v, snapshot))
