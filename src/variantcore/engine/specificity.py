"""Internal specificity: an additive ranking score, not CSS specificity."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParsedVariant

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = ["priority_of", "calculate_specificity"]


def priority_of(variant: ParsedVariant, snapshot: RegistrySnapshot | None = None) -> int:
    """Ranking weight of one variant.

    Standard and custom variants take the specificity from their definition;
    a custom variant with no registered definition falls back to the kind
    table, as does any variant when no snapshot is given.
    """
    if snapshot is not None:
        if variant.kind is VariantKind.CUSTOM:
            custom = snapshot.custom.get(variant.name)
            if custom is not None:
                return custom.specificity
        else:
            definition = snapshot.definitions.get(variant.name)
            if definition is not None and definition.kind is variant.kind:
                return definition.specificity  # type: ignore[return-value]
    return variant.kind.priority


def calculate_specificity(
    variants: Iterable[ParsedVariant], snapshot: RegistrySnapshot | None = None
) -> int:
    """Sum of priorities over matched variants."""
    return sum(priority_of(v, snapshot) for v in variants if v.matched)
