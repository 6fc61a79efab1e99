"""Rewrites of a combination that keep its meaning or resolve a conflict."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from variantcore.engine.specificity import calculate_specificity
from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParsedVariant, VariantCombination
from variantcore.validation.validator import validate

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = ["optimize_combination", "can_simplify", "simplify_combination"]

_DUPLICATE_RULE = "check_duplicate_variants"


def optimize_combination(
    combination: VariantCombination, snapshot: RegistrySnapshot | None = None
) -> VariantCombination:
    """Drop repeated variants, keeping the first occurrence of each name.

    A valid combination gets its specificity recomputed and loses its
    duplicate warnings; an invalid one keeps its error.
    """
    seen: set[str] = set()
    variants: list[ParsedVariant] = []
    for variant in combination.variants:
        if variant.name in seen:
            continue
        seen.add(variant.name)
        variants.append(variant)

    if not combination.valid:
        return replace(combination, variants=tuple(variants))
    return VariantCombination(
        variants=tuple(variants),
        specificity=calculate_specificity(variants, snapshot),
        diagnostics=tuple(d for d in combination.diagnostics if d.rule != _DUPLICATE_RULE),
    )


def can_simplify(combination: VariantCombination) -> bool:
    """True when the combination holds both a print and a screen variant."""
    kinds = set(combination.kinds)
    return VariantKind.PRINT in kinds and VariantKind.SCREEN in kinds


def simplify_combination(
    combination: VariantCombination, snapshot: RegistrySnapshot
) -> VariantCombination:
    """Remove conflicting print/screen variants and validate what is left."""
    if not can_simplify(combination):
        return combination
    variants = [
        v
        for v in combination.variants
        if v.kind not in (VariantKind.PRINT, VariantKind.SCREEN)
    ]
    diagnostics = validate(variants, snapshot)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        return VariantCombination.invalid(errors[0].message, tuple(variants), tuple(diagnostics))
    return VariantCombination(
        variants=tuple(variants),
        specificity=calculate_specificity(variants, snapshot),
        diagnostics=tuple(diagnostics),
    )
