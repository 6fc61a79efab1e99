"""Validation rules for variant combinations.

Each rule is a function taking the parsed variants of one token (in token
order) and the registry snapshot they were resolved against, and returning a
list of Diagnostic objects describing any issues found.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from variantcore.model.diagnostic import Diagnostic, Severity
from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParsedVariant

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot


# ---------------------------------------------------------------------------
# Combination rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_print_screen_exclusive(
    variants: list[ParsedVariant], snapshot: RegistrySnapshot
) -> list[Diagnostic]:
    """Print and screen variants are mutually exclusive."""
    printing = [v.name for v in variants if v.kind is VariantKind.PRINT]
    screens = [v.name for v in variants if v.kind is VariantKind.SCREEN]
    if printing and screens:
        return [
            Diagnostic(
                rule="check_print_screen_exclusive",
                severity=Severity.ERROR,
                message="Cannot combine 'print' and 'screen' variants",
                variants=tuple(printing + screens),
                fix="Keep either the print or the screen variant.",
            )
        ]
    return []


def check_single_responsive(
    variants: list[ParsedVariant], snapshot: RegistrySnapshot
) -> list[Diagnostic]:
    """At most one responsive variant per token."""
    responsive = [v.name for v in variants if v.kind is VariantKind.RESPONSIVE]
    if len(responsive) > 1:
        return [
            Diagnostic(
                rule="check_single_responsive",
                severity=Severity.ERROR,
                message=(
                    "Cannot combine multiple responsive variants: "
                    + ", ".join(responsive)
                ),
                variants=tuple(responsive),
                fix=f"Keep a single breakpoint, e.g. '{responsive[0]}'.",
            )
        ]
    return []


def check_dependencies(
    variants: list[ParsedVariant], snapshot: RegistrySnapshot
) -> list[Diagnostic]:
    """Declared dependencies must appear in the same token."""
    active = {v.name for v in variants}
    diagnostics: list[Diagnostic] = []
    for variant in variants:
        definition = snapshot.lookup(variant.name)
        if definition is None or definition.can_apply(active):
            continue
        missing = [dep for dep in definition.dependencies if dep not in active]
        diagnostics.append(
            Diagnostic(
                rule="check_dependencies",
                severity=Severity.ERROR,
                message=(
                    f"Variant '{variant.name}' requires "
                    + ", ".join(f"'{m}'" for m in missing)
                    + " in the same class"
                ),
                variants=(variant.name, *missing),
                fix="Add the missing variants to the class.",
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_duplicate_variants(
    variants: list[ParsedVariant], snapshot: RegistrySnapshot
) -> list[Diagnostic]:
    """The same variant written twice has no additional effect."""
    counts = Counter(v.name for v in variants)
    return [
        Diagnostic(
            rule="check_duplicate_variants",
            severity=Severity.WARNING,
            message=f"Variant '{name}' appears {count} times",
            variants=(name,),
            fix=f"Remove the repeated '{name}'.",
        )
        for name, count in counts.items()
        if count > 1
    ]


def check_combinable(
    variants: list[ParsedVariant], snapshot: RegistrySnapshot
) -> list[Diagnostic]:
    """Variants declared non-combinable are expected to stand alone."""
    if len(variants) < 2:
        return []
    diagnostics: list[Diagnostic] = []
    for variant in variants:
        definition = snapshot.lookup(variant.name)
        if definition is None or definition.combinable:
            continue
        others = [v.name for v in variants if v.name != variant.name]
        if not others:
            continue
        diagnostics.append(
            Diagnostic(
                rule="check_combinable",
                severity=Severity.WARNING,
                message=(
                    f"Variant '{variant.name}' is not meant to be combined with "
                    + ", ".join(f"'{o}'" for o in others)
                ),
                variants=(variant.name, *others),
            )
        )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

ERROR_RULES = [
    check_print_screen_exclusive,
    check_single_responsive,
    check_dependencies,
]

WARNING_RULES = [
    check_duplicate_variants,
    check_combinable,
]

ALL_RULES = ERROR_RULES + WARNING_RULES
