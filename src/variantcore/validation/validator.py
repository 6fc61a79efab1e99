"""Combination validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from variantcore.model.diagnostic import Diagnostic
from variantcore.model.variant import ParsedVariant
from variantcore.parser.errors import InvalidCombinationError
from variantcore.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot


RuleFunc = Callable[[list[ParsedVariant], "RegistrySnapshot"], list[Diagnostic]]


def validate(
    variants: list[ParsedVariant],
    snapshot: RegistrySnapshot,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all validation rules against *variants*.

    Returns the full list of diagnostics (errors and warnings), errors of
    earlier rules first. The input list is never modified.
    """
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    frozen = list(variants)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(frozen, snapshot))
    return diagnostics


def validate_or_raise(
    variants: list[ParsedVariant],
    snapshot: RegistrySnapshot,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run validation; raises :class:`InvalidCombinationError` on any ERROR diagnostic.

    The error's reason is the first failing rule's message. Returns the
    warnings when no errors are found.
    """
    diagnostics = validate(variants, snapshot, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise InvalidCombinationError(errors[0].message, diagnostics)
    return diagnostics
