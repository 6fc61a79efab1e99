"""Combination validation: cross-variant rules reported as diagnostics."""

from variantcore.validation.validator import RuleFunc, validate, validate_or_raise

__all__ = ["RuleFunc", "validate", "validate_or_raise"]
