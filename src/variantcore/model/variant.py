"""Per-token resolution artifacts: parsed variants, combinations and results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from variantcore.model.diagnostic import Diagnostic
from variantcore.model.kind import VariantKind


class Interaction(Enum):
    """Advisory tags describing how the variants of one token interact."""

    ENHANCES = "enhances"
    REQUIRES_SEPARATE_RULES = "requires_separate_rules"
    USES_MEDIA_QUERIES = "uses_media_queries"


class CssStrategy(Enum):
    """How the CSS emission step should lay out the rule for a combination."""

    DIRECT_SELECTORS = "direct_selectors"
    CLASS_BASED = "class_based"
    MEDIA_QUERY_ONLY = "media_query_only"
    NESTED_MEDIA_QUERIES = "nested_media_queries"


@dataclass(frozen=True)
class ParsedVariant:
    """One variant instance resolved from a token segment.

    ``breakpoint`` is only set for responsive variants resolved through the
    breakpoint table.
    """

    name: str
    kind: VariantKind
    matched: bool = True
    breakpoint: str | None = None

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the resolution parameters."""
        if self.breakpoint is None:
            return MappingProxyType({})
        return MappingProxyType({"breakpoint": self.breakpoint})

    @property
    def label(self) -> str:
        """Display form of the kind, ``Custom(name)`` for custom variants."""
        if self.kind is VariantKind.CUSTOM:
            return f"Custom({self.name})"
        return self.kind.name


@dataclass(frozen=True)
class VariantCombination:
    """The ordered variants of one token with their aggregate score."""

    variants: tuple[ParsedVariant, ...] = ()
    specificity: int = 0
    valid: bool = True
    error_message: str | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        if not self.valid and not self.error_message:
            raise ValueError("An invalid combination requires an error message")

    @classmethod
    def invalid(
        cls,
        message: str,
        variants: tuple[ParsedVariant, ...] = (),
        diagnostics: tuple[Diagnostic, ...] = (),
    ) -> VariantCombination:
        return cls(
            variants=variants,
            specificity=0,
            valid=False,
            error_message=message,
            diagnostics=diagnostics,
        )

    @property
    def names(self) -> list[str]:
        return [v.name for v in self.variants]

    @property
    def kinds(self) -> list[VariantKind]:
        return [v.kind for v in self.variants]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


@dataclass(frozen=True)
class ParseResult:
    """Final output of resolving one token.

    ``success`` is derived: the combination is valid and the base class is
    non-empty. ``error`` names the error type when resolution failed and
    ``css_strategy`` is only set on successful results.
    """

    original_token: str
    base_class: str
    combination: VariantCombination
    selector: str = ""
    media_query: str | None = None
    media_queries: tuple[str, ...] = ()
    interactions: tuple[Interaction, ...] = ()
    css_strategy: CssStrategy | None = None
    error: str | None = None

    @classmethod
    def failure(
        cls,
        original_token: str,
        message: str,
        *,
        error: str,
        base_class: str = "",
        variants: tuple[ParsedVariant, ...] = (),
        diagnostics: tuple[Diagnostic, ...] = (),
    ) -> ParseResult:
        return cls(
            original_token=original_token,
            base_class=base_class,
            combination=VariantCombination.invalid(message, variants, diagnostics),
            error=error,
        )

    @property
    def success(self) -> bool:
        return self.combination.valid and bool(self.base_class)

    @property
    def variants(self) -> tuple[ParsedVariant, ...]:
        return self.combination.variants

    @property
    def specificity(self) -> int:
        return self.combination.specificity

    @property
    def valid(self) -> bool:
        return self.combination.valid

    @property
    def error_message(self) -> str | None:
        return self.combination.error_message

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serialisable view of the result."""
        return {
            "original_token": self.original_token,
            "base_class": self.base_class,
            "variants": [
                {
                    "name": v.name,
                    "kind": v.label,
                    "matched": v.matched,
                    "parameters": dict(v.parameters),
                }
                for v in self.variants
            ],
            "specificity": self.specificity,
            "valid": self.valid,
            "selector": self.selector,
            "media_query": self.media_query,
            "media_queries": list(self.media_queries),
            "interactions": [i.value for i in self.interactions],
            "css_strategy": self.css_strategy.value if self.css_strategy else None,
            "success": self.success,
            "error": self.error,
            "error_message": self.error_message,
            "diagnostics": [str(d) for d in self.combination.diagnostics],
        }
