"""Variant definitions: the standard table entries and user-registered variants."""

from __future__ import annotations

from dataclasses import dataclass

from variantcore.model.kind import DEFAULT_CUSTOM_SPECIFICITY, VariantKind


@dataclass(frozen=True)
class VariantDefinition:
    """Static description of a standard variant.

    Attributes:
        name: The variant prefix as written in a token (``hover``, ``dark``).
        kind: The variant's category.
        selector_pattern: Selector fragment (``:hover``, ``.dark ``); empty for
            variants that only contribute a media query.
        media_query: Media condition, if the variant is media based.
        specificity: Ranking weight; defaults to the kind's priority.
        combinable: Whether the variant is expected alongside others.
        dependencies: Variant names that must appear in the same token.
    """

    name: str
    kind: VariantKind
    selector_pattern: str = ""
    media_query: str | None = None
    specificity: int | None = None
    combinable: bool = True
    dependencies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Variant definition name must be a non-empty string")
        if self.specificity is None:
            object.__setattr__(self, "specificity", self.kind.priority)

    def can_apply(self, active: list[str] | tuple[str, ...] | set[str]) -> bool:
        """True if every dependency is among *active* variant names."""
        return all(dep in active for dep in self.dependencies)


@dataclass(frozen=True)
class CustomVariant:
    """A variant registered at runtime."""

    name: str
    selector: str
    media_query: str | None = None
    specificity: int = DEFAULT_CUSTOM_SPECIFICITY
    combinable: bool = True
    dependencies: tuple[str, ...] = ()

    @property
    def kind(self) -> VariantKind:
        return VariantKind.CUSTOM

    @property
    def selector_pattern(self) -> str:
        return self.selector

    def can_apply(self, active: list[str] | tuple[str, ...] | set[str]) -> bool:
        """True if every dependency is among *active* variant names."""
        return all(dep in active for dep in self.dependencies)
