"""Interaction analysis: advisory tags for the CSS emission step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from variantcore.model.kind import VariantKind
from variantcore.model.variant import CssStrategy, Interaction, ParsedVariant

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = ["analyze_interactions", "choose_css_strategy"]


def _carries_media_query(variant: ParsedVariant, snapshot: RegistrySnapshot | None) -> bool:
    if variant.kind.is_media_feature:
        return True
    if variant.kind is VariantKind.CUSTOM and snapshot is not None:
        custom = snapshot.custom.get(variant.name)
        return custom is not None and bool(custom.media_query)
    return False


def analyze_interactions(
    variants: Iterable[ParsedVariant], snapshot: RegistrySnapshot | None = None
) -> list[Interaction]:
    """Classify how the variants of one token interact.

    - responsive together with a state variant -> ENHANCES
    - any dark-mode variant -> REQUIRES_SEPARATE_RULES
    - any media-based variant -> USES_MEDIA_QUERIES
    """
    items = list(variants)
    kinds = {v.kind for v in items}
    interactions: list[Interaction] = []

    if VariantKind.RESPONSIVE in kinds and VariantKind.STATE in kinds:
        interactions.append(Interaction.ENHANCES)

    if VariantKind.DARK_MODE in kinds:
        interactions.append(Interaction.REQUIRES_SEPARATE_RULES)

    if any(_carries_media_query(v, snapshot) for v in items):
        interactions.append(Interaction.USES_MEDIA_QUERIES)

    return interactions


def choose_css_strategy(interactions: Iterable[Interaction]) -> CssStrategy:
    """Pick the rule layout for a combination from its interaction tags.

    Media conditions together with a dark-mode ancestor need the class rule
    nested inside the media block; either one alone gets its own layout.
    """
    tags = set(interactions)
    media = Interaction.USES_MEDIA_QUERIES in tags
    separate = Interaction.REQUIRES_SEPARATE_RULES in tags
    if media and separate:
        return CssStrategy.NESTED_MEDIA_QUERIES
    if media:
        return CssStrategy.MEDIA_QUERY_ONLY
    if separate:
        return CssStrategy.CLASS_BASED
    return CssStrategy.DIRECT_SELECTORS
