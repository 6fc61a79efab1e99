"""Variant kinds and their ranking priorities."""

from __future__ import annotations

from enum import Enum


class VariantKind(Enum):
    """Category of a parsed variant.

    ``CUSTOM`` is the ``Custom(name)`` case: the custom name is the variant's
    own name, carried on :class:`~variantcore.model.variant.ParsedVariant`.
    """

    STATE = "state"
    RESPONSIVE = "responsive"
    DARK_MODE = "dark_mode"
    FOCUS_WITHIN = "focus_within"
    MOTION_SAFE = "motion_safe"
    MOTION_REDUCE = "motion_reduce"
    CONTRAST = "contrast"
    REDUCED_MOTION = "reduced_motion"
    ORIENTATION = "orientation"
    PRINT = "print"
    SCREEN = "screen"
    CUSTOM = "custom"

    @property
    def priority(self) -> int:
        """Ranking weight of the kind (larger ranks higher)."""
        return KIND_PRIORITY[self]

    @property
    def is_media_feature(self) -> bool:
        """True for kinds that condition on a media query rather than a selector."""
        return self in MEDIA_KINDS


KIND_PRIORITY: dict[VariantKind, int] = {
    VariantKind.RESPONSIVE: 100,
    VariantKind.STATE: 80,
    VariantKind.DARK_MODE: 60,
    VariantKind.FOCUS_WITHIN: 50,
    VariantKind.MOTION_SAFE: 40,
    VariantKind.MOTION_REDUCE: 40,
    VariantKind.CONTRAST: 30,
    VariantKind.REDUCED_MOTION: 30,
    VariantKind.ORIENTATION: 20,
    VariantKind.PRINT: 10,
    VariantKind.SCREEN: 10,
    VariantKind.CUSTOM: 5,
}

MEDIA_KINDS = frozenset({
    VariantKind.RESPONSIVE,
    VariantKind.MOTION_SAFE,
    VariantKind.MOTION_REDUCE,
    VariantKind.CONTRAST,
    VariantKind.REDUCED_MOTION,
    VariantKind.ORIENTATION,
    VariantKind.PRINT,
    VariantKind.SCREEN,
})

# Custom variants registered without an explicit specificity.
DEFAULT_CUSTOM_SPECIFICITY = 1
