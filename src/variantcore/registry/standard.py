"""The standard variant table.

Every behavioural fact about a standard variant (selector text, media query,
priority, combinability) lives in the definitions built here.
"""

from __future__ import annotations

from variantcore.model.definition import VariantDefinition
from variantcore.model.kind import VariantKind

__all__ = [
    "DEFAULT_BREAKPOINTS",
    "breakpoint_media_query",
    "standard_definitions",
]

# Breakpoint name -> minimum viewport width in pixels.
DEFAULT_BREAKPOINTS: dict[str, int] = {
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
    "2xl": 1536,
}

_PSEUDO_CLASSES: list[tuple[str, str]] = [
    ("hover", ":hover"),
    ("focus", ":focus"),
    ("focus-visible", ":focus-visible"),
    ("active", ":active"),
    ("visited", ":visited"),
    ("target", ":target"),
    ("first", ":first-child"),
    ("last", ":last-child"),
    ("only", ":only-child"),
    ("odd", ":nth-child(odd)"),
    ("even", ":nth-child(even)"),
    ("first-of-type", ":first-of-type"),
    ("last-of-type", ":last-of-type"),
    ("only-of-type", ":only-of-type"),
    ("empty", ":empty"),
    ("disabled", ":disabled"),
    ("enabled", ":enabled"),
    ("checked", ":checked"),
    ("indeterminate", ":indeterminate"),
    ("default", ":default"),
    ("required", ":required"),
    ("valid", ":valid"),
    ("invalid", ":invalid"),
    ("in-range", ":in-range"),
    ("out-of-range", ":out-of-range"),
    ("placeholder-shown", ":placeholder-shown"),
    ("autofill", ":autofill"),
    ("read-only", ":read-only"),
    ("read-write", ":read-write"),
    ("open", "[open]"),
]

_PSEUDO_ELEMENTS: list[tuple[str, str]] = [
    ("before", "::before"),
    ("after", "::after"),
    ("placeholder", "::placeholder"),
    ("file", "::file-selector-button"),
    ("marker", "::marker"),
    ("selection", "::selection"),
    ("first-line", "::first-line"),
    ("first-letter", "::first-letter"),
    ("backdrop", "::backdrop"),
]

# Parent/sibling state: group-hover renders as ".group:hover " before the element.
_GROUP_STATES = ["hover", "focus", "active", "focus-visible", "disabled", "checked"]

_DIRECTION: list[tuple[str, str]] = [
    ("rtl", '[dir="rtl"] '),
    ("ltr", '[dir="ltr"] '),
]

_MEDIA_FEATURES: list[tuple[str, VariantKind, str]] = [
    ("motion-safe", VariantKind.MOTION_SAFE, "(prefers-reduced-motion: no-preference)"),
    ("motion-reduce", VariantKind.MOTION_REDUCE, "(prefers-reduced-motion: reduce)"),
    ("contrast-more", VariantKind.CONTRAST, "(prefers-contrast: more)"),
    ("contrast-less", VariantKind.CONTRAST, "(prefers-contrast: less)"),
    ("portrait", VariantKind.ORIENTATION, "(orientation: portrait)"),
    ("landscape", VariantKind.ORIENTATION, "(orientation: landscape)"),
]


def breakpoint_media_query(min_width: int) -> str:
    """Media condition for a breakpoint of *min_width* pixels."""
    return f"(min-width:{min_width}px)"


def _state_definitions() -> list[VariantDefinition]:
    defs = [
        VariantDefinition(name, VariantKind.STATE, pattern)
        for name, pattern in _PSEUDO_CLASSES + _PSEUDO_ELEMENTS
    ]
    for state in _GROUP_STATES:
        pseudo = dict(_PSEUDO_CLASSES)[state]
        defs.append(
            VariantDefinition(f"group-{state}", VariantKind.STATE, f".group{pseudo} ")
        )
        defs.append(
            VariantDefinition(f"peer-{state}", VariantKind.STATE, f".peer{pseudo} ~ ")
        )
    defs.extend(
        VariantDefinition(name, VariantKind.STATE, pattern) for name, pattern in _DIRECTION
    )
    return defs


def standard_definitions() -> dict[str, VariantDefinition]:
    """Build the ``name -> VariantDefinition`` table of standard variants.

    Breakpoints are not part of this table; they resolve through the
    registry's breakpoint table.
    """
    defs: list[VariantDefinition] = []
    defs.extend(_state_definitions())

    defs.append(VariantDefinition("dark", VariantKind.DARK_MODE, ".dark "))
    defs.append(
        VariantDefinition("focus-within", VariantKind.FOCUS_WITHIN, ":focus-within")
    )

    for name, kind, query in _MEDIA_FEATURES:
        defs.append(VariantDefinition(name, kind, "", media_query=query))

    defs.append(
        VariantDefinition("print", VariantKind.PRINT, "", media_query="print", combinable=False)
    )
    defs.append(
        VariantDefinition("screen", VariantKind.SCREEN, "", media_query="screen", combinable=False)
    )

    return {d.name: d for d in defs}
