"""Selector composition: render ordered variants around a base class.

Placement of a selector pattern:
    - ``&`` marks the element; text before it is an ancestor prefix, text
      after it a suffix (``.dark &``, ``&:where(.x *)``).
    - a pattern ending in whitespace or a combinator is an ancestor prefix
      (``.dark ``, ``.peer:checked ~ ``, ``.list >``).
    - a pattern starting with ``:`` or ``[`` is a suffix on the element
      (``:hover``, ``::before``, ``[open]``).
    - anything else (``.theme-x``) is an ancestor prefix followed by a space.
    - an empty pattern renders nothing (media-only variants).

Prefixes appear in canonical order before the base class, suffixes in
canonical order after it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable

from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParsedVariant

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = [
    "Fragment",
    "split_pattern",
    "render_fragment",
    "join_prefixes",
    "compose_selector",
    "media_query_for",
    "collect_media_queries",
]

PLACEHOLDER = "&"
COMBINATORS = ("~", ">", "+")


@dataclass(frozen=True)
class Fragment:
    """Selector text one variant contributes around the element."""

    prefix: str = ""
    suffix: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.prefix and not self.suffix


def split_pattern(pattern: str) -> Fragment:
    """Classify a selector pattern into prefix and suffix parts."""
    if not pattern:
        return Fragment()
    if PLACEHOLDER in pattern:
        before, after = pattern.split(PLACEHOLDER, 1)
        return Fragment(prefix=before, suffix=after)
    if pattern[-1].isspace():
        return Fragment(prefix=pattern)
    if pattern.endswith(COMBINATORS):
        return Fragment(prefix=pattern + " ")
    if pattern.startswith((":", "[")):
        return Fragment(suffix=pattern)
    return Fragment(prefix=pattern + " ")


def render_fragment(variant: ParsedVariant, snapshot: RegistrySnapshot) -> Fragment:
    """Look up the variant's selector pattern and classify it."""
    definition = snapshot.lookup(variant.name)
    if definition is None or (
        variant.kind is VariantKind.RESPONSIVE and variant.breakpoint is not None
    ):
        return Fragment()
    return split_pattern(definition.selector_pattern)


def join_prefixes(prefixes: Iterable[str]) -> str:
    """Concatenate prefixes, adding one space only where neither side has one."""
    result = ""
    for part in prefixes:
        if not part:
            continue
        if result and not result[-1].isspace() and not part[0].isspace():
            result += " "
        result += part
    return result


def compose_selector(
    ordered: Iterable[ParsedVariant], base_class: str, snapshot: RegistrySnapshot
) -> str:
    """Build the full selector for *base_class* from canonically ordered variants."""
    fragments = [render_fragment(v, snapshot) for v in ordered]
    prefix = join_prefixes(f.prefix for f in fragments)
    suffix = "".join(f.suffix for f in fragments)
    return f"{prefix}.{base_class}{suffix}"


def media_query_for(variant: ParsedVariant, snapshot: RegistrySnapshot) -> str | None:
    """Media condition a variant contributes, if any."""
    if variant.kind is VariantKind.RESPONSIVE and variant.breakpoint is not None:
        return snapshot.breakpoint_query(variant.breakpoint)
    definition = snapshot.lookup(variant.name)
    if definition is None:
        return None
    return definition.media_query or None


def collect_media_queries(
    ordered: Iterable[ParsedVariant], snapshot: RegistrySnapshot
) -> list[str]:
    """All media conditions in canonical order; the first is the one surfaced."""
    queries: list[str] = []
    for variant in ordered:
        query = media_query_for(variant, snapshot)
        if query:
            queries.append(query)
    return queries
