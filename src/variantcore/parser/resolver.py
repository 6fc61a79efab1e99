"""Resolve variant names to parsed variants against a registry snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParsedVariant
from variantcore.parser.errors import UnknownVariantError

if TYPE_CHECKING:
    from variantcore.registry.registry import RegistrySnapshot

__all__ = ["resolve_variant", "resolve_variants"]


def resolve_variant(name: str, snapshot: RegistrySnapshot) -> ParsedVariant:
    """Resolve a single variant name.

    Resolution order:
    1. Standard table, exact name
    2. Custom variants, exact name
    3. Breakpoints (``RESPONSIVE`` kind, tagged with the breakpoint name)

    Raises :class:`UnknownVariantError` when nothing matches.
    """
    definition = snapshot.definitions.get(name)
    if definition is not None:
        return ParsedVariant(name=name, kind=definition.kind)

    if name in snapshot.custom:
        return ParsedVariant(name=name, kind=VariantKind.CUSTOM)

    if name in snapshot.breakpoints:
        return ParsedVariant(
            name=name,
            kind=VariantKind.RESPONSIVE,
            breakpoint=name,
        )

    raise UnknownVariantError(name)


def resolve_variants(names: list[str], snapshot: RegistrySnapshot) -> list[ParsedVariant]:
    """Resolve names in order; the first unknown name aborts the whole list."""
    return [resolve_variant(name, snapshot) for name in names]
