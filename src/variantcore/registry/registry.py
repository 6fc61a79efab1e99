"""Variant registry: the standard table, custom variants and breakpoints.

The registry is an explicit object owned by whoever builds the engine. Custom
variants and breakpoints can change during its lifetime; each change publishes
a new immutable :class:`RegistrySnapshot` so that a resolve call in flight
keeps reading the table it started with.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Union

from variantcore.events import types as events
from variantcore.events.bus import EventBus
from variantcore.model.definition import CustomVariant, VariantDefinition
from variantcore.model.kind import DEFAULT_CUSTOM_SPECIFICITY, VariantKind
from variantcore.registry.names import is_valid_variant_name, validate_variant_name
from variantcore.registry.standard import (
    DEFAULT_BREAKPOINTS,
    breakpoint_media_query,
    standard_definitions,
)

logger = logging.getLogger(__name__)

Definition = Union[VariantDefinition, CustomVariant]


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable view of the registry at one version."""

    definitions: Mapping[str, VariantDefinition]
    custom: Mapping[str, CustomVariant]
    breakpoints: Mapping[str, int]
    version: int = 0

    def lookup(self, name: str) -> Definition | None:
        """Return the standard or custom definition for *name* (standard first)."""
        definition = self.definitions.get(name)
        if definition is not None:
            return definition
        return self.custom.get(name)

    def breakpoint_query(self, name: str) -> str | None:
        """Media query for breakpoint *name*, or None if it is not a breakpoint."""
        width = self.breakpoints.get(name)
        if width is None:
            return None
        return breakpoint_media_query(width)

    def names(self) -> list[str]:
        """All resolvable variant names in resolution order, without duplicates."""
        seen: dict[str, None] = {}
        for name in (*self.definitions, *self.custom, *self.breakpoints):
            seen.setdefault(name, None)
        return list(seen)

    def supports(self, name: str) -> bool:
        return (
            name in self.definitions
            or name in self.custom
            or name in self.breakpoints
        )


class VariantRegistry:
    """Standard variant definitions plus a mutable table of custom variants.

    Registration and removal are serialised by a lock and swap in a new
    snapshot; readers never lock. Completing registration before concurrent
    parsing starts is the simplest discipline, but not required.
    """

    def __init__(
        self,
        breakpoints: Mapping[str, int] | None = None,
        *,
        event_bus: EventBus | None = None,
    ) -> None:
        self.event_bus = event_bus or EventBus()
        self._definitions: Mapping[str, VariantDefinition] = MappingProxyType(
            standard_definitions()
        )
        self._custom: dict[str, CustomVariant] = {}
        self._breakpoints: dict[str, int] = {}
        for name, width in (breakpoints if breakpoints is not None else DEFAULT_BREAKPOINTS).items():
            self._breakpoints[_check_breakpoint(name, width)] = int(width)
        self._lock = threading.Lock()
        self._version = 0
        self._snapshot = self._build_snapshot()

    # --- snapshots ------------------------------------------------------------

    def _build_snapshot(self) -> RegistrySnapshot:
        return RegistrySnapshot(
            definitions=self._definitions,
            custom=MappingProxyType(dict(self._custom)),
            breakpoints=MappingProxyType(dict(self._breakpoints)),
            version=self._version,
        )

    def _publish(self) -> int:
        """Bump the version and swap in a fresh snapshot. Caller holds the lock."""
        self._version += 1
        self._snapshot = self._build_snapshot()
        return self._version

    def snapshot(self) -> RegistrySnapshot:
        """Return the current immutable snapshot."""
        return self._snapshot

    @property
    def version(self) -> int:
        return self._snapshot.version

    # --- custom variants ------------------------------------------------------

    def register(
        self,
        name: str,
        selector: str,
        media_query: str | None = None,
        specificity: int | None = None,
        combinable: bool | None = None,
        dependencies: Iterable[str] = (),
    ) -> CustomVariant:
        """Register (or overwrite) a custom variant.

        Raises :class:`~variantcore.parser.errors.InvalidCustomVariantNameError`
        when *name* breaks the naming rule.
        """
        validate_variant_name(name)
        if specificity is not None and specificity < 0:
            raise ValueError(f"Specificity must be non-negative, got {specificity}")
        variant = CustomVariant(
            name=name,
            selector=selector,
            media_query=media_query or None,
            specificity=DEFAULT_CUSTOM_SPECIFICITY if specificity is None else specificity,
            combinable=True if combinable is None else combinable,
            dependencies=tuple(dependencies),
        )
        with self._lock:
            replaced = name in self._custom
            self._custom[name] = variant
            version = self._publish()

        if name in self._definitions or name in self._breakpoints:
            logger.warning(
                "Custom variant %r is shadowed by a standard variant or breakpoint", name
            )
        logger.info(
            "%s custom variant %r (selector=%r, media_query=%r)",
            "Replaced" if replaced else "Registered",
            name,
            selector,
            variant.media_query,
        )
        self.event_bus.emit(
            events.CustomVariantRegistered(name=name, version=version, replaced=replaced)
        )
        return variant

    def unregister(self, name: str) -> bool:
        """Remove a custom variant; returns False if it was not registered."""
        with self._lock:
            if name not in self._custom:
                return False
            del self._custom[name]
            version = self._publish()

        logger.info("Unregistered custom variant %r", name)
        self.event_bus.emit(events.CustomVariantUnregistered(name=name, version=version))
        return True

    def get_custom(self, name: str) -> CustomVariant | None:
        return self._snapshot.custom.get(name)

    def custom_variants(self) -> list[CustomVariant]:
        return list(self._snapshot.custom.values())

    # --- breakpoints ----------------------------------------------------------

    def set_breakpoint(self, name: str, min_width: int) -> None:
        """Add or change a breakpoint."""
        _check_breakpoint(name, min_width)
        with self._lock:
            self._breakpoints[name] = int(min_width)
            version = self._publish()
        logger.info("Set breakpoint %r to %dpx", name, min_width)
        self.event_bus.emit(
            events.BreakpointChanged(name=name, min_width=int(min_width), version=version)
        )

    def remove_breakpoint(self, name: str) -> bool:
        """Remove a breakpoint; returns False if it was not defined."""
        with self._lock:
            if name not in self._breakpoints:
                return False
            del self._breakpoints[name]
            version = self._publish()
        logger.info("Removed breakpoint %r", name)
        self.event_bus.emit(
            events.BreakpointChanged(name=name, min_width=None, version=version)
        )
        return True

    @property
    def breakpoints(self) -> Mapping[str, int]:
        return self._snapshot.breakpoints

    # --- lookups --------------------------------------------------------------

    def get_definition(self, name: str) -> VariantDefinition | None:
        """Return the standard definition for *name*, if any."""
        return self._definitions.get(name)

    def names(self, kind: VariantKind | None = None) -> list[str]:
        """All resolvable names, optionally restricted to one kind."""
        snap = self._snapshot
        if kind is None:
            return snap.names()
        if kind is VariantKind.RESPONSIVE:
            return list(snap.breakpoints)
        return [
            name
            for name in snap.names()
            if (definition := snap.lookup(name)) is not None and definition.kind is kind
        ]

    def supports(self, name: str) -> bool:
        return self._snapshot.supports(name)

    def __repr__(self) -> str:
        snap = self._snapshot
        return (
            f"VariantRegistry(standard={len(snap.definitions)}, "
            f"custom={len(snap.custom)}, breakpoints={len(snap.breakpoints)}, "
            f"version={snap.version})"
        )


def _check_breakpoint(name: str, min_width: int) -> str:
    if not is_valid_variant_name(name):
        raise ValueError(f"Invalid breakpoint name: {name!r}")
    if int(min_width) <= 0:
        raise ValueError(f"Breakpoint {name!r} needs a positive width, got {min_width}")
    return name
