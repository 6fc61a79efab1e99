"""Event system: bus and event types for registry changes and token resolution."""

from variantcore.events.bus import EventBus
from variantcore.events.types import (
    BreakpointChanged,
    CacheCleared,
    CustomVariantRegistered,
    CustomVariantUnregistered,
    TokenRejected,
    TokenResolved,
)

__all__ = [
    "EventBus",
    "BreakpointChanged",
    "CacheCleared",
    "CustomVariantRegistered",
    "CustomVariantUnregistered",
    "TokenRejected",
    "TokenResolved",
]
