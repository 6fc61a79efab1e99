"""Bounded result cache keyed by raw token string."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict

from variantcore.events import types as events
from variantcore.events.bus import EventBus
from variantcore.model.variant import ParseResult

logger = logging.getLogger(__name__)

# Registry changes after which no cached entry can be trusted.
INVALIDATING_EVENTS = (
    events.CustomVariantRegistered,
    events.CustomVariantUnregistered,
    events.BreakpointChanged,
)


class ResultCache:
    """Least-recently-used cache of parse results.

    Entries are only valid for the registry version they were computed
    against; a lookup with a different version clears the whole cache.
    """

    def __init__(self, max_size: int = 1024, *, event_bus: EventBus | None = None) -> None:
        if max_size <= 0:
            raise ValueError(f"Cache size must be positive, got {max_size}")
        self.max_size = max_size
        self.event_bus = event_bus
        self._lock = threading.Lock()
        self._entries: OrderedDict[str, ParseResult] = OrderedDict()
        self._version: int | None = None
        self._bound_bus: EventBus | None = None
        self.hits = 0
        self.misses = 0

    def bind(self, event_bus: EventBus) -> None:
        """Clear the cache whenever *event_bus* reports a registry change.

        A cache is bound to at most one bus; binding again moves it.
        """
        self.unbind()
        for event_type in INVALIDATING_EVENTS:
            event_bus.subscribe(event_type, self._on_registry_change)
        self._bound_bus = event_bus

    def unbind(self) -> None:
        """Stop listening to the bus passed to :meth:`bind`."""
        if self._bound_bus is None:
            return
        for event_type in INVALIDATING_EVENTS:
            self._bound_bus.unsubscribe(event_type, self._on_registry_change)
        self._bound_bus = None

    def _on_registry_change(self, _event: object) -> None:
        self.clear()

    def get(self, token: str, version: int) -> ParseResult | None:
        with self._lock:
            dropped = self._sync_version(version)
            result = self._entries.get(token)
            if result is None:
                self.misses += 1
            else:
                self._entries.move_to_end(token)
                self.hits += 1
        self._report(dropped)
        return result

    def put(self, token: str, version: int, result: ParseResult) -> None:
        with self._lock:
            dropped = self._sync_version(version)
            self._entries[token] = result
            self._entries.move_to_end(token)
            while len(self._entries) > self.max_size:
                self._entries.popitem(last=False)
        self._report(dropped)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            dropped = len(self._entries)
            self._entries.clear()
            self._version = None
        self._report(dropped)

    def _sync_version(self, version: int) -> int:
        """Forget entries computed for another registry version. Caller holds the lock."""
        if version == self._version:
            return 0
        dropped = len(self._entries)
        self._entries.clear()
        self._version = version
        return dropped

    def _report(self, dropped: int) -> None:
        if not dropped:
            return
        logger.debug("Cleared %d cached results", dropped)
        if self.event_bus is not None:
            self.event_bus.emit(events.CacheCleared(entries=dropped))

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def stats(self) -> tuple[int, int]:
        """Return ``(entries, max_size)``."""
        with self._lock:
            return len(self._entries), self.max_size

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._entries
