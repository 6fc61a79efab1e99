"""Tests for the LRU result cache."""

import pytest

from variantcore.engine.cache import ResultCache
from variantcore.events import types as events
from variantcore.events.bus import EventBus
from variantcore.model.variant import ParseResult, VariantCombination


def _result(token: str) -> ParseResult:
    return ParseResult(token, token, VariantCombination(), selector=f".{token}")


class TestResultCache:
    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            ResultCache(0)

    def test_put_and_get(self):
        cache = ResultCache(4)
        cache.put("a", 0, _result("a"))
        assert cache.get("a", 0) == _result("a")
        assert "a" in cache
        assert len(cache) == 1

    def test_miss(self):
        cache = ResultCache(4)
        assert cache.get("nope", 0) is None
        assert cache.misses == 1

    def test_lru_eviction(self):
        cache = ResultCache(2)
        cache.put("a", 0, _result("a"))
        cache.put("b", 0, _result("b"))
        cache.get("a", 0)
        cache.put("c", 0, _result("c"))
        assert "a" in cache
        assert "b" not in cache
        assert "c" in cache

    def test_version_change_clears(self):
        cache = ResultCache(4)
        cache.put("a", 0, _result("a"))
        assert cache.get("a", 1) is None
        assert len(cache) == 0

    def test_hit_rate(self):
        cache = ResultCache(4)
        assert cache.hit_rate == 0.0
        cache.put("a", 0, _result("a"))
        cache.get("a", 0)
        cache.get("b", 0)
        assert cache.hit_rate == 0.5

    def test_stats(self):
        cache = ResultCache(8)
        cache.put("a", 0, _result("a"))
        assert cache.stats() == (1, 8)

    def test_clear_emits_event(self):
        bus = EventBus()
        cleared = []
        bus.subscribe(events.CacheCleared, cleared.append)
        cache = ResultCache(4, event_bus=bus)
        cache.put("a", 0, _result("a"))
        cache.put("b", 0, _result("b"))
        cache.clear()
        cache.clear()
        assert cleared == [events.CacheCleared(entries=2)]

    def test_bind_clears_on_registry_events(self):
        bus = EventBus()
        cache = ResultCache(4)
        cache.bind(bus)
        cache.put("a", 0, _result("a"))
        bus.emit(events.CustomVariantRegistered(name="x", version=1, replaced=False))
        assert len(cache) == 0

        cache.put("a", 1, _result("a"))
        bus.emit(events.TokenResolved(token="a", specificity=0, cached=False))
        assert len(cache) == 1

    def test_unbind_stops_clearing(self):
        bus = EventBus()
        cache = ResultCache(4)
        cache.bind(bus)
        cache.unbind()
        cache.put("a", 0, _result("a"))
        bus.emit(events.CustomVariantRegistered(name="x", version=1, replaced=False))
        assert len(cache) == 1

    def test_unbind_without_bind(self):
        ResultCache(4).unbind()

    def test_rebind_moves_subscription(self):
        first, second = EventBus(), EventBus()
        cache = ResultCache(4)
        cache.bind(first)
        cache.bind(second)
        cache.put("a", 0, _result("a"))
        first.emit(events.CustomVariantRegistered(name="x", version=1, replaced=False))
        assert len(cache) == 1
        second.emit(events.CustomVariantRegistered(name="x", version=1, replaced=False))
        assert len(cache) == 0

    def test_bind_twice_subscribes_once(self):
        bus = EventBus()
        cleared = []
        cache = ResultCache(4, event_bus=bus)
        bus.subscribe(events.CacheCleared, cleared.append)
        cache.bind(bus)
        cache.bind(bus)
        cache.put("a", 0, _result("a"))
        bus.emit(events.BreakpointChanged(name="sm", min_width=640, version=1))
        assert cleared == [events.CacheCleared(entries=1)]
