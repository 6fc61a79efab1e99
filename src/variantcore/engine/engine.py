"""Resolution engine: turns a token into a ParseResult.

Pipeline per token: split -> resolve names -> validate -> score -> order ->
compose selector and media query -> analyze interactions. Errors in any
stage become a failed ParseResult; nothing is raised for a bad token.
"""

from __future__ import annotations

import logging
from typing import Iterable

from variantcore.engine.cache import ResultCache
from variantcore.engine.conflicts import analyze_interactions, choose_css_strategy
from variantcore.engine.ordering import order_variants
from variantcore.engine.selector import collect_media_queries, compose_selector
from variantcore.engine.specificity import calculate_specificity
from variantcore.events import types as events
from variantcore.events.bus import EventBus
from variantcore.model.variant import ParsedVariant, ParseResult, VariantCombination
from variantcore.parser.errors import (
    InvalidCombinationError,
    TokenSyntaxError,
    UnknownVariantError,
)
from variantcore.parser.resolver import resolve_variants
from variantcore.parser.splitter import split_token
from variantcore.registry.registry import RegistrySnapshot, VariantRegistry
from variantcore.validation.validator import RuleFunc, validate_or_raise

logger = logging.getLogger(__name__)


def resolve_token(
    token: str,
    snapshot: RegistrySnapshot,
    extra_rules: list[RuleFunc] | None = None,
) -> ParseResult:
    """Resolve *token* against one registry snapshot.

    Pure function of its inputs: the same token and snapshot always give an
    identical result.
    """
    try:
        names, base_class = split_token(token)
    except TokenSyntaxError as exc:
        return ParseResult.failure(token, str(exc), error=type(exc).__name__)

    try:
        variants = resolve_variants(names, snapshot)
    except UnknownVariantError as exc:
        return ParseResult.failure(
            token, str(exc), error=type(exc).__name__, base_class=base_class
        )

    try:
        diagnostics = validate_or_raise(variants, snapshot, extra_rules=extra_rules)
    except InvalidCombinationError as exc:
        return ParseResult.failure(
            token,
            exc.reason,
            error=type(exc).__name__,
            base_class=base_class,
            variants=tuple(variants),
            diagnostics=tuple(exc.diagnostics),
        )

    ordered = order_variants(variants, snapshot)
    queries = collect_media_queries(ordered, snapshot)
    interactions = analyze_interactions(variants, snapshot)
    combination = VariantCombination(
        variants=tuple(variants),
        specificity=calculate_specificity(variants, snapshot),
        diagnostics=tuple(diagnostics),
    )
    return ParseResult(
        original_token=token,
        base_class=base_class,
        combination=combination,
        selector=compose_selector(ordered, base_class, snapshot),
        media_query=queries[0] if queries else None,
        media_queries=tuple(queries),
        interactions=tuple(interactions),
        css_strategy=choose_css_strategy(interactions),
    )


class VariantEngine:
    """Resolves tokens against a registry, with an optional result cache.

    The engine takes one registry snapshot per call, so custom variants may be
    registered or removed between (or during) calls without locking here.
    """

    def __init__(
        self,
        registry: VariantRegistry | None = None,
        *,
        event_bus: EventBus | None = None,
        cache_size: int | None = 1024,
        extra_rules: list[RuleFunc] | None = None,
    ) -> None:
        self.registry = registry or VariantRegistry(event_bus=event_bus)
        self.event_bus = event_bus or self.registry.event_bus
        self.extra_rules = list(extra_rules or [])
        self.cache: ResultCache | None = None
        if cache_size:
            self.cache = ResultCache(cache_size, event_bus=self.event_bus)
            self.cache.bind(self.registry.event_bus)

    def resolve(self, token: str) -> ParseResult:
        """Resolve one token. Never raises for malformed or invalid tokens."""
        snapshot = self.registry.snapshot()

        cached = False
        result: ParseResult | None = None
        if self.cache is not None:
            result = self.cache.get(token, snapshot.version)
            cached = result is not None
        if result is None:
            result = resolve_token(token, snapshot, self.extra_rules)
            if self.cache is not None:
                self.cache.put(token, snapshot.version, result)

        if result.success:
            self.event_bus.emit(
                events.TokenResolved(
                    token=token, specificity=result.specificity, cached=cached
                )
            )
        else:
            logger.debug("Rejected %r: %s", token, result.error_message)
            self.event_bus.emit(
                events.TokenRejected(
                    token=token,
                    error=result.error or "",
                    message=result.error_message or "",
                    cached=cached,
                )
            )
        return result

    def close(self) -> None:
        """Detach the cache from the registry's event bus."""
        if self.cache is not None:
            self.cache.unbind()

    def resolve_many(self, tokens: Iterable[str]) -> list[ParseResult]:
        """Resolve tokens in order."""
        return [self.resolve(token) for token in tokens]

    def specificity_of(self, variants: Iterable[ParsedVariant]) -> int:
        """Score arbitrary parsed variants against the current registry."""
        return calculate_specificity(variants, self.registry.snapshot())

    # --- custom variant pass-throughs ----------------------------------------

    def register(self, name: str, selector: str, **options: object) -> None:
        """Register a custom variant on the underlying registry."""
        self.registry.register(name, selector, **options)  # type: ignore[arg-type]

    def unregister(self, name: str) -> bool:
        return self.registry.unregister(name)
