"""Resolution engine: scoring, ordering, selector composition and caching."""

from variantcore.engine.cache import ResultCache
from variantcore.engine.conflicts import analyze_interactions, choose_css_strategy
from variantcore.engine.engine import VariantEngine, resolve_token
from variantcore.engine.ordering import order_variants
from variantcore.engine.optimizer import (
    can_simplify,
    optimize_combination,
    simplify_combination,
)
from variantcore.engine.selector import (
    Fragment,
    collect_media_queries,
    compose_selector,
    split_pattern,
)
from variantcore.engine.specificity import calculate_specificity, priority_of

__all__ = [
    "VariantEngine",
    "resolve_token",
    "ResultCache",
    "analyze_interactions",
    "choose_css_strategy",
    "optimize_combination",
    "can_simplify",
    "simplify_combination",
    "order_variants",
    "Fragment",
    "split_pattern",
    "compose_selector",
    "collect_media_queries",
    "calculate_specificity",
    "priority_of",
]
