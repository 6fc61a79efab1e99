"""Usage analysis and plain-text formatting of parse results."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from variantcore.engine.optimizer import can_simplify, optimize_combination
from variantcore.model.kind import VariantKind
from variantcore.model.variant import ParseResult, VariantCombination

# Combinations scoring above this are flagged by find_suggestions.
HIGH_SPECIFICITY = 300

_TOP_VARIANTS = 10
_TOP_SUGGESTIONS = 5


class SuggestionType(Enum):
    HIGH_SPECIFICITY = "high_specificity"
    REDUNDANT_VARIANT = "redundant_variant"
    STANDALONE_VARIANT = "standalone_variant"
    CONFLICTING_VARIANTS = "conflicting_variants"


@dataclass(frozen=True)
class Suggestion:
    token: str
    kind: SuggestionType
    description: str
    replacement: str | None = None


@dataclass
class UsageStats:
    """Aggregate counts over a batch of parse results."""

    total: int = 0
    successful: int = 0
    failed: int = 0
    variant_counts: Counter[str] = field(default_factory=Counter)
    error_counts: Counter[str] = field(default_factory=Counter)

    @property
    def success_rate(self) -> float:
        return self.successful / self.total if self.total else 0.0

    def most_used(self, limit: int = _TOP_VARIANTS) -> list[tuple[str, int]]:
        """Variants by descending use, ties broken by name."""
        ranked = sorted(self.variant_counts.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:limit]


def analyze_usage(results: Iterable[ParseResult]) -> UsageStats:
    stats = UsageStats()
    for result in results:
        stats.total += 1
        if result.success:
            stats.successful += 1
            stats.variant_counts.update(v.name for v in result.variants)
        else:
            stats.failed += 1
            stats.error_counts[result.error or "unknown"] += 1
    return stats


_RULE_SUGGESTIONS = {
    "check_duplicate_variants": SuggestionType.REDUNDANT_VARIANT,
    "check_combinable": SuggestionType.STANDALONE_VARIANT,
}


def _rebuild(combination: VariantCombination, base_class: str) -> str:
    return ":".join([*combination.names, base_class])


def find_suggestions(results: Iterable[ParseResult]) -> list[Suggestion]:
    """Point out tokens worth simplifying, with a rewritten token where one exists."""
    suggestions: list[Suggestion] = []
    for result in results:
        if not result.success:
            if result.base_class and can_simplify(result.combination):
                kept = [
                    v.name
                    for v in result.variants
                    if v.kind not in (VariantKind.PRINT, VariantKind.SCREEN)
                ]
                suggestions.append(
                    Suggestion(
                        result.original_token,
                        SuggestionType.CONFLICTING_VARIANTS,
                        "Print and screen variants cancel out",
                        replacement=":".join([*kept, result.base_class]),
                    )
                )
            continue
        for warning in result.combination.warnings:
            kind = _RULE_SUGGESTIONS.get(warning.rule)
            if kind is None:
                continue
            replacement = None
            if kind is SuggestionType.REDUNDANT_VARIANT:
                replacement = _rebuild(
                    optimize_combination(result.combination), result.base_class
                )
            suggestions.append(
                Suggestion(result.original_token, kind, warning.message, replacement)
            )
        if result.specificity > HIGH_SPECIFICITY:
            suggestions.append(
                Suggestion(
                    result.original_token,
                    SuggestionType.HIGH_SPECIFICITY,
                    f"High specificity ({result.specificity}) may cause override issues",
                )
            )
    return suggestions


def format_combination(combination: VariantCombination) -> str:
    if not combination.variants:
        return "no variants"
    names = ", ".join(f"{v.name} ({v.label})" for v in combination.variants)
    return f"{names} (specificity: {combination.specificity})"


def format_result(result: ParseResult) -> str:
    """Multi-line description of one result."""
    lines = [
        f"Class: {result.original_token}",
        f"Base: {result.base_class}",
        f"Success: {str(result.success).lower()}",
    ]
    if result.success:
        lines.append(f"Combination: {format_combination(result.combination)}")
        lines.append(f"Selector: {result.selector}")
        if result.media_query:
            lines.append(f"Media Query: {result.media_query}")
        if len(result.media_queries) > 1:
            lines.append(f"Other Media Queries: {', '.join(result.media_queries[1:])}")
        if result.interactions:
            lines.append(
                "Interactions: " + ", ".join(i.value for i in result.interactions)
            )
        if result.css_strategy is not None:
            lines.append(f"CSS Strategy: {result.css_strategy.value}")
        for warning in result.combination.warnings:
            lines.append(str(warning))
    elif result.error_message:
        lines.append(f"Error: {result.error}: {result.error_message}")
    return "\n".join(lines)


def summary_report(results: list[ParseResult]) -> str:
    stats = analyze_usage(results)
    suggestions = find_suggestions(results)

    lines = [
        "=== Variant Parsing Summary ===",
        "",
        f"Total Classes: {stats.total}",
        f"Successful Parses: {stats.successful} ({stats.success_rate * 100:.1f}%)",
        f"Failed Parses: {stats.failed}",
    ]

    most_used = stats.most_used()
    if most_used:
        lines.append("")
        lines.append("Most Used Variants:")
        lines.extend(f"  {name}: {count}" for name, count in most_used)

    if stats.error_counts:
        lines.append("")
        lines.append("Failures:")
        lines.extend(
            f"  {error}: {count}" for error, count in sorted(stats.error_counts.items())
        )

    if suggestions:
        lines.append("")
        lines.append(f"Suggestions ({len(suggestions)}):")
        for suggestion in suggestions[:_TOP_SUGGESTIONS]:
            line = f"  {suggestion.token}: {suggestion.description}"
            if suggestion.replacement:
                line += f" (use {suggestion.replacement})"
            lines.append(line)
        if len(suggestions) > _TOP_SUGGESTIONS:
            lines.append(f"  ... and {len(suggestions) - _TOP_SUGGESTIONS} more")

    return "\n".join(lines) + "\n"
