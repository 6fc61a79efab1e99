"""Tests for variant kinds, definitions, diagnostics and parse results."""

import pytest

from variantcore.model.definition import CustomVariant, VariantDefinition
from variantcore.model.diagnostic import Diagnostic, Severity
from variantcore.model.kind import KIND_PRIORITY, VariantKind
from variantcore.model.variant import (
    CssStrategy,
    Interaction,
    ParsedVariant,
    ParseResult,
    VariantCombination,
)


# ---------------------------------------------------------------------------
# VariantKind
# ---------------------------------------------------------------------------


class TestVariantKind:
    def test_every_kind_has_a_priority(self):
        assert set(KIND_PRIORITY) == set(VariantKind)

    def test_priority_table(self):
        assert VariantKind.RESPONSIVE.priority == 100
        assert VariantKind.STATE.priority == 80
        assert VariantKind.DARK_MODE.priority == 60
        assert VariantKind.FOCUS_WITHIN.priority == 50
        assert VariantKind.MOTION_SAFE.priority == 40
        assert VariantKind.MOTION_REDUCE.priority == 40
        assert VariantKind.CONTRAST.priority == 30
        assert VariantKind.REDUCED_MOTION.priority == 30
        assert VariantKind.ORIENTATION.priority == 20
        assert VariantKind.PRINT.priority == 10
        assert VariantKind.SCREEN.priority == 10
        assert VariantKind.CUSTOM.priority == 5

    def test_media_features(self):
        assert VariantKind.RESPONSIVE.is_media_feature
        assert VariantKind.PRINT.is_media_feature
        assert not VariantKind.STATE.is_media_feature
        assert not VariantKind.DARK_MODE.is_media_feature
        assert not VariantKind.CUSTOM.is_media_feature


# ---------------------------------------------------------------------------
# Definitions
# ---------------------------------------------------------------------------


class TestVariantDefinition:
    def test_specificity_defaults_to_kind_priority(self):
        d = VariantDefinition("hover", VariantKind.STATE, ":hover")
        assert d.specificity == 80

    def test_explicit_specificity_kept(self):
        d = VariantDefinition("hover", VariantKind.STATE, ":hover", specificity=7)
        assert d.specificity == 7

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            VariantDefinition("", VariantKind.STATE)

    def test_can_apply_with_dependencies(self):
        d = VariantDefinition("x", VariantKind.STATE, dependencies=("hover",))
        assert d.can_apply(["hover", "x"])
        assert not d.can_apply(["x"])

    def test_frozen(self):
        d = VariantDefinition("hover", VariantKind.STATE, ":hover")
        with pytest.raises(AttributeError):
            d.name = "focus"  # type: ignore[misc]


class TestCustomVariant:
    def test_defaults(self):
        c = CustomVariant("hocus", ":hover")
        assert c.kind is VariantKind.CUSTOM
        assert c.specificity == 1
        assert c.combinable is True
        assert c.selector_pattern == ":hover"
        assert c.media_query is None

    def test_can_apply(self):
        c = CustomVariant("x", ":hover", dependencies=("dark",))
        assert c.can_apply({"dark"})
        assert not c.can_apply(set())


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------


class TestDiagnostic:
    def test_str_with_variants(self):
        d = Diagnostic("r", Severity.ERROR, "boom", variants=("sm", "md"))
        assert str(d) == "ERROR [variants=sm,md]: boom"

    def test_str_without_variants(self):
        d = Diagnostic("r", Severity.WARNING, "careful")
        assert str(d) == "WARNING: careful"

    def test_severity_helpers(self):
        assert Diagnostic("r", Severity.ERROR, "m").is_error
        assert Diagnostic("r", Severity.WARNING, "m").is_warning


# ---------------------------------------------------------------------------
# ParsedVariant / VariantCombination / ParseResult
# ---------------------------------------------------------------------------


class TestParsedVariant:
    def test_defaults(self):
        v = ParsedVariant("hover", VariantKind.STATE)
        assert v.matched is True
        assert v.parameters == {}
        assert v.breakpoint is None

    def test_breakpoint_parameter(self):
        v = ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm")
        assert v.breakpoint == "sm"
        assert v.parameters == {"breakpoint": "sm"}

    def test_parameters_are_read_only(self):
        v = ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm")
        with pytest.raises(TypeError):
            v.parameters["breakpoint"] = "md"  # type: ignore[index]
        assert v.breakpoint == "sm"

    def test_hashable(self):
        a = ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm")
        b = ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm")
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_label(self):
        assert ParsedVariant("hover", VariantKind.STATE).label == "STATE"
        assert ParsedVariant("hocus", VariantKind.CUSTOM).label == "Custom(hocus)"


class TestVariantCombination:
    def test_invalid_requires_message(self):
        with pytest.raises(ValueError):
            VariantCombination(valid=False)

    def test_invalid_constructor(self):
        combo = VariantCombination.invalid("nope")
        assert not combo.valid
        assert combo.error_message == "nope"
        assert combo.specificity == 0

    def test_names_kinds_and_warnings(self):
        warning = Diagnostic("w", Severity.WARNING, "w")
        combo = VariantCombination(
            variants=(
                ParsedVariant("dark", VariantKind.DARK_MODE),
                ParsedVariant("hover", VariantKind.STATE),
            ),
            specificity=140,
            diagnostics=(warning,),
        )
        assert combo.names == ["dark", "hover"]
        assert combo.kinds == [VariantKind.DARK_MODE, VariantKind.STATE]
        assert combo.warnings == [warning]


class TestParseResult:
    def test_success_requires_base_class(self):
        result = ParseResult("x", "", VariantCombination())
        assert result.valid
        assert not result.success

    def test_failure(self):
        result = ParseResult.failure(
            "bogus:p-4", "Unknown variant: 'bogus'", error="UnknownVariantError", base_class="p-4"
        )
        assert not result.success
        assert result.base_class == "p-4"
        assert result.error == "UnknownVariantError"
        assert result.error_message == "Unknown variant: 'bogus'"

    def test_to_dict(self):
        combo = VariantCombination(
            variants=(
                ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm"),
            ),
            specificity=100,
        )
        result = ParseResult(
            "sm:flex",
            "flex",
            combo,
            selector=".flex",
            media_query="(min-width:640px)",
            media_queries=("(min-width:640px)",),
            interactions=(Interaction.USES_MEDIA_QUERIES,),
            css_strategy=CssStrategy.MEDIA_QUERY_ONLY,
        )
        data = result.to_dict()
        assert data["css_strategy"] == "media_query_only"
        assert data["base_class"] == "flex"
        assert data["variants"] == [
            {
                "name": "sm",
                "kind": "RESPONSIVE",
                "matched": True,
                "parameters": {"breakpoint": "sm"},
            }
        ]
        assert data["specificity"] == 100
        assert data["media_queries"] == ["(min-width:640px)"]
        assert data["interactions"] == ["uses_media_queries"]
        assert data["success"] is True
        assert data["error"] is None

    def test_hashable(self):
        result = ParseResult(
            "sm:flex",
            "flex",
            VariantCombination(
                variants=(ParsedVariant("sm", VariantKind.RESPONSIVE, breakpoint="sm"),),
                specificity=100,
            ),
        )
        assert hash(result) == hash(result)

    def test_failure_has_no_css_strategy(self):
        result = ParseResult.failure("bogus:x", "nope", error="UnknownVariantError")
        assert result.css_strategy is None
        assert result.to_dict()["css_strategy"] is None
