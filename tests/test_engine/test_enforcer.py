"""Tests for compliance enforcement and rule derivation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from styledna.engine.enforcer import (
    FEATHER_RULES,
    LUCIDE_RULES,
    PRESET_RULES,
    TABLER_RULES,
    check_compliance,
    enforce_style,
    estimate_optical_weight,
    extract_cascaded_attr,
    extract_stroke_width,
    find_filled_elements,
    format_compliance_result,
    rules_from_style_summary,
)
from styledna.models.compliance import EnforcementRules
from styledna.models.style import StyleSummary
from tests.conftest import CIRCLE_SVG, PAUSE_FILLED_SVG, SETTINGS_SVG


PAUSE_FIXED_SVG = (
    '<svg viewBox="0 0 24 24" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" fill="none">'
    '<path d="M6 19h4V5H6v14zm8-14v14h4V5h-4z" fill="none"/></svg>'
)


# ---------------------------------------------------------------------------
# 1. Extraction
# ---------------------------------------------------------------------------

class TestExtraction:
    def test_root_first(self):
        assert extract_stroke_width(CIRCLE_SVG) == 2.0

    def test_group_then_drawable(self):
        svg = '<svg viewBox="0 0 24 24"><g stroke-width="1.5"><path stroke-width="3" d="M0 0"/></g></svg>'
        assert extract_stroke_width(svg) == 1.5
        svg = '<svg viewBox="0 0 24 24"><path stroke-linecap="square" d="M0 0"/></svg>'
        assert extract_cascaded_attr(svg, "stroke-linecap") == "square"

    def test_units_ignored(self):
        assert extract_stroke_width('<svg stroke-width="2px">') == 2.0

    def test_absent(self):
        assert extract_stroke_width(PAUSE_FILLED_SVG) is None

    def test_optical_weight(self):
        assert estimate_optical_weight(CIRCLE_SVG) == 0.0
        assert estimate_optical_weight(SETTINGS_SVG) == pytest.approx(0.565)

    def test_filled_elements(self):
        labels = [label for _, label in find_filled_elements(PAUSE_FILLED_SVG)]
        assert labels == ['path (fill="black")']
        assert find_filled_elements(CIRCLE_SVG) == []
        labels = [label for _, label in find_filled_elements('<svg><circle r="2"/></svg>')]
        assert labels == ["circle (no fill attribute)"]

    def test_inline_style_values(self):
        svg = '<svg viewBox="0 0 24 24" style="stroke-width: 1.5px"><path style="fill:red" d="M0 0"/></svg>'
        assert extract_stroke_width(svg) == 1.5
        labels = [label for _, label in find_filled_elements(svg)]
        assert labels == ['path (fill="red")']


# ---------------------------------------------------------------------------
# 2. Enforcement
# ---------------------------------------------------------------------------

class TestEnforceStyle:
    def test_filled_icon_against_feather(self):
        """A filled Material icon breaks four Feather rules."""
        result = enforce_style(PAUSE_FILLED_SVG, FEATHER_RULES)
        assert not result.passed
        assert result.score == 20
        assert [v.rule for v in result.violations] == [
            "stroke-width",
            "stroke-linecap",
            "stroke-linejoin",
            "element-fill",
        ]
        assert all(v.severity == "error" and v.auto_fixable for v in result.violations)
        assert result.violations[0].actual == "not set"
        assert result.violations[3].location == 'path (fill="black")'
        assert result.auto_fixed == PAUSE_FIXED_SVG
        assert [c.attribute for c in result.changes] == [
            "stroke-width",
            "stroke-linecap",
            "stroke-linejoin",
            "fill",
        ]

    def test_fixed_output_is_compliant(self):
        first = enforce_style(PAUSE_FILLED_SVG, FEATHER_RULES)
        second = enforce_style(first.auto_fixed, FEATHER_RULES)
        assert second.passed
        assert second.score == 100
        assert second.violations == []
        assert second.auto_fixed == first.auto_fixed

    def test_compliant_icon_untouched(self):
        result = enforce_style(CIRCLE_SVG, FEATHER_RULES)
        assert result.passed
        assert result.score == 100
        assert result.changes == []
        assert result.auto_fixed == CIRCLE_SVG

    def test_numeric_width_comparison(self):
        svg = CIRCLE_SVG.replace('stroke-width="2"', 'stroke-width="2.0"')
        assert enforce_style(svg, FEATHER_RULES).passed

    def test_width_mismatch_fixed_on_root(self):
        svg = CIRCLE_SVG.replace('stroke-width="2"', 'stroke-width="1.5"')
        result = enforce_style(svg, FEATHER_RULES)
        assert result.score == 80
        violation = result.violations[0]
        assert (violation.expected, violation.actual) == ("2", "1.5")
        assert 'stroke-width="2"' in result.auto_fixed
        assert 'stroke-width="1.5"' not in result.auto_fixed

    def test_view_box_stamped_without_rescaling(self):
        svg = CIRCLE_SVG.replace('viewBox="0 0 24 24"', 'viewBox="0 0 48 48"')
        result = enforce_style(svg, FEATHER_RULES)
        assert [v.rule for v in result.violations] == ["viewBox"]
        assert 'viewBox="0 0 24 24"' in result.auto_fixed
        assert '<circle cx="12" cy="12" r="10"/>' in result.auto_fixed

    def test_fill_location_lists_first_three(self):
        svg = '<svg viewBox="0 0 24 24">' + '<path fill="red" d="M0 0h1"/>' * 4 + "</svg>"
        result = enforce_style(svg, EnforcementRules(require_fill_none=True))
        violation = result.violations[0]
        assert violation.actual == "4 elements with fill"
        assert violation.location == ", ".join(['path (fill="red")'] * 3)
        assert 'fill="red"' not in result.auto_fixed
        assert result.auto_fixed.count('fill="none"') == 5

    def test_root_fill_none_kept(self):
        svg = '<svg viewBox="0 0 24 24" fill="none"><path fill="red" d="M0 0h1"/></svg>'
        result = enforce_style(svg, EnforcementRules(require_fill_none=True))
        assert result.auto_fixed == '<svg viewBox="0 0 24 24" fill="none"><path fill="none" d="M0 0h1"/></svg>'

    def test_warnings_do_not_fail(self):
        result = enforce_style(SETTINGS_SVG, FEATHER_RULES)
        assert result.passed
        assert result.score == 90
        assert [v.rule for v in result.warnings] == ["optical-weight", "path-complexity"]
        assert result.errors == []
        assert all(not v.auto_fixable for v in result.warnings)
        assert result.auto_fixed == SETTINGS_SVG

    def test_preset_thresholds(self):
        assert enforce_style(SETTINGS_SVG, TABLER_RULES).score == 95
        assert enforce_style(SETTINGS_SVG, LUCIDE_RULES).score == 90

    def test_empty_rules_always_pass(self):
        result = enforce_style(PAUSE_FILLED_SVG, EnforcementRules())
        assert result.passed
        assert result.score == 100
        assert result.auto_fixed == PAUSE_FILLED_SVG

    def test_missing_root_not_fixable(self):
        svg = '<path d="M0 0h1"/>'
        result = enforce_style(svg, EnforcementRules(stroke_width=2))
        assert not result.violations[0].auto_fixable
        assert result.auto_fixed == svg

    def test_score_floor(self):
        svg = '<svg viewBox="0 0 16 16">' + '<path d="M0 0h1"/>' + "</svg>"
        rules = FEATHER_RULES.model_copy(update={"max_optical_weight": 0.0, "max_path_complexity": 0})
        result = enforce_style(svg, rules)
        # 5 errors and 2 warnings
        assert len(result.errors) == 5
        assert len(result.warnings) == 2
        assert result.score == 0

    def test_check_compliance(self):
        assert check_compliance(CIRCLE_SVG, FEATHER_RULES)
        assert not check_compliance(PAUSE_FILLED_SVG, FEATHER_RULES)

    def test_inline_fill_flagged_under_unfilled_root(self):
        svg = '<svg viewBox="0 0 24 24" fill="none"><path style="fill:black" d="M0 0h1"/></svg>'
        result = enforce_style(svg, EnforcementRules(require_fill_none=True))
        assert not result.passed
        assert result.score == 80
        assert result.violations[0].location == 'path (fill="black")'
        assert result.auto_fixed == (
            '<svg viewBox="0 0 24 24" fill="none"><path style="fill:none" d="M0 0h1" fill="none"/></svg>'
        )
        assert enforce_style(result.auto_fixed, EnforcementRules(require_fill_none=True)).passed

    def test_inline_width_rewritten_on_root(self):
        svg = CIRCLE_SVG.replace('stroke-width="2"', 'style="stroke-width:3; opacity: .5"')
        result = enforce_style(svg, FEATHER_RULES)
        violation = result.violations[0]
        assert (violation.rule, violation.expected, violation.actual) == ("stroke-width", "2", "3")
        assert 'style="stroke-width:2; opacity: .5"' in result.auto_fixed
        assert "stroke-width:3" not in result.auto_fixed
        second = enforce_style(result.auto_fixed, FEATHER_RULES)
        assert second.passed
        assert second.auto_fixed == result.auto_fixed

    def test_inline_style_beats_attribute(self):
        svg = CIRCLE_SVG.replace('stroke-linecap="round"', 'stroke-linecap="round" style="stroke-linecap: butt"')
        result = enforce_style(svg, FEATHER_RULES)
        assert [(v.rule, v.actual) for v in result.violations] == [("stroke-linecap", "butt")]
        assert 'style="stroke-linecap: round"' in result.auto_fixed


# ---------------------------------------------------------------------------
# 3. Rules and presets
# ---------------------------------------------------------------------------

class TestRules:
    def test_presets(self):
        assert set(PRESET_RULES) == {"feather", "tabler", "lucide"}
        assert FEATHER_RULES.max_path_complexity == 40
        assert TABLER_RULES.max_optical_weight == 0.5
        assert TABLER_RULES.max_path_complexity == 60
        assert LUCIDE_RULES.max_path_complexity == 45
        assert LUCIDE_RULES.stroke_width == 2

    def test_presets_are_immutable(self):
        with pytest.raises(ValidationError):
            FEATHER_RULES.stroke_width = 3

    def test_from_outline_summary(self):
        rules = rules_from_style_summary(StyleSummary(avg_stroke_width=1.5, stroke_join="miter"))
        assert rules.stroke_width == 1.5
        assert rules.stroke_linecap == "round"
        assert rules.stroke_linejoin == "miter"
        assert rules.view_box == "0 0 24 24"
        assert rules.require_fill_none

    def test_from_filled_summary(self):
        summary = StyleSummary(stroke_style="filled", fill_usage="solid", target_grid=None)
        rules = rules_from_style_summary(summary)
        assert rules.stroke_width is None
        assert rules.stroke_linecap is None
        assert rules.view_box is None
        assert not rules.require_fill_none
        assert enforce_style(PAUSE_FILLED_SVG, rules).score == 100

    def test_mixed_summary_keeps_fills(self):
        rules = rules_from_style_summary(StyleSummary(stroke_style="mixed", fill_usage="partial"))
        assert rules.stroke_width == 2.0
        assert not rules.require_fill_none


# ---------------------------------------------------------------------------
# 4. Reporting
# ---------------------------------------------------------------------------

class TestReport:
    def test_non_compliant_report(self):
        report = format_compliance_result(enforce_style(PAUSE_FILLED_SVG, FEATHER_RULES))
        lines = report.splitlines()
        assert lines[0] == "NON-COMPLIANT (Score: 20/100)"
        assert "  [error] stroke-width: expected 2, got not set [auto-fixed]" in lines
        assert '  - stroke-width: "not set" -> "2"' in lines

    def test_compliant_report(self):
        assert format_compliance_result(enforce_style(CIRCLE_SVG, FEATHER_RULES)) == "COMPLIANT (Score: 100/100)"
