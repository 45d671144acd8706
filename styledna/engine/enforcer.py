"""Compliance enforcer — deterministic attribute fixes against target style rules.

Every rule is checked against the input markup; fixes accumulate on a working
copy. Attribute-level mismatches are errors and always auto-fixable. Density
and complexity checks are warnings: reducing them means redrawing geometry,
which this stage never does.
"""

from __future__ import annotations

import logging
import re

from styledna.engine.manifest import ManifestStyle, parse_style_manifest
from styledna.models.compliance import Change, ComplianceResult, EnforcementRules, Violation
from styledna.models.style import StyleSummary
from styledna.svg import markup
from styledna.svg.path_grammar import count_commands

logger = logging.getLogger(__name__)

_LIBRARY_REASON = "Library standard enforcement"
_FILL_REASON = "Stroke-only icon enforcement"
_NOT_SET = "not set"

# Path-data chars at which optical weight saturates to 1.0
_OPTICAL_WEIGHT_SCALE = 1000.0

_ERROR_PENALTY = 20
_WARNING_PENALTY = 5

# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def extract_cascaded_attr(svg: str, name: str) -> str | None:
    """First rendered value of ``name`` on the root, then any ``<g>``, then the first drawable.

    Inline ``style`` declarations count and win over presentation attributes.
    """
    value = markup.root_property(svg, name)
    if value is not None:
        return value
    for m in markup.iter_groups(svg):
        value = markup.style_property(m.group(0), name)
        if value is not None:
            return value
    for m in markup.iter_drawables(svg):
        value = markup.style_property(m.group(0), name)
        if value is not None:
            return value
    return None


def extract_stroke_width(svg: str) -> float | None:
    raw = extract_cascaded_attr(svg, "stroke-width")
    if raw is None:
        return None
    return markup.leading_float(raw)


def estimate_optical_weight(svg: str) -> float:
    """Path-data length as a 0-1 density proxy (typical icons: 100-500 chars)."""
    total = sum(len(d) for d in markup.path_data(svg))
    return min(1.0, total / _OPTICAL_WEIGHT_SCALE)


def count_path_commands(svg: str) -> int:
    return sum(count_commands(d) for d in markup.path_data(svg))


def find_filled_elements(svg: str) -> list[tuple[re.Match[str], str]]:
    """Drawables that would paint a fill, with a short description of each."""
    root_fill_none = (markup.root_property(svg, "fill") or "").strip() == "none"
    offenders = []
    for m in markup.iter_drawables(svg):
        name = markup.tag_name(m)
        fill = markup.style_property(m.group(0), "fill")
        if fill is not None and fill.strip() != "none":
            offenders.append((m, f'{name} (fill="{fill}")'))
        elif fill is None and not root_fill_none:
            offenders.append((m, f"{name} (no fill attribute)"))
    return offenders


def _fmt(value: float) -> str:
    return f"{value:g}"


# ---------------------------------------------------------------------------
# Enforcement
# ---------------------------------------------------------------------------


def enforce_style(svg: str, rules: EnforcementRules) -> ComplianceResult:
    """Check ``svg`` against ``rules``, auto-fix what is mechanical, and score it."""
    violations: list[Violation] = []
    changes: list[Change] = []
    fixed = svg
    has_root = markup.root_tag(svg) is not None

    def fix_root(rule: str, expected: str, actual: str | None) -> None:
        nonlocal fixed
        before = actual if actual is not None else _NOT_SET
        violations.append(
            Violation(rule=rule, expected=expected, actual=before, severity="error", auto_fixable=has_root)
        )
        # Root-level attributes cascade to children that don't override them.
        # A conflicting inline declaration on the root is rewritten too.
        fixed = markup.set_root_property(fixed, rule, expected)
        changes.append(Change(attribute=rule, before=before, after=expected, reason=_LIBRARY_REASON))

    # 1. Stroke width
    if rules.stroke_width is not None:
        actual_width = extract_stroke_width(svg)
        if actual_width != rules.stroke_width:
            fix_root(
                "stroke-width",
                _fmt(rules.stroke_width),
                _fmt(actual_width) if actual_width is not None else None,
            )

    # 2. Linecap / linejoin
    for rule, target in (("stroke-linecap", rules.stroke_linecap), ("stroke-linejoin", rules.stroke_linejoin)):
        if target is None:
            continue
        actual = extract_cascaded_attr(svg, rule)
        if actual != target:
            fix_root(rule, target, actual)

    # 3. viewBox: stamped verbatim, content is never rescaled
    if rules.view_box is not None:
        actual_box = markup.root_attr(svg, "viewBox")
        if actual_box != rules.view_box:
            fix_root("viewBox", rules.view_box, actual_box)

    # 4. fill="none" on every drawable
    if rules.require_fill_none:
        offenders = find_filled_elements(svg)
        if offenders:
            violations.append(
                Violation(
                    rule="element-fill",
                    expected='fill="none" on all elements',
                    actual=f"{len(offenders)} elements with fill",
                    severity="error",
                    auto_fixable=True,
                    location=", ".join(label for _, label in offenders[:3]),
                )
            )
            fixed = markup.replace_tags(
                fixed,
                [(m, markup.set_style_property(m.group(0), "fill", "none")) for m, _ in find_filled_elements(fixed)],
            )
            if (markup.root_property(fixed, "fill") or "").strip() != "none":
                fixed = markup.set_root_property(fixed, "fill", "none")
            changes.append(
                Change(
                    attribute="fill",
                    before=f"{len(offenders)} non-none fills",
                    after='all fill="none"',
                    reason=_FILL_REASON,
                )
            )

    # 5. Optical weight (advisory)
    if rules.max_optical_weight is not None:
        weight = estimate_optical_weight(svg)
        if weight > rules.max_optical_weight:
            violations.append(
                Violation(
                    rule="optical-weight",
                    expected=f"<{rules.max_optical_weight:.2f}",
                    actual=f"{weight:.2f}",
                    severity="warning",
                    auto_fixable=False,
                )
            )

    # 6. Path complexity (advisory)
    if rules.max_path_complexity is not None:
        complexity = count_path_commands(svg)
        if complexity > rules.max_path_complexity:
            violations.append(
                Violation(
                    rule="path-complexity",
                    expected=f"<{rules.max_path_complexity} commands",
                    actual=f"{complexity} commands",
                    severity="warning",
                    auto_fixable=False,
                )
            )

    error_count = sum(1 for v in violations if v.severity == "error")
    warning_count = len(violations) - error_count
    score = max(0, 100 - _ERROR_PENALTY * error_count - _WARNING_PENALTY * warning_count)

    if violations:
        logger.info(
            "Compliance: score %d, %d errors, %d warnings, %d changes",
            score,
            error_count,
            warning_count,
            len(changes),
        )

    return ComplianceResult(
        passed=error_count == 0,
        score=score,
        violations=violations,
        auto_fixed=fixed,
        changes=changes,
    )


def check_compliance(svg: str, rules: EnforcementRules) -> bool:
    """Pass/fail only; the fixed markup is discarded."""
    return enforce_style(svg, rules).passed


# ---------------------------------------------------------------------------
# Rule derivation
# ---------------------------------------------------------------------------

_DEFAULT_MAX_OPTICAL_WEIGHT = 0.5
_DEFAULT_MAX_PATH_COMPLEXITY = 50


def rules_from_manifest_style(style: ManifestStyle) -> EnforcementRules:
    return EnforcementRules(
        stroke_width=style.stroke_width or None,
        stroke_linecap=style.stroke_linecap,
        stroke_linejoin=style.stroke_linejoin,
        view_box=f"0 0 {style.view_box_size} {style.view_box_size}" if style.view_box_size else None,
        require_fill_none=True,
        max_optical_weight=_DEFAULT_MAX_OPTICAL_WEIGHT,
        max_path_complexity=_DEFAULT_MAX_PATH_COMPLEXITY,
    )


def rules_from_manifest(manifest: str) -> EnforcementRules:
    return rules_from_manifest_style(parse_style_manifest(manifest))


def rules_from_style_summary(summary: StyleSummary) -> EnforcementRules:
    """Target rules for a library. Filled libraries get no stroke targets."""
    stroked = summary.stroke_style != "filled"
    grid = summary.target_grid
    return EnforcementRules(
        stroke_width=summary.avg_stroke_width if stroked else None,
        stroke_linecap=summary.stroke_cap if stroked else None,
        stroke_linejoin=summary.stroke_join if stroked else None,
        view_box=f"0 0 {grid} {grid}" if grid else None,
        require_fill_none=summary.stroke_style == "outline",
        max_optical_weight=_DEFAULT_MAX_OPTICAL_WEIGHT,
        max_path_complexity=_DEFAULT_MAX_PATH_COMPLEXITY,
    )


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

FEATHER_RULES = EnforcementRules(
    stroke_width=2,
    stroke_linecap="round",
    stroke_linejoin="round",
    view_box="0 0 24 24",
    require_fill_none=True,
    max_optical_weight=0.4,
    max_path_complexity=40,
)

TABLER_RULES = FEATHER_RULES.model_copy(update={"max_optical_weight": 0.5, "max_path_complexity": 60})

LUCIDE_RULES = FEATHER_RULES.model_copy(update={"max_path_complexity": 45})

PRESET_RULES: dict[str, EnforcementRules] = {
    "feather": FEATHER_RULES,
    "tabler": TABLER_RULES,
    "lucide": LUCIDE_RULES,
}


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------


def format_compliance_result(result: ComplianceResult) -> str:
    """Human-readable report for logs and diagnostics panels."""
    status = "COMPLIANT" if result.passed else "NON-COMPLIANT"
    lines = [f"{status} (Score: {result.score}/100)"]

    if result.violations:
        lines.append("")
        lines.append("Violations:")
        for v in result.violations:
            fix = " [auto-fixed]" if v.auto_fixable else ""
            lines.append(f"  [{v.severity}] {v.rule}: expected {v.expected}, got {v.actual}{fix}")

    if result.changes:
        lines.append("")
        lines.append("Changes applied:")
        for c in result.changes:
            lines.append(f'  - {c.attribute}: "{c.before}" -> "{c.after}"')

    return "\n".join(lines)
