"""Enforcement rules and compliance results."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from styledna.models.style import StrokeCap, StrokeJoin

StyleRule = Literal[
    "stroke-width",
    "stroke-linecap",
    "stroke-linejoin",
    "viewBox",
    "element-fill",
    "optical-weight",
    "path-complexity",
]
Severity = Literal["error", "warning"]


class EnforcementRules(BaseModel):
    """Target attribute values; None disables the corresponding check."""

    model_config = ConfigDict(frozen=True)

    stroke_width: float | None = None
    stroke_linecap: StrokeCap | None = None
    stroke_linejoin: StrokeJoin | None = None
    view_box: str | None = None
    require_fill_none: bool = False  # stroke-based target styles
    # Advisory thresholds: exceeding them only warns
    max_optical_weight: float | None = None
    max_path_complexity: int | None = None


class Violation(BaseModel):
    rule: StyleRule
    expected: str
    actual: str
    severity: Severity
    auto_fixable: bool
    location: str | None = None


class Change(BaseModel):
    attribute: str
    before: str
    after: str
    reason: str


class ComplianceResult(BaseModel):
    """Output of one enforcement pass. ``auto_fixed`` is always present."""

    passed: bool
    score: int = Field(ge=0, le=100)
    violations: list[Violation] = Field(default_factory=list)
    auto_fixed: str
    changes: list[Change] = Field(default_factory=list)

    @property
    def errors(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == "error"]

    @property
    def warnings(self) -> list[Violation]:
        return [v for v in self.violations if v.severity == "warning"]
