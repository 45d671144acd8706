"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from styledna.models.compliance import ComplianceResult, EnforcementRules
from styledna.models.style import StyleSummary


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    cached_libraries: int = 0


class PathCommandOut(BaseModel):
    letter: str
    kind: str
    args: list[float | bool] = Field(default_factory=list)


class PathParseResponse(BaseModel):
    commands: list[PathCommandOut] = Field(default_factory=list)
    command_count: int = 0
    arc_flags: list[tuple[bool, bool]] = Field(default_factory=list)


class PathRoundResponse(BaseModel):
    d: str
    decimals: int
    original_length: int = 0
    rounded_length: int = 0


class StyleAnalyzeResponse(BaseModel):
    summary: StyleSummary
    rules: EnforcementRules
    cached: bool = False
    processing_time_ms: float = 0.0


class EnforceResponse(BaseModel):
    result: ComplianceResult
    rules: EnforcementRules
    report: str = ""


class EnforceBatchResponse(BaseModel):
    results: list[ComplianceResult] = Field(default_factory=list)
    passed: int = 0
    failed: int = 0


class OptimizeResponse(BaseModel):
    svg: str
    view_box: str
    original_length: int
    optimized_length: int


class CombineResponse(BaseModel):
    path_data: str
    view_box: str
    fill_rule: str | None = None
