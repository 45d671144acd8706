"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator

from styledna.models.compliance import EnforcementRules
from styledna.models.style import IconMarkup


class PathParseRequest(BaseModel):
    d: str = Field(..., description="Path data (the d attribute value)")
    strict: bool = Field(default=False, description="Reject malformed tokens instead of skipping them")


class PathRoundRequest(BaseModel):
    d: str = Field(..., description="Path data (the d attribute value)")
    decimals: int | None = Field(default=None, ge=0, le=10, description="Defaults to the configured precision")
    strict: bool = False


class StyleAnalyzeRequest(BaseModel):
    icons: list[IconMarkup] = Field(..., description="Reference icons of one library")
    library_id: str | None = Field(default=None, description="Cache key; reuses a previous analysis")
    refresh: bool = Field(default=False, description="Ignore any cached analysis")


class RuleSource(BaseModel):
    """Target style given as explicit rules, a preset name, a free-text manifest
    or a previously analyzed library. Exactly one must be set."""

    rules: EnforcementRules | None = None
    preset: str | None = Field(default=None, description="feather, tabler or lucide")
    manifest: str | None = Field(default=None, description="Free-text Style DNA")
    library_id: str | None = Field(default=None, description="Derive rules from a cached analysis")

    @model_validator(mode="after")
    def _one_rule_source(self) -> RuleSource:
        given = [s for s in (self.rules, self.preset, self.manifest, self.library_id) if s is not None]
        if len(given) != 1:
            raise ValueError("Provide exactly one of rules, preset, manifest or library_id")
        return self


class EnforceRequest(RuleSource):
    svg: str = Field(..., description="Candidate SVG markup")


class EnforceBatchRequest(RuleSource):
    svgs: list[str] = Field(..., description="Candidate SVG markups")


class OptimizeRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    decimals: int = Field(default=1, ge=0, le=6)


class CombineRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    decimals: int = Field(default=3, ge=0, le=6, description="Coordinate precision of the merged path")
