"""Style-DNA summary model — the canonical style profile of an icon corpus."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StrokeStyle = Literal["outline", "filled", "mixed"]
StrokeCap = Literal["round", "square", "butt"]
StrokeJoin = Literal["round", "miter", "bevel"]
FillUsage = Literal["none", "solid", "partial"]
DetailLevel = Literal["low", "medium", "high"]
RenderStyle = Literal["stroke", "fill"]


class IconMarkup(BaseModel):
    """One corpus icon: full SVG markup plus optional render-style metadata."""

    model_config = ConfigDict(frozen=True)

    svg: str
    name: str = ""
    render_style: RenderStyle | None = None  # takes precedence over markup heuristics


class StyleSummary(BaseModel):
    """Immutable snapshot produced by one analysis run."""

    model_config = ConfigDict(frozen=True)

    avg_stroke_width: float = 2.0
    stroke_style: StrokeStyle = "outline"
    stroke_cap: StrokeCap = "round"
    stroke_join: StrokeJoin = "round"
    avg_corner_radius: float = 3.0
    fill_usage: FillUsage = "none"
    dominant_shapes: str = "mixed geometric shapes"
    detail_level: DetailLevel = "medium"
    confidence_score: float = Field(default=1.0, ge=0.0, le=1.0)
    target_grid: int | None = 24
