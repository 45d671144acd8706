"""Free-text Style DNA manifest parsing.

Manifests are loosely written style descriptions ("2px uniform stroke, round
terminals, 24x24 grid"). Each field tries a list of patterns in order and the
first hit wins; anything unmatched stays None.
"""

from __future__ import annotations

import re

from pydantic import BaseModel

from styledna.models.style import StrokeCap, StrokeJoin

_LINECAP_PATTERNS = [
    re.compile(r"stroke-linecap[=:]\s*[\"']?(butt|round|square)[\"']?", re.IGNORECASE),
    re.compile(r"linecap[:\s]+(butt|round|square)", re.IGNORECASE),
    re.compile(r"terminals?[:\s]+(butt|round|square)", re.IGNORECASE),
]
_LINEJOIN_PATTERNS = [
    re.compile(r"stroke-linejoin[=:]\s*[\"']?(miter|round|bevel)[\"']?", re.IGNORECASE),
    re.compile(r"linejoin[:\s]+(miter|round|bevel)", re.IGNORECASE),
    re.compile(r"joins?[:\s]+(miter|round|bevel)", re.IGNORECASE),
]
_STROKE_WIDTH_PATTERNS = [
    re.compile(r"stroke-width[=:]\s*[\"']?(\d+(?:\.\d+)?)(?:px)?[\"']?", re.IGNORECASE),
    re.compile(r"stroke[:\s]+(\d+(?:\.\d+)?)\s*px", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*px\s*(?:uniform\s+)?stroke", re.IGNORECASE),
    re.compile(r"weight[:\s]+(\d+(?:\.\d+)?)\s*px", re.IGNORECASE),
]
_VIEWBOX_PATTERNS = [
    re.compile(r"viewBox[=:]\s*[\"']?\s*0\s+0\s+(\d+)\s+(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\s*[x×]\s*(\d+)\s*(?:px)?\s*(?:grid|viewBox|canvas)", re.IGNORECASE),
    re.compile(r"canvas[:\s]+(\d+)\s*[x×]\s*(\d+)", re.IGNORECASE),
]
_PADDING_PATTERNS = [
    re.compile(r"padding[:\s]+(\d+(?:\.\d+)?)\s*px", re.IGNORECASE),
    re.compile(r"(\d+(?:\.\d+)?)\s*px\s*(?:padding|margin|edge|inset)", re.IGNORECASE),
]


class ManifestStyle(BaseModel):
    """Style values recovered from a manifest; None where the text is silent."""

    stroke_linecap: StrokeCap | None = None
    stroke_linejoin: StrokeJoin | None = None
    stroke_width: float | None = None
    view_box_size: int | None = None
    padding: float | None = None
    raw_manifest: str = ""


def _first_match(patterns: list[re.Pattern[str]], text: str) -> re.Match[str] | None:
    for pattern in patterns:
        m = pattern.search(text)
        if m:
            return m
    return None


def parse_style_manifest(manifest: str) -> ManifestStyle:
    parsed = ManifestStyle(raw_manifest=manifest)

    m = _first_match(_LINECAP_PATTERNS, manifest)
    if m:
        parsed.stroke_linecap = m.group(1).lower()

    m = _first_match(_LINEJOIN_PATTERNS, manifest)
    if m:
        parsed.stroke_linejoin = m.group(1).lower()

    m = _first_match(_STROKE_WIDTH_PATTERNS, manifest)
    if m:
        parsed.stroke_width = float(m.group(1))

    # Square grids assumed; take the larger side
    m = _first_match(_VIEWBOX_PATTERNS, manifest)
    if m:
        parsed.view_box_size = max(int(m.group(1)), int(m.group(2)))

    m = _first_match(_PADDING_PATTERNS, manifest)
    if m:
        parsed.padding = float(m.group(1))

    return parsed
