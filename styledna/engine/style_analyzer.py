"""Style analyzer — infers a StyleSummary from a corpus of icon markup.

Each icon is scanned independently (IconScan); only the aggregation step
(medians, modes, confidence) looks at the whole corpus, so callers may fan
the scans out freely.
"""

from __future__ import annotations

import logging
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TypeVar

import numpy as np

from styledna.engine.config import AnalyzerConfig
from styledna.errors import EmptyCorpusError
from styledna.models.style import IconMarkup, StyleSummary
from styledna.svg import markup
from styledna.svg.path_grammar import count_commands, has_curves, has_lines, parse_path_data

logger = logging.getLogger(__name__)

T = TypeVar("T")

_STROKE_WIDTH_ATTR_RE = re.compile(r'(?<![\w-])stroke-width\s*=\s*["\']([^"\']+)["\']', re.IGNORECASE)
_STROKE_WIDTH_STYLE_RE = re.compile(r"(?<![\w-])stroke-width\s*:\s*([^;\"']+)", re.IGNORECASE)
_BORDER_RADIUS_RE = re.compile(r"border-radius\s*:\s*([^;\"']+)", re.IGNORECASE)

_CAPS = ("round", "square", "butt")
_JOINS = ("round", "miter", "bevel")
_STYLE_TAGS = ("svg", "g") + markup.DRAWABLE_TAGS
_STYLE_TAG_RE = re.compile(r"<(%s)\b[^>]*>" % "|".join(_STYLE_TAGS), re.IGNORECASE)


def _positive_floats(raw_values: Iterable[str]) -> list[float]:
    values = []
    for raw in raw_values:
        value = markup.leading_float(raw)
        if value is not None and value > 0:
            values.append(value)
    return values


def _style_tags(svg: str) -> list[str]:
    return [m.group(0) for m in _STYLE_TAG_RE.finditer(svg)]


# ---------------------------------------------------------------------------
# Per-icon scanners
# ---------------------------------------------------------------------------


def parse_stroke_widths(svg: str) -> list[float]:
    """All positive stroke-width values, from attributes and inline styles."""
    raw = _STROKE_WIDTH_ATTR_RE.findall(svg) + _STROKE_WIDTH_STYLE_RE.findall(svg)
    return _positive_floats(raw)


def parse_stroke_caps(svg: str) -> list[str]:
    return _style_values(svg, "stroke-linecap")


def parse_stroke_joins(svg: str) -> list[str]:
    return _style_values(svg, "stroke-linejoin")


def _style_values(svg: str, name: str) -> list[str]:
    values = []
    for tag in _style_tags(svg):
        attr = markup.get_attr(tag, name)
        if attr is not None:
            values.append(attr.strip().lower())
        style = markup.get_attr(tag, "style")
        if style:
            inline = markup.parse_style(style).get(name)
            if inline:
                values.append(inline.lower())
    return values


def parse_corner_radii(svg: str) -> list[float]:
    """rx/ry on rect elements plus any inline border-radius."""
    raw: list[str] = []
    for m in markup.iter_drawables(svg):
        if markup.tag_name(m) != "rect":
            continue
        for name in ("rx", "ry"):
            value = markup.get_attr(m.group(0), name)
            if value is not None:
                raw.append(value)
    raw.extend(_BORDER_RADIUS_RE.findall(svg))
    return _positive_floats(raw)


def infer_geometry(svg: str) -> str:
    """Label the icon's shape families, e.g. ``"circles and curves"``."""
    tags = [(markup.tag_name(m), m.group(0)) for m in markup.iter_drawables(svg)]
    names = {name for name, _ in tags}
    commands = [cmd for d in markup.path_data(svg) for cmd in parse_path_data(d)]

    shapes: list[str] = []
    if names & {"circle", "ellipse"}:
        shapes.append("circles")
    rects = [tag for name, tag in tags if name == "rect"]
    if any(markup.get_attr(tag, "rx") is not None for tag in rects):
        shapes.append("rounded rectangles")
    elif rects:
        shapes.append("rectangles")
    if has_curves(commands):
        shapes.append("curves")
    if has_lines(commands):
        shapes.append("straight lines")

    if not shapes:
        return "mixed geometric shapes"
    return " and ".join(shapes[:2])


def calculate_detail_level(svg: str, config: AnalyzerConfig | None = None) -> str:
    """Bucket an icon by element count and average commands per path."""
    config = config or AnalyzerConfig()
    elements = [markup.tag_name(m) for m in markup.iter_drawables(svg)]
    path_count = elements.count("path")
    command_count = sum(count_commands(d) for d in markup.path_data(svg))
    avg_commands = command_count / path_count if path_count else 0.0

    max_elements, max_commands = config.low_detail
    if len(elements) <= max_elements and avg_commands <= max_commands:
        return "low"
    max_elements, max_commands = config.medium_detail
    if len(elements) <= max_elements and avg_commands <= max_commands:
        return "medium"
    return "high"


def calculate_path_complexity(svg: str) -> int:
    """Total path commands plus two per non-path shape. Lower = simpler."""
    shape_count = sum(1 for m in markup.iter_drawables(svg) if markup.tag_name(m) != "path")
    return sum(count_commands(d) for d in markup.path_data(svg)) + 2 * shape_count


def detect_grid_size(svg: str) -> float | None:
    """Larger of the viewBox width/height, or None without a usable viewBox."""
    box = markup.view_box(svg)
    if box is None or box[2] <= 0 or box[3] <= 0:
        return None
    return max(box[2], box[3])


def classify_render_style(svg: str) -> str:
    """Markup fallback: ``"stroke"``, ``"fill"`` or ``"mixed"`` for one icon."""
    has_fill = has_stroke = False
    for tag in _style_tags(svg):
        fill = markup.style_property(tag, "fill")
        stroke = markup.style_property(tag, "stroke")
        if fill is not None and fill.strip().lower() not in ("none", ""):
            has_fill = True
        if stroke is not None and stroke.strip().lower() not in ("none", ""):
            has_stroke = True
    if has_fill and has_stroke:
        return "mixed"
    if has_stroke:
        return "stroke"
    # No fill or stroke declared: SVG's default paint is a black fill
    return "fill"


@dataclass
class IconScan:
    """Everything the aggregation step needs from one icon."""

    stroke_widths: list[float] = field(default_factory=list)
    caps: list[str] = field(default_factory=list)
    joins: list[str] = field(default_factory=list)
    corner_radii: list[float] = field(default_factory=list)
    geometry: str = "mixed geometric shapes"
    detail_level: str = "medium"
    grid: float | None = None
    render_style: str = "fill"


def scan_icon(icon: IconMarkup | str, config: AnalyzerConfig | None = None) -> IconScan:
    icon = _as_markup(icon)
    svg = icon.svg
    return IconScan(
        stroke_widths=parse_stroke_widths(svg),
        caps=parse_stroke_caps(svg),
        joins=parse_stroke_joins(svg),
        corner_radii=parse_corner_radii(svg),
        geometry=infer_geometry(svg),
        detail_level=calculate_detail_level(svg, config),
        grid=detect_grid_size(svg),
        render_style=icon.render_style or classify_render_style(svg),
    )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def mode(values: Sequence[T]) -> T | None:
    """Most frequent value; ties go to the first one seen."""
    if not values:
        return None
    return Counter(values).most_common(1)[0][0]


def snap_to_nearest(value: float, allowed: Sequence[float]) -> float:
    if not allowed:
        return value
    return min(allowed, key=lambda a: abs(a - value))


def calculate_confidence(
    style_share: float,
    icons_with_width: int,
    total_icons: int,
    config: AnalyzerConfig | None = None,
) -> float:
    """Confidence 0-1 from style consistency, data coverage and corpus size."""
    config = config or AnalyzerConfig()
    confidence = 1.0
    confidence *= style_share
    if icons_with_width < total_icons * config.sparse_width_ratio:
        confidence *= config.sparse_width_penalty
    if total_icons < config.small_corpus_size:
        confidence *= config.small_corpus_penalty
    confidence *= min(1.0, config.size_ramp_base + config.size_ramp_step * total_icons)
    return round(max(0.0, min(1.0, confidence)), 4)


def summarize_scans(scans: Sequence[IconScan], config: AnalyzerConfig | None = None) -> StyleSummary:
    """Join point: fold per-icon scans into one StyleSummary."""
    if not scans:
        raise EmptyCorpusError("Cannot analyze style of an empty icon set")
    config = config or AnalyzerConfig()

    widths = [w for s in scans for w in s.stroke_widths]
    if widths:
        avg_stroke_width = float(np.median(widths))
        if config.snap_stroke_widths:
            avg_stroke_width = snap_to_nearest(avg_stroke_width, config.allowed_stroke_widths)
    else:
        avg_stroke_width = config.default_stroke_width

    radii = [r for s in scans for r in s.corner_radii]
    avg_corner_radius = float(np.median(radii)) if radii else config.default_corner_radius

    cap = mode([c for s in scans for c in s.caps])
    join = mode([j for s in scans for j in s.joins])

    render_styles = Counter(s.render_style for s in scans)
    if render_styles["mixed"] or (render_styles["fill"] and render_styles["stroke"]):
        stroke_style = "mixed"
    elif render_styles["fill"]:
        stroke_style = "filled"
    else:
        stroke_style = "outline"
    fill_usage = {"outline": "none", "filled": "solid", "mixed": "partial"}[stroke_style]

    grids = [s.grid for s in scans if s.grid is not None]
    grid_mode = mode(grids)
    if grid_mode is None:
        target_grid = config.default_grid
    else:
        target_grid = int(snap_to_nearest(grid_mode, config.canonical_grids))

    style_share = render_styles.most_common(1)[0][1] / len(scans)
    confidence = calculate_confidence(
        style_share,
        icons_with_width=sum(1 for s in scans if s.stroke_widths),
        total_icons=len(scans),
        config=config,
    )

    summary = StyleSummary(
        avg_stroke_width=avg_stroke_width,
        stroke_style=stroke_style,
        stroke_cap=cap if cap in _CAPS else "round",
        stroke_join=join if join in _JOINS else "round",
        avg_corner_radius=avg_corner_radius,
        fill_usage=fill_usage,
        dominant_shapes=mode([s.geometry for s in scans]) or "mixed geometric shapes",
        detail_level=mode([s.detail_level for s in scans]) or "medium",
        confidence_score=confidence,
        target_grid=target_grid,
    )
    logger.info(
        "Style summary over %d icons: %s, width %.2f, %s/%s, confidence %.2f",
        len(scans),
        summary.stroke_style,
        summary.avg_stroke_width,
        summary.stroke_cap,
        summary.stroke_join,
        summary.confidence_score,
    )
    return summary


def analyze_style(
    icons: Sequence[IconMarkup | str],
    config: AnalyzerConfig | None = None,
) -> StyleSummary:
    """Analyze a corpus of icons (IconMarkup or raw SVG strings)."""
    if not icons:
        raise EmptyCorpusError("Cannot analyze style of an empty icon set")
    config = config or AnalyzerConfig()
    return summarize_scans([scan_icon(icon, config) for icon in icons], config)


def select_simplest(icons: Sequence[IconMarkup | str], k: int) -> list[IconMarkup]:
    """The ``k`` lowest-complexity icons, stable on ties."""
    ranked = sorted((_as_markup(icon) for icon in icons), key=lambda i: calculate_path_complexity(i.svg))
    return ranked[: max(0, k)]


def _as_markup(icon: IconMarkup | str) -> IconMarkup:
    return icon if isinstance(icon, IconMarkup) else IconMarkup(svg=icon)
