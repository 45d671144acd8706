"""Analyzer configuration — thresholds and defaults for style inference."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalyzerConfig:
    """Controls how a corpus is summarized."""

    # Fallbacks when the corpus carries no data
    default_stroke_width: float = 2.0
    default_corner_radius: float = 3.0
    default_grid: int = 24

    # Discrete stroke widths; only applied when snapping is enabled
    snap_stroke_widths: bool = False
    allowed_stroke_widths: tuple[float, ...] = (1.0, 1.5, 2.0, 2.5, 3.0, 4.0)

    # Canonical viewBox sizes the detected grid snaps to
    canonical_grids: tuple[int, ...] = (16, 20, 24, 32, 48, 64)

    # Detail-level buckets: (max elements, max avg commands per path)
    low_detail: tuple[int, int] = (2, 10)
    medium_detail: tuple[int, int] = (5, 20)

    # Confidence penalties
    sparse_width_ratio: float = 0.5  # below this share of icons with width data...
    sparse_width_penalty: float = 0.7
    small_corpus_size: int = 5  # fewer icons than this...
    small_corpus_penalty: float = 0.8
    # Corpus-size ramp: min(1, base + step * n), saturating at n = 10
    size_ramp_base: float = 0.9
    size_ramp_step: float = 0.01
