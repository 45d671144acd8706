"""Token optimizer — shrinks SVG markup before it is sent to a language model.

Metadata and styling noise are stripped and coordinates are rounded. Path data
is rounded through the grammar-aware rounder, never with a text-level number
regex, so arc flags survive.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from styledna.svg import markup
from styledna.svg.rounder import format_number, round_path_data, round_value

logger = logging.getLogger(__name__)

_XML_DECL_RE = re.compile(r"<\?xml[^?]*\?>")
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_METADATA_RE = re.compile(r"<(title|desc|metadata|defs)\b[^>]*>.*?</\1\s*>", re.DOTALL | re.IGNORECASE)
_STRIP_ATTR_RE = re.compile(r"""\s+(?:id|class|style|data-[\w-]+)\s*=\s*(["']).*?\1""", re.DOTALL)
_D_ATTR_RE = re.compile(r"""(?<![\w:.-])d\s*=\s*(["'])(.*?)\1""", re.DOTALL)
_NUMERIC_ATTR_RE = re.compile(
    r"""(\s(?:cx|cy|r|rx|ry|x|y|x1|y1|x2|y2|width|height))\s*=\s*(["'])([^"']*)\2"""
)
_NUMBER_ONLY_RE = re.compile(r"\s*[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?\s*$")


@dataclass(frozen=True)
class OptimizedSvg:
    optimized: str
    view_box: str
    original_length: int
    optimized_length: int


def optimize_svg_for_llm(svg: str, decimals: int = 1) -> OptimizedSvg:
    """Strip metadata, round coordinates and collapse whitespace."""
    view_box = markup.root_attr(svg, "viewBox") or "0 0 24 24"
    out = _XML_DECL_RE.sub("", svg)
    out = _COMMENT_RE.sub("", out)
    out = _METADATA_RE.sub("", out)
    out = _STRIP_ATTR_RE.sub("", out)

    out = _D_ATTR_RE.sub(lambda m: f'd="{round_path_data(m.group(2), decimals)}"', out)

    def _round_attr(m: re.Match[str]) -> str:
        raw = m.group(3)
        # Percentages and units are left alone
        if not _NUMBER_ONLY_RE.match(raw):
            return m.group(0)
        return f'{m.group(1)}="{format_number(round_value(float(raw), decimals))}"'

    out = _NUMERIC_ATTR_RE.sub(_round_attr, out)

    out = re.sub(r"\s+", " ", out).strip()
    out = re.sub(r">\s+<", "><", out)
    out = re.sub(r"\s+(/?>)", r"\1", out)
    out = re.sub(r"<\s+", "<", out)

    logger.debug("Optimized SVG: %d → %d chars", len(svg), len(out))
    return OptimizedSvg(
        optimized=out,
        view_box=view_box,
        original_length=len(svg),
        optimized_length=len(out),
    )
