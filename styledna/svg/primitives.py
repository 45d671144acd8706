"""Shape primitives → path data.

Circles, ellipses, rects, lines and polylines are rebuilt as PathCommands and
serialized through the rounder, so generated arcs carry real Flag arguments.
Every piece starts with an absolute ``M`` so concatenation cannot shift it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from styledna.models.path import CommandKind, Flag, Number, PathCommand
from styledna.svg import markup
from styledna.svg.path_grammar import parse_path_data
from styledna.svg.rounder import round_precision, serialize_path_data

logger = logging.getLogger(__name__)

_POINTS_SPLIT_RE = re.compile(r"[\s,]+")

# Enough to keep sub-pixel detail on any icon grid
_DEFAULT_DECIMALS = 3


@dataclass(frozen=True)
class CombinedPath:
    path_data: str
    view_box: str
    fill_rule: str | None = None


def _move(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.MOVE_TO, False, (Number(x), Number(y)))


def _line(x: float, y: float) -> PathCommand:
    return PathCommand(CommandKind.LINE_TO, False, (Number(x), Number(y)))


def _rel(kind: CommandKind, *values: float) -> PathCommand:
    return PathCommand(kind, True, tuple(Number(v) for v in values))


def _arc(rx: float, ry: float, large: bool, sweep: bool, dx: float, dy: float) -> PathCommand:
    return PathCommand(
        CommandKind.ARC,
        True,
        (Number(rx), Number(ry), Number(0), Flag(large), Flag(sweep), Number(dx), Number(dy)),
    )


_CLOSE = PathCommand(CommandKind.CLOSE_PATH, False)


def ellipse_commands(cx: float, cy: float, rx: float, ry: float) -> list[PathCommand]:
    """Two half-arcs from the leftmost point."""
    return [
        _move(cx - rx, cy),
        _arc(rx, ry, True, False, 2 * rx, 0),
        _arc(rx, ry, True, False, -2 * rx, 0),
    ]


def rect_commands(x: float, y: float, width: float, height: float, rx: float = 0, ry: float = 0) -> list[PathCommand]:
    rx = rx or ry
    ry = ry or rx
    rx = min(rx, width / 2)
    ry = min(ry, height / 2)

    if rx <= 0 or ry <= 0:
        return [
            _move(x, y),
            _rel(CommandKind.HLINE_TO, width),
            _rel(CommandKind.VLINE_TO, height),
            _rel(CommandKind.HLINE_TO, -width),
            PathCommand(CommandKind.CLOSE_PATH, True),
        ]

    inner_w = width - 2 * rx
    inner_h = height - 2 * ry
    return [
        _move(x + rx, y),
        _rel(CommandKind.HLINE_TO, inner_w),
        _arc(rx, ry, False, True, rx, ry),
        _rel(CommandKind.VLINE_TO, inner_h),
        _arc(rx, ry, False, True, -rx, ry),
        _rel(CommandKind.HLINE_TO, -inner_w),
        _arc(rx, ry, False, True, -rx, -ry),
        _rel(CommandKind.VLINE_TO, -inner_h),
        _arc(rx, ry, False, True, rx, -ry),
        PathCommand(CommandKind.CLOSE_PATH, True),
    ]


def polyline_commands(points: str, closed: bool = False) -> list[PathCommand]:
    coords = [float(v) for v in _POINTS_SPLIT_RE.split(points.strip()) if v]
    if len(coords) < 2:
        return []
    if len(coords) % 2:
        logger.debug("Odd coordinate count in points list; dropping the last value")
        coords = coords[:-1]
    commands = [_move(coords[0], coords[1])]
    commands.extend(_line(coords[i], coords[i + 1]) for i in range(2, len(coords), 2))
    if closed:
        commands.append(_CLOSE)
    return commands


def _absolute_start(commands: list[PathCommand]) -> list[PathCommand]:
    """A leading relative ``m`` is absolute anyway; make that explicit."""
    if commands and commands[0].kind is CommandKind.MOVE_TO and commands[0].is_relative:
        first = commands[0]
        return [PathCommand(first.kind, False, first.args)] + commands[1:]
    return commands


def _floats(attrs: dict[str, str], *names: str, default: float | None = None) -> list[float]:
    """Numeric attribute values; raises ValueError for a missing (without default) or unparseable one."""
    values = []
    for name in names:
        raw = attrs.get(name)
        if raw is None:
            if default is None:
                raise ValueError(f"missing {name} attribute")
            values.append(default)
        else:
            values.append(float(raw))
    return values


def _shape_commands(tag: str, attrs: dict[str, str]) -> list[PathCommand]:
    if tag == "circle":
        cx, cy, r = _floats(attrs, "cx", "cy", default=0.0) + _floats(attrs, "r")
        return ellipse_commands(cx, cy, r, r) if r > 0 else []
    if tag == "ellipse":
        cx, cy, rx, ry = _floats(attrs, "cx", "cy", default=0.0) + _floats(attrs, "rx", "ry")
        return ellipse_commands(cx, cy, rx, ry) if rx > 0 and ry > 0 else []
    if tag == "rect":
        x, y, rx, ry = _floats(attrs, "x", "y", "rx", "ry", default=0.0)
        width, height = _floats(attrs, "width", "height")
        return rect_commands(x, y, width, height, rx, ry) if width > 0 and height > 0 else []
    if tag == "line":
        x1, y1, x2, y2 = _floats(attrs, "x1", "y1", "x2", "y2", default=0.0)
        return [_move(x1, y1), _line(x2, y2)]
    if tag in ("polyline", "polygon"):
        return polyline_commands(attrs.get("points", ""), closed=tag == "polygon")
    return []


def element_commands(tag: str, attrs: dict[str, str]) -> list[PathCommand]:
    """PathCommands for one drawable element; empty when attributes are unusable."""
    if tag == "path":
        return _absolute_start(parse_path_data(attrs.get("d", "")))
    try:
        return _shape_commands(tag, attrs)
    except ValueError as e:
        logger.warning("Skipping <%s> with unusable geometry: %s", tag, e)
        return []


def extract_combined_path_data(svg: str, decimals: int = _DEFAULT_DECIMALS) -> CombinedPath:
    """Merge every drawable element of ``svg`` into one path string, in document order."""
    pieces = []
    for m in markup.iter_drawables(svg):
        commands = element_commands(markup.tag_name(m), markup.extract_attrs(m.group(0)))
        if commands:
            pieces.append(serialize_path_data(round_precision(commands, decimals)))

    fill_rule = markup.root_attr(svg, "fill-rule")
    if fill_rule is None:
        for m in markup.iter_drawables(svg):
            fill_rule = markup.get_attr(m.group(0), "fill-rule")
            if fill_rule is not None:
                break

    return CombinedPath(
        path_data="".join(pieces),
        view_box=markup.root_attr(svg, "viewBox") or "0 0 24 24",
        fill_rule=fill_rule,
    )
