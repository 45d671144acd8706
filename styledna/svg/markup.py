"""Regex-level SVG markup helpers — tag scanning and attribute splicing.

Icon markup is handled as text so that untouched bytes stay byte-identical:
attributes are read from individual tag strings and fixes are spliced back
into the original document.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

DRAWABLE_TAGS = ("path", "circle", "rect", "ellipse", "polygon", "polyline", "line")

_ATTR_RE = re.compile(r'([\w:.-]+)\s*=\s*(["\'])(.*?)\2', re.DOTALL)
_ROOT_RE = re.compile(r"<svg\b[^>]*>", re.IGNORECASE)
_TAG_END_RE = re.compile(r"\s*(/?)>$")
_VIEWBOX_NUMBERS_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_LEADING_FLOAT_RE = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def _tag_re(names: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(r"<(%s)\b[^>]*>" % "|".join(names), re.IGNORECASE)


_DRAWABLE_RE = _tag_re(DRAWABLE_TAGS)
_GROUP_RE = _tag_re(("g",))
_PATH_RE = _tag_re(("path",))


def _named_attr_re(name: str) -> re.Pattern[str]:
    # Lookbehind keeps "width" from matching inside "stroke-width"
    return re.compile(r'(?<![\w:.-])%s\s*=\s*(["\'])(.*?)\1' % re.escape(name), re.DOTALL)


def extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract all key=value attributes from an SVG tag string."""
    return {m.group(1): m.group(3) for m in _ATTR_RE.finditer(tag_text)}


def get_attr(tag_text: str, name: str) -> str | None:
    m = _named_attr_re(name).search(tag_text)
    return m.group(2) if m else None


def parse_style(style: str) -> dict[str, str]:
    """Parse an inline ``style="a: b; c: d"`` declaration list."""
    props: dict[str, str] = {}
    for decl in style.split(";"):
        key, sep, value = decl.partition(":")
        if sep and key.strip():
            props[key.strip().lower()] = value.strip()
    return props


def leading_float(text: str) -> float | None:
    """``"2px"`` → 2.0; unparseable text → None."""
    m = _LEADING_FLOAT_RE.match(text)
    return float(m.group(1)) if m else None


def style_property(tag_text: str, name: str) -> str | None:
    """Rendered value of ``name``: the inline style wins over the presentation attribute."""
    style = get_attr(tag_text, "style")
    if style:
        value = parse_style(style).get(name)
        if value is not None:
            return value
    return get_attr(tag_text, name)


def set_attr(tag_text: str, name: str, value: str | float) -> str:
    """Replace ``name`` in a tag string, or append it before the tag closes."""
    value = str(value).replace('"', "&quot;")
    pattern = _named_attr_re(name)
    if pattern.search(tag_text):
        return pattern.sub(lambda _m: f'{name}="{value}"', tag_text, count=1)
    return _TAG_END_RE.sub(lambda m: f' {name}="{value}"{m.group(1)}>', tag_text, count=1)


def set_style_property(tag_text: str, name: str, value: str | float) -> str:
    """Set ``name`` as an attribute and rewrite any inline declaration of it."""
    tag_text = set_attr(tag_text, name, value)
    style = get_attr(tag_text, "style")
    if not style or name not in parse_style(style):
        return tag_text
    decls = []
    for decl in style.split(";"):
        key, sep, old = decl.partition(":")
        if sep and key.strip().lower() == name:
            lead = old[: len(old) - len(old.lstrip())]
            decl = f"{key}:{lead}{value}"
        decls.append(decl)
    return set_attr(tag_text, "style", ";".join(decls))


def root_tag(svg: str) -> re.Match[str] | None:
    return _ROOT_RE.search(svg)


def root_attr(svg: str, name: str) -> str | None:
    m = root_tag(svg)
    return get_attr(m.group(0), name) if m else None


def root_property(svg: str, name: str) -> str | None:
    m = root_tag(svg)
    return style_property(m.group(0), name) if m else None


def set_root_property(svg: str, name: str, value: str | float) -> str:
    """Set a property on the root ``<svg>`` tag, splicing the rest untouched."""
    m = root_tag(svg)
    if m is None:
        return svg
    return svg[: m.start()] + set_style_property(m.group(0), name, value) + svg[m.end():]


def iter_drawables(svg: str) -> Iterator[re.Match[str]]:
    """Opening tags of every drawable shape element, in document order."""
    return _DRAWABLE_RE.finditer(svg)


def iter_groups(svg: str) -> Iterator[re.Match[str]]:
    return _GROUP_RE.finditer(svg)


def tag_name(match: re.Match[str]) -> str:
    return match.group(1).lower()


def path_data(svg: str) -> list[str]:
    """``d`` values of all ``<path>`` elements."""
    values = []
    for m in _PATH_RE.finditer(svg):
        d = get_attr(m.group(0), "d")
        if d is not None:
            values.append(d)
    return values


def replace_tags(svg: str, pattern_matches: list[tuple[re.Match[str], str]]) -> str:
    """Splice replacement tag strings in; offsets come from the original text."""
    result = svg
    for m, replacement in sorted(pattern_matches, key=lambda p: p[0].start(), reverse=True):
        result = result[: m.start()] + replacement + result[m.end():]
    return result


def view_box(svg: str) -> tuple[float, float, float, float] | None:
    """Root viewBox as (min-x, min-y, width, height), or None if absent/invalid."""
    raw = root_attr(svg, "viewBox")
    if raw is None:
        return None
    numbers = _VIEWBOX_NUMBERS_RE.findall(raw)
    if len(numbers) != 4:
        return None
    x, y, w, h = (float(n) for n in numbers)
    return (x, y, w, h)
