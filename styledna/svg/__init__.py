"""SVG-level helpers: path grammar, coordinate rounding, markup scanning."""
