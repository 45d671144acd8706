"""Style-DNA engine: corpus analysis, compliance enforcement and caching."""

from styledna.engine.cache import StyleCache
from styledna.engine.config import AnalyzerConfig
from styledna.engine.enforcer import (
    FEATHER_RULES,
    LUCIDE_RULES,
    PRESET_RULES,
    TABLER_RULES,
    check_compliance,
    enforce_style,
    format_compliance_result,
    rules_from_manifest,
    rules_from_style_summary,
)
from styledna.engine.style_analyzer import analyze_style

__all__ = [
    "AnalyzerConfig",
    "StyleCache",
    "analyze_style",
    "enforce_style",
    "check_compliance",
    "format_compliance_result",
    "rules_from_manifest",
    "rules_from_style_summary",
    "FEATHER_RULES",
    "TABLER_RULES",
    "LUCIDE_RULES",
    "PRESET_RULES",
]
