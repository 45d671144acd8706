"""Data-parallel fan-out for batches of independent icons or corpora."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from styledna.engine.config import AnalyzerConfig
from styledna.engine.enforcer import enforce_style
from styledna.engine.style_analyzer import analyze_style
from styledna.models.compliance import ComplianceResult, EnforcementRules
from styledna.models.style import IconMarkup, StyleSummary

logger = logging.getLogger(__name__)


def enforce_batch(
    svgs: Sequence[str],
    rules: EnforcementRules,
    max_workers: int | None = None,
) -> list[ComplianceResult]:
    """Enforce ``rules`` on every candidate; results keep input order."""
    if not svgs:
        return []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        results = list(pool.map(lambda svg: enforce_style(svg, rules), svgs))
    passed = sum(1 for r in results if r.passed)
    logger.info("Batch enforcement: %d/%d candidates passed", passed, len(results))
    return results


def analyze_corpora(
    corpora: Mapping[str, Sequence[IconMarkup | str]],
    config: AnalyzerConfig | None = None,
    max_workers: int | None = None,
) -> dict[str, StyleSummary]:
    """Analyze several libraries concurrently, keyed like ``corpora``.

    An empty corpus raises EmptyCorpusError for the whole call.
    """
    keys = list(corpora)
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        summaries = list(pool.map(lambda key: analyze_style(corpora[key], config), keys))
    return dict(zip(keys, summaries))
