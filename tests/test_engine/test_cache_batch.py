"""Tests for the summary cache and batch fan-out."""

from __future__ import annotations

import threading

import pytest

from styledna.engine.batch import analyze_corpora, enforce_batch
from styledna.engine.cache import StyleCache
from styledna.engine.enforcer import FEATHER_RULES, enforce_style
from styledna.engine.style_analyzer import analyze_style
from styledna.errors import EmptyCorpusError
from styledna.models.style import StyleSummary
from tests.conftest import CIRCLE_SVG, MINUS_SVG, PAUSE_FILLED_SVG, SETTINGS_SVG, SMILEY_SVG


class TestStyleCache:
    def test_put_get(self):
        cache = StyleCache()
        summary = StyleSummary()
        assert cache.get("lucide") is None
        cache.put("lucide", summary)
        assert cache.get("lucide") is summary
        assert "lucide" in cache
        assert len(cache) == 1

    def test_invalidate(self):
        cache = StyleCache()
        cache.put("lucide", StyleSummary())
        assert cache.invalidate("lucide")
        assert not cache.invalidate("lucide")
        assert "lucide" not in cache

    def test_clear(self):
        cache = StyleCache()
        cache.put("a", StyleSummary())
        cache.put("b", StyleSummary())
        cache.clear()
        assert len(cache) == 0

    def test_instances_are_independent(self):
        first, second = StyleCache(), StyleCache()
        first.put("a", StyleSummary())
        assert second.get("a") is None

    def test_concurrent_puts(self):
        cache = StyleCache()
        threads = [
            threading.Thread(target=cache.put, args=(f"lib-{i}", StyleSummary()))
            for i in range(20)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(cache) == 20


class TestEnforceBatch:
    def test_preserves_order(self):
        svgs = [PAUSE_FILLED_SVG, CIRCLE_SVG, SETTINGS_SVG, PAUSE_FILLED_SVG]
        results = enforce_batch(svgs, FEATHER_RULES, max_workers=3)
        assert [r.score for r in results] == [20, 100, 90, 20]

    def test_matches_sequential(self):
        svgs = [PAUSE_FILLED_SVG, CIRCLE_SVG, SMILEY_SVG]
        assert enforce_batch(svgs, FEATHER_RULES) == [enforce_style(s, FEATHER_RULES) for s in svgs]

    def test_empty(self):
        assert enforce_batch([], FEATHER_RULES) == []


class TestAnalyzeCorpora:
    def test_keyed_results(self):
        corpora = {"outline": [CIRCLE_SVG, MINUS_SVG], "filled": [PAUSE_FILLED_SVG]}
        summaries = analyze_corpora(corpora, max_workers=2)
        assert list(summaries) == ["outline", "filled"]
        assert summaries["outline"] == analyze_style(corpora["outline"])
        assert summaries["filled"].stroke_style == "filled"

    def test_empty_corpus_fails_whole_call(self):
        with pytest.raises(EmptyCorpusError):
            analyze_corpora({"ok": [CIRCLE_SVG], "empty": []})
