"""POST /api/style/* — Style DNA analysis and compliance enforcement."""

from __future__ import annotations

import asyncio
import logging
import time
from functools import partial

from fastapi import APIRouter, Depends, HTTPException

from styledna.config import Settings
from styledna.dependencies import get_settings, get_style_cache
from styledna.engine.batch import enforce_batch
from styledna.engine.cache import StyleCache
from styledna.engine.enforcer import (
    PRESET_RULES,
    enforce_style,
    format_compliance_result,
    rules_from_manifest,
    rules_from_style_summary,
)
from styledna.engine.style_analyzer import analyze_style
from styledna.models.compliance import EnforcementRules
from styledna.models.requests import EnforceBatchRequest, EnforceRequest, RuleSource, StyleAnalyzeRequest
from styledna.models.responses import EnforceBatchResponse, EnforceResponse, StyleAnalyzeResponse

router = APIRouter(prefix="/style")
logger = logging.getLogger(__name__)


def _resolve_rules(req: RuleSource, cache: StyleCache) -> EnforcementRules:
    if req.rules is not None:
        return req.rules
    if req.preset is not None:
        rules = PRESET_RULES.get(req.preset.lower())
        if rules is None:
            raise HTTPException(status_code=404, detail=f"Unknown preset {req.preset!r}")
        return rules
    if req.manifest is not None:
        return rules_from_manifest(req.manifest)
    summary = cache.get(req.library_id)
    if summary is None:
        raise HTTPException(status_code=404, detail=f"No cached analysis for library {req.library_id!r}")
    return rules_from_style_summary(summary)


@router.post("/analyze", response_model=StyleAnalyzeResponse)
async def analyze(
    req: StyleAnalyzeRequest,
    cache: StyleCache = Depends(get_style_cache),
) -> StyleAnalyzeResponse:
    start = time.perf_counter()

    if req.library_id and not req.refresh:
        cached = cache.get(req.library_id)
        if cached is not None:
            return StyleAnalyzeResponse(summary=cached, rules=rules_from_style_summary(cached), cached=True)

    # Corpus scans are CPU-bound; keep the event loop free
    loop = asyncio.get_running_loop()
    summary = await loop.run_in_executor(None, analyze_style, req.icons)

    if req.library_id:
        cache.put(req.library_id, summary)

    return StyleAnalyzeResponse(
        summary=summary,
        rules=rules_from_style_summary(summary),
        cached=False,
        processing_time_ms=(time.perf_counter() - start) * 1000,
    )


@router.post("/enforce", response_model=EnforceResponse)
async def enforce(req: EnforceRequest, cache: StyleCache = Depends(get_style_cache)) -> EnforceResponse:
    rules = _resolve_rules(req, cache)
    result = enforce_style(req.svg, rules)
    return EnforceResponse(result=result, rules=rules, report=format_compliance_result(result))


@router.post("/enforce-batch", response_model=EnforceBatchResponse)
async def enforce_many(
    req: EnforceBatchRequest,
    cache: StyleCache = Depends(get_style_cache),
    settings: Settings = Depends(get_settings),
) -> EnforceBatchResponse:
    if len(req.svgs) > settings.max_batch_size:
        raise HTTPException(
            status_code=422,
            detail=f"Batch of {len(req.svgs)} exceeds the limit of {settings.max_batch_size}",
        )
    rules = _resolve_rules(req, cache)

    loop = asyncio.get_running_loop()
    results = await loop.run_in_executor(None, partial(enforce_batch, req.svgs, rules, settings.batch_workers))

    passed = sum(1 for r in results if r.passed)
    return EnforceBatchResponse(results=results, passed=passed, failed=len(results) - passed)
