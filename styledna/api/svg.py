"""POST /api/svg/optimize and /api/svg/combine — markup reshaping for prompts and exports."""

from __future__ import annotations

from fastapi import APIRouter

from styledna.models.requests import CombineRequest, OptimizeRequest
from styledna.models.responses import CombineResponse, OptimizeResponse
from styledna.svg.optimizer import optimize_svg_for_llm
from styledna.svg.primitives import extract_combined_path_data

router = APIRouter(prefix="/svg")


@router.post("/optimize", response_model=OptimizeResponse)
async def optimize(req: OptimizeRequest) -> OptimizeResponse:
    result = optimize_svg_for_llm(req.svg, req.decimals)
    return OptimizeResponse(
        svg=result.optimized,
        view_box=result.view_box,
        original_length=result.original_length,
        optimized_length=result.optimized_length,
    )


@router.post("/combine", response_model=CombineResponse)
async def combine(req: CombineRequest) -> CombineResponse:
    """Merge every shape of an icon into a single path string."""
    combined = extract_combined_path_data(req.svg, req.decimals)
    return CombineResponse(
        path_data=combined.path_data,
        view_box=combined.view_box,
        fill_rule=combined.fill_rule,
    )
