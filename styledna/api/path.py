"""POST /api/path/* — path-data parsing and arc-safe rounding."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from styledna.config import Settings
from styledna.dependencies import get_settings
from styledna.models.requests import PathParseRequest, PathRoundRequest
from styledna.models.responses import PathCommandOut, PathParseResponse, PathRoundResponse
from styledna.svg.path_grammar import ParseMode, arc_flags, parse_path_data
from styledna.svg.rounder import round_path_data

router = APIRouter(prefix="/path")


def _mode(strict: bool, settings: Settings) -> ParseMode:
    return ParseMode.STRICT if strict else settings.parse_mode


@router.post("/parse", response_model=PathParseResponse)
async def parse(req: PathParseRequest, settings: Settings = Depends(get_settings)) -> PathParseResponse:
    commands = parse_path_data(req.d, _mode(req.strict, settings))
    return PathParseResponse(
        commands=[
            PathCommandOut(letter=cmd.letter, kind=cmd.kind.name, args=[arg.value for arg in cmd.args])
            for cmd in commands
        ],
        command_count=len(commands),
        arc_flags=arc_flags(commands),
    )


@router.post("/round", response_model=PathRoundResponse)
async def round_path(req: PathRoundRequest, settings: Settings = Depends(get_settings)) -> PathRoundResponse:
    decimals = req.decimals if req.decimals is not None else settings.default_precision
    rounded = round_path_data(req.d, decimals, _mode(req.strict, settings))
    return PathRoundResponse(
        d=rounded,
        decimals=decimals,
        original_length=len(req.d),
        rounded_length=len(rounded),
    )
