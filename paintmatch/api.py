from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from paintmatch.src.mix_engine.conversions import InvalidColorFormat, normalize_hex
from paintmatch.src.mix_engine.io import read_image_rgb, sample_hex
from paintmatch.src.mix_engine.palette import PAINT_COLORS
from paintmatch.src.mix_engine.search import MixSearchEngine


class MatchRequest(BaseModel):
    color: str | None = Field(
        default=None,
        description="Target color as 3- or 6-digit hex, with or without '#'",
    )
    image_url: str | None = Field(
        default=None,
        description="HTTP(S) image URL to pick the target color from",
    )
    x: int | None = Field(default=None, ge=0, description="Pixel column in the image")
    y: int | None = Field(default=None, ge=0, description="Pixel row in the image")


class MixItem(BaseModel):
    name: str
    percentage: int
    hex: str


class MatchResponse(BaseModel):
    target_color: str
    colors: list[MixItem]
    mixed_color: str | None
    distance: float | None
    found: bool


class PaintItem(BaseModel):
    name: str
    hex: str
    role: str


app = FastAPI(
    title="Paint Mix Matcher API",
    version="1.0.0",
    description="Find a practical mix of cyan, magenta, yellow, white and black paint for a color.",
)


def _build_engine() -> MixSearchEngine:
    return MixSearchEngine()


def _resolve_target(payload: MatchRequest) -> str:
    if payload.color is not None:
        return normalize_hex(payload.color)
    if payload.image_url is None or payload.x is None or payload.y is None:
        raise InvalidColorFormat("provide 'color' or 'image_url' with 'x' and 'y'")
    image_rgb = read_image_rgb(payload.image_url)
    return sample_hex(image_rgb, payload.x, payload.y)


@app.get("/palette", response_model=list[PaintItem])
async def list_palette() -> list[PaintItem]:
    return [PaintItem(**paint.to_dict()) for paint in PAINT_COLORS]


@app.post("/match", response_model=MatchResponse)
async def match_color(payload: MatchRequest) -> MatchResponse:
    try:
        target = await run_in_threadpool(_resolve_target, payload)
    except InvalidColorFormat as exc:
        raise HTTPException(status_code=400, detail=f"invalid_color: {exc}") from exc
    except Exception as exc:
        raise HTTPException(
            status_code=400, detail=f"failed_to_match_color: {exc}"
        ) from exc

    engine = _build_engine()
    result = await run_in_threadpool(engine.run, target)

    return MatchResponse(
        target_color=result.target_color,
        colors=[
            MixItem(
                name=component.name,
                percentage=int(component.percentage),
                hex=component.hex,
            )
            for component in result.color_mix
        ],
        mixed_color=result.mixed_color,
        distance=None if not result.found else float(result.distance),
        found=result.found,
    )
