from __future__ import annotations

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from starlette.concurrency import run_in_threadpool

from .colors import rgb_to_hex
from .errors import QuantizationError
from .pipeline import PaletteExtractor
from .quantizer import MAX_COLORS, MIN_COLORS
from .settings import ExtractorSettings

settings = ExtractorSettings.from_env()


class ColorRequest(BaseModel):
    image_url: str = Field(..., description="HTTP(S) image URL")
    quality: int = Field(
        default=settings.quality, ge=1, description="Sample every Nth pixel"
    )
    ignore_white: bool = Field(
        default=settings.ignore_white, description="Drop near-white pixels"
    )


class PaletteRequest(ColorRequest):
    color_count: int = Field(
        default=settings.color_count,
        ge=MIN_COLORS,
        le=MAX_COLORS,
        description="Maximum colors to return",
    )


class ColorItem(BaseModel):
    hex: str
    rgb: list[int]
    population: int
    proportion: float
    percentage: float


class PaletteResponse(BaseModel):
    colors: list[ColorItem]
    requested_count: int
    sample_count: int
    warnings: list[str]


class ColorResponse(BaseModel):
    hex: str
    rgb: list[int]


app = FastAPI(
    title="palette-cut API",
    version="1.0.0",
    description="Extract a median cut color palette from an image URL.",
)


def _build_extractor(quality: int, ignore_white: bool) -> PaletteExtractor:
    return PaletteExtractor(
        quality=quality,
        ignore_white=ignore_white,
        request_timeout=settings.request_timeout,
    )


def _http_error(exc: Exception) -> HTTPException:
    if isinstance(exc, QuantizationError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=400, detail=f"failed_to_extract_palette: {exc}")


@app.post("/palette", response_model=PaletteResponse)
async def extract_palette(payload: PaletteRequest) -> PaletteResponse:
    extractor = _build_extractor(payload.quality, payload.ignore_white)
    try:
        result = await run_in_threadpool(
            extractor.run, payload.image_url, payload.color_count
        )
    except Exception as exc:
        raise _http_error(exc) from exc

    colors = [
        ColorItem(
            hex=swatch.hex,
            rgb=list(swatch.rgb),
            population=swatch.population,
            proportion=float(swatch.proportion),
            percentage=float(swatch.proportion * 100.0),
        )
        for swatch in result.swatches
    ]
    return PaletteResponse(
        colors=colors,
        requested_count=result.requested_count,
        sample_count=result.sample_count,
        warnings=result.warnings,
    )


@app.post("/color", response_model=ColorResponse)
async def extract_color(payload: ColorRequest) -> ColorResponse:
    extractor = _build_extractor(payload.quality, payload.ignore_white)
    try:
        rgb = await run_in_threadpool(extractor.dominant_color, payload.image_url)
    except Exception as exc:
        raise _http_error(exc) from exc

    return ColorResponse(hex=rgb_to_hex(rgb), rgb=list(rgb))
