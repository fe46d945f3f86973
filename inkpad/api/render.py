"""
Render API

저장된 point group 목록을 새 surface에 replay하여 PNG로 돌려준다.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional
import logging

from inkpad.config import config
from inkpad.core.canvas import RasterSurface, count_inked_pixels
from inkpad.core.drawing import Drawing
from inkpad.core.options import SignaturePadOptions
from inkpad.core.signature_pad import SignaturePad
from inkpad.utils.helpers import numpy_to_base64_png

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["render"])


class PointModel(BaseModel):
    x: float
    y: float
    time: int


class RenderRequest(BaseModel):
    """Drawing to replay and the surface to replay it on"""
    point_groups: List[List[PointModel]]
    width: int = Field(default=config.RENDER_WIDTH, gt=0, le=config.MAX_RENDER_DIMENSION)
    height: int = Field(default=config.RENDER_HEIGHT, gt=0, le=config.MAX_RENDER_DIMENSION)
    options: Optional[Dict[str, Any]] = None
    include_last_point: bool = True


def build_options(overrides: Optional[Dict[str, Any]]) -> SignaturePadOptions:
    """Config defaults with request overrides applied"""
    merged = SignaturePadOptions.from_config(config).to_dict()
    merged.pop("resolved_dot_size")
    merged.update({k: v for k, v in (overrides or {}).items() if k not in ("on_begin", "on_end", "onBegin", "onEnd")})
    return SignaturePadOptions.from_dict(merged)


@router.get("/options/defaults")
async def default_options():
    """Ink options the server starts every pad with"""
    return {
        "options": SignaturePadOptions.from_config(config).to_dict(),
        "width": config.RENDER_WIDTH,
        "height": config.RENDER_HEIGHT
    }


@router.post("/render")
async def render_drawing(request: RenderRequest):
    """
    Replay point groups and return the rendered image

    Returns:
        base64 PNG, surface size and drawing counts
    """
    try:
        options = build_options(request.options)
    except (TypeError, ValueError) as e:
        logger.error(f"[Render] Invalid options: {e}")
        raise HTTPException(status_code=400, detail=f"Invalid options: {e}")

    drawing = Drawing.from_data([[p.model_dump() for p in group] for group in request.point_groups])

    surface = RasterSurface(width=request.width, height=request.height)
    pad = SignaturePad(surface, options=options)
    dots = pad.from_data(drawing, include_last_point=request.include_last_point)

    logger.info(
        f"[Render] {len(drawing)} groups, {drawing.point_count()} points → {len(dots)} dots "
        f"on {request.width}x{request.height}"
    )

    return {
        "image": numpy_to_base64_png(surface.to_uint8()),
        "width": surface.width,
        "height": surface.height,
        "num_groups": len(drawing),
        "num_points": drawing.point_count(),
        "num_dots": len(dots),
        "inked_pixels": count_inked_pixels(surface.image, options.background_color)
    }
