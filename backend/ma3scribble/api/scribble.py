"""POST /api/v1/png-to-ma3-scribble — PNG → potrace → grandMA3 scribble.

The request body is the PNG image; options are query parameters (see
models.requests). The preview variant returns the traced SVG restyled to
show strokes instead of the scribble XML.
"""

from __future__ import annotations

import asyncio
import logging
from functools import partial

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from ma3scribble.config import Settings
from ma3scribble.dependencies import get_settings
from ma3scribble.engine.pipeline import encode_svg_to_scribble
from ma3scribble.imaging.preprocess import preprocess_png
from ma3scribble.imaging.trace import trace_png
from ma3scribble.models.requests import PreprocessOptions, ScribbleOptions, TraceOptions
from ma3scribble.svg.preview import stroke_preview

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/png-to-ma3-scribble")


def _convert(png: bytes, request: Request, settings: Settings, preview_only: bool) -> Response:
    """Sync conversion — runs in the default executor."""
    params = request.query_params
    preprocess_options = PreprocessOptions.from_query(params)
    trace_options = TraceOptions.from_query(params)
    scribble_options = ScribbleOptions.from_query(params)

    preprocessed = preprocess_png(png, preprocess_options.to_config())
    traced = trace_png(
        preprocessed,
        trace_options.to_config(),
        potrace_filename=settings.potrace_filename,
        timeout=settings.trace_timeout_seconds,
    )

    if preview_only:
        svg = stroke_preview(traced.decode("utf-8"), scribble_options.stroke_color)
        return Response(content=svg, media_type="image/svg+xml")

    scribble = encode_svg_to_scribble(traced, scribble_options.to_config())
    return Response(content=scribble, media_type="application/xml")


async def _run(request: Request, settings: Settings, preview_only: bool) -> Response:
    png = await request.body()
    logger.debug("Received %d bytes (preview=%s)", len(png), preview_only)
    loop = asyncio.get_running_loop()
    # CPU-bound work and the potrace subprocess stay off the event loop
    return await loop.run_in_executor(None, partial(_convert, png, request, settings, preview_only))


@router.post("")
async def png_to_scribble(request: Request, settings: Settings = Depends(get_settings)) -> Response:
    return await _run(request, settings, preview_only=False)


@router.post("/preview")
async def png_to_scribble_preview(
    request: Request, settings: Settings = Depends(get_settings)
) -> Response:
    return await _run(request, settings, preview_only=True)
