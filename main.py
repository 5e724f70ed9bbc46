import logging
from typing import Optional

from fastapi import FastAPI, Query, Response
from fastapi.responses import JSONResponse

from fractal_catalog import build_catalog
from fractal_config import load_settings
from fractal_errors import (
    DefinitionError,
    FractalError,
    InvalidColor,
    IterationLimitExceeded,
    MalformedSequence,
    SurfaceUnavailable,
    UnknownFractal,
)
from fractalgen_web import draw_fractal_web_bytes
from logging_config import setup_logging

settings = load_settings()
setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI()
catalog = build_catalog()

ERROR_STATUS = (
    (UnknownFractal, 404),
    (IterationLimitExceeded, 400),
    (InvalidColor, 400),
    (SurfaceUnavailable, 503),
    (MalformedSequence, 500),
    (DefinitionError, 500),
)


def error_response(err: FractalError) -> JSONResponse:
    for kind, status_code in ERROR_STATUS:
        if isinstance(err, kind):
            break
    else:
        status_code = 500
    if status_code == 500:
        logger.error("Render failed: %s", err)
    else:
        logger.debug("Rejected render request: %s", err)
    return JSONResponse({"error": str(err)}, status_code=status_code)


# ---------------- Catalog -------------------

@app.get("/fractals")
def fractals():
    """List the fractals that /drawfractal can render."""
    return JSONResponse(catalog.summary())

# ---------------- FractalGen -------------------

@app.get("/drawfractal")
def drawfractal(
    fractal: int = Query(1, description="Catalog id from /fractals"),
    iterations: int = Query(4, description="Rewriting rounds, 0..max_iterations"),
    color1: Optional[str] = Query(None, description="Gradient start color, e.g. #4DFE44"),
    color2: Optional[str] = Query(None, description="Gradient end color"),
    width: Optional[int] = Query(None, ge=1),
    height: Optional[int] = Query(None, ge=1),
):
    """Render a fractal with a two color gradient and return it as PNG."""
    try:
        img_bytes = draw_fractal_web_bytes(
            catalog,
            fractal_id=fractal,
            iterations=iterations,
            color_start=color1 or settings.color_start,
            color_end=color2 or settings.color_end,
            img_size=(width or settings.width, height or settings.height),
            max_side=settings.max_side,
        )
    except FractalError as e:
        return error_response(e)
    return Response(content=img_bytes, media_type="image/png", headers={"Cache-Control": "no-store"})
