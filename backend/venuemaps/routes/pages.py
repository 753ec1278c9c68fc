"""
VenueMaps Backend — Client Page Route
======================================

What:  Serves the single-page POI viewer at `/`.
How:   Returns static/index.html; the page fetches /api/pois itself and
       switches between loading, error, empty and populated states.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter(tags=["Pages"])

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    return FileResponse(
        path=str(STATIC_DIR / "index.html"),
        media_type="text/html",
        headers={"Cache-Control": "no-cache"},
    )
