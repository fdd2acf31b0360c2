"""
Static documentation pages.

Serves the landing page, the endpoint reference and their stylesheet
from the package's ``static`` directory.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter()


@router.get("/", include_in_schema=False)
async def get_index() -> FileResponse:
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/docs", include_in_schema=False)
async def get_docs() -> FileResponse:
    return FileResponse(STATIC_DIR / "docs.html", media_type="text/html")


@router.get("/style.css", include_in_schema=False)
async def get_css() -> FileResponse:
    return FileResponse(STATIC_DIR / "style.css", media_type="text/css")
