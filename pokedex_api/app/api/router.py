"""
Top-level router.

Record endpoints keep the flat ``/getX`` and ``/updateX`` paths of the
public API, so no prefix is applied here.
"""

from fastapi import APIRouter

from .endpoints import mutations, pages, pokemon

router = APIRouter()

router.include_router(pages.router, tags=["pages"])
router.include_router(pokemon.router, tags=["pokemon"])
router.include_router(mutations.router, tags=["mutations"])
