"""
Mutation endpoints for Pokedex records.

All routes accept a JSON or form-encoded body (see ``deps.parse_body``)
that must include the record ``id``.  Successful updates answer ``204``
with no body.  ``/addPokemon`` answers ``201`` when it creates a
record.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Response

from pokedex_api.app.api.deps import get_service, parse_body
from pokedex_api.app.services.pokemon_service import PokemonService
from pokedex_api.app.services.responses import render

router = APIRouter()


@router.post("/addPokemon")
async def add_pokemon(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    """Create a record, or replace every supplied field of an existing one.

    Required: ``id``, ``num``, ``name``, ``image``, ``type``, ``height``,
    ``weight`` and ``weaknesses``.  ``nextEvolution`` is optional.
    """
    return render(service.add_pokemon(body))


@router.post("/updateName")
async def update_name(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    return render(service.update_fields("updateName", body))


@router.post("/updateImage")
async def update_image(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    return render(service.update_fields("updateImage", body))


@router.post("/addType")
async def add_type(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    """Append a type; a record with a single type gets a list of two."""
    return render(service.add_type(body))


@router.post("/updateType")
async def update_type(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    """Replace the record's types with the supplied one(s)."""
    return render(service.update_fields("updateType", body))


@router.post("/updateHeight")
async def update_height(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    return render(service.update_fields("updateHeight", body))


@router.post("/updateWeight")
async def update_weight(
    body: Dict[str, Any] = Depends(parse_body),
    service: PokemonService = Depends(get_service),
) -> Response:
    return render(service.update_fields("updateWeight", body))
