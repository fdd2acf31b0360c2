"""
Read endpoints for Pokedex records.

Every endpoint takes the record id from the ``id`` query parameter and
answers with JSON.  ``HEAD`` is accepted wherever ``GET`` is and
returns the same headers without a body.
"""

from fastapi import APIRouter, Depends, Request, Response

from pokedex_api.app.api.deps import get_service
from pokedex_api.app.services.pokemon_service import PokemonService
from pokedex_api.app.services.responses import render

router = APIRouter()

READ_METHODS = ["GET", "HEAD"]


@router.api_route("/getPokemon", methods=READ_METHODS)
async def get_pokemon(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    """Return the full record for ``id``."""
    return render(service.get_pokemon(request.query_params), request.method)


@router.api_route("/getAllPokemon", methods=READ_METHODS)
async def get_all_pokemon(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    """Return every record currently held, in insertion order."""
    return render(service.get_all_pokemon(), request.method)


@router.api_route("/getName", methods=READ_METHODS)
async def get_name(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    return render(service.get_field(request.query_params, "name"), request.method)


@router.api_route("/getImage", methods=READ_METHODS)
async def get_image(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    return render(service.get_field(request.query_params, "image"), request.method)


# ``/getTypes`` is kept for clients of the older router table.
@router.api_route("/getType", methods=READ_METHODS)
@router.api_route("/getTypes", methods=READ_METHODS)
async def get_type(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    """Return the type as a string, or a list when there are several."""
    return render(service.get_field(request.query_params, "type"), request.method)


@router.api_route("/getWeaknesses", methods=READ_METHODS)
async def get_weaknesses(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    return render(service.get_field(request.query_params, "weaknesses"), request.method)


@router.api_route("/getHeight", methods=READ_METHODS)
async def get_height(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    return render(service.get_field(request.query_params, "height"), request.method)


@router.api_route("/getWeight", methods=READ_METHODS)
async def get_weight(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    return render(service.get_field(request.query_params, "weight"), request.method)


@router.api_route("/getHeightWeight", methods=READ_METHODS)
async def get_height_weight(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    """Return ``{"height": ..., "weight": ...}`` in one call."""
    return render(service.get_height_weight(request.query_params), request.method)


@router.api_route("/getEvolution", methods=READ_METHODS)
async def get_evolution(request: Request, service: PokemonService = Depends(get_service)) -> Response:
    """Return the evolution chain.

    A record without evolutions yields a ``success`` message with
    status 200 rather than an error.
    """
    return render(service.get_evolution(request.query_params), request.method)
