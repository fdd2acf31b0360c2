"""
FastAPI dependencies shared by the endpoint modules.

``parse_body`` normalises JSON and form-encoded bodies into the same
flat mapping.  Form fields sent more than once (``type=Grass&type=Poison``)
become lists; single fields stay scalar.  Bodies with any other content
type are treated as empty.
"""

import json
import logging
from typing import Any, Dict
from urllib.parse import parse_qs

from fastapi import Depends, Request

from pokedex_api.app.core.store import PokedexStore
from pokedex_api.app.services.pokemon_service import PokemonService

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class MalformedBodyError(Exception):
    """Raised when a request body cannot be decoded."""


async def parse_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedBodyError("Request body is not valid UTF-8") from exc

    if content_type == JSON_CONTENT_TYPE:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MalformedBodyError(f"Invalid JSON body: {exc}") from exc
        if not isinstance(data, dict):
            raise MalformedBodyError("JSON body must be an object")
        return data

    if content_type == FORM_CONTENT_TYPE:
        parsed = parse_qs(text, keep_blank_values=True)
        return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}

    logger.debug("Ignoring body with content type %r", content_type)
    return {}


def get_store(request: Request) -> PokedexStore:
    return request.app.state.store


def get_service(store: PokedexStore = Depends(get_store)) -> PokemonService:
    return PokemonService(store)
