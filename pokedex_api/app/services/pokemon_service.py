"""
Service layer for Pokedex lookups and mutations.

``resolve_identifier`` and ``resolve_record`` map the ``id`` parameter
of a request onto a stored record.  ``PokemonService`` combines them
with the field validators and the store, and returns a
``ShapedResponse`` for every endpoint.  Handlers never touch the store
directly.

Services are synchronous on purpose: no mutation suspends half way,
so on the event loop a request always sees the collection either
before or after another request's change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Type, Union

from pydantic import ValidationError

from pokedex_api.app.core.store import CREATED, PokedexStore, RecordNotFoundError
from pokedex_api.app.schemas.pokemon import (
    HeightUpdate,
    ImageUpdate,
    NameUpdate,
    Pokemon,
    PokemonCreate,
    PokemonPatch,
    TypeUpdate,
    WeightUpdate,
)
from pokedex_api.app.services import responses
from pokedex_api.app.services.responses import ShapedResponse
from pokedex_api.app.services.validators import validate

logger = logging.getLogger(__name__)

ID_PARAM = "id"

# Attributes exposed by the single field endpoints, keyed by wire name.
PROJECTED_FIELDS = ("name", "image", "type", "weaknesses", "height", "weight")

UPDATE_PATCHES: Dict[str, Type[PokemonPatch]] = {
    "updateName": NameUpdate,
    "updateImage": ImageUpdate,
    "updateType": TypeUpdate,
    "updateHeight": HeightUpdate,
    "updateWeight": WeightUpdate,
}


@dataclass(frozen=True)
class ParsedId:
    value: int


@dataclass(frozen=True)
class MissingIdParam:
    pass


@dataclass(frozen=True)
class InvalidIdParam:
    raw: Any = None


Resolution = Union[ParsedId, MissingIdParam, InvalidIdParam]


def parse_id(raw: Any) -> Optional[int]:
    """Parse a positive integer id from a query or body value."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw > 0 else None
    if isinstance(raw, str):
        text = raw.strip()
        if text.isascii() and text.isdigit():
            value = int(text)
            return value if value > 0 else None
    return None


def resolve_identifier(params: Mapping[str, Any], store: PokedexStore) -> Resolution:
    """Work out which record a request refers to.

    A missing or empty ``id`` gives ``MissingIdParam``.  Anything that is
    not a positive integer, or that names no stored record, gives
    ``InvalidIdParam``; callers cannot tell the two apart.
    """
    raw = params.get(ID_PARAM)
    if raw is None or raw == "":
        return MissingIdParam()
    record_id = parse_id(raw)
    if record_id is None or store.find_by_id(record_id) is None:
        return InvalidIdParam(raw)
    return ParsedId(record_id)


def resolve_record(parsed: ParsedId, store: PokedexStore) -> Optional[Pokemon]:
    return store.find_by_id(parsed.value)


def _invalid_field_names(exc: ValidationError) -> Iterable[str]:
    names = []
    for error in exc.errors():
        location = error.get("loc") or ("body",)
        name = str(location[0])
        if name not in names:
            names.append(name)
    return names


class PokemonService:
    """Endpoint logic for reading and changing Pokedex records."""

    def __init__(self, store: PokedexStore) -> None:
        self.store = store

    def _lookup(self, params: Mapping[str, Any]) -> Tuple[Optional[Pokemon], Optional[ShapedResponse]]:
        """Return ``(record, None)`` or ``(None, error_response)``."""
        outcome = resolve_identifier(params, self.store)
        if isinstance(outcome, MissingIdParam):
            return None, responses.missing_id_param()
        if isinstance(outcome, InvalidIdParam):
            logger.debug("No pokemon matches id %r", outcome.raw)
            return None, responses.invalid_id_param()
        record = resolve_record(outcome, self.store)
        if record is None:
            return None, responses.invalid_id_param()
        return record, None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_pokemon(self, params: Mapping[str, Any]) -> ShapedResponse:
        record, error = self._lookup(params)
        if error:
            return error
        return responses.found(record.to_wire())

    def get_all_pokemon(self) -> ShapedResponse:
        return responses.found([record.to_wire() for record in self.store.list_all()])

    def get_field(self, params: Mapping[str, Any], field: str) -> ShapedResponse:
        """Return a single attribute of the requested record."""
        if field not in PROJECTED_FIELDS:
            raise ValueError(f"Unknown pokemon field {field!r}")
        record, error = self._lookup(params)
        if error:
            return error
        return responses.found(record.to_wire()[field])

    def get_height_weight(self, params: Mapping[str, Any]) -> ShapedResponse:
        record, error = self._lookup(params)
        if error:
            return error
        return responses.found({"height": record.height, "weight": record.weight})

    def get_evolution(self, params: Mapping[str, Any]) -> ShapedResponse:
        # A record without evolutions is a successful answer, not an error.
        record, error = self._lookup(params)
        if error:
            return error
        if not record.next_evolution:
            return responses.no_evolutions()
        return responses.found(record.to_wire()["nextEvolution"])

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_pokemon(self, body: Mapping[str, Any]) -> ShapedResponse:
        """Create a record, or replace the supplied fields of an existing one.

        Answers ``201`` when the record is new and ``204`` when it
        already existed.
        """
        missing = validate("addPokemon", body)
        if missing:
            return responses.missing_fields(missing)
        record_id = parse_id(body.get(ID_PARAM))
        if record_id is None:
            return responses.invalid_id_param()
        try:
            patch = PokemonCreate.model_validate(dict(body))
            outcome = self.store.upsert_fields(record_id, patch.changes())
        except ValidationError as exc:
            return responses.invalid_fields(_invalid_field_names(exc))
        if outcome == CREATED:
            logger.info("Added pokemon %s (%s)", record_id, patch.name)
            return responses.created()
        logger.info("Replaced pokemon %s (%s)", record_id, patch.name)
        return responses.updated()

    def update_fields(self, operation: str, body: Mapping[str, Any]) -> ShapedResponse:
        """Overwrite the attribute handled by ``operation`` on an existing record.

        Unknown ids are rejected; these endpoints never create records.
        """
        patch_model = UPDATE_PATCHES[operation]
        missing = validate(operation, body)
        if missing:
            return responses.missing_fields(missing)
        record, error = self._lookup(body)
        if error:
            return error
        try:
            patch = patch_model.model_validate(dict(body))
            changes = patch.changes()
            self.store.update(record.id, lambda current: {**current, **changes})
        except ValidationError as exc:
            return responses.invalid_fields(_invalid_field_names(exc))
        except RecordNotFoundError:
            return responses.invalid_id_param()
        logger.info("%s applied to pokemon %s: %s", operation, record.id, sorted(changes))
        return responses.updated()

    def add_type(self, body: Mapping[str, Any]) -> ShapedResponse:
        """Append one or more types to an existing record."""
        missing = validate("addType", body)
        if missing:
            return responses.missing_fields(missing)
        record, error = self._lookup(body)
        if error:
            return error
        try:
            patch = TypeUpdate.model_validate(dict(body))
            updated = self.store.add_type(record.id, patch.type)
        except ValidationError as exc:
            return responses.invalid_fields(_invalid_field_names(exc))
        except RecordNotFoundError:
            return responses.invalid_id_param()
        logger.info("Pokemon %s now has types %s", record.id, updated.type)
        return responses.updated()
