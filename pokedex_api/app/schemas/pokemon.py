"""
Pydantic models for Pokedex records.

``Pokemon`` is the stored record.  Internally ``type`` and
``weaknesses`` are always ordered lists; on the wire a single type
collapses back to a plain string so that clients written against the
original JSON shape keep working.  ``PokemonPatch`` subclasses describe
the body accepted by each mutation endpoint.  Which fields were
actually supplied is read from ``model_fields_set`` rather than from
the truthiness of the values, so a height of ``"0"`` is a legitimate
update.

Input also accepts the legacy keys found in the seed data: ``img`` for
``image`` and ``next_evolution`` (with ``num`` instead of ``id``) for
``nextEvolution``.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


# Type and weakness names must be non-empty.
CategoryName = Annotated[str, Field(min_length=1)]

# Wire key paired with its legacy spelling.
LEGACY_ALIASES = (("image", "img"), ("nextEvolution", "next_evolution"))


def _number_as_text(value: Any) -> Any:
    """Accept JSON numbers for the free-form text fields."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


def _drop_empty_aliases(data: Any) -> Any:
    """Let a filled legacy key win over an empty wire key.

    ``{"image": "", "img": "x.png"}`` reads as ``x.png``, matching the
    presence check in ``services.validators``.
    """
    if not isinstance(data, dict):
        return data
    cleaned = dict(data)
    for key, legacy in LEGACY_ALIASES:
        if cleaned.get(key) in (None, "", []) and legacy in cleaned:
            cleaned.pop(key, None)
    return cleaned


def _as_unique_list(value: Any) -> Any:
    """Promote a scalar to a one element list and drop repeated entries."""
    if value is None:
        return value
    if isinstance(value, str):
        value = [value]
    if isinstance(value, (list, tuple)):
        seen: List[Any] = []
        for item in value:
            if item not in seen:
                seen.append(item)
        return seen
    return value


class Evolution(BaseModel):
    """A single ``{id, name}`` step in an evolution chain."""

    id: int
    name: str

    @model_validator(mode="before")
    @classmethod
    def accept_legacy_num(cls, data: Any) -> Any:
        # Seed data identifies evolutions by zero padded ``num``.
        if isinstance(data, dict) and "id" not in data and "num" in data:
            data = dict(data)
            data["id"] = int(str(data.pop("num")))
        return data


class Pokemon(BaseModel):
    """A full Pokedex record as held by the store."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0, examples=[1])
    num: Optional[str] = Field(None, examples=["001"])
    name: str = Field(..., min_length=1, examples=["Bulbasaur"])
    image: str = Field("", validation_alias=AliasChoices("image", "img"))
    type: List[CategoryName] = Field(..., min_length=1, examples=[["Grass", "Poison"]])
    weaknesses: List[CategoryName] = Field(default_factory=list)
    height: str = Field("", examples=["0.71 m"])
    weight: str = Field("", examples=["6.9 kg"])
    next_evolution: Optional[List[Evolution]] = Field(
        None,
        validation_alias=AliasChoices("nextEvolution", "next_evolution"),
        serialization_alias="nextEvolution",
    )

    @model_validator(mode="before")
    @classmethod
    def prefer_filled_alias(cls, data: Any) -> Any:
        return _drop_empty_aliases(data)

    @field_validator("type", "weaknesses", mode="before")
    @classmethod
    def normalize_lists(cls, value: Any) -> Any:
        return _as_unique_list(value)

    @field_validator("num", "height", "weight", mode="before")
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        return _number_as_text(value)

    @field_serializer("type", when_used="json")
    def collapse_single_type(self, value: List[str]) -> Any:
        return value[0] if len(value) == 1 else list(value)

    def to_wire(self) -> Dict[str, Any]:
        """Return the JSON representation sent to clients."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def normalize_field_names(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Map wire and legacy keys onto ``Pokemon`` attribute names."""
    renames = {"img": "image", "nextEvolution": "next_evolution"}
    normalized: Dict[str, Any] = {}
    for key, value in fields.items():
        normalized[renames.get(key, key)] = value
    return normalized


class PokemonPatch(BaseModel):
    """Base class for mutation bodies.

    Only attributes explicitly present in the request end up in
    ``changes()``; everything else is left untouched on the record.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: int = Field(..., gt=0)

    @model_validator(mode="before")
    @classmethod
    def prefer_filled_alias(cls, data: Any) -> Any:
        return _drop_empty_aliases(data)

    @field_validator("num", "height", "weight", mode="before", check_fields=False)
    @classmethod
    def numbers_as_text(cls, value: Any) -> Any:
        return _number_as_text(value)

    def changes(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set if name != "id"}


class PokemonCreate(PokemonPatch):
    """Body of ``/addPokemon``."""

    num: str
    name: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1, validation_alias=AliasChoices("image", "img"))
    type: List[CategoryName] = Field(..., min_length=1)
    height: str
    weight: str
    weaknesses: List[CategoryName]
    next_evolution: Optional[List[Evolution]] = Field(
        None, validation_alias=AliasChoices("nextEvolution", "next_evolution")
    )

    @field_validator("type", "weaknesses", mode="before")
    @classmethod
    def normalize_lists(cls, value: Any) -> Any:
        return _as_unique_list(value)


class NameUpdate(PokemonPatch):
    name: str = Field(..., min_length=1)


class ImageUpdate(PokemonPatch):
    image: str = Field(..., min_length=1, validation_alias=AliasChoices("image", "img"))


class TypeUpdate(PokemonPatch):
    """Body of ``/updateType`` and ``/addType``."""

    type: List[CategoryName] = Field(..., min_length=1)

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, value: Any) -> Any:
        return _as_unique_list(value)


class HeightUpdate(PokemonPatch):
    height: str


class WeightUpdate(PokemonPatch):
    weight: str
