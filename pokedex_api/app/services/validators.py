"""
Presence checks for mutation request bodies.

Each mutation endpoint declares the attributes it requires.  A field
counts as missing when the key is absent or its value is ``None``, an
empty string, or a list with no non-empty entry.  No type checking
happens here; the patch models in ``schemas.pokemon`` do that
afterwards.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

REQUIRED_FIELDS: Dict[str, Tuple[str, ...]] = {
    "addPokemon": ("id", "num", "name", "image", "type", "height", "weight", "weaknesses"),
    "updateName": ("id", "name"),
    "updateImage": ("id", "image"),
    "addType": ("id", "type"),
    "updateType": ("id", "type"),
    "updateHeight": ("id", "height"),
    "updateWeight": ("id", "weight"),
}

# Older clients send ``img`` instead of ``image``.
FIELD_ALIASES: Dict[str, Tuple[str, ...]] = {
    "image": ("image", "img"),
}


@dataclass(frozen=True)
class MissingFields:
    """Validation failure listing the absent attributes of a body."""

    operation: str
    names: Tuple[str, ...]

    @property
    def required(self) -> Tuple[str, ...]:
        return REQUIRED_FIELDS[self.operation]


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple)):
        return all(is_missing(item) for item in value)
    return False


def validate(operation: str, body: Mapping[str, Any]) -> Optional[MissingFields]:
    """Return ``None`` if ``body`` holds every field ``operation`` requires.

    Raises ``KeyError`` for an unknown operation name.
    """
    missing = []
    for name in REQUIRED_FIELDS[operation]:
        keys = FIELD_ALIASES.get(name, (name,))
        if all(is_missing(body.get(key)) for key in keys):
            missing.append(name)
    if missing:
        return MissingFields(operation=operation, names=tuple(missing))
    return None
