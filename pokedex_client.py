"""Pokedex API client.

A thin wrapper around the Pokedex HTTP service built on ``requests``.
Every public method returns a ``(data, error)`` tuple: on success
``data`` holds the decoded JSON (``None`` for empty ``204`` answers)
and ``error`` is ``None``; on failure ``data`` is ``None`` and
``error`` is a dictionary with ``status_code`` and ``message`` keys.
The message is taken from the service's own ``message`` field where
the response carries one.

Mutation methods send JSON bodies by default; pass ``form=True`` to
send ``application/x-www-form-urlencoded`` instead.

Example::

    api = PokedexAPI(base_url="http://localhost:3000")
    name, error = api.get_name(25)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class PokedexAPI:
    """Client for the Pokedex API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:3000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Dict[str, Any] | None = None,
        body: Dict[str, Any] | None = None,
        form: bool = False,
    ) -> Result:
        """Perform an HTTP request and decode the JSON answer."""
        url = f"{self.base_url}{path}"
        kwargs: Dict[str, Any] = {"params": params, "timeout": self.timeout}
        if body is not None:
            kwargs["data" if form else "json"] = body
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method=method, url=url, **kwargs)
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _get(self, path: str, pokemon_id: Any) -> Result:
        return self._request("GET", path, params={"id": pokemon_id})

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def get_pokemon(self, pokemon_id: Any) -> Result:
        """Retrieve the full record of a pokemon."""
        return self._get("/getPokemon", pokemon_id)

    def list_pokemon(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve every record.  On failure the list is empty."""
        data, error = self._request("GET", "/getAllPokemon")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_name(self, pokemon_id: Any) -> Result:
        return self._get("/getName", pokemon_id)

    def get_image(self, pokemon_id: Any) -> Result:
        return self._get("/getImage", pokemon_id)

    def get_types(self, pokemon_id: Any) -> Tuple[List[str], Optional[Dict[str, Any]]]:
        """Retrieve the types of a pokemon, always as a list."""
        data, error = self._get("/getType", pokemon_id)
        if error:
            return [], error
        if isinstance(data, str):
            return [data], None
        return list(data or []), None

    def get_weaknesses(self, pokemon_id: Any) -> Result:
        return self._get("/getWeaknesses", pokemon_id)

    def get_height(self, pokemon_id: Any) -> Result:
        return self._get("/getHeight", pokemon_id)

    def get_weight(self, pokemon_id: Any) -> Result:
        return self._get("/getWeight", pokemon_id)

    def get_evolutions(self, pokemon_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve the evolution chain.

        The service answers with a ``success`` message object when a
        pokemon has no evolutions; this is returned as an empty list.
        """
        data, error = self._get("/getEvolution", pokemon_id)
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_pokemon(self, payload: Dict[str, Any], *, form: bool = False) -> Result:
        """Create a pokemon, or replace the fields of an existing one."""
        return self._request("POST", "/addPokemon", body=payload, form=form)

    def update_name(self, pokemon_id: Any, name: str, *, form: bool = False) -> Result:
        return self._request("POST", "/updateName", body={"id": pokemon_id, "name": name}, form=form)

    def update_image(self, pokemon_id: Any, image: str, *, form: bool = False) -> Result:
        return self._request("POST", "/updateImage", body={"id": pokemon_id, "image": image}, form=form)

    def add_type(self, pokemon_id: Any, type_name: str, *, form: bool = False) -> Result:
        return self._request("POST", "/addType", body={"id": pokemon_id, "type": type_name}, form=form)

    def update_type(self, pokemon_id: Any, types: Any, *, form: bool = False) -> Result:
        return self._request("POST", "/updateType", body={"id": pokemon_id, "type": types}, form=form)

    def update_height(self, pokemon_id: Any, height: str, *, form: bool = False) -> Result:
        return self._request("POST", "/updateHeight", body={"id": pokemon_id, "height": height}, form=form)

    def update_weight(self, pokemon_id: Any, weight: str, *, form: bool = False) -> Result:
        return self._request("POST", "/updateWeight", body={"id": pokemon_id, "weight": weight}, form=form)
