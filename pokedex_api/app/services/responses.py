"""
Response shaping.

Every handler outcome is turned into a ``ShapedResponse`` (status code
plus JSON payload) by the functions below, and only ``render`` knows
about Starlette response objects.  Keeping the two apart lets the
services be tested without an HTTP client.

``render`` never writes a body for ``204`` responses or ``HEAD``
requests; for ``HEAD`` the ``Content-Length`` header still reports the
size the body would have had.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable

from fastapi import status
from fastapi.responses import JSONResponse, Response

from pokedex_api.app.services.validators import MissingFields


@dataclass(frozen=True)
class ShapedResponse:
    status: int
    payload: Any = field(default_factory=dict)


def _message(message: str, tag: str) -> dict:
    return {"message": message, "id": tag}


def missing_id_param() -> ShapedResponse:
    return ShapedResponse(status.HTTP_400_BAD_REQUEST, _message("Missing required query parameter 'id'", "badRequest"))


def invalid_id_param() -> ShapedResponse:
    return ShapedResponse(status.HTTP_400_BAD_REQUEST, _message("Invalid query parameter", "badRequest"))


def found(value: Any) -> ShapedResponse:
    return ShapedResponse(status.HTTP_200_OK, value)


def no_evolutions() -> ShapedResponse:
    return ShapedResponse(
        status.HTTP_200_OK, _message("Specified pokemon does not have any evolutions", "success")
    )


def not_found() -> ShapedResponse:
    return ShapedResponse(status.HTTP_404_NOT_FOUND, _message("The requested page was not found", "notFound"))


def missing_fields(missing: MissingFields) -> ShapedResponse:
    message = "Missing one or more required attributes: " + ", ".join(missing.required)
    return ShapedResponse(status.HTTP_400_BAD_REQUEST, _message(message, "badRequest"))


def invalid_fields(names: Iterable[str]) -> ShapedResponse:
    message = "Invalid value for one or more attributes: " + ", ".join(names)
    return ShapedResponse(status.HTTP_400_BAD_REQUEST, _message(message, "badRequest"))


def malformed_body() -> ShapedResponse:
    return ShapedResponse(status.HTTP_400_BAD_REQUEST, _message("Malformed request body", "badRequest"))


def created() -> ShapedResponse:
    return ShapedResponse(status.HTTP_201_CREATED, _message("Successfully added new pokemon", "success"))


def updated() -> ShapedResponse:
    return ShapedResponse(status.HTTP_204_NO_CONTENT, {})


def internal_error() -> ShapedResponse:
    return ShapedResponse(
        status.HTTP_500_INTERNAL_SERVER_ERROR, _message("An unexpected error occurred", "internalError")
    )


def render(shaped: ShapedResponse, method: str = "GET") -> Response:
    """Convert a ``ShapedResponse`` into a Starlette response."""
    if shaped.status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=shaped.status)
    response = JSONResponse(status_code=shaped.status, content=shaped.payload)
    if method.upper() == "HEAD":
        return Response(
            status_code=shaped.status,
            media_type=response.media_type,
            headers={"content-length": str(len(response.body))},
        )
    return response
