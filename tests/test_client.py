import json

import pytest
import requests

from pokedex_client import PokedexAPI


class FakeSession:
    """Records requests and answers with queued ``requests.Response`` objects."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def make_response(status, payload=None):
    response = requests.Response()
    response.status_code = status
    response._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    response.url = "http://pokedex.test"
    return response


@pytest.fixture
def api():
    return PokedexAPI(base_url="http://pokedex.test/", session=FakeSession())


def test_get_name(api):
    api.session.responses.append(make_response(200, "Pikachu"))
    assert api.get_name(25) == ("Pikachu", None)
    method, url, kwargs = api.session.calls[0]
    assert (method, url) == ("GET", "http://pokedex.test/getName")
    assert kwargs["params"] == {"id": 25}


def test_error_message_comes_from_payload(api):
    api.session.responses.append(make_response(400, {"message": "Invalid query parameter", "id": "badRequest"}))
    data, error = api.get_pokemon(9999)
    assert data is None
    assert error == {"status_code": 400, "message": "Invalid query parameter"}


def test_connection_error(api):
    api.session.responses.append(requests.ConnectionError("refused"))
    data, error = api.get_pokemon(1)
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_get_types_always_list(api):
    api.session.responses.extend([make_response(200, "Grass"), make_response(200, ["Grass", "Poison"])])
    assert api.get_types(1) == (["Grass"], None)
    assert api.get_types(1) == (["Grass", "Poison"], None)


def test_get_evolutions_without_chain(api):
    api.session.responses.append(
        make_response(200, {"message": "Specified pokemon does not have any evolutions", "id": "success"})
    )
    assert api.get_evolutions(132) == ([], None)


def test_update_sends_json_or_form(api):
    api.session.responses.extend([make_response(204), make_response(204)])
    assert api.update_height(1, "0.80 m") == (None, None)
    assert api.update_height(1, "0.80 m", form=True) == (None, None)
    assert api.session.calls[0][2]["json"] == {"id": 1, "height": "0.80 m"}
    assert api.session.calls[1][2]["data"] == {"id": 1, "height": "0.80 m"}


def test_client_against_app(client, new_pokemon):
    # TestClient.request takes the same arguments as requests.Session.request.
    api = PokedexAPI(base_url="http://testserver", session=client)
    assert api.add_pokemon(new_pokemon)[1] is None
    assert api.add_type(25, "Steel") == (None, None)
    assert api.get_types(25) == (["Electric", "Steel"], None)
    names = [p["name"] for p in api.list_pokemon()[0]]
    assert names == ["Bulbasaur", "Ditto", "Pikachu"]
