import pytest


def test_add_pokemon_creates(client, new_pokemon):
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 201
    assert resp.json() == {"message": "Successfully added new pokemon", "id": "success"}
    assert client.get("/getName", params={"id": 25}).json() == "Pikachu"


def test_add_pokemon_form_encoded(client, new_pokemon):
    new_pokemon["weaknesses"] = ["Ground", "Rock"]
    resp = client.post("/addPokemon", data=new_pokemon)
    assert resp.status_code == 201
    record = client.get("/getPokemon", params={"id": 25}).json()
    assert record["id"] == 25
    assert record["type"] == "Electric"
    assert record["weaknesses"] == ["Ground", "Rock"]


def test_add_pokemon_existing_id_updates(client, new_pokemon):
    new_pokemon["id"] = 1
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 204
    assert resp.content == b""
    record = client.get("/getPokemon", params={"id": 1}).json()
    assert record["name"] == "Pikachu"
    # fields not in the body are kept
    assert record["nextEvolution"][0]["name"] == "Ivysaur"
    assert len(client.get("/getAllPokemon").json()) == 2


def test_add_pokemon_missing_name_changes_nothing(client, new_pokemon):
    del new_pokemon["name"]
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 400
    assert resp.json()["id"] == "badRequest"
    assert resp.json()["message"].startswith("Missing one or more required attributes")
    assert len(client.get("/getAllPokemon").json()) == 2


def test_add_pokemon_invalid_id(client, new_pokemon):
    new_pokemon["id"] = "twenty-five"
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid query parameter"


def test_add_pokemon_bad_field_shape(client, new_pokemon):
    new_pokemon["type"] = {"primary": "Electric"}
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 400
    assert "type" in resp.json()["message"]
    assert client.get("/getPokemon", params={"id": 25}).status_code == 400


def test_add_type_scenario(client):
    resp = client.post("/addType", json={"id": 1, "type": "Poison"})
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get("/getType", params={"id": 1}).json() == ["Grass", "Poison"]


def test_add_type_form_encoded(client):
    resp = client.post("/addType", data={"id": "132", "type": "Ghost"})
    assert resp.status_code == 204
    assert client.get("/getType", params={"id": 132}).json() == ["Normal", "Ghost"]


def test_update_type_replaces(client):
    assert client.post("/updateType", json={"id": 1, "type": ["Fire", "Flying"]}).status_code == 204
    assert client.get("/getType", params={"id": 1}).json() == ["Fire", "Flying"]
    assert client.post("/updateType", json={"id": 1, "type": "Water"}).status_code == 204
    assert client.get("/getType", params={"id": 1}).json() == "Water"


@pytest.mark.parametrize(
    "path, field, value, getter",
    [
        ("/updateName", "name", "Bulba", "/getName"),
        ("/updateImage", "image", "bulba.png", "/getImage"),
        ("/updateHeight", "height", "0", "/getHeight"),
        ("/updateWeight", "weight", "7 kg", "/getWeight"),
    ],
)
def test_single_field_updates(client, path, field, value, getter):
    resp = client.post(path, json={"id": 1, field: value})
    assert resp.status_code == 204
    assert client.get(getter, params={"id": 1}).json() == value


def test_update_leaves_other_fields(client):
    client.post("/updateHeight", json={"id": 1, "height": "0.80 m"})
    client.post("/updateWeight", json={"id": 1, "weight": "7.5 kg"})
    record = client.get("/getPokemon", params={"id": 1}).json()
    assert record["height"] == "0.80 m"
    assert record["weight"] == "7.5 kg"
    assert record["name"] == "Bulbasaur"


def test_update_is_idempotent(client):
    client.post("/updateName", json={"id": 1, "name": "Bulba"})
    first = client.get("/getAllPokemon").json()
    client.post("/updateName", json={"id": 1, "name": "Bulba"})
    assert client.get("/getAllPokemon").json() == first


def test_update_missing_fields(client):
    resp = client.post("/updateName", json={"id": 1})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Missing one or more required attributes: id, name", "id": "badRequest"}


def test_update_unknown_id_does_not_create(client):
    resp = client.post("/updateName", json={"id": 77, "name": "Ghost"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Invalid query parameter"
    assert len(client.get("/getAllPokemon").json()) == 2


def test_malformed_json_body(client):
    resp = client.post("/updateName", content=b"{not json", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Malformed request body", "id": "badRequest"}


def test_json_body_must_be_object(client):
    resp = client.post("/addType", content=b"[1, 2]", headers={"content-type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Malformed request body"


def test_unsupported_content_type_is_empty_body(client):
    resp = client.post("/updateName", content=b"id=1&name=x", headers={"content-type": "text/plain"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing one or more required attributes: id, name"


def test_update_image_uses_filled_legacy_key(client):
    resp = client.post("/updateImage", json={"id": 1, "image": "", "img": "bulba.png"})
    assert resp.status_code == 204
    assert client.get("/getImage", params={"id": 1}).json() == "bulba.png"


def test_update_image_both_keys_empty(client):
    resp = client.post("/updateImage", json={"id": 1, "image": "", "img": ""})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing one or more required attributes: id, image"
    assert client.get("/getImage", params={"id": 1}).json().endswith("001.png")


def test_update_type_rejects_blank_entry(client):
    resp = client.post(
        "/updateType",
        content=b"id=1&type=Fire&type=",
        headers={"content-type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"message": "Invalid value for one or more attributes: type", "id": "badRequest"}
    assert client.get("/getType", params={"id": 1}).json() == "Grass"


def test_update_type_with_only_blank_entries_is_missing(client):
    resp = client.post("/updateType", json={"id": 1, "type": [""]})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Missing one or more required attributes: id, type"


def test_add_pokemon_rejects_blank_weakness(client, new_pokemon):
    new_pokemon["weaknesses"] = ["Ground", ""]
    resp = client.post("/addPokemon", json=new_pokemon)
    assert resp.status_code == 400
    assert "weaknesses" in resp.json()["message"]
    assert client.get("/getPokemon", params={"id": 25}).status_code == 400


def test_add_pokemon_deduplicates_weaknesses(client, new_pokemon):
    new_pokemon["weaknesses"] = ["Rock", "Ground", "Rock", "Ground", "Water"]
    assert client.post("/addPokemon", json=new_pokemon).status_code == 201
    assert client.get("/getWeaknesses", params={"id": 25}).json() == ["Rock", "Ground", "Water"]


def test_add_pokemon_replace_deduplicates_weaknesses(client, new_pokemon):
    new_pokemon["id"] = 1
    new_pokemon["weaknesses"] = ["Fire", "Fire", "Ice"]
    assert client.post("/addPokemon", data=new_pokemon).status_code == 204
    assert client.get("/getWeaknesses", params={"id": 1}).json() == ["Fire", "Ice"]


def test_numeric_height_and_weight_stored_as_text(client):
    assert client.post("/updateHeight", json={"id": 1, "height": 7}).status_code == 204
    assert client.post("/updateWeight", json={"id": 1, "weight": 6.9}).status_code == 204
    assert client.get("/getHeightWeight", params={"id": 1}).json() == {"height": "7", "weight": "6.9"}
