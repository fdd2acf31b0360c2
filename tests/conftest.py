import pytest
from fastapi.testclient import TestClient

from pokedex_api.app.core.store import PokedexStore
from pokedex_api.app.main import create_app
from pokedex_api.app.schemas.pokemon import Pokemon


@pytest.fixture
def bulbasaur():
    return Pokemon(
        id=1,
        num="001",
        name="Bulbasaur",
        image="http://www.serebii.net/pokemongo/pokemon/001.png",
        type="Grass",
        height="0.71 m",
        weight="6.9 kg",
        weaknesses=["Fire", "Ice", "Flying", "Psychic"],
        next_evolution=[{"id": 2, "name": "Ivysaur"}, {"id": 3, "name": "Venusaur"}],
    )


@pytest.fixture
def ditto():
    return Pokemon(
        id=132,
        num="132",
        name="Ditto",
        image="http://www.serebii.net/pokemongo/pokemon/132.png",
        type=["Normal"],
        height="0.30 m",
        weight="4.0 kg",
        weaknesses=["Fighting"],
    )


@pytest.fixture
def store(bulbasaur, ditto):
    return PokedexStore([bulbasaur, ditto])


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as c:
        yield c


@pytest.fixture
def new_pokemon():
    return {
        "id": 25,
        "num": "025",
        "name": "Pikachu",
        "image": "http://www.serebii.net/pokemongo/pokemon/025.png",
        "type": "Electric",
        "height": "0.41 m",
        "weight": "6.0 kg",
        "weaknesses": ["Ground"],
    }
