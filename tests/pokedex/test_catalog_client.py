from unittest.mock import MagicMock

import pytest
import requests

from src.pokedex.catalog_client import CatalogClient
from src.pokedex.config import CatalogConfig

BASE_URL = "https://pokeapi.test/api/v2"

PIKACHU = {
    "id": 25,
    "name": "pikachu",
    "height": 4,
    "weight": 60,
    "base_experience": 112,
    "types": [{"slot": 1, "type": {"name": "electric", "url": ""}}],
    "abilities": [{"ability": {"name": "static"}}, {"ability": {"name": "lightning-rod"}}],
    "stats": [
        {"base_stat": 35, "stat": {"name": "hp"}},
        {"base_stat": 55, "stat": {"name": "attack"}},
        {"base_stat": 40, "stat": {"name": "defense"}},
        {"base_stat": 50, "stat": {"name": "special-attack"}},
        {"base_stat": 50, "stat": {"name": "special-defense"}},
        {"base_stat": 90, "stat": {"name": "speed"}},
    ],
    "moves": [{"move": {"name": "mega-punch"}}, {"move": {"name": "pay-day"}}],
}


def make_client(payload=None, *, status_error: Exception | None = None, json_error: Exception | None = None, get_error: Exception | None = None):
    response = MagicMock()
    response.json.return_value = payload
    if json_error is not None:
        response.json.side_effect = json_error
    if status_error is not None:
        response.raise_for_status.side_effect = status_error

    session = MagicMock()
    session.headers = {}
    session.get.return_value = response
    if get_error is not None:
        session.get.side_effect = get_error

    client = CatalogClient(CatalogConfig(base_url=BASE_URL, user_agent="pokedex-tests/1.0", timeout=3.0), session=session)
    return client, session


def test_fetch_creature_parses_payload():
    client, session = make_client(PIKACHU)

    creature = client.fetch_creature("Pikachu")

    session.get.assert_called_once_with(f"{BASE_URL}/pokemon/pikachu", timeout=3.0)
    assert session.headers["User-Agent"] == "pokedex-tests/1.0"
    assert creature.id == 25
    assert creature.types == ["electric"]
    assert creature.abilities == ["static", "lightning-rod"]
    assert creature.stats.hp == 35
    assert creature.stats.special_attack == 50
    assert creature.moves == ["mega-punch", "pay-day"]
    assert creature.height_m == 0.4
    assert creature.weight_kg == 6.0


def test_types_are_ordered_by_slot():
    payload = dict(PIKACHU, types=[{"slot": 2, "type": {"name": "flying"}}, {"slot": 1, "type": {"name": "normal"}}])
    client, _ = make_client(payload)

    assert client.fetch_creature(16).types == ["normal", "flying"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"get_error": requests.ConnectionError("connection refused")},
        {"get_error": requests.Timeout("timed out")},
        {"status_error": requests.HTTPError("404 Not Found")},
        {"json_error": ValueError("Expecting value")},
    ],
)
def test_failures_are_unavailable(kwargs):
    client, _ = make_client(PIKACHU, **kwargs)

    assert client.fetch_creature(25) is None


def test_malformed_payload_is_unavailable():
    client, _ = make_client({"name": "pikachu"})

    assert client.fetch_creature(25) is None


def test_non_object_payload_is_unavailable():
    client, _ = make_client([1, 2, 3])

    assert client.fetch_move("tackle") is None


def test_empty_name_is_not_requested():
    client, session = make_client(PIKACHU)

    assert client.fetch_creature("  ") is None
    session.get.assert_not_called()


def test_species_text_prefers_english_and_cleans_whitespace():
    payload = {
        "id": 25,
        "flavor_text_entries": [
            {"flavor_text": "Il lui arrive de remettre", "language": {"name": "fr"}},
            {"flavor_text": "When several of\nthese POKéMON\fgather", "language": {"name": "en"}},
        ],
    }
    client, _ = make_client(payload)

    species = client.fetch_species_text(25)

    assert species.description() == "When several of these POKéMON gather"


def test_species_without_english_text_falls_back():
    client, _ = make_client({"id": 25, "flavor_text_entries": [{"flavor_text": "Pika", "language": {"name": "ja"}}]})

    assert client.fetch_species_text(25).description() == "No description available."


def test_fetch_move_keeps_missing_fields_empty():
    client, _ = make_client({"name": "growl", "power": None, "accuracy": 100, "pp": 40, "type": {"name": "normal"}, "damage_class": {"name": "status"}})

    move = client.fetch_move("growl")

    assert move.power is None
    assert move.accuracy == 100
    assert move.type == "normal"
    assert move.damage_class == "status"


def test_generation_roster():
    client, session = make_client({"pokemon_species": [{"name": "bulbasaur", "url": "https://pokeapi.co/api/v2/pokemon-species/1/"}]})

    roster = client.fetch_generation_roster(1)

    session.get.assert_called_once_with(f"{BASE_URL}/generation/1", timeout=3.0)
    assert [(ref.name, ref.id, ref.lookup_key) for ref in roster] == [("bulbasaur", 1, "1")]


def test_affinity_roster():
    client, session = make_client({"pokemon": [{"slot": 1, "pokemon": {"name": "charmander", "url": "https://pokeapi.co/api/v2/pokemon/4/"}}]})

    roster = client.fetch_affinity_roster("Fire")

    session.get.assert_called_once_with(f"{BASE_URL}/type/fire", timeout=3.0)
    assert roster[0].name == "charmander"
    assert roster[0].id == 4


def test_creature_details_needs_both_lookups():
    client, session = make_client(PIKACHU)
    species_response = MagicMock()
    species_response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
    session.get.side_effect = [session.get.return_value, species_response]

    assert client.fetch_creature_details(25) is None


def test_string_type_entries_are_unavailable():
    client, _ = make_client(dict(PIKACHU, types=["electric"]))

    assert client.fetch_creature(25) is None


def test_string_move_type_is_unavailable():
    client, _ = make_client({"name": "ember", "power": 40, "type": "fire"})

    assert client.fetch_move("ember") is None


def test_alternate_form_uses_its_species_entry():
    form = dict(PIKACHU, id=10080, name="pikachu-rock-star", species={"name": "pikachu", "url": "https://pokeapi.co/api/v2/pokemon-species/25/"})
    client, session = make_client(form)
    species_response = MagicMock()
    species_response.json.return_value = {"id": 25, "flavor_text_entries": []}
    session.get.side_effect = [session.get.return_value, species_response]

    creature, species = client.fetch_creature_details(10080)

    assert creature.species_id == 25
    assert species.id == 25
    assert session.get.call_args_list[1].args[0] == f"{BASE_URL}/pokemon-species/25"
