"""Shared fakes: a scripted random source and an in-memory catalog."""

from collections import deque

import pytest

from src.pokedex.schema.battle_pokemon import BattleStats
from src.pokedex.schema.species_info import CreatureRecord, CreatureRef, FlavorTextEntry, MoveRecord, SpeciesRecord


class ScriptedRandom:
    """Random source that replays queued values per method.

    With an empty queue: random() -> 0.0 (always hits), uniform(a, b) -> b (max roll),
    randrange(n) -> 0, randint(a, b) -> a.
    """

    def __init__(self):
        self.queues = {"random": deque(), "uniform": deque(), "randrange": deque(), "randint": deque()}

    def push(self, method: str, *values):
        self.queues[method].extend(values)

    def random(self) -> float:
        return self.queues["random"].popleft() if self.queues["random"] else 0.0

    def uniform(self, a: float, b: float) -> float:
        return self.queues["uniform"].popleft() if self.queues["uniform"] else b

    def randrange(self, stop: int) -> int:
        value = self.queues["randrange"].popleft() if self.queues["randrange"] else 0
        assert 0 <= value < stop
        return value

    def randint(self, a: int, b: int) -> int:
        value = self.queues["randint"].popleft() if self.queues["randint"] else a
        assert a <= value <= b
        return value


def creature_record(id: int, name: str, types: list[str], hp: int = 100, moves: list[str] | None = None, base_experience: int = 100) -> CreatureRecord:
    return CreatureRecord(
        id=id,
        name=name,
        height=4,
        weight=60,
        base_experience=base_experience,
        types=types,
        abilities=["static"],
        stats=BattleStats(hp=hp, attack=100, defense=100, special_attack=100, special_defense=100, speed=100),
        moves=moves or [],
    )


class FakeCatalog:
    """In-memory stand-in for CatalogClient. Anything not registered is unavailable."""

    def __init__(self):
        self.creatures: dict[str, CreatureRecord] = {}
        self.species: dict[int, SpeciesRecord] = {}
        self.moves: dict[str, MoveRecord] = {}
        self.generations: dict[int, list[CreatureRef]] = {}
        self.affinities: dict[str, list[CreatureRef]] = {}
        self.calls: list[tuple[str, object]] = []

    def add_creature(self, record: CreatureRecord, description: str | None = None) -> None:
        self.creatures[str(record.id)] = record
        self.creatures[record.name] = record
        entries = [FlavorTextEntry(flavor_text=description, language="en")] if description else []
        self.species[record.id] = SpeciesRecord(id=record.id, flavor_text_entries=entries)

    def fetch_creature(self, id_or_name):
        self.calls.append(("creature", id_or_name))
        return self.creatures.get(str(id_or_name).lower())

    def fetch_species_text(self, creature_id):
        self.calls.append(("species", creature_id))
        return self.species.get(creature_id)

    def fetch_move(self, name):
        self.calls.append(("move", name))
        return self.moves.get(name)

    def fetch_generation_roster(self, generation):
        self.calls.append(("generation", generation))
        return self.generations.get(generation)

    def fetch_affinity_roster(self, type_name):
        self.calls.append(("type", type_name))
        return self.affinities.get(type_name)

    def fetch_creature_details(self, id_or_name):
        creature = self.fetch_creature(id_or_name)
        if creature is None:
            return None
        species = self.fetch_species_text(creature.species_id or creature.id)
        if species is None:
            return None
        return creature, species


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def catalog() -> FakeCatalog:
    catalog = FakeCatalog()
    catalog.add_creature(creature_record(1, "bulbasaur", ["grass", "poison"], hp=45, moves=["tackle"]), "A strange seed was planted on its back at birth.")
    catalog.add_creature(
        creature_record(25, "pikachu", ["electric"], hp=35, moves=["thunder-shock", "quick-attack", "growl", "mystery-move", "thunder"], base_experience=112),
        "When several of these POKéMON gather, their electricity could build and cause lightning storms.",
    )
    catalog.add_creature(creature_record(129, "magikarp", ["water"], hp=1, moves=["splash"], base_experience=40))
    catalog.moves["thunder-shock"] = MoveRecord(name="thunder-shock", power=40, accuracy=100, pp=30, type="electric", damage_class="special")
    catalog.moves["quick-attack"] = MoveRecord(name="quick-attack", power=40, accuracy=100, pp=30, type="normal", damage_class="physical")
    catalog.moves["growl"] = MoveRecord(name="growl", power=None, accuracy=100, pp=40, type="normal", damage_class="status")
    catalog.moves["thunder"] = MoveRecord(name="thunder", power=110, accuracy=70, pp=10, type="electric", damage_class="special")
    catalog.moves["tackle"] = MoveRecord(name="tackle", power=40, accuracy=100, pp=35, type="normal", damage_class="physical")
    catalog.moves["splash"] = MoveRecord(name="splash", power=None, accuracy=None, pp=40, type="normal", damage_class="status")
    catalog.generations[1] = [
        CreatureRef(name="bulbasaur", url="https://pokeapi.co/api/v2/pokemon-species/1/"),
        CreatureRef(name="pikachu", url="https://pokeapi.co/api/v2/pokemon-species/25/"),
    ]
    catalog.affinities["electric"] = [CreatureRef(name="pikachu", url="https://pokeapi.co/api/v2/pokemon/25/")]
    return catalog
