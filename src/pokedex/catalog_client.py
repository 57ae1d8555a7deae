"""Client for the PokeAPI v2 catalog."""

import logging
from typing import Any, Optional

import requests
from pydantic import ValidationError

from src.pokedex.config import CatalogConfig
from src.pokedex.errors import CatalogUnavailable
from src.pokedex.schema.battle_pokemon import BattleStats
from src.pokedex.schema.species_info import CreatureRecord, CreatureRef, FlavorTextEntry, MoveRecord, SpeciesRecord

logger = logging.getLogger(__name__)

# PokeAPI stat name -> BattleStats field
STAT_FIELDS = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "special_attack",
    "special-defense": "special_defense",
    "speed": "speed",
}


def parse_creature(data: dict[str, Any]) -> CreatureRecord:
    stats = {STAT_FIELDS[s["stat"]["name"]]: s["base_stat"] for s in data["stats"] if s["stat"]["name"] in STAT_FIELDS}
    return CreatureRecord(
        id=data["id"],
        name=data["name"],
        height=data.get("height") or 0,
        weight=data.get("weight") or 0,
        base_experience=data.get("base_experience") or 0,
        types=[t["type"]["name"] for t in sorted(data["types"], key=lambda t: t.get("slot", 0))],
        abilities=[a["ability"]["name"] for a in data.get("abilities", [])],
        stats=BattleStats(**stats),
        moves=[m["move"]["name"] for m in data.get("moves", [])],
        species_id=CreatureRef(**data["species"]).id if data.get("species") else None,
    )


def parse_species(data: dict[str, Any]) -> SpeciesRecord:
    return SpeciesRecord(
        id=data.get("id"),
        flavor_text_entries=[FlavorTextEntry(flavor_text=e["flavor_text"], language=e["language"]["name"]) for e in data.get("flavor_text_entries", [])],
    )


def parse_move(data: dict[str, Any]) -> MoveRecord:
    return MoveRecord(
        name=data["name"],
        power=data.get("power"),
        accuracy=data.get("accuracy"),
        pp=data.get("pp"),
        type=(data.get("type") or {}).get("name"),
        damage_class=(data.get("damage_class") or {}).get("name"),
    )


class CatalogClient:
    """
    Read-only client for creature, species, move, generation and type lookups

    Every public fetch_* method returns None when the catalog is unavailable
    (network error, timeout, non-2xx status, malformed payload). Nothing raises
    past this class.
    """

    def __init__(self, config: Optional[CatalogConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or CatalogConfig()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.config.user_agent})

    def _get_json(self, endpoint: str) -> dict[str, Any]:
        """GET an endpoint relative to the base url.

        Raises:
            CatalogUnavailable: on any transport, status or decoding failure
        """
        url = f"{self.config.base_url.rstrip('/')}{endpoint}"
        try:
            response = self.session.get(url, timeout=self.config.timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise CatalogUnavailable(endpoint, str(e)) from e
        except ValueError as e:
            raise CatalogUnavailable(endpoint, f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise CatalogUnavailable(endpoint, "unexpected payload shape")
        return data

    def _fetch(self, endpoint: str, parse):
        try:
            return parse(self._get_json(endpoint))
        except CatalogUnavailable as e:
            logger.warning(str(e))
        except (AttributeError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Catalog response for '{endpoint}' could not be parsed: {e}")
        return None

    def fetch_creature(self, id_or_name: int | str) -> Optional[CreatureRecord]:
        """Look up a creature by national dex id or lowercase name"""
        key = str(id_or_name).strip().lower()
        if not key:
            return None
        return self._fetch(f"/pokemon/{key}", parse_creature)

    def fetch_species_text(self, creature_id: int) -> Optional[SpeciesRecord]:
        """Look up the species entry holding a creature's flavor text"""
        return self._fetch(f"/pokemon-species/{creature_id}", parse_species)

    def fetch_move(self, name: str) -> Optional[MoveRecord]:
        return self._fetch(f"/move/{name.strip().lower()}", parse_move)

    def fetch_generation_roster(self, generation: int) -> Optional[list[CreatureRef]]:
        """All species introduced in a generation"""
        return self._fetch(f"/generation/{generation}", lambda data: [CreatureRef(**s) for s in data["pokemon_species"]])

    def fetch_affinity_roster(self, type_name: str) -> Optional[list[CreatureRef]]:
        """All creatures carrying an elemental type"""
        key = type_name.strip().lower()
        if not key:
            return None
        return self._fetch(f"/type/{key}", lambda data: [CreatureRef(**p["pokemon"]) for p in data["pokemon"]])

    def fetch_creature_details(self, id_or_name: int | str) -> Optional[tuple[CreatureRecord, SpeciesRecord]]:
        """Creature record plus its species text, as shown on a creature card"""
        creature = self.fetch_creature(id_or_name)
        if creature is None:
            return None
        # Alternate forms (/pokemon/10034) share their base species entry
        species = self.fetch_species_text(creature.species_id or creature.id)
        if species is None:
            return None
        return creature, species
