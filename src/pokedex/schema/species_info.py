from typing import Optional

from pydantic import BaseModel, Field

from src.pokedex.constants import MSG_NO_DESCRIPTION
from src.pokedex.schema.battle_pokemon import BattleStats


class CreatureRef(BaseModel):
    """Roster entry from a generation or type listing"""

    name: str
    url: str = ""

    @property
    def id(self) -> Optional[int]:
        """National dex id parsed from the resource url (".../pokemon-species/25/")"""
        tail = self.url.rstrip("/").rsplit("/", 1)[-1]
        return int(tail) if tail.isdigit() else None

    @property
    def lookup_key(self) -> str:
        # Species names don't always match a pokemon resource name; the id always does
        return str(self.id) if self.id is not None else self.name


class CreatureRecord(BaseModel):
    """Summary of a /pokemon/{id} payload"""

    id: int = Field(ge=1)
    name: str
    height: int = Field(ge=0, default=0)  # decimetres
    weight: int = Field(ge=0, default=0)  # hectograms
    base_experience: int = Field(ge=0, default=0)
    types: list[str] = Field(min_length=1)
    abilities: list[str] = Field(default_factory=list)
    stats: BattleStats
    moves: list[str] = Field(default_factory=list)  # move names, catalog order
    species_id: Optional[int] = None  # from the species url; differs from id for alternate forms

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10


class FlavorTextEntry(BaseModel):
    flavor_text: str
    language: str


class SpeciesRecord(BaseModel):
    """Summary of a /pokemon-species/{id} payload"""

    id: Optional[int] = None
    flavor_text_entries: list[FlavorTextEntry] = Field(default_factory=list)

    def flavor_text(self, language: str = "en") -> Optional[str]:
        for entry in self.flavor_text_entries:
            if entry.language == language:
                return entry.flavor_text.replace("\n", " ").replace("\f", " ")
        return None

    def description(self) -> str:
        return self.flavor_text("en") or MSG_NO_DESCRIPTION


class MoveRecord(BaseModel):
    """Summary of a /move/{name} payload"""

    name: str
    power: Optional[int] = Field(default=None, ge=0)
    accuracy: Optional[int] = Field(default=None, ge=0, le=100)
    pp: Optional[int] = Field(default=None, ge=0)
    type: Optional[str] = None
    damage_class: Optional[str] = None
