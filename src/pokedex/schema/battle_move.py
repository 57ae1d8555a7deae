from pydantic import BaseModel, Field

from src.pokedex.constants import DEFAULT_MOVE_ACCURACY, DEFAULT_MOVE_PP, DEFAULT_MOVE_TYPE
from src.pokedex.enums import MoveCategory


class BattleMove(BaseModel):
    """A move slot on a combatant, hydrated from the catalog's move record"""

    name: str
    power: int = Field(ge=0, default=0)  # 0 = status-only
    accuracy: int = Field(ge=0, le=100, default=DEFAULT_MOVE_ACCURACY)  # percent chance to connect
    category: MoveCategory = MoveCategory.PHYSICAL
    type: str = DEFAULT_MOVE_TYPE  # elemental affinity, keys the effectiveness chart
    pp: int = Field(ge=0, default=DEFAULT_MOVE_PP)

    @property
    def display_name(self) -> str:
        """Catalog names are hyphenated: razor-wind -> Razor Wind"""
        return self.name.replace("-", " ").title()
