from typing import Optional

from pydantic import BaseModel, Field

from src.pokedex.enums import EncounterStatus, Weather
from src.pokedex.schema.battle_pokemon import BattlePokemon


class BattleWeather(BaseModel):
    type: Weather = Weather.NONE
    turns_left: int = Field(ge=0, default=0)

    def tick(self) -> bool:
        """Count down one turn. Returns True if the weather cleared."""
        if self.type == Weather.NONE:
            return False
        self.turns_left = max(0, self.turns_left - 1)
        if self.turns_left == 0:
            self.type = Weather.NONE
            return True
        return False


class BattleState(BaseModel):
    """
    One two-combatant Encounter

    Lifecycle: created active by BattleEngine.initialize_battle, mutated once per
    process_turn / use_item, and frozen at ENDED once a combatant hits 0 HP.
    """

    player: BattlePokemon
    opponent: BattlePokemon

    # Turn being resolved next; starts at 1 and grows by exactly one per resolved turn
    turn: int = Field(ge=1, default=1)
    weather: BattleWeather = Field(default_factory=BattleWeather)
    status: EncounterStatus = EncounterStatus.ACTIVE
    winner: Optional[str] = None

    # Per-action message log, cleared at the start of every turn
    messages: list[str] = Field(default_factory=list)

    def is_active(self) -> bool:
        return self.status == EncounterStatus.ACTIVE

    def log(self, message: str) -> None:
        self.messages.append(message)
