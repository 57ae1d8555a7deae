"""
Start-of-turn effects

Weather is processed first, then status upkeep for each combatant in turn
(player before opponent). Both run before any move is chosen or resolved.
"""

import logging

from src.pokedex.constants import BURN_DAMAGE_PERCENT, POISON_DAMAGE_PERCENT
from src.pokedex.enums import StatusType, Weather
from src.pokedex.schema.battle_pokemon import BattlePokemon
from src.pokedex.schema.battle_state import BattleState

logger = logging.getLogger(__name__)

WEATHER_MESSAGES = {
    Weather.SUNNY: "The sunlight is strong.",
    Weather.RAINY: "Rain continues to fall.",
}

WEATHER_END_MESSAGES = {
    Weather.SUNNY: "The sunlight faded.",
    Weather.RAINY: "The rain stopped.",
    Weather.SANDSTORM: "The sandstorm subsided.",
    Weather.HAIL: "The hail stopped.",
}

# Percent of max HP lost per turn
UPKEEP_DAMAGE_PERCENT = {
    StatusType.BURN: BURN_DAMAGE_PERCENT,
    StatusType.POISON: POISON_DAMAGE_PERCENT,
}

UPKEEP_MESSAGES = {
    StatusType.BURN: "{name} is hurt by its burn! (-{damage} HP)",
    StatusType.POISON: "{name} is hurt by poison! (-{damage} HP)",
}

STATUS_END_MESSAGES = {
    StatusType.BURN: "{name}'s burn healed.",
    StatusType.POISON: "{name} is no longer poisoned.",
    StatusType.PARALYZE: "{name} is no longer paralyzed.",
    StatusType.SLEEP: "{name} woke up!",
}


def upkeep_damage(mon: BattlePokemon) -> int:
    """HP a combatant's status costs it this turn (0 for statuses without upkeep)"""
    percent = UPKEEP_DAMAGE_PERCENT.get(mon.status.type, 0)
    return mon.max_hp * percent // 100


class TurnEffectsProcessor:
    """Applies the weather and status steps of a turn to a BattleState"""

    def __init__(self, battle_state: BattleState):
        self.battle_state = battle_state

    def process_weather(self) -> None:
        """
        Announce active weather and count it down

        Sun and rain get a message every turn; the damage multipliers themselves
        live in the damage calculator.
        """
        weather = self.battle_state.weather
        match weather.type:
            case Weather.SUNNY | Weather.RAINY:
                self.battle_state.log(WEATHER_MESSAGES[weather.type])
            case _:
                pass

        ending = weather.type
        if weather.tick():
            self.battle_state.log(WEATHER_END_MESSAGES[ending])
            logger.debug(f"Weather {ending.value} ended on turn {self.battle_state.turn}")

    def process_status_upkeep(self, mon: BattlePokemon) -> int:
        """
        Apply one combatant's status upkeep: damage first, then the countdown

        Returns:
            HP lost this turn
        """
        status = mon.status.type
        if status == StatusType.NONE:
            return 0

        lost = 0
        if status.has_upkeep_damage():
            lost = mon.take_damage(upkeep_damage(mon))
            self.battle_state.log(UPKEEP_MESSAGES[status].format(name=mon.display_name, damage=lost))

        if mon.status.tick():
            self.battle_state.log(STATUS_END_MESSAGES[status].format(name=mon.display_name))

        return lost
