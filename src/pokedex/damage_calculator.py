"""
Damage calculation

    attackStat  = physical ? attack  : special_attack
    defenseStat = physical ? defense : special_defense
    base        = floor(((2*level/5 + 2) * power * attackStat / defenseStat) / 50 + 2)
    damage      = base * effectiveness * weather
    burned attacker using a physical move: damage *= 0.5
    damage     *= uniform(0.85, 1.00)
    result      = floor(damage)

Stat stages scale the attack/defense stat before it enters the formula; an
unmodified combatant (all stages 0) goes through the formula untouched.
"""

import math
from typing import Optional

from src.pokedex.constants import (
    BURN_PHYSICAL_MULTIPLIER,
    MIN_STAT_STAGE,
    TYPE_MUL_NORMAL,
    WEATHER_BOOST_MULTIPLIER,
    WEATHER_WEAKEN_MULTIPLIER,
)
from src.pokedex.enums import MoveCategory, Stat, StatusType, Weather
from src.pokedex.schema.battle_move import BattleMove
from src.pokedex.schema.battle_pokemon import BattlePokemon
from src.pokedex.type_effectiveness import TypeEffectiveness
from src.pokedex.utils import rng as rng_utils
from src.pokedex.utils.rng import RandomSource

# Stat stage ratios, indexed by stage - MIN_STAT_STAGE
# STAT_STAGE_RATIOS[i] = (numerator, denominator)
STAT_STAGE_RATIOS = [
    (10, 40),  # -6
    (10, 35),  # -5
    (10, 30),  # -4
    (10, 25),  # -3
    (10, 20),  # -2
    (10, 15),  # -1
    (10, 10),  #  0
    (15, 10),  # +1
    (20, 10),  # +2
    (25, 10),  # +3
    (30, 10),  # +4
    (35, 10),  # +5
    (40, 10),  # +6
]

# Weather -> move type -> multiplier
WEATHER_MULTIPLIERS: dict[Weather, dict[str, float]] = {
    Weather.SUNNY: {"fire": WEATHER_BOOST_MULTIPLIER, "water": WEATHER_WEAKEN_MULTIPLIER},
    Weather.RAINY: {"water": WEATHER_BOOST_MULTIPLIER, "fire": WEATHER_WEAKEN_MULTIPLIER},
}


def apply_stat_mod(base_stat: int, pokemon: BattlePokemon, stat: Stat) -> int:
    """Scale a stat by the combatant's current stage for it"""
    stage = pokemon.stat_modifiers.get(stat)
    numerator, denominator = STAT_STAGE_RATIOS[stage - MIN_STAT_STAGE]
    return (base_stat * numerator) // denominator


def is_move_hit(move: BattleMove, rng: RandomSource) -> bool:
    """Accuracy check: a uniform percentage draw hits iff draw <= accuracy"""
    return rng_utils.roll_percent(rng) <= move.accuracy


class DamageCalculator:
    """
    Computes move damage for the battle engine

    The random source and the effectiveness chart are injected so turns can be
    replayed deterministically in tests.
    """

    def __init__(self, rng: RandomSource, type_effectiveness: Optional[TypeEffectiveness] = None):
        self.rng = rng
        self.type_effectiveness = type_effectiveness or TypeEffectiveness()

    def get_attack_defense(self, attacker: BattlePokemon, defender: BattlePokemon, move: BattleMove) -> tuple[int, int]:
        """Pick the stat pair for the move's category, with stages applied"""
        if move.category == MoveCategory.PHYSICAL:
            attack = apply_stat_mod(attacker.stats.attack, attacker, Stat.ATTACK)
            defense = apply_stat_mod(defender.stats.defense, defender, Stat.DEFENSE)
        else:
            attack = apply_stat_mod(attacker.stats.special_attack, attacker, Stat.SPECIAL_ATTACK)
            defense = apply_stat_mod(defender.stats.special_defense, defender, Stat.SPECIAL_DEFENSE)
        # A 0 defense stat would divide by zero
        return attack, max(defense, 1)

    def calculate_base_damage(self, attacker: BattlePokemon, defender: BattlePokemon, move: BattleMove) -> int:
        """Level/power/stat part of the formula, before any multiplier"""
        attack, defense = self.get_attack_defense(attacker, defender, move)
        level = attacker.level
        return math.floor(((2 * level / 5 + 2) * move.power * attack / defense) / 50 + 2)

    def get_weather_multiplier(self, move: BattleMove, weather: Weather) -> float:
        return WEATHER_MULTIPLIERS.get(weather, {}).get(move.type, TYPE_MUL_NORMAL)

    def calculate_damage(self, attacker: BattlePokemon, defender: BattlePokemon, move: BattleMove, weather: Weather = Weather.NONE) -> int:
        """
        Full damage for one hit. Draws exactly one random damage roll.

        Returns:
            Non-negative integer damage
        """
        damage: float = self.calculate_base_damage(attacker, defender, move)

        damage *= self.type_effectiveness.get_effectiveness_multiplier(move.type, defender.types)
        damage *= self.get_weather_multiplier(move, weather)

        if attacker.status.type == StatusType.BURN and move.category == MoveCategory.PHYSICAL:
            damage *= BURN_PHYSICAL_MULTIPLIER

        damage *= rng_utils.damage_roll(self.rng)

        return max(0, math.floor(damage))
