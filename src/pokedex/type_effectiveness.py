from typing import Iterable, Mapping, Optional

from src.pokedex.constants import (
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NORMAL,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_SUPER_EFFECTIVE,
)

EffectivenessChart = Mapping[str, Mapping[str, float]]

# Sparse attacking-type -> defending-type -> multiplier table.
# Illustrative, not exhaustive: any pair missing here is neutral (x1.0).
TYPE_EFFECTIVENESS_CHART: dict[str, dict[str, float]] = {
    "normal": {
        "rock": TYPE_MUL_NOT_EFFECTIVE,
        "steel": TYPE_MUL_NOT_EFFECTIVE,
        "ghost": TYPE_MUL_NO_EFFECT,
    },
    "fire": {
        "grass": TYPE_MUL_SUPER_EFFECTIVE,
        "ice": TYPE_MUL_SUPER_EFFECTIVE,
        "bug": TYPE_MUL_SUPER_EFFECTIVE,
        "steel": TYPE_MUL_SUPER_EFFECTIVE,
        "fire": TYPE_MUL_NOT_EFFECTIVE,
        "water": TYPE_MUL_NOT_EFFECTIVE,
        "rock": TYPE_MUL_NOT_EFFECTIVE,
        "dragon": TYPE_MUL_NOT_EFFECTIVE,
    },
    "water": {
        "fire": TYPE_MUL_SUPER_EFFECTIVE,
        "ground": TYPE_MUL_SUPER_EFFECTIVE,
        "rock": TYPE_MUL_SUPER_EFFECTIVE,
        "water": TYPE_MUL_NOT_EFFECTIVE,
        "grass": TYPE_MUL_NOT_EFFECTIVE,
        "dragon": TYPE_MUL_NOT_EFFECTIVE,
    },
    "grass": {
        "water": TYPE_MUL_SUPER_EFFECTIVE,
        "ground": TYPE_MUL_SUPER_EFFECTIVE,
        "rock": TYPE_MUL_SUPER_EFFECTIVE,
        "fire": TYPE_MUL_NOT_EFFECTIVE,
        "grass": TYPE_MUL_NOT_EFFECTIVE,
        "poison": TYPE_MUL_NOT_EFFECTIVE,
        "flying": TYPE_MUL_NOT_EFFECTIVE,
        "bug": TYPE_MUL_NOT_EFFECTIVE,
        "dragon": TYPE_MUL_NOT_EFFECTIVE,
        "steel": TYPE_MUL_NOT_EFFECTIVE,
    },
    "electric": {
        "water": TYPE_MUL_SUPER_EFFECTIVE,
        "flying": TYPE_MUL_SUPER_EFFECTIVE,
        "electric": TYPE_MUL_NOT_EFFECTIVE,
        "grass": TYPE_MUL_NOT_EFFECTIVE,
        "dragon": TYPE_MUL_NOT_EFFECTIVE,
        "ground": TYPE_MUL_NO_EFFECT,
    },
    "ground": {
        "fire": TYPE_MUL_SUPER_EFFECTIVE,
        "electric": TYPE_MUL_SUPER_EFFECTIVE,
        "poison": TYPE_MUL_SUPER_EFFECTIVE,
        "rock": TYPE_MUL_SUPER_EFFECTIVE,
        "steel": TYPE_MUL_SUPER_EFFECTIVE,
        "grass": TYPE_MUL_NOT_EFFECTIVE,
        "bug": TYPE_MUL_NOT_EFFECTIVE,
        "flying": TYPE_MUL_NO_EFFECT,
    },
    "ice": {
        "grass": TYPE_MUL_SUPER_EFFECTIVE,
        "ground": TYPE_MUL_SUPER_EFFECTIVE,
        "flying": TYPE_MUL_SUPER_EFFECTIVE,
        "dragon": TYPE_MUL_SUPER_EFFECTIVE,
        "fire": TYPE_MUL_NOT_EFFECTIVE,
        "water": TYPE_MUL_NOT_EFFECTIVE,
        "ice": TYPE_MUL_NOT_EFFECTIVE,
        "steel": TYPE_MUL_NOT_EFFECTIVE,
    },
    "ghost": {
        "ghost": TYPE_MUL_SUPER_EFFECTIVE,
        "psychic": TYPE_MUL_SUPER_EFFECTIVE,
        "normal": TYPE_MUL_NO_EFFECT,
    },
}


class TypeEffectiveness:
    """
    Type effectiveness lookup over a sparse, swappable chart

    Pass a different chart to the constructor to change coverage without touching
    the damage calculator.
    """

    def __init__(self, chart: Optional[EffectivenessChart] = None):
        self.chart: EffectivenessChart = TYPE_EFFECTIVENESS_CHART if chart is None else chart

    def get_effectiveness(self, attacking_type: str, defending_type: str) -> float:
        """Multiplier of one attacking type against one defending type (1.0 if absent)"""
        return self.chart.get(attacking_type, {}).get(defending_type, TYPE_MUL_NORMAL)

    def get_effectiveness_multiplier(self, attacking_type: str, defending_types: Iterable[str]) -> float:
        """
        Combined multiplier against every defending type

        Dual types multiply together, so x2 * x2 = x4 and x2 * x0.5 = x1.
        """
        multiplier = TYPE_MUL_NORMAL
        for defending_type in defending_types:
            multiplier *= self.get_effectiveness(attacking_type, defending_type)
        return multiplier

    def get_effectiveness_description(self, attacking_type: str, defending_types: Iterable[str]) -> str:
        """Get human-readable description of type effectiveness"""
        multiplier = self.get_effectiveness_multiplier(attacking_type, defending_types)

        if multiplier == TYPE_MUL_NO_EFFECT:
            return MSG_NO_EFFECT
        elif multiplier < TYPE_MUL_NORMAL:
            return MSG_NOT_VERY_EFFECTIVE
        elif multiplier > TYPE_MUL_NORMAL:
            return MSG_SUPER_EFFECTIVE
        else:
            return ""  # Normal effectiveness - no message
