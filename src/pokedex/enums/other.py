from enum import Enum


class Weather(str, Enum):
    NONE = "none"
    SUNNY = "sunny"
    RAINY = "rainy"
    SANDSTORM = "sandstorm"
    HAIL = "hail"


class MoveCategory(str, Enum):
    """Physical moves use Attack/Defense, special moves use Sp. Atk/Sp. Def"""

    PHYSICAL = "physical"
    SPECIAL = "special"

    @classmethod
    def from_damage_class(cls, damage_class: str | None) -> "MoveCategory":
        # Status moves carry no damage class of their own; they resolve as physical
        if damage_class == cls.SPECIAL.value:
            return cls.SPECIAL
        return cls.PHYSICAL


class Stat(str, Enum):
    """Stats that can carry a battle stage modifier (HP never does)"""

    ATTACK = "attack"
    DEFENSE = "defense"
    SPECIAL_ATTACK = "special_attack"
    SPECIAL_DEFENSE = "special_defense"
    SPEED = "speed"
