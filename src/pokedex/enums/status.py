from enum import Enum


class StatusType(str, Enum):
    """Non-volatile status conditions. Only one may be active per combatant."""

    NONE = "none"
    BURN = "burn"
    POISON = "poison"
    PARALYZE = "paralyze"
    SLEEP = "sleep"

    def has_upkeep_damage(self) -> bool:
        """Burn and poison chip HP every turn; the others are inert here."""
        return self in (StatusType.BURN, StatusType.POISON)


class EncounterStatus(str, Enum):
    ACTIVE = "active"
    ENDED = "ended"
