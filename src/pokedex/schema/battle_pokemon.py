from typing import Optional

from pydantic import BaseModel, Field

from src.pokedex.constants import DEFAULT_LEVEL, MAX_LEVEL, MAX_MON_MOVES, MAX_STAT_STAGE, MIN_LEVEL, MIN_STAT_STAGE
from src.pokedex.enums import Stat, StatusType
from src.pokedex.schema.battle_move import BattleMove


class BattleStats(BaseModel):
    """Base stats, fetched once at hydration and never mutated"""

    hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    special_attack: int = Field(ge=0)
    special_defense: int = Field(ge=0)
    speed: int = Field(ge=0)

    model_config = {"frozen": True}


class StatusCondition(BaseModel):
    type: StatusType = StatusType.NONE
    turns_left: int = Field(ge=0, default=0)

    def is_active(self) -> bool:
        return self.type != StatusType.NONE

    def tick(self) -> bool:
        """Count down one turn. Returns True if the condition wore off."""
        if not self.is_active():
            return False
        self.turns_left = max(0, self.turns_left - 1)
        if self.turns_left == 0:
            self.clear()
            return True
        return False

    def clear(self) -> None:
        self.type = StatusType.NONE
        self.turns_left = 0


class StatModifiers(BaseModel):
    """Signed stat stages (-6..+6), 0 = unmodified"""

    attack: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    defense: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    special_attack: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    special_defense: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)
    speed: int = Field(ge=MIN_STAT_STAGE, le=MAX_STAT_STAGE, default=0)

    def get(self, stat: Stat) -> int:
        return getattr(self, stat.value)

    def change(self, stat: Stat, amount: int) -> int:
        """Shift a stage, clamped to the legal range. Returns the applied delta."""
        before = self.get(stat)
        after = min(MAX_STAT_STAGE, max(MIN_STAT_STAGE, before + amount))
        setattr(self, stat.value, after)
        return after - before


class StatBoost(BaseModel):
    stat: Stat
    amount: int


class ItemEffect(BaseModel):
    heal: Optional[int] = Field(default=None, ge=0)
    status: Optional[StatusType] = None  # StatusType.NONE cures
    stat_boost: Optional[StatBoost] = None


class BattleItem(BaseModel):
    """Single-use consumable held in a combatant's bag"""

    name: str
    effect: ItemEffect = Field(default_factory=ItemEffect)


class BattlePokemon(BaseModel):
    """A creature taking part in an Encounter: immutable base stats plus mutable battle state"""

    # Identity
    id: int = Field(ge=1)
    name: str
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL, default=DEFAULT_LEVEL)
    types: list[str] = Field(min_length=1, max_length=2)

    # Stats
    stats: BattleStats
    current_hp: int = Field(ge=0)

    # Moves
    moves: list[BattleMove] = Field(default_factory=list, max_length=MAX_MON_MOVES)

    # Battle state
    status: StatusCondition = Field(default_factory=StatusCondition)
    stat_modifiers: StatModifiers = Field(default_factory=StatModifiers)
    experience: int = Field(ge=0, default=0)
    base_experience: int = Field(ge=0, default=0)
    items: list[BattleItem] = Field(default_factory=list)

    @property
    def max_hp(self) -> int:
        return self.stats.hp

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def is_fainted(self) -> bool:
        return self.current_hp <= 0

    def take_damage(self, amount: int) -> int:
        """Subtract HP, floored at 0. Returns the HP actually lost."""
        before = self.current_hp
        self.current_hp = max(0, self.current_hp - max(0, amount))
        return before - self.current_hp

    def heal(self, amount: int) -> int:
        """Restore HP, capped at max HP. Returns the HP actually restored."""
        before = self.current_hp
        self.current_hp = min(self.max_hp, self.current_hp + max(0, amount))
        return self.current_hp - before
