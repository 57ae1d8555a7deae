from src.pokedex.enums import Stat, StatusType
from src.pokedex.schema.battle_pokemon import BattleItem, ItemEffect, StatBoost

# Bag every combatant starts an encounter with
DEFAULT_ITEMS = [
    BattleItem(name="Potion", effect=ItemEffect(heal=20)),  # Restore 20 HP
    BattleItem(name="Super Potion", effect=ItemEffect(heal=50)),  # Restore 50 HP
    BattleItem(name="Full Heal", effect=ItemEffect(status=StatusType.NONE)),  # Cure any status
    BattleItem(name="X Attack", effect=ItemEffect(stat_boost=StatBoost(stat=Stat.ATTACK, amount=1))),  # +1 Attack stage
]


def get_default_items() -> list[BattleItem]:
    """Fresh copy of the default bag; items are consumed in place"""
    return [item.model_copy(deep=True) for item in DEFAULT_ITEMS]
