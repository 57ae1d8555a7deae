from src.pokedex.constants import DEFAULT_STATUS_TURNS
from src.pokedex.enums import StatusType
from src.pokedex.schema.battle_pokemon import BattleItem, BattlePokemon
from src.pokedex.schema.battle_state import BattleState

STAT_NAMES = {
    "attack": "Attack",
    "defense": "Defense",
    "special_attack": "Sp. Atk",
    "special_defense": "Sp. Def",
    "speed": "Speed",
}


def _apply_heal(battle_state: BattleState, mon: BattlePokemon, amount: int) -> bool:
    restored = mon.heal(amount)
    if restored == 0:
        return False
    battle_state.log(f"{mon.display_name} recovered {restored} HP! ({mon.current_hp}/{mon.max_hp})")
    return True


def _apply_status(battle_state: BattleState, mon: BattlePokemon, status: StatusType) -> bool:
    """Set a status; StatusType.NONE cures whatever is active"""
    if status == StatusType.NONE:
        if not mon.status.is_active():
            return False
        cured = mon.status.type
        mon.status.clear()
        battle_state.log(f"{mon.display_name} was cured of {cured.value}!")
        return True

    # Overwrites, never stacks
    mon.status.type = status
    mon.status.turns_left = DEFAULT_STATUS_TURNS
    battle_state.log(f"{mon.display_name} is now affected by {status.value}!")
    return True


def _apply_stat_boost(battle_state: BattleState, mon: BattlePokemon, item: BattleItem) -> bool:
    boost = item.effect.stat_boost
    applied = mon.stat_modifiers.change(boost.stat, boost.amount)
    stat_name = STAT_NAMES[boost.stat.value]
    if applied == 0:
        battle_state.log(f"{mon.display_name}'s {stat_name} won't go any {'higher' if boost.amount > 0 else 'lower'}!")
        return False
    direction = "rose" if applied > 0 else "fell"
    battle_state.log(f"{mon.display_name}'s {stat_name} {direction}!")
    return True


def apply_item(battle_state: BattleState, mon: BattlePokemon, item: BattleItem) -> bool:
    """
    Apply every effect an item carries to a combatant

    Does not remove the item from the bag; the caller owns consumption.

    Returns:
        True if at least one effect changed something
    """
    battle_state.log(f"{mon.display_name} used {item.name}!")
    effect = item.effect
    applied = False

    if effect.heal:
        applied = _apply_heal(battle_state, mon, effect.heal) or applied
    if effect.status is not None:
        applied = _apply_status(battle_state, mon, effect.status) or applied
    if effect.stat_boost is not None:
        applied = _apply_stat_boost(battle_state, mon, item) or applied

    if not applied:
        battle_state.log("But nothing happened.")
    return applied
