"""Text rendering for tool responses."""

from typing import Optional

from src.pokedex.enums import Weather
from src.pokedex.schema.battle_pokemon import BattlePokemon
from src.pokedex.schema.battle_state import BattleState
from src.pokedex.schema.species_info import CreatureRecord, SpeciesRecord


def capitalize_first_letter(text: str) -> str:
    return text[:1].upper() + text[1:]


def _format_measure(value: float) -> str:
    # 0.4 -> "0.4", 6.0 -> "6"
    return f"{value:g}"


def format_creature_card(creature: CreatureRecord, species: SpeciesRecord, label: Optional[str] = None) -> str:
    """
    Markdown card for one creature

    Args:
        label: Optional scope shown in the header, e.g. "Kanto" renders
            "# Random Kanto Pokémon: Pikachu (#25)"
    """
    name = capitalize_first_letter(creature.name)
    if label:
        header = f"# Random {capitalize_first_letter(label)} Pokémon: {name} (#{creature.id})"
    else:
        header = f"# {name} (#{creature.id})"

    types = ", ".join(capitalize_first_letter(t) for t in creature.types)
    abilities = ", ".join(capitalize_first_letter(a) for a in creature.abilities)

    return "\n".join(
        [
            header,
            "",
            f"**Types:** {types}",
            f"**Height:** {_format_measure(creature.height_m)}m",
            f"**Weight:** {_format_measure(creature.weight_kg)}kg",
            f"**Abilities:** {abilities}",
            "",
            f"**Description:** {species.description()}",
        ]
    )


def format_hp(mon: BattlePokemon) -> str:
    return f"{mon.display_name} HP: {mon.current_hp}/{mon.max_hp}"


def format_moves(mon: BattlePokemon) -> str:
    if not mon.moves:
        return f"{mon.display_name} knows no moves."
    return "\n".join(f"{index}: {move.display_name} ({capitalize_first_letter(move.type)}, power {move.power}, accuracy {move.accuracy})" for index, move in enumerate(mon.moves))


def format_items(mon: BattlePokemon) -> str:
    if not mon.items:
        return "The bag is empty."
    return "\n".join(f"{index}: {item.name}" for index, item in enumerate(mon.items))


def format_battle_start(battle_state: BattleState) -> str:
    player = battle_state.player
    opponent = battle_state.opponent
    lines = [
        "The battle has begun!",
        f"{player.display_name} (Lv. {player.level}) vs {opponent.display_name} (Lv. {opponent.level})",
        "",
        format_hp(player),
        format_hp(opponent),
    ]
    if battle_state.weather.type != Weather.NONE:
        lines.append(f"Weather: {capitalize_first_letter(battle_state.weather.type.value)} ({battle_state.weather.turns_left} turns)")
    lines += ["", "Available moves:", format_moves(player), "", "Items:", format_items(player)]
    return "\n".join(lines)


def format_victory(battle_state: BattleState) -> str:
    return f"The battle is over! {battle_state.winner} won!"


def format_turn(battle_state: BattleState, turn_number: int) -> str:
    """Log of one resolved turn followed by both HP lines"""
    lines = [f"Turn {turn_number}:", *battle_state.messages, "", format_hp(battle_state.player), format_hp(battle_state.opponent)]
    if not battle_state.is_active():
        lines += ["", format_victory(battle_state)]
    return "\n".join(lines)


def format_item_use(battle_state: BattleState) -> str:
    player = battle_state.player
    return "\n".join([*battle_state.messages, "", format_hp(player), "", "Remaining items:", format_items(player)])


def format_battle_status(battle_state: BattleState) -> str:
    lines = [f"Turn {battle_state.turn}", format_hp(battle_state.player), format_hp(battle_state.opponent)]
    for mon in (battle_state.player, battle_state.opponent):
        if mon.status.is_active():
            lines.append(f"{mon.display_name} is affected by {mon.status.type.value} ({mon.status.turns_left} turns left)")
    if battle_state.weather.type != Weather.NONE:
        lines.append(f"Weather: {capitalize_first_letter(battle_state.weather.type.value)} ({battle_state.weather.turns_left} turns)")
    lines += ["", "Available moves:", format_moves(battle_state.player), "", "Items:", format_items(battle_state.player)]
    return "\n".join(lines)
