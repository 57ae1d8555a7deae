import logging
from typing import Optional

from src.pokedex.catalog_client import CatalogClient
from src.pokedex.constants import DEFAULT_LEVEL, DEFAULT_MOVE_ACCURACY, DEFAULT_MOVE_POWER, DEFAULT_MOVE_PP, DEFAULT_MOVE_TYPE, MAX_MON_MOVES
from src.pokedex.data.items import get_default_items
from src.pokedex.enums import MoveCategory
from src.pokedex.errors import HydrationError
from src.pokedex.schema.battle_move import BattleMove
from src.pokedex.schema.battle_pokemon import BattleItem, BattlePokemon
from src.pokedex.schema.species_info import MoveRecord

logger = logging.getLogger(__name__)


def _build_move(name: str, record: Optional[MoveRecord]) -> BattleMove:
    # Catalog leaves power/accuracy empty for status moves; fall back to defaults
    if record is None:
        return BattleMove(name=name, power=DEFAULT_MOVE_POWER, accuracy=DEFAULT_MOVE_ACCURACY, pp=DEFAULT_MOVE_PP, type=DEFAULT_MOVE_TYPE)
    return BattleMove(
        name=record.name,
        power=record.power or DEFAULT_MOVE_POWER,
        accuracy=record.accuracy or DEFAULT_MOVE_ACCURACY,
        pp=record.pp or DEFAULT_MOVE_PP,
        type=record.type or DEFAULT_MOVE_TYPE,
        category=MoveCategory.from_damage_class(record.damage_class),
    )


def create_battle_pokemon(
    catalog: CatalogClient,
    creature_id: int | str,
    level: int = DEFAULT_LEVEL,
    items: Optional[list[BattleItem]] = None,
) -> BattlePokemon:
    """Hydrate a combatant from the catalog.

    Takes the first four moves the catalog lists. A move whose details can't be
    fetched still joins the moveset with default values.

    Raises:
        HydrationError: the creature itself is unavailable
    """
    record = catalog.fetch_creature(creature_id)
    if record is None:
        raise HydrationError(creature_id)

    moves = []
    for move_name in record.moves[:MAX_MON_MOVES]:
        move_record = catalog.fetch_move(move_name)
        if move_record is None:
            logger.info(f"Using default values for move '{move_name}'")
        moves.append(_build_move(move_name, move_record))

    return BattlePokemon(
        id=record.id,
        name=record.name,
        level=level,
        types=record.types[:2],
        stats=record.stats,
        current_hp=record.stats.hp,
        moves=moves,
        base_experience=record.base_experience,
        items=items if items is not None else get_default_items(),
    )
