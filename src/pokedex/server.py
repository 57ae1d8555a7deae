"""Stdio tool server exposing Pokédex lookups and battles to MCP clients."""

import logging
import sys
from typing import Optional

from mcp.server.fastmcp import FastMCP

from src.pokedex.config import config
from src.pokedex.service import PokedexService

logger = logging.getLogger(__name__)

mcp = FastMCP("pokedex")

service = PokedexService(config=config)


@mcp.tool()
def random_creature() -> str:
    """Get a random Pokémon with its types, size, abilities and Pokédex description."""
    return service.random_creature()


@mcp.tool()
def random_creature_from_region(region: str) -> str:
    """Get a random Pokémon introduced in a region.

    Args:
        region: One of kanto, johto, hoenn, sinnoh, unova, kalos, alola, galar, paldea.
    """
    return service.random_creature_from_region(region)


@mcp.tool()
def random_creature_by_affinity(affinity: str) -> str:
    """Get a random Pokémon of an elemental type.

    Args:
        affinity: Type name such as fire, water, grass or dragon.
    """
    return service.random_creature_by_affinity(affinity)


@mcp.tool()
def creature_by_id(creature_id: int) -> str:
    """Look up a Pokémon by its national Pokédex number."""
    return service.creature_by_id(creature_id)


@mcp.tool()
def natural_language_query(query: str) -> str:
    """Answer a plain-English Pokémon question.

    Understands lookups such as "What is pokemon #25?", "random pokemon from kanto",
    "random fire pokemon" and "random pokemon".
    """
    return service.natural_language_query(query)


@mcp.tool()
def start_battle(player_id: int, opponent_id: int, level: Optional[int] = None, weather: str = "none") -> str:
    """Start a battle between two Pokémon, replacing any battle in progress.

    Args:
        player_id: Pokédex number of your Pokémon.
        opponent_id: Pokédex number of the opponent.
        level: Level for both combatants (1-100). Defaults to 50.
        weather: none, sunny, rainy, sandstorm or hail.
    """
    return service.start_battle(player_id, opponent_id, level, weather)


@mcp.tool()
def make_move(move_index: int) -> str:
    """Attack with one of your Pokémon's moves and resolve a full turn.

    Args:
        move_index: Index of the move, as listed when the battle started.
    """
    return service.make_move(move_index)


@mcp.tool()
def use_item(item_index: int) -> str:
    """Use an item from your bag on your Pokémon. Does not end the turn.

    Args:
        item_index: Index of the item in your bag.
    """
    return service.use_item(item_index)


@mcp.tool()
def battle_status() -> str:
    """Show the current battle without taking an action."""
    return service.battle_status()


def main() -> None:
    # stdout carries the protocol, so logs go to stderr
    logging.basicConfig(
        stream=sys.stderr,
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Pokédex MCP server running on stdio")
    try:
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal error while running the server")
        sys.exit(1)


if __name__ == "__main__":
    main()
