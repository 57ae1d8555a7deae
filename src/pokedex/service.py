"""
Tool boundary: every public method returns response text and never raises

Catalog failures, hydration failures, bad selectors and a missing battle all come
back as readable messages. Anything unexpected is logged with its traceback and
reported generically so the server process keeps running.
"""

import functools
import logging
from typing import Callable, Optional

from src.pokedex import formatting
from src.pokedex.battle_engine import BattleEngine
from src.pokedex.catalog_client import CatalogClient
from src.pokedex.config import Config, config as default_config
from src.pokedex.constants import MAX_CREATURE_ID, MAX_LEVEL, MIN_LEVEL, MSG_NO_ACTIVE_BATTLE, MSG_UNEXPECTED_ERROR, REGION_TO_GENERATION
from src.pokedex.encounter_store import EncounterStore
from src.pokedex.enums import Weather
from src.pokedex.errors import HydrationError, InvalidItemIndex, InvalidMoveIndex, NoActiveBattle
from src.pokedex.queries import HELP_TEXT, IntentKind, parse_query
from src.pokedex.schema.species_info import CreatureRef
from src.pokedex.utils import rng as rng_utils
from src.pokedex.utils.mon_factory import create_battle_pokemon
from src.pokedex.utils.rng import RandomSource

logger = logging.getLogger(__name__)


def tool_boundary(method: Callable[..., str]) -> Callable[..., str]:
    """Turn any uncaught exception into the generic failure text"""

    @functools.wraps(method)
    def wrapper(*args, **kwargs) -> str:
        try:
            return method(*args, **kwargs)
        except Exception:
            logger.exception(f"Unexpected error in {method.__name__}")
            return MSG_UNEXPECTED_ERROR

    return wrapper


class PokedexService:
    """
    Creature lookups and the battle session behind the tool surface

    Collaborators are injected: the catalog client (remote data), the encounter
    store (the single battle slot), the battle engine and the random source used
    for "random creature" picks.
    """

    def __init__(
        self,
        catalog: Optional[CatalogClient] = None,
        store: Optional[EncounterStore] = None,
        engine: Optional[BattleEngine] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or default_config
        self.rng = rng or rng_utils.default_rng()
        self.catalog = catalog or CatalogClient(self.config.catalog)
        self.store = store or EncounterStore()
        self.engine = engine or BattleEngine(self.rng)

    # =================================================================
    # CREATURE LOOKUPS
    # =================================================================

    @tool_boundary
    def random_creature(self) -> str:
        creature_id = self.rng.randint(1, MAX_CREATURE_ID)
        details = self.catalog.fetch_creature_details(creature_id)
        if details is None:
            return "Failed to retrieve a random Pokémon. Please try again."
        return formatting.format_creature_card(*details)

    @tool_boundary
    def creature_by_id(self, creature_id: int) -> str:
        details = self.catalog.fetch_creature_details(creature_id)
        if details is None:
            return f"No Pokémon found with ID #{creature_id}."
        return formatting.format_creature_card(*details)

    @tool_boundary
    def random_creature_from_region(self, region: str) -> str:
        normalized = region.strip().lower()
        generation = REGION_TO_GENERATION.get(normalized)
        if generation is None:
            return f"Unknown region: {region}. Available regions are: {', '.join(REGION_TO_GENERATION)}"

        roster = self.catalog.fetch_generation_roster(generation)
        if not roster:
            return f"Failed to retrieve Pokémon from the {normalized} region."

        details = self.catalog.fetch_creature_details(self._pick(roster).lookup_key)
        if details is None:
            return f"Failed to retrieve details for the selected Pokémon from {normalized}."
        return formatting.format_creature_card(*details, label=normalized)

    @tool_boundary
    def random_creature_by_affinity(self, affinity: str) -> str:
        normalized = affinity.strip().lower()
        roster = self.catalog.fetch_affinity_roster(normalized) if normalized else None
        if not roster:
            return f"Unknown type: {affinity} or no Pokémon found of this type."

        details = self.catalog.fetch_creature_details(self._pick(roster).lookup_key)
        if details is None:
            return f"Failed to retrieve details for the selected {normalized} Pokémon."
        return formatting.format_creature_card(*details, label=normalized)

    @tool_boundary
    def natural_language_query(self, query: str) -> str:
        intent = parse_query(query)
        if intent is None:
            return HELP_TEXT

        logger.debug(f"Query {query!r} matched {intent.kind.value}")
        match intent.kind:
            case IntentKind.LOOKUP_BY_NUMBER:
                return self.creature_by_id(intent.number)
            case IntentKind.RANDOM_FROM_REGION:
                return self.random_creature_from_region(intent.argument)
            case IntentKind.RANDOM_BY_TYPE:
                return self.random_creature_by_affinity(intent.argument)
            case _:
                return self.random_creature()

    def _pick(self, roster: list[CreatureRef]) -> CreatureRef:
        return roster[rng_utils.choice_index(self.rng, len(roster))]

    # =================================================================
    # BATTLE
    # =================================================================

    @tool_boundary
    def start_battle(self, player_id: int, opponent_id: int, level: Optional[int] = None, weather: str = "none") -> str:
        """Hydrate both combatants and install the new Encounter, replacing any current one"""
        level = self.config.battle.default_level if level is None else level
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            return f"Invalid level {level}; choose a level between {MIN_LEVEL} and {MAX_LEVEL}."
        try:
            battle_weather = Weather(weather.strip().lower() or Weather.NONE.value)
        except ValueError:
            return f"Unknown weather: {weather}. Available weather: {', '.join(w.value for w in Weather)}"

        # Build everything before touching the store so a failure leaves it as it was
        try:
            player = create_battle_pokemon(self.catalog, player_id, level)
            opponent = create_battle_pokemon(self.catalog, opponent_id, level)
        except HydrationError as e:
            logger.warning(str(e))
            return f"Failed to start the battle: {e}"

        with self.store.locked():
            if self.store.get() is not None:
                logger.info("Replacing the active battle with a new one")
            battle_state = self.engine.initialize_battle(player, opponent, weather=battle_weather)
            self.store.set(battle_state)
            return formatting.format_battle_start(battle_state)

    @tool_boundary
    def make_move(self, move_index: int) -> str:
        with self.store.locked():
            battle_state = self.store.get()
            try:
                if battle_state is None:
                    raise NoActiveBattle(MSG_NO_ACTIVE_BATTLE)
                turn_number = battle_state.turn
                self.engine.process_turn(battle_state, move_index)
            except NoActiveBattle:
                return MSG_NO_ACTIVE_BATTLE
            except InvalidMoveIndex as e:
                return str(e)

            if self.engine.is_battle_over(battle_state):
                self.store.clear()
            return formatting.format_turn(battle_state, turn_number)

    @tool_boundary
    def use_item(self, item_index: int) -> str:
        with self.store.locked():
            battle_state = self.store.get()
            try:
                if battle_state is None:
                    raise NoActiveBattle(MSG_NO_ACTIVE_BATTLE)
                self.engine.use_item(battle_state, item_index)
            except NoActiveBattle:
                return MSG_NO_ACTIVE_BATTLE
            except InvalidItemIndex as e:
                return str(e)
            return formatting.format_item_use(battle_state)

    @tool_boundary
    def battle_status(self) -> str:
        """Current Encounter at a glance without advancing it"""
        battle_state = self.store.get()
        if battle_state is None:
            return MSG_NO_ACTIVE_BATTLE
        return formatting.format_battle_status(battle_state)
