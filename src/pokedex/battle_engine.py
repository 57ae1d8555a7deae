import logging
from typing import Optional

from src.pokedex.constants import DEFAULT_WEATHER_TURNS, EXPERIENCE_DIVISOR
from src.pokedex.damage_calculator import DamageCalculator, is_move_hit
from src.pokedex.enums import EncounterStatus, Weather
from src.pokedex.errors import InvalidItemIndex, InvalidMoveIndex, NoActiveBattle
from src.pokedex.items import apply_item
from src.pokedex.schema.battle_move import BattleMove
from src.pokedex.schema.battle_pokemon import BattlePokemon
from src.pokedex.schema.battle_state import BattleState, BattleWeather
from src.pokedex.turn_effects import TurnEffectsProcessor
from src.pokedex.type_effectiveness import TypeEffectiveness
from src.pokedex.utils import rng as rng_utils
from src.pokedex.utils.rng import RandomSource

logger = logging.getLogger(__name__)


class BattleEngine:
    """
    Turn resolution for a single two-combatant Encounter

    The engine holds no encounter of its own: every operation takes the BattleState
    it acts on, so whoever owns the state (the EncounterStore) decides its lifetime.
    All randomness (accuracy rolls, damage rolls, the opponent's move choice) comes
    from the injected random source.

    A turn runs in a fixed order:
    1. Clear the message log
    2. Weather announcement and countdown
    3. Status upkeep, player then opponent
    4. Opponent picks a move at random
    5. Player attacks
    6. Opponent attacks, if still standing
    7. Turn counter advances
    8. Battle ends if anyone is at 0 HP
    """

    def __init__(self, rng: Optional[RandomSource] = None, type_effectiveness: Optional[TypeEffectiveness] = None):
        self.rng = rng or rng_utils.default_rng()
        self.damage_calculator = DamageCalculator(self.rng, type_effectiveness)

    def initialize_battle(self, player: BattlePokemon, opponent: BattlePokemon, weather: Weather = Weather.NONE, weather_turns: int = DEFAULT_WEATHER_TURNS) -> BattleState:
        """
        Create an active Encounter between two hydrated combatants

        Args:
            player: Combatant controlled by the caller
            opponent: Combatant picking random moves
            weather: Starting weather (NONE for clear skies)
            weather_turns: How many turns the starting weather lasts
        """
        battle_weather = BattleWeather(type=weather, turns_left=weather_turns if weather != Weather.NONE else 0)
        battle_state = BattleState(player=player, opponent=opponent, weather=battle_weather)
        battle_state.log(f"A battle started between {player.display_name} and {opponent.display_name}!")
        logger.info(f"Battle started: {player.name} (#{player.id}) vs {opponent.name} (#{opponent.id})")
        return battle_state

    def process_turn(self, battle_state: BattleState, move_slot: int) -> BattleState:
        """
        Resolve one full turn

        Args:
            battle_state: The active Encounter, mutated in place
            move_slot: Index into the player's move list

        Returns:
            The same battle state, after the turn

        Raises:
            NoActiveBattle: the Encounter has already ended
            InvalidMoveIndex: move_slot is not a valid index (nothing is mutated)
        """
        self._require_active(battle_state)
        player = battle_state.player
        opponent = battle_state.opponent
        if not 0 <= move_slot < len(player.moves):
            raise InvalidMoveIndex(move_slot, len(player.moves))

        # Combatants in the order they reached 0 HP this turn
        fainted: list[BattlePokemon] = []

        # 1. Fresh log for this turn
        battle_state.messages = []

        # 2-3. Weather, then status upkeep (player first)
        effects = TurnEffectsProcessor(battle_state)
        effects.process_weather()
        for mon in (player, opponent):
            effects.process_status_upkeep(mon)
            self._check_fainted(battle_state, mon, fainted)

        # 4. Opponent has no strategy beyond a uniform pick
        opponent_move = self._choose_random_move(opponent)

        # 5. Player attacks first
        if not fainted:
            self.execute_move(battle_state, player, opponent, player.moves[move_slot])
            self._check_fainted(battle_state, opponent, fainted)

        # 6. Opponent answers only if both are still standing
        if not fainted:
            if opponent_move is None:
                battle_state.log(f"{opponent.display_name} has no moves to use!")
            else:
                self.execute_move(battle_state, opponent, player, opponent_move)
                self._check_fainted(battle_state, player, fainted)

        # 7. Advance
        battle_state.turn += 1

        # 8. First to reach 0 HP loses; step order above makes that unambiguous
        if fainted:
            self._end_battle(battle_state, loser=fainted[0])

        logger.debug(f"Turn {battle_state.turn - 1} resolved: {player.name} {player.current_hp}/{player.max_hp}, {opponent.name} {opponent.current_hp}/{opponent.max_hp}")
        return battle_state

    def use_item(self, battle_state: BattleState, item_slot: int) -> BattleState:
        """
        Use one item from the player's bag on the player's combatant

        The item is consumed whether or not it had any effect. Using an item does
        not advance the turn.

        Raises:
            NoActiveBattle: the Encounter has already ended
            InvalidItemIndex: item_slot is not a valid index (nothing is mutated)
        """
        self._require_active(battle_state)
        player = battle_state.player
        if not 0 <= item_slot < len(player.items):
            raise InvalidItemIndex(item_slot, len(player.items))

        battle_state.messages = []
        item = player.items[item_slot]
        apply_item(battle_state, player, item)
        del player.items[item_slot]
        logger.debug(f"{player.name} used {item.name}; {len(player.items)} item(s) left")
        return battle_state

    def execute_move(self, battle_state: BattleState, attacker: BattlePokemon, defender: BattlePokemon, move: BattleMove) -> int:
        """
        One attack: accuracy check, then damage on a hit

        Returns:
            HP the defender actually lost (0 on a miss)
        """
        battle_state.log(f"{attacker.display_name} used {move.display_name}!")
        if not is_move_hit(move, self.rng):
            battle_state.log(f"{attacker.display_name}'s attack missed!")
            return 0

        damage = self.damage_calculator.calculate_damage(attacker, defender, move, battle_state.weather.type)
        dealt = defender.take_damage(damage)

        description = self.damage_calculator.type_effectiveness.get_effectiveness_description(move.type, defender.types)
        if description:
            battle_state.log(description)
        battle_state.log(f"{defender.display_name} took {dealt} damage!")
        return dealt

    def is_battle_over(self, battle_state: BattleState) -> bool:
        return battle_state.status == EncounterStatus.ENDED

    def get_winner(self, battle_state: BattleState) -> Optional[BattlePokemon]:
        """
        Returns:
            The surviving combatant, or None while the battle continues
        """
        if not self.is_battle_over(battle_state):
            return None
        return battle_state.opponent if battle_state.player.is_fainted() else battle_state.player

    # =================================================================
    # HELPER METHODS
    # =================================================================

    def _require_active(self, battle_state: Optional[BattleState]) -> None:
        if battle_state is None or not battle_state.is_active():
            raise NoActiveBattle("There is no active battle.")

    def _choose_random_move(self, mon: BattlePokemon) -> Optional[BattleMove]:
        index = rng_utils.choice_index(self.rng, len(mon.moves))
        if index < 0:
            return None
        return mon.moves[index]

    def _check_fainted(self, battle_state: BattleState, mon: BattlePokemon, fainted: list[BattlePokemon]) -> None:
        if mon.is_fainted() and not any(f is mon for f in fainted):
            fainted.append(mon)
            battle_state.log(f"{mon.display_name} fainted!")

    def _end_battle(self, battle_state: BattleState, loser: BattlePokemon) -> None:
        winner = battle_state.opponent if loser is battle_state.player else battle_state.player
        battle_state.status = EncounterStatus.ENDED
        battle_state.winner = winner.display_name

        if winner is battle_state.player:
            gained = loser.base_experience * loser.level // EXPERIENCE_DIVISOR
            winner.experience += gained
            battle_state.log(f"{winner.display_name} gained {gained} experience points!")

        logger.info(f"Battle ended after {battle_state.turn - 1} turn(s); winner: {winner.name}")
