from src.pokedex.enums import StatusType, Weather
from src.pokedex.schema.battle_pokemon import BattlePokemon, BattleStats, StatusCondition
from src.pokedex.schema.battle_state import BattleState, BattleWeather
from src.pokedex.turn_effects import TurnEffectsProcessor, upkeep_damage


def make_mon(name: str = "pikachu", *, hp: int = 100, current_hp: int | None = None, status: StatusType = StatusType.NONE, turns_left: int = 3) -> BattlePokemon:
    return BattlePokemon(
        id=25,
        name=name,
        types=["electric"],
        stats=BattleStats(hp=hp, attack=55, defense=40, special_attack=50, special_defense=50, speed=90),
        current_hp=hp if current_hp is None else current_hp,
        status=StatusCondition(type=status, turns_left=turns_left if status != StatusType.NONE else 0),
    )


def make_state(player: BattlePokemon, weather: Weather = Weather.NONE, weather_turns: int = 0) -> BattleState:
    return BattleState(player=player, opponent=make_mon("eevee"), weather=BattleWeather(type=weather, turns_left=weather_turns))


def test_burn_takes_a_tenth_rounded_down():
    mon = make_mon(hp=45, status=StatusType.BURN)
    state = make_state(mon)

    lost = TurnEffectsProcessor(state).process_status_upkeep(mon)

    assert lost == 4
    assert mon.current_hp == 41
    assert state.messages == ["Pikachu is hurt by its burn! (-4 HP)"]


def test_poison_takes_eight_percent_rounded_down():
    mon = make_mon(hp=45, status=StatusType.POISON)

    assert upkeep_damage(mon) == 3


def test_upkeep_damage_floors_hp_at_zero():
    mon = make_mon(current_hp=2, status=StatusType.BURN)
    state = make_state(mon)

    lost = TurnEffectsProcessor(state).process_status_upkeep(mon)

    assert lost == 2
    assert mon.current_hp == 0


def test_status_counter_runs_out_and_resets():
    mon = make_mon(status=StatusType.POISON, turns_left=1)
    state = make_state(mon)

    TurnEffectsProcessor(state).process_status_upkeep(mon)

    assert mon.status.type == StatusType.NONE
    assert mon.status.turns_left == 0
    assert state.messages[-1] == "Pikachu is no longer poisoned."


def test_inert_status_counts_down_without_damage():
    mon = make_mon(status=StatusType.SLEEP, turns_left=2)
    state = make_state(mon)

    lost = TurnEffectsProcessor(state).process_status_upkeep(mon)

    assert lost == 0
    assert mon.current_hp == mon.max_hp
    assert mon.status.type == StatusType.SLEEP
    assert mon.status.turns_left == 1


def test_no_status_is_a_no_op():
    mon = make_mon()
    state = make_state(mon)

    assert TurnEffectsProcessor(state).process_status_upkeep(mon) == 0
    assert state.messages == []


def test_rain_is_announced_and_counts_down():
    state = make_state(make_mon(), Weather.RAINY, weather_turns=3)

    TurnEffectsProcessor(state).process_weather()

    assert state.messages == ["Rain continues to fall."]
    assert state.weather.turns_left == 2
    assert state.weather.type == Weather.RAINY


def test_sandstorm_is_silent_until_it_ends():
    state = make_state(make_mon(), Weather.SANDSTORM, weather_turns=2)
    processor = TurnEffectsProcessor(state)

    processor.process_weather()
    assert state.messages == []

    processor.process_weather()
    assert state.messages == ["The sandstorm subsided."]
    assert state.weather.type == Weather.NONE


def test_weather_end_is_logged(caplog):
    state = make_state(make_mon(), Weather.HAIL, weather_turns=1)

    with caplog.at_level("DEBUG", logger="src.pokedex.turn_effects"):
        TurnEffectsProcessor(state).process_weather()

    assert "Weather hail ended on turn 1" in caplog.text
