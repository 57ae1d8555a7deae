# =============================================================================
# CATALOG SERVICE - PokeAPI v2
# =============================================================================
POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
USER_AGENT = "pokedex-app/1.0"
HTTP_TIMEOUT_SECONDS = 10.0

# Upper bound for "any random Pokemon" draws (national dex ids 1..MAX_CREATURE_ID)
MAX_CREATURE_ID = 1000

# Region name -> generation number
REGION_TO_GENERATION = {
    "kanto": 1,
    "johto": 2,
    "hoenn": 3,
    "sinnoh": 4,
    "unova": 5,
    "kalos": 6,
    "alola": 7,
    "galar": 8,
    "paldea": 9,
}

# Type names accepted by the natural language "random <type> pokemon" intent
KNOWN_TYPES = (
    "normal",
    "fire",
    "water",
    "grass",
    "electric",
    "ice",
    "fighting",
    "poison",
    "ground",
    "flying",
    "psychic",
    "bug",
    "rock",
    "ghost",
    "dragon",
    "dark",
    "steel",
    "fairy",
)

# =============================================================================
# COMBATANT LIMITS
# =============================================================================
DEFAULT_LEVEL = 50
MIN_LEVEL = 1
MAX_LEVEL = 100
MAX_MON_MOVES = 4

# Defaults for move fields the catalog leaves empty
DEFAULT_MOVE_POWER = 0
DEFAULT_MOVE_ACCURACY = 100
DEFAULT_MOVE_PP = 20
DEFAULT_MOVE_TYPE = "normal"

# Signed stat stages
MIN_STAT_STAGE = -6
MAX_STAT_STAGE = 6

# =============================================================================
# DAMAGE
# =============================================================================
DAMAGE_ROLL_MIN = 0.85
DAMAGE_ROLL_MAX = 1.00
BURN_PHYSICAL_MULTIPLIER = 0.5

TYPE_MUL_NO_EFFECT = 0.0
TYPE_MUL_NOT_EFFECTIVE = 0.5
TYPE_MUL_NORMAL = 1.0
TYPE_MUL_SUPER_EFFECTIVE = 2.0

WEATHER_BOOST_MULTIPLIER = 1.5
WEATHER_WEAKEN_MULTIPLIER = 0.5
DEFAULT_WEATHER_TURNS = 5

# =============================================================================
# STATUS UPKEEP - percent of max HP lost per turn
# =============================================================================
BURN_DAMAGE_PERCENT = 10
POISON_DAMAGE_PERCENT = 8

# Turns a status set by an item lasts
DEFAULT_STATUS_TURNS = 3

# Experience awarded on victory: base_experience * level // EXPERIENCE_DIVISOR
EXPERIENCE_DIVISOR = 7

# =============================================================================
# MESSAGES
# =============================================================================
MSG_NO_EFFECT = "It doesn't affect the target..."
MSG_NOT_VERY_EFFECTIVE = "It's not very effective..."
MSG_SUPER_EFFECTIVE = "It's super effective!"
MSG_NO_DESCRIPTION = "No description available."
MSG_NO_ACTIVE_BATTLE = "There is no active battle! Start one with the start_battle tool first."
MSG_UNEXPECTED_ERROR = "Something went wrong while handling the request. Please try again."
