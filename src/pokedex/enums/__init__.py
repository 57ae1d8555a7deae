from src.pokedex.enums.status import StatusType, EncounterStatus
from src.pokedex.enums.other import Weather, MoveCategory, Stat
