import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from src.pokedex.schema.battle_state import BattleState


class EncounterStore:
    """Single-slot, in-process holder for the one active Encounter.

    Battle actions must hold `locked()` for their whole read-modify-write so two
    tool calls can never interleave turns. Nothing survives a process restart.
    """

    def __init__(self) -> None:
        self._encounter: Optional[BattleState] = None
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["EncounterStore"]:
        with self._lock:
            yield self

    def get(self) -> Optional[BattleState]:
        with self._lock:
            return self._encounter

    def set(self, encounter: BattleState) -> None:
        """Install an Encounter, replacing any existing one"""
        with self._lock:
            self._encounter = encounter

    def clear(self) -> None:
        with self._lock:
            self._encounter = None
