"""Runtime configuration for the Pokédex server, overridable through environment variables."""

import logging
import os
from dataclasses import dataclass, field

from src.pokedex.constants import DEFAULT_LEVEL, HTTP_TIMEOUT_SECONDS, POKEAPI_BASE_URL, USER_AGENT

logger = logging.getLogger(__name__)


def _env_number(name: str, default, parse):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return parse(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a valid number, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    return _env_number(name, default, float)


def _env_int(name: str, default: int) -> int:
    return _env_number(name, default, int)


@dataclass
class CatalogConfig:
    """Configuration for the PokeAPI client."""

    base_url: str = field(default_factory=lambda: os.getenv("POKEDEX_API_BASE_URL", POKEAPI_BASE_URL))
    user_agent: str = field(default_factory=lambda: os.getenv("POKEDEX_USER_AGENT", USER_AGENT))
    timeout: float = field(default_factory=lambda: _env_float("POKEDEX_HTTP_TIMEOUT", HTTP_TIMEOUT_SECONDS))


@dataclass
class BattleConfig:
    """Configuration for new encounters."""

    default_level: int = field(default_factory=lambda: _env_int("POKEDEX_DEFAULT_LEVEL", DEFAULT_LEVEL))


@dataclass
class Config:
    """Global configuration container."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    battle: BattleConfig = field(default_factory=BattleConfig)
    log_level: str = field(default_factory=lambda: os.getenv("POKEDEX_LOG_LEVEL", "INFO").upper())


# Global config instance
config = Config()
