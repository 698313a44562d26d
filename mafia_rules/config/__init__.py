"""Game configuration module."""

from .game_config import (
    GameConfig,
    GamePhase,
    default_config,
    MIN_PLAYERS,
    MAX_PLAYERS,
    DAY_PHASE_DURATION,
    NIGHT_PHASE_DURATION,
    DISCUSSION_DURATION,
    VOTING_DURATION,
)
from .config_loader import load_config, load_config_from_yaml, load_roster_from_yaml

__all__ = [
    'GameConfig',
    'GamePhase',
    'default_config',
    'MIN_PLAYERS',
    'MAX_PLAYERS',
    'DAY_PHASE_DURATION',
    'NIGHT_PHASE_DURATION',
    'DISCUSSION_DURATION',
    'VOTING_DURATION',
    'load_config',
    'load_config_from_yaml',
    'load_roster_from_yaml',
]
