"""
Rules kernel for a Mafia-style social deduction game.
"""

from .core import (
    Role,
    Faction,
    RoleConfig,
    Player,
    Elimination,
    EliminationCause,
    GameEndResult,
    get_role_config,
    roles_by_faction,
    can_perform_night_action,
    check_game_end,
)
from .config import GameConfig, GamePhase, default_config, load_config

__version__ = "0.1.0"

__all__ = [
    'Role',
    'Faction',
    'RoleConfig',
    'Player',
    'Elimination',
    'EliminationCause',
    'GameEndResult',
    'get_role_config',
    'roles_by_faction',
    'can_perform_night_action',
    'check_game_end',
    'GameConfig',
    'GamePhase',
    'default_config',
    'load_config',
]
