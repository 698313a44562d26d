"""
Core rules: role registry, players, and win condition checking.
"""

from .exceptions import MafiaRulesError, UnknownRoleError, RoleConfigError, RoleAssignmentError
from .roles import (
    Role,
    Faction,
    NightAbility,
    RoleConfig,
    ROLE_CONFIGS,
    get_role_config,
    get_faction,
    roles_by_faction,
    can_perform_night_action,
    is_role,
    parse_role,
    validate_role_assignment,
)
from .player import Player
from .win_conditions import (
    EliminationCause,
    Elimination,
    FactionTally,
    GameEndResult,
    WinRule,
    WIN_RULES,
    tally_alive,
    check_game_end,
)

__all__ = [
    'MafiaRulesError',
    'UnknownRoleError',
    'RoleConfigError',
    'RoleAssignmentError',
    'Role',
    'Faction',
    'NightAbility',
    'RoleConfig',
    'ROLE_CONFIGS',
    'get_role_config',
    'get_faction',
    'roles_by_faction',
    'can_perform_night_action',
    'is_role',
    'parse_role',
    'validate_role_assignment',
    'Player',
    'EliminationCause',
    'Elimination',
    'FactionTally',
    'GameEndResult',
    'WinRule',
    'WIN_RULES',
    'tally_alive',
    'check_game_end',
]
