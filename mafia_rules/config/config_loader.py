"""
Loaders for YAML-based game configurations and player rosters.
"""

import logging
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, List, Optional, TYPE_CHECKING

import yaml

from .game_config import GameConfig, default_config

if TYPE_CHECKING:
    from ..core.player import Player

logger = logging.getLogger(__name__)


def _read_yaml(path: str) -> Any:
    yaml_file = Path(path)
    
    if not yaml_file.exists():
        raise FileNotFoundError(f"File not found: {path}")
    
    with open(yaml_file, 'r') as f:
        return yaml.safe_load(f)


def load_config_from_yaml(config_path: str) -> GameConfig:
    """
    Load game configuration from a YAML file.
    
    Only GameConfig fields may be set. Other keys are logged and skipped,
    values of the wrong type are rejected.
    
    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the file is not a mapping or a value has the wrong type
        yaml.YAMLError: If the YAML file is invalid
    """
    config_dict = _read_yaml(config_path)
    
    if config_dict is None:
        return default_config
    if not isinstance(config_dict, dict):
        raise ValueError(f"Config must be a mapping of settings: {config_path}")
    
    field_types = {f.name: type(getattr(default_config, f.name)) for f in fields(GameConfig)}
    settings = {}
    
    for key, value in config_dict.items():
        expected = field_types.get(key)
        if expected is None:
            logger.warning("Unknown config key '%s' in %s", key, config_path)
            continue
        # bool is an int subclass, but "true" is never a duration
        if not isinstance(value, expected) or isinstance(value, bool) != (expected is bool):
            raise ValueError(
                f"Config key '{key}' must be {expected.__name__}, got {value!r} in {config_path}"
            )
        settings[key] = value
    
    return replace(default_config, **settings)


def load_config(config_path: Optional[str] = None) -> GameConfig:
    """Load configuration from a YAML file, or the default config when no path is given."""
    return default_config if config_path is None else load_config_from_yaml(config_path)


def _read_flag(entry: dict, key: str, default: bool, player_id: str) -> bool:
    value = entry.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"Player {player_id}: '{key}' must be true or false, got {value!r}")
    return value


def load_roster_from_yaml(roster_path: str) -> List["Player"]:
    """
    Load a player roster from a YAML file.
    
    The file holds a list of mappings with keys id, name, role and the
    optional alive / revealed flags. Role names that the registry does not
    know are kept as raw strings so the win-condition check can report them.
    
    Raises:
        FileNotFoundError: If the roster file doesn't exist
        ValueError: If the file is not a list of player mappings, a flag is
            not a boolean, or two players share an id
    """
    # core.roles imports this package, so import lazily
    from ..core.player import Player
    from ..core.roles import parse_role
    from ..core.exceptions import UnknownRoleError
    
    entries = _read_yaml(roster_path) or []
    if not isinstance(entries, list):
        raise ValueError(f"Roster must be a list of players: {roster_path}")
    
    players = []
    seen_ids = set()
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict) or "role" not in entry:
            raise ValueError(f"Roster entry {index} must be a mapping with a role")
        
        player_id = str(entry.get("id", index + 1))
        if player_id in seen_ids:
            raise ValueError(f"Duplicate player id in roster: {player_id}")
        seen_ids.add(player_id)
        
        try:
            role = parse_role(entry["role"])
        except UnknownRoleError:
            logger.debug("Player %s has unrecognized role %r", player_id, entry["role"])
            role = entry["role"]
        
        players.append(Player(
            id=player_id,
            name=str(entry.get("name", f"Player {player_id}")),
            role=role,
            is_alive=_read_flag(entry, "alive", True, player_id),
            is_revealed=_read_flag(entry, "revealed", False, player_id),
        ))
    
    return players
