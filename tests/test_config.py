"""
Tests for game configuration and YAML loading.
"""

import logging

import pytest
import yaml

from mafia_rules.core import Role
from mafia_rules.config import (
    GameConfig, GamePhase, default_config, load_config, load_config_from_yaml, load_roster_from_yaml,
    MIN_PLAYERS, MAX_PLAYERS, DAY_PHASE_DURATION, NIGHT_PHASE_DURATION, DISCUSSION_DURATION, VOTING_DURATION,
)


def test_game_constants():
    """Test the published phase durations and player limits."""
    assert MIN_PLAYERS == 4
    assert MAX_PLAYERS == 16
    assert DAY_PHASE_DURATION == 120
    assert NIGHT_PHASE_DURATION == 30
    assert DISCUSSION_DURATION == 60
    assert VOTING_DURATION == 30


def test_phase_duration():
    """Test duration lookup by phase."""
    config = GameConfig()
    
    assert config.phase_duration(GamePhase.DAY) == 120
    assert config.phase_duration(GamePhase.NIGHT) == 30
    assert config.phase_duration(GamePhase.DISCUSSION) == 60
    assert config.phase_duration(GamePhase.VOTING) == 30
    
    assert GameConfig(night_phase_duration=45).phase_duration(GamePhase.NIGHT) == 45


def test_load_config_default():
    """Test that no path gives the default config."""
    assert load_config() is default_config


def test_load_config_from_yaml(config_file):
    """Test overriding values from YAML."""
    path = config_file("day_phase_duration: 90\nmax_players: 12\nlog_level: DEBUG\n")
    
    config = load_config(path)
    
    assert config.day_phase_duration == 90
    assert config.max_players == 12
    assert config.log_level == "DEBUG"
    assert config.voting_duration == VOTING_DURATION


def test_load_config_empty_file(config_file):
    """Test that an empty YAML file gives the default config."""
    assert load_config_from_yaml(config_file("")) is default_config


def test_load_config_unknown_key_warns(config_file, caplog):
    """Test that unknown keys are logged and ignored."""
    path = config_file("llm_model: gpt-4\nvoting_duration: 20\n")
    
    with caplog.at_level(logging.WARNING):
        config = load_config_from_yaml(path)
    
    assert config.voting_duration == 20
    assert not hasattr(config, "llm_model")
    assert "Unknown config key 'llm_model'" in caplog.text


def test_load_config_missing_file(tmp_path):
    """Test a missing config file."""
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.yaml"))


def test_load_config_invalid_yaml(config_file):
    """Test a malformed config file."""
    with pytest.raises(yaml.YAMLError):
        load_config_from_yaml(config_file("day_phase_duration: [1, 2\n"))


def test_load_roster(roster_file):
    """Test loading players from YAML."""
    path = roster_file(
        "- {id: 1, name: Alice, role: villager}\n"
        "- {id: 2, name: Bob, role: Serial Killer, alive: false, revealed: true}\n"
        "- {name: Carol, role: MAFIA}\n"
    )
    
    players = load_roster_from_yaml(path)
    
    assert [p.id for p in players] == ["1", "2", "3"]
    assert [p.role for p in players] == [Role.VILLAGER, Role.SERIAL_KILLER, Role.MAFIA]
    assert players[0].is_alive
    assert not players[1].is_alive
    assert players[1].is_revealed
    assert players[2].name == "Carol"


def test_load_roster_keeps_unknown_roles(roster_file):
    """Test that unrecognized role names survive loading."""
    players = load_roster_from_yaml(roster_file("- {id: a, name: Dan, role: werewolf}\n"))
    
    assert players[0].role == "werewolf"
    assert not players[0].has_known_role


def test_load_roster_rejects_bad_shape(roster_file):
    """Test rosters that are not a list of players."""
    with pytest.raises(ValueError):
        load_roster_from_yaml(roster_file("players: 3\n"))
    
    with pytest.raises(ValueError):
        load_roster_from_yaml(roster_file("- {id: 1, name: Alice}\n"))


def test_load_roster_empty(roster_file):
    """Test an empty roster file."""
    assert load_roster_from_yaml(roster_file("")) == []


def test_load_config_ignores_non_field_keys(config_file, caplog):
    """Test that keys naming methods or properties are not applied."""
    path = config_file("phase_duration: 5\nvoting_duration: 25\n")
    
    with caplog.at_level(logging.WARNING):
        config = load_config_from_yaml(path)
    
    assert config.phase_duration(GamePhase.VOTING) == 25
    assert config.phase_duration(GamePhase.DAY) == DAY_PHASE_DURATION
    assert "Unknown config key 'phase_duration'" in caplog.text


def test_load_config_rejects_non_mapping(config_file):
    """Test a config file whose top level is a list."""
    with pytest.raises(ValueError):
        load_config_from_yaml(config_file("- 1\n- 2\n"))


def test_load_config_rejects_wrong_types(config_file):
    """Test values that do not match the setting's type."""
    with pytest.raises(ValueError):
        load_config_from_yaml(config_file("day_phase_duration: soon\n"))
    
    with pytest.raises(ValueError):
        load_config_from_yaml(config_file("max_players: true\n"))


def test_load_config_leaves_default_untouched(config_file):
    """Test that loading a file does not modify the default config."""
    load_config_from_yaml(config_file("min_players: 6\n"))
    
    assert default_config.min_players == MIN_PLAYERS


def test_load_roster_rejects_non_bool_flags(roster_file):
    """Test that quoted or numeric flags are rejected."""
    with pytest.raises(ValueError):
        load_roster_from_yaml(roster_file('- {id: 1, role: villager, alive: "false"}\n'))
    
    with pytest.raises(ValueError):
        load_roster_from_yaml(roster_file("- {id: 1, role: villager, revealed: 1}\n"))


def test_load_roster_rejects_duplicate_ids(roster_file):
    """Test two players sharing an id."""
    path = roster_file(
        "- {id: 1, name: Alice, role: villager}\n"
        "- {id: '1', name: Bob, role: mafia}\n"
    )
    
    with pytest.raises(ValueError, match="Duplicate player id"):
        load_roster_from_yaml(path)
