"""
Pytest fixtures for rules kernel tests.
"""

import pytest
from typing import List

from mafia_rules.core import Player, Role


def _make_players(*roles, dead=()) -> List[Player]:
    """Build a roster with ids "1", "2", ... in the given role order."""
    players = []
    for index, role in enumerate(roles, start=1):
        player_id = str(index)
        players.append(Player(
            id=player_id,
            name=f"Player {player_id}",
            role=role,
            is_alive=player_id not in dead,
        ))
    return players


@pytest.fixture
def make_players():
    """Factory for rosters: make_players(Role.VILLAGER, Role.MAFIA, dead={"2"})."""
    return _make_players


@pytest.fixture
def full_roster() -> List[Player]:
    """An eight player game using most of the role set."""
    return _make_players(
        Role.VILLAGER,
        Role.VILLAGER,
        Role.DOCTOR,
        Role.DETECTIVE,
        Role.MAFIA,
        Role.MAFIA,
        Role.JESTER,
        Role.SERIAL_KILLER,
    )


@pytest.fixture
def roster_file(tmp_path):
    """Write a YAML roster and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "roster.yaml"
        path.write_text(content)
        return str(path)
    return _write


@pytest.fixture
def config_file(tmp_path):
    """Write a YAML config and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "config.yaml"
        path.write_text(content)
        return str(path)
    return _write
