"""
Game configuration and constants.
"""

from dataclasses import dataclass
from enum import Enum


# Player limits
MIN_PLAYERS = 4
MAX_PLAYERS = 16

# Phase durations in seconds (consumed by the session scheduler)
DAY_PHASE_DURATION = 120
NIGHT_PHASE_DURATION = 30
DISCUSSION_DURATION = 60
VOTING_DURATION = 30


class GamePhase(Enum):
    """Timed game phases."""
    DAY = "day"
    NIGHT = "night"
    DISCUSSION = "discussion"
    VOTING = "voting"


@dataclass
class GameConfig:
    """Configuration for game parameters."""
    
    # Player limits
    min_players: int = MIN_PLAYERS
    max_players: int = MAX_PLAYERS
    
    # Phase durations (seconds)
    day_phase_duration: int = DAY_PHASE_DURATION
    night_phase_duration: int = NIGHT_PHASE_DURATION
    discussion_duration: int = DISCUSSION_DURATION
    voting_duration: int = VOTING_DURATION
    
    log_level: str = "INFO"
    
    def phase_duration(self, phase: GamePhase) -> int:
        """Get the duration of a phase in seconds."""
        durations = {
            GamePhase.DAY: self.day_phase_duration,
            GamePhase.NIGHT: self.night_phase_duration,
            GamePhase.DISCUSSION: self.discussion_duration,
            GamePhase.VOTING: self.voting_duration,
        }
        return durations[phase]


# Default configuration instance
default_config = GameConfig()
