"""
Player class representing a game participant.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .roles import Faction, Role, get_faction, is_role


@dataclass
class Player:
    """
    Represents a player in the game.

    The role is normally a Role. Rosters built from external data may carry
    an unrecognized value, which the win-condition check reports instead of
    failing on.
    """
    id: str
    name: str
    role: Any
    is_alive: bool = True
    is_revealed: bool = False
    
    def __str__(self) -> str:
        role_name = self.role.value if isinstance(self.role, Role) else str(self.role)
        return f"Player {self.id} ({self.name}, {role_name})"
    
    @property
    def has_known_role(self) -> bool:
        """Check if the player's role is in the registry."""
        return is_role(self.role)
    
    @property
    def faction(self) -> Optional[Faction]:
        """Get the player's faction, or None for an unknown role."""
        if not self.has_known_role:
            return None
        return get_faction(self.role)
    
    def eliminate(self) -> None:
        """Mark player as eliminated."""
        self.is_alive = False
    
    def reveal(self) -> None:
        """Mark player's role as public."""
        self.is_revealed = True
