"""
Role definitions and abilities for the Mafia game.

The registry is built once at import time and exposed read-only.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional

from .exceptions import RoleAssignmentError, RoleConfigError, UnknownRoleError
from ..config.game_config import GameConfig, default_config


class Faction(Enum):
    """Win-condition group a role belongs to."""
    VILLAGE = "village"  # Win by eliminating all Mafia
    MAFIA = "mafia"  # Win by equaling or outnumbering Village
    NEUTRAL = "neutral"  # Special win conditions


class Role(Enum):
    """Player role types."""
    VILLAGER = "villager"
    MAFIA = "mafia"
    DOCTOR = "doctor"
    DETECTIVE = "detective"
    JESTER = "jester"
    SERIAL_KILLER = "serial_killer"
    LOVER = "lover"
    BODYGUARD = "bodyguard"
    WITCH = "witch"
    ACCOUNTANT = "accountant"


class NightAbility(Enum):
    """Night ability labels. Resolution happens outside this package."""
    KILL = "Kill"
    PROTECT = "Protect"
    INVESTIGATE = "Investigate"
    GUARD = "Guard"
    POTION = "Potion"
    COUNT = "Count"


@dataclass(frozen=True)
class RoleConfig:
    """Static configuration of a single role."""
    name: str
    faction: Faction
    description: str
    can_vote_during_day: bool = True
    can_vote_to_eliminate: bool = True
    has_night_ability: bool = False
    night_ability_name: Optional[NightAbility] = None
    max_count: Optional[int] = 1  # None means unbounded
    is_visible: bool = False

    def __post_init__(self):
        if self.has_night_ability != (self.night_ability_name is not None):
            raise RoleConfigError(
                self.name,
                f"Role {self.name} must name a night ability if and only if it has one"
            )
        if self.max_count is not None and self.max_count < 1:
            raise RoleConfigError(self.name, f"Role {self.name} has max_count {self.max_count}")

    @property
    def is_unique(self) -> bool:
        """Check if at most one player may hold this role."""
        return self.max_count == 1


ROLE_CONFIGS: Mapping[Role, RoleConfig] = MappingProxyType({
    Role.VILLAGER: RoleConfig(
        name="Villager",
        faction=Faction.VILLAGE,
        description="A regular villager with no special abilities. Vote during the day to eliminate suspects.",
        max_count=None,
        is_visible=True,
    ),
    Role.MAFIA: RoleConfig(
        name="Mafia",
        faction=Faction.MAFIA,
        description="Member of the Mafia. Eliminate villagers at night. Know other Mafia members.",
        has_night_ability=True,
        night_ability_name=NightAbility.KILL,
        max_count=None,
    ),
    Role.DOCTOR: RoleConfig(
        name="Doctor",
        faction=Faction.VILLAGE,
        description="Protects one player each night from elimination. Cannot protect self.",
        has_night_ability=True,
        night_ability_name=NightAbility.PROTECT,
    ),
    Role.DETECTIVE: RoleConfig(
        name="Detective",
        faction=Faction.VILLAGE,
        description="Investigates one player each night to learn their alignment (Village/Mafia/Neutral).",
        has_night_ability=True,
        night_ability_name=NightAbility.INVESTIGATE,
    ),
    Role.JESTER: RoleConfig(
        name="Jester",
        faction=Faction.NEUTRAL,
        description="Wins alone by getting voted out during the day phase.",
    ),
    Role.SERIAL_KILLER: RoleConfig(
        name="Serial Killer",
        faction=Faction.NEUTRAL,
        description="Eliminates one player each night. Wins if they are the last player alive.",
        has_night_ability=True,
        night_ability_name=NightAbility.KILL,
    ),
    Role.LOVER: RoleConfig(
        name="Lover",
        faction=Faction.VILLAGE,
        description="Paired with another player. If one lover dies, the other dies too.",
        max_count=2,
    ),
    Role.BODYGUARD: RoleConfig(
        name="Bodyguard",
        faction=Faction.VILLAGE,
        description="Protects one player each night, blocking their special abilities as well.",
        has_night_ability=True,
        night_ability_name=NightAbility.GUARD,
    ),
    Role.WITCH: RoleConfig(
        name="Witch",
        faction=Faction.VILLAGE,
        description="Has two potions: one to save and one to kill. Can use during night.",
        has_night_ability=True,
        night_ability_name=NightAbility.POTION,
    ),
    Role.ACCOUNTANT: RoleConfig(
        name="Accountant",
        faction=Faction.VILLAGE,
        description="Each night, learns how many Mafia members remain alive.",
        has_night_ability=True,
        night_ability_name=NightAbility.COUNT,
    ),
})


def is_role(value: Any) -> bool:
    """Check if a value is a role known to the registry."""
    return isinstance(value, Role) and value in ROLE_CONFIGS


def get_role_config(role: Role) -> RoleConfig:
    """
    Get the configuration for a role.

    Raises:
        UnknownRoleError: If the value is not a Role
    """
    if not is_role(role):
        raise UnknownRoleError(role)
    return ROLE_CONFIGS[role]


def get_faction(role: Role) -> Faction:
    """Get the faction a role belongs to."""
    return get_role_config(role).faction


def can_perform_night_action(role: Role) -> bool:
    """Check if a role has a night phase action."""
    return get_role_config(role).has_night_ability


def roles_by_faction(faction: Faction) -> FrozenSet[Role]:
    """Get all roles belonging to a faction."""
    return frozenset(role for role, config in ROLE_CONFIGS.items() if config.faction == faction)


def parse_role(value: Any) -> Role:
    """
    Resolve a role from a Role, its value ("serial_killer") or its display
    name ("Serial Killer"). Matching is case-insensitive.

    Raises:
        UnknownRoleError: If nothing matches
    """
    if isinstance(value, Role):
        return value
    if not isinstance(value, str):
        raise UnknownRoleError(value)

    key = value.strip().lower()
    for role, config in ROLE_CONFIGS.items():
        if key in (role.value, role.name.lower(), config.name.lower()):
            return role
    raise UnknownRoleError(value)


def validate_role_assignment(roles: Iterable[Role], config: GameConfig = default_config) -> None:
    """
    Check that a list of assigned roles can form a legal game: the player
    count lies within the configured limits and no role exceeds its max_count.

    Raises:
        RoleAssignmentError: Listing every violation found
    """
    roles = list(roles)
    violations: List[str] = []

    if len(roles) < config.min_players:
        violations.append(f"At least {config.min_players} players are required, got {len(roles)}")
    if len(roles) > config.max_players:
        violations.append(f"At most {config.max_players} players are allowed, got {len(roles)}")

    counts = Counter(roles)
    for role, count in counts.items():
        if not is_role(role):
            violations.append(f"Unknown role: {role!r}")
            continue
        role_config = ROLE_CONFIGS[role]
        if role_config.max_count is not None and count > role_config.max_count:
            violations.append(
                f"{role_config.name} may be held by at most {role_config.max_count} "
                f"player(s), got {count}"
            )

    if violations:
        raise RoleAssignmentError(violations)
