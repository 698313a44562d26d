"""
Win condition checking for the Mafia game.

check_game_end() is a pure function of a roster snapshot. Alive players are
tallied by faction and the ordered WIN_RULES are applied, first match wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .player import Player
from .roles import Faction, Role, get_faction, is_role


class EliminationCause(Enum):
    """How a player left the game."""
    DAY_VOTE = "day_vote"
    NIGHT_KILL = "night_kill"
    OTHER = "other"


@dataclass(frozen=True)
class Elimination:
    """The most recent elimination, as reported by the game session."""
    player_id: str
    role: Role
    cause: EliminationCause


@dataclass(frozen=True)
class FactionTally:
    """Alive players grouped by faction."""
    village: Tuple[Player, ...] = ()
    mafia: Tuple[Player, ...] = ()
    neutral: Tuple[Player, ...] = ()
    unclassified: Tuple[Player, ...] = ()  # Alive players with a role outside the registry

    @property
    def village_count(self) -> int:
        return len(self.village)

    @property
    def mafia_count(self) -> int:
        return len(self.mafia)

    @property
    def neutral_count(self) -> int:
        return len(self.neutral)


@dataclass(frozen=True)
class GameEndResult:
    """Result of a game end check."""
    has_ended: bool
    winning_faction: Optional[Faction] = None
    reason: str = ""  # Name of the rule that ended the game
    unclassified_player_ids: Tuple[str, ...] = ()


WinPredicate = Callable[[FactionTally, Optional[Elimination]], bool]


@dataclass(frozen=True)
class WinRule:
    """A single win condition: when the predicate holds, the faction wins."""
    name: str
    faction: Faction
    predicate: WinPredicate


def _mafia_majority(tally: FactionTally, last_elimination: Optional[Elimination]) -> bool:
    # Neutral survivors are not counted against the mafia
    return tally.mafia_count > 0 and tally.mafia_count >= tally.village_count


def _village_cleared(tally: FactionTally, last_elimination: Optional[Elimination]) -> bool:
    return tally.mafia_count == 0 and tally.village_count > 0


def _jester_voted_out(tally: FactionTally, last_elimination: Optional[Elimination]) -> bool:
    return (
        last_elimination is not None
        and last_elimination.role == Role.JESTER
        and last_elimination.cause == EliminationCause.DAY_VOTE
    )


WIN_RULES: Tuple[WinRule, ...] = (
    WinRule("mafia_majority", Faction.MAFIA, _mafia_majority),
    WinRule("village_cleared", Faction.VILLAGE, _village_cleared),
    WinRule("jester_voted_out", Faction.NEUTRAL, _jester_voted_out),
)


def tally_alive(players: Iterable[Player]) -> FactionTally:
    """Group alive players by faction. Dead players are skipped."""
    buckets = {
        Faction.VILLAGE: [],
        Faction.MAFIA: [],
        Faction.NEUTRAL: [],
    }
    unclassified: List[Player] = []

    for player in players:
        if not player.is_alive:
            continue
        if not is_role(player.role):
            unclassified.append(player)
            continue
        buckets[get_faction(player.role)].append(player)

    return FactionTally(
        village=tuple(buckets[Faction.VILLAGE]),
        mafia=tuple(buckets[Faction.MAFIA]),
        neutral=tuple(buckets[Faction.NEUTRAL]),
        unclassified=tuple(unclassified),
    )


def _matches_roster(players: Sequence[Player], elimination: Elimination) -> bool:
    """Check that the eliminated player is in the roster, dead, and holds the reported role."""
    return any(
        player.id == elimination.player_id
        and not player.is_alive
        and player.role == elimination.role
        for player in players
    )


def check_game_end(
    players: Sequence[Player],
    last_elimination: Optional[Elimination] = None,
    rules: Sequence[WinRule] = WIN_RULES,
) -> GameEndResult:
    """
    Check if the game has ended and which faction won.

    Args:
        players: Snapshot of the full roster, dead players included
        last_elimination: The elimination that triggered this check, if any.
            A Jester only wins when this reports them voted out during the day.
            A signal that disagrees with the roster (unknown id, player still
            alive, different role) is ignored.
        rules: Ordered win conditions, first match wins

    Returns:
        GameEndResult. Players whose role is not in the registry are left out
        of the tally and listed in unclassified_player_ids.
    """
    if last_elimination is not None and not _matches_roster(players, last_elimination):
        last_elimination = None

    tally = tally_alive(players)
    unclassified_ids = tuple(player.id for player in tally.unclassified)

    for rule in rules:
        if rule.predicate(tally, last_elimination):
            return GameEndResult(
                has_ended=True,
                winning_faction=rule.faction,
                reason=rule.name,
                unclassified_player_ids=unclassified_ids,
            )

    return GameEndResult(has_ended=False, unclassified_player_ids=unclassified_ids)
