"""
Command-line front end for the Mafia rules kernel.
"""

import argparse
import logging
import sys
from typing import List, Optional

import yaml

from mafia_rules.core import (
    Elimination,
    EliminationCause,
    Faction,
    GameEndResult,
    Player,
    Role,
    ROLE_CONFIGS,
    check_game_end,
    roles_by_faction,
)
from mafia_rules.config import GameConfig, GamePhase, load_config, load_roster_from_yaml

logger = logging.getLogger("mafia_rules")


def print_roles(faction: Optional[Faction] = None) -> None:
    """Print the role registry, optionally limited to one faction."""
    roles = roles_by_faction(faction) if faction else set(ROLE_CONFIGS)

    print("=" * 60)
    print("ROLES" if faction is None else f"ROLES - {faction.value.title()}")
    print("=" * 60)
    # Keep declaration order
    for role in [r for r in Role if r in roles]:
        config = ROLE_CONFIGS[role]
        ability = config.night_ability_name.value if config.night_ability_name else "-"
        max_count = "unlimited" if config.max_count is None else str(config.max_count)
        visible = " (public)" if config.is_visible else ""
        print(f"{config.name:<14} {config.faction.value:<8} night: {ability:<12} max: {max_count}{visible}")
        print(f"    {config.description}")


def print_phases(config: GameConfig) -> None:
    """Print phase durations and player limits."""
    print("=" * 60)
    print("PHASES")
    print("=" * 60)
    for phase in GamePhase:
        print(f"{phase.value:<12} {config.phase_duration(phase)}s")
    print(f"\nPlayers: {config.min_players}-{config.max_players}")


def print_verdict(players: List[Player], result: GameEndResult) -> None:
    """Print the outcome of a game end check."""
    alive = [p for p in players if p.is_alive]

    print("=" * 60)
    if result.has_ended:
        print(f"GAME OVER - {result.winning_faction.value.title()} WIN! ({result.reason})")
    else:
        print("Game continues")
    print("=" * 60)
    print(f"Alive: {len(alive)} / {len(players)}")
    for player in alive:
        print(f"  • {player}")


def _find_elimination(players: List[Player], player_id: str, cause: str) -> Elimination:
    for player in players:
        if player.id == player_id:
            return Elimination(player_id=player.id, role=player.role, cause=EliminationCause(cause))
    raise ValueError(f"Player {player_id} is not in the roster")


def check_roster(roster_path: str, last_eliminated: Optional[str] = None,
                 cause: str = EliminationCause.DAY_VOTE.value) -> GameEndResult:
    """Load a roster file and check whether the game has ended."""
    players = load_roster_from_yaml(roster_path)
    last_elimination = _find_elimination(players, last_eliminated, cause) if last_eliminated else None

    result = check_game_end(players, last_elimination=last_elimination)
    for player_id in result.unclassified_player_ids:
        logger.warning("Player %s has an unrecognized role and was not counted", player_id)
    logger.info("Checked %d players: has_ended=%s winner=%s", len(players), result.has_ended,
                result.winning_faction.value if result.winning_faction else None)

    print_verdict(players, result)
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect Mafia roles and check win conditions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py roles                                 # List every role
  python main.py roles --faction neutral               # List neutral roles
  python main.py --config configs/fast.yaml phases     # Show phase durations
  python main.py check roster.yaml                     # Check a roster
  python main.py check roster.yaml --last-eliminated 4 --cause day_vote
        """
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file (default: use default config)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    roles_parser = subparsers.add_parser("roles", help="List roles in the registry")
    roles_parser.add_argument(
        "--faction",
        "-f",
        choices=[f.value for f in Faction],
        default=None,
        help="Only list roles of this faction"
    )

    subparsers.add_parser("phases", help="Show phase durations and player limits")

    check_parser = subparsers.add_parser("check", help="Check whether a roster has reached a win condition")
    check_parser.add_argument("roster", help="Path to YAML roster file")
    check_parser.add_argument(
        "--last-eliminated",
        "-e",
        type=str,
        default=None,
        help="Id of the player whose elimination triggered this check"
    )
    check_parser.add_argument(
        "--cause",
        choices=[c.value for c in EliminationCause],
        default=None,
        help="How the last player was eliminated (default: day_vote). Requires --last-eliminated"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the command line. Returns 1 when a config or roster file cannot be used."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "check" and args.cause is not None and args.last_eliminated is None:
        parser.error("--cause requires --last-eliminated")

    try:
        config = load_config(args.config)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("Cannot load config: %s", e)
        return 1

    logging.basicConfig(
        level=getattr(logging, str(config.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "roles":
        print_roles(Faction(args.faction) if args.faction else None)
    elif args.command == "phases":
        print_phases(config)
    elif args.command == "check":
        try:
            check_roster(args.roster, args.last_eliminated, args.cause or EliminationCause.DAY_VOTE.value)
        except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
            logger.error("Cannot check roster: %s", e)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
