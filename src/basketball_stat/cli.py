#!/usr/bin/env python3
"""
Command-line interface for season statistics.

Usage:
    basketball-stat summary --year 2025            # Season leaderboard
    basketball-stat history --year 2025 --player 张三
    basketball-stat games --year 2025              # Loaded and failed game files
    basketball-stat summary --year 2025 --json
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Optional

from .providers import ConfigFetchError, get_loader
from .services import SeasonStore

logger = logging.getLogger("basketball_stat.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def load_store(year: int) -> SeasonStore:
    """Load a season into a fresh store."""
    async with get_loader() as loader:
        store = SeasonStore(loader)
        await store.load_year_data(year)
    return store


def _fmt(value: float) -> str:
    return f"{value:g}"


def cmd_summary(args: argparse.Namespace) -> int:
    """Print the season leaderboard."""
    try:
        store = asyncio.run(load_store(args.year))
    except ConfigFetchError as e:
        logger.error(f"Could not load season {args.year}: {e}")
        return 1

    rows = store.player_annual_stats
    if args.json:
        print(json.dumps([row.model_dump(by_alias=True) for row in rows], ensure_ascii=False, indent=2))
        return 0

    print(f"\nSeason {args.year} ({store.total_games} games)")
    print("=" * 96)
    print(
        f"{'Player':<12} {'No.':<10} {'GP':>3} {'PTS':>5} {'PPG':>5} {'+/-':>6}"
        f" {'MIN':>4} {'PF':>4} {'PFPG':>5} {'W':>3} {'L':>3} {'WIN%':>6}"
    )
    for row in rows:
        print(
            f"{row.name:<12} {row.number:<10} {row.games_played:>3} {_fmt(row.total_points):>5}"
            f" {row.avg_points:>5.1f} {row.avg_plus_minus:>6.1f} {row.avg_play_time:>4}"
            f" {_fmt(row.total_fouls):>4} {row.avg_fouls:>5.1f} {row.wins:>3} {row.losses:>3}"
            f" {row.win_rate:>6.1f}"
        )
    return 0


def cmd_history(args: argparse.Namespace) -> int:
    """Print one player's game-by-game history."""
    try:
        store = asyncio.run(load_store(args.year))
    except ConfigFetchError as e:
        logger.error(f"Could not load season {args.year}: {e}")
        return 1

    rows = store.get_player_history(args.player)
    if args.json:
        print(json.dumps([row.model_dump(by_alias=True) for row in rows], ensure_ascii=False, indent=2))
        return 0

    if not rows:
        print(f"No games found for {args.player} in {args.year}")
        return 0

    print(f"\n{args.player} - {args.year}")
    print("=" * 60)
    print(f"{'Date':<12} {'No.':<5} {'Team':<6} {'PTS':>4} {'+/-':>5} {'MIN':>4} {'PF':>3}  Result")
    for row in rows:
        print(
            f"{row.date:<12} {str(row.number):<5} {str(row.team or ''):<6} {_fmt(row.points):>4}"
            f" {_fmt(row.plus_minus):>5} {row.play_time:>4} {_fmt(row.fouls):>3}  {row.result}"
        )
    return 0


def cmd_games(args: argparse.Namespace) -> int:
    """List which game files loaded and which failed."""
    try:
        store = asyncio.run(load_store(args.year))
    except ConfigFetchError as e:
        logger.error(f"Could not load season {args.year}: {e}")
        return 1

    if args.json:
        print(json.dumps(
            {
                "loaded": [g.date for g in store.games_data],
                "failed": {g.date: g.error for g in store.failed_games},
            },
            ensure_ascii=False,
            indent=2,
        ))
        return 0

    print(f"\nSeason {args.year}: {store.total_games} loaded, {len(store.failed_games)} failed")
    for game in store.games_data:
        print(f"  {game.date}  {store.files_config.get(game.date, '')}")
    for game in store.failed_games:
        print(f"  {game.date}  FAILED: {game.error}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Basketball season statistics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # summary command
    summary_parser = subparsers.add_parser("summary", help="Season leaderboard")
    summary_parser.add_argument("--year", type=int, required=True, help="Season year")
    summary_parser.add_argument("--json", action="store_true", help="Output JSON")

    # history command
    history_parser = subparsers.add_parser("history", help="One player's games")
    history_parser.add_argument("--year", type=int, required=True, help="Season year")
    history_parser.add_argument("--player", required=True, help="Player name")
    history_parser.add_argument("--json", action="store_true", help="Output JSON")

    # games command
    games_parser = subparsers.add_parser("games", help="Loaded and failed game files")
    games_parser.add_argument("--year", type=int, required=True, help="Season year")
    games_parser.add_argument("--json", action="store_true", help="Output JSON")

    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    commands = {
        "summary": cmd_summary,
        "history": cmd_history,
        "games": cmd_games,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
