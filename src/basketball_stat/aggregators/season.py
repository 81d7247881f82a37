"""
Season statistics aggregator.

Turns the game records of one season into per-player season summaries
and per-player game histories. The game files hold box scores for a
two-team pickup run, so every function here is a pure function of the
records it is given.

Identity is the player's name: the same person may wear different
jersey numbers on different nights, and all of them are collected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.models import GameRecord, PlayerHistoryEntry, PlayerSeasonAggregate
from ..core.types import DEFAULT_TEAMS, GameResult

logger = logging.getLogger(__name__)


# =============================================================================
# Field helpers
# =============================================================================


def _number_or_zero(value: Any) -> float | int:
    """Coerce a raw stat value to a number, falling back to 0."""
    if not value or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value
    try:
        return float(value)
    except (ValueError, TypeError):
        return 0


def round_half_up(value: float, places: int = 1) -> float:
    """Round to ``places`` decimals, halves away from zero.

    Works on the decimal text of the value, so 0.25 rounds to 0.3 instead
    of the binary-float 0.2.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def extract_game_entry(payload: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return the single game entry of a raw payload.

    Game files wrap the entry as ``{"game": [{...}]}``; a bare entry is
    accepted too. Anything else yields an empty mapping.
    """
    if not isinstance(payload, Mapping):
        return {}
    if "players" in payload:
        return payload
    games = payload.get("game")
    if isinstance(games, list) and games and isinstance(games[0], Mapping):
        return games[0]
    return {}


def play_time_seconds(entry: Mapping[str, Any]) -> float | int:
    """Seconds on court: finished stints plus the running one."""
    return _number_or_zero(entry.get("totalTime")) + _number_or_zero(entry.get("currentTime"))


def determine_winning_team(
    team_scores: Optional[Mapping[str, Any]],
    teams: Sequence[str] = DEFAULT_TEAMS,
) -> Optional[str]:
    """Team with the strictly higher score, None on a tie."""
    team_scores = team_scores or {}
    first, second = teams
    first_score = _number_or_zero(team_scores.get(first))
    second_score = _number_or_zero(team_scores.get(second))
    if first_score > second_score:
        return first
    if second_score > first_score:
        return second
    return None


def _number_sort_key(number: str) -> tuple[int, float, str]:
    try:
        return (0, float(number), number)
    except ValueError:
        return (1, 0.0, number)


def format_numbers(numbers: Iterable[Any]) -> str:
    """Distinct jersey numbers, ascending numerically, comma-joined."""
    distinct = dict.fromkeys(str(n).strip() for n in numbers if n is not None and str(n).strip())
    return ", ".join(sorted(distinct, key=_number_sort_key))


# =============================================================================
# Season summary
# =============================================================================


@dataclass
class _PlayerTotals:
    name: str
    numbers: dict[str, None] = field(default_factory=dict)
    games_played: int = 0
    total_points: float = 0
    total_plus_minus: float = 0
    total_play_time: float = 0
    total_fouls: float = 0
    wins: int = 0
    losses: int = 0

    def to_aggregate(self) -> PlayerSeasonAggregate:
        games = self.games_played
        return PlayerSeasonAggregate(
            name=self.name,
            number=format_numbers(self.numbers),
            games_played=games,
            total_points=self.total_points,
            avg_points=round_half_up(self.total_points / games),
            avg_plus_minus=round_half_up(self.total_plus_minus / games),
            avg_play_time=int(round_half_up(self.total_play_time / games / 60, 0)),
            total_fouls=self.total_fouls,
            avg_fouls=round_half_up(self.total_fouls / games),
            wins=self.wins,
            losses=self.losses,
            # Denominator is games played, so DNPs and ties dilute the rate
            win_rate=round_half_up(self.wins / games * 100) if games > 0 else 0.0,
        )


def compute_season_aggregates(
    games: Iterable[GameRecord],
    teams: Sequence[str] = DEFAULT_TEAMS,
) -> list[PlayerSeasonAggregate]:
    """Aggregate every player's season from the given game records.

    Args:
        games: Season game records; failed records (``data is None``) are skipped
        teams: The two team labels used in ``teamScores``

    Returns:
        One row per player name, sorted by total points descending. Ties
        keep the order in which the players first appeared.
    """
    totals: dict[str, _PlayerTotals] = {}

    for index, game in enumerate(games, start=1):
        if game.data is None:
            continue

        entry = extract_game_entry(game.data)
        players = entry.get("players") or []
        if not players:
            logger.warning(f"Game {index} ({game.date}) has no player data, skipping")
            continue

        winning_team = determine_winning_team(entry.get("teamScores"), teams)

        for player in players:
            name = player.get("name")
            if not name:
                logger.warning(f"Game {index} ({game.date}) has a player entry without a name")
                continue
            name = str(name)
            play_time = play_time_seconds(player)

            stats = totals.get(name)
            if stats is None:
                stats = totals[name] = _PlayerTotals(name=name)

            number = player.get("number")
            if number is not None:
                stats.numbers[str(number).strip()] = None
            stats.games_played += 1
            stats.total_points += _number_or_zero(player.get("score"))
            stats.total_plus_minus += _number_or_zero(player.get("plusMinus"))
            stats.total_play_time += play_time
            stats.total_fouls += _number_or_zero(player.get("fouls"))

            # DNP players and tied games count toward neither column
            if play_time != 0 and winning_team:
                if player.get("team") == winning_team:
                    stats.wins += 1
                else:
                    stats.losses += 1

    rows = [stats.to_aggregate() for stats in totals.values()]
    rows.sort(key=lambda row: row.total_points, reverse=True)
    return rows


# =============================================================================
# Player history
# =============================================================================


def compute_player_history(
    games: Iterable[GameRecord],
    player_name: str,
    teams: Sequence[str] = DEFAULT_TEAMS,
) -> list[PlayerHistoryEntry]:
    """Game-by-game rows for one player, oldest first.

    Dates are compared as strings, so they must sort lexicographically
    (ISO ``YYYY-MM-DD``).
    """
    history: list[PlayerHistoryEntry] = []

    for game in games:
        if game.data is None:
            continue

        entry = extract_game_entry(game.data)
        players = entry.get("players") or []
        player = next((p for p in players if p.get("name") == player_name), None)
        if player is None:
            continue

        play_time = play_time_seconds(player)
        winning_team = determine_winning_team(entry.get("teamScores"), teams)

        result = GameResult.none
        if play_time != 0 and winning_team:
            result = GameResult.win if player.get("team") == winning_team else GameResult.loss

        history.append(
            PlayerHistoryEntry(
                date=game.date,
                number=player.get("number"),
                team=player.get("team"),
                points=_number_or_zero(player.get("score")),
                plus_minus=_number_or_zero(player.get("plusMinus")),
                play_time=int(round_half_up(play_time / 60, 0)),
                fouls=_number_or_zero(player.get("fouls")),
                result=result.value,
            )
        )

    history.sort(key=lambda row: row.date)
    return history
