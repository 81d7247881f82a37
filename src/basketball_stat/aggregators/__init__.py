"""
Season statistics aggregators.

These aggregators turn the raw game records of a season into derived
views: a per-player season summary table and per-player game history.

Design: pure functions of the game records, no I/O.
"""

from .season import (
    compute_player_history,
    compute_season_aggregates,
    determine_winning_team,
    format_numbers,
    play_time_seconds,
    round_half_up,
)

__all__ = [
    "compute_player_history",
    "compute_season_aggregates",
    "determine_winning_team",
    "format_numbers",
    "play_time_seconds",
    "round_half_up",
]
