"""
Core types and constants for basketball-stat.

The data files label the two sides of every pickup game with fixed
team names; result markers mirror what the history view shows.
"""

from enum import Enum


TEAM_RED = "红队"
TEAM_BLACK = "黑队"

DEFAULT_TEAMS: tuple[str, str] = (TEAM_RED, TEAM_BLACK)


class GameResult(str, Enum):
    """Per-game result marker for a single player."""

    win = "胜"
    loss = "负"
    none = "-"
