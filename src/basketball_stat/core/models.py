"""
Data models for season game records and derived player views.

GameRecord is the immutable unit produced by the loader; the pydantic
models are derived rows, serialized with camelCase keys for the
JavaScript front end that renders them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


# =============================================================================
# Loader Records
# =============================================================================


@dataclass(frozen=True)
class GameRecord:
    """
    One game's date plus its raw payload, or the reason it failed.

    Attributes:
        date: Season-local date key (ISO YYYY-MM-DD sorts correctly)
        data: Raw game payload as decoded from JSON, None if the fetch failed
        error: Failure message when data is None
    """

    date: str
    data: Optional[dict[str, Any]]
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.data is not None


# =============================================================================
# Derived Views
# =============================================================================


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class PlayerSeasonAggregate(_CamelModel):
    """Season summary row for one player (keyed by name)."""

    name: str
    number: str
    games_played: int
    total_points: int | float
    avg_points: float
    avg_plus_minus: float
    avg_play_time: int  # minutes
    total_fouls: int | float
    avg_fouls: float
    wins: int
    losses: int
    win_rate: float


class PlayerHistoryEntry(_CamelModel):
    """One game row in a player's season history."""

    date: str
    number: Any
    team: Any = None
    points: int | float = 0
    plus_minus: int | float = 0
    play_time: int = 0  # minutes
    fouls: int | float = 0
    result: str
