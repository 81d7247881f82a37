"""
Core module for basketball-stat.

This module provides the foundational components:
- Configuration management (config.py)
- Data models (models.py)
- Team labels and result markers (types.py)
- Shared HTTP client infrastructure (http.py)

Usage:
    from basketball_stat.core import Settings, get_settings
    from basketball_stat.core import GameRecord, PlayerSeasonAggregate
    from basketball_stat.core.http import BaseApiClient, ExternalAPIError
"""

# Configuration
from .config import Settings, get_settings

# Types
from .types import DEFAULT_TEAMS, TEAM_BLACK, TEAM_RED, GameResult

# Models
from .models import GameRecord, PlayerHistoryEntry, PlayerSeasonAggregate

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Types
    "DEFAULT_TEAMS",
    "TEAM_RED",
    "TEAM_BLACK",
    "GameResult",
    # Models
    "GameRecord",
    "PlayerHistoryEntry",
    "PlayerSeasonAggregate",
]
