"""
Stateful services for basketball-stat.

Usage:
    from basketball_stat.providers import get_loader
    from basketball_stat.services import SeasonStore

    async with get_loader() as loader:
        store = SeasonStore(loader)
        await store.load_year_data(2025)
        for row in store.player_annual_stats:
            print(row.name, row.total_points)
"""

from .season import SeasonStore

__all__ = ["SeasonStore"]
