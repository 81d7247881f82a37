"""
Pytest configuration for basketball-stat tests.

Provides builders for raw game payloads and an in-memory season loader,
so no test touches the network.
"""

import asyncio

import pytest

from basketball_stat.core.models import GameRecord
from basketball_stat.core.types import TEAM_BLACK, TEAM_RED
from basketball_stat.providers.base import (
    ConfigFetchError,
    GameFetchError,
    SeasonLoaderProtocol,
)


def player(name, team=TEAM_RED, *, number="0", score=0, plus_minus=0,
           total_time=600, current_time=0, fouls=0):
    return {
        "name": name,
        "number": number,
        "team": team,
        "score": score,
        "plusMinus": plus_minus,
        "totalTime": total_time,
        "currentTime": current_time,
        "fouls": fouls,
    }


def payload(players, red=0, black=0):
    return {"game": [{"players": players, "teamScores": {TEAM_RED: red, TEAM_BLACK: black}}]}


class FakeLoader(SeasonLoaderProtocol):
    """In-memory loader; per-year configs, per-date payloads, failures, and gates."""

    loader_name = "fake"

    def __init__(self, config=None, payloads=None, *, failing=(), config_error=False):
        self.config = config if config is not None else {}
        self.payloads = payloads or {}
        self.failing = set(failing)
        self.config_error = config_error
        self.season_configs: dict = {}
        self.config_gate: asyncio.Event | None = None
        self.game_gates: dict[str, asyncio.Event] = {}
        self.requested: list[str] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return None

    async def fetch_season_config(self, year):
        if self.config_gate is not None:
            await self.config_gate.wait()
        if self.config_error:
            raise ConfigFetchError(year, "Failed to fetch config: HTTP 404")
        return self.season_configs.get(year, self.config)

    async def fetch_game_payload(self, year, date, filename):
        self.requested.append(date)
        await asyncio.sleep(0)
        if date in self.game_gates:
            await self.game_gates[date].wait()
        if date in self.failing:
            raise GameFetchError(date, f"Failed to fetch game data: HTTP 500 ({filename})")
        return self.payloads[date]


@pytest.fixture
def make_player():
    return player


@pytest.fixture
def make_payload():
    return payload


@pytest.fixture
def make_game():
    def _make(date, players, red=0, black=0):
        return GameRecord(date=date, data=payload(players, red, black))

    return _make


@pytest.fixture
def fake_loader_cls():
    return FakeLoader
