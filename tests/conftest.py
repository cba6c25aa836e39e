"""Shared fixtures: raw match-v5 builders, fake sleep and in-memory store."""
import itertools
from typing import List, Optional

import pytest

from infrastructure.repositories import parse_matches
from infrastructure.storage import InMemoryBlobStore


def raw_participant(
    puuid: str,
    *,
    team_id: int = 100,
    win: bool = True,
    champion: str = "Ahri",
    position: str = "MIDDLE",
    kills: int = 5,
    deaths: int = 2,
    assists: int = 7,
    vision: Optional[int] = 20,
    kp: Optional[float] = None,
    dmg: Optional[float] = None,
    name: Optional[str] = None,
    tag: str = "EUW",
) -> dict:
    p = {
        "puuid": puuid,
        "riotIdGameName": name if name is not None else puuid.title(),
        "riotIdTagline": tag,
        "teamId": team_id,
        "teamPosition": position,
        "championName": champion,
        "win": win,
        "kills": kills,
        "deaths": deaths,
        "assists": assists,
    }
    if vision is not None:
        p["visionScore"] = vision
    challenges = {}
    if kp is not None:
        challenges["killParticipation"] = kp
    if dmg is not None:
        challenges["teamDamagePercentage"] = dmg
    if challenges:
        p["challenges"] = challenges
    return p


def raw_match(
    match_id: str,
    participants: List[dict],
    *,
    queue_id: int = 420,
    duration: int = 1800,
    creation: int = 1_700_000_000_000,
    version: str = "14.3.555.1234",
) -> dict:
    return {
        "metadata": {"matchId": match_id, "participants": [p["puuid"] for p in participants]},
        "info": {
            "queueId": queue_id,
            "gameCreation": creation,
            "gameEndTimestamp": creation + duration * 1000,
            "gameDuration": duration,
            "gameVersion": version,
            "participants": participants,
        },
    }


class RecordingSleep:
    """Stands in for ``asyncio.sleep``; records seconds instead of waiting."""

    def __init__(self) -> None:
        self.calls: List[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def make_participant():
    return raw_participant


@pytest.fixture
def make_match():
    return raw_match


@pytest.fixture
def parse():
    return parse_matches


@pytest.fixture
def sleep_recorder():
    return RecordingSleep()


@pytest.fixture
def store():
    return InMemoryBlobStore()


@pytest.fixture
def clock():
    """Strictly increasing fake epoch-ms clock."""
    counter = itertools.count(1_700_000_000_000, 1000)
    return lambda: next(counter)
