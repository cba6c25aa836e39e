"""Match repository implementation."""
import logging
from typing import Any, List, Optional

from domain.entities import Match, Participant
from domain.enums import Region, Role
from domain.interfaces import IMatchRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class MatchRepository(IMatchRepository):
    """Repository for match data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize match repository.

        Args:
            api_client: Riot API client instance, shared with every other
                repository of the same job so they draw from one limiter
        """
        self.api_client = api_client

    async def get_match_ids(self, region: Region, puuid: str, count: int) -> List[str]:
        """Get up to ``count`` recent ranked match IDs, newest first."""
        return await self.api_client.get_match_ids(region, puuid, count)

    async def get_raw_match(self, region: Region, match_id: str) -> dict:
        """Get the match-v5 body unchanged; stored as-is so later duo queries can re-parse it."""
        return await self.api_client.get_match(region, match_id)


def parse_match(data: dict) -> Match:
    """Parse raw match-v5 data into a Match entity."""
    metadata = data.get('metadata') or {}
    info = data.get('info') or {}

    participants = tuple(
        _parse_participant_data(p_data) for p_data in info.get('participants') or []
    )

    game_creation = info.get('gameCreation') or 0
    game_duration = info.get('gameDuration') or 0

    return Match(
        match_id=metadata.get('matchId') or '',
        queue_id=info.get('queueId') or 0,
        game_creation=game_creation,
        game_end_timestamp=info.get('gameEndTimestamp') or game_creation + game_duration * 1000,
        game_duration=game_duration,
        game_version=info.get('gameVersion') or '',
        participants=participants,
    )


def parse_matches(raw_matches: List[dict]) -> List[Match]:
    """Parse a stored match set, skipping records that are not match bodies."""
    matches = []
    for raw in raw_matches:
        if not isinstance(raw, dict) or 'info' not in raw:
            logger.warning("Skipping malformed match record")
            continue
        matches.append(parse_match(raw))
    return matches


def _parse_participant_data(p_data: dict) -> Participant:
    """Parse raw participant data into Participant entity."""
    challenges = p_data.get('challenges') or {}

    return Participant(
        puuid=p_data.get('puuid') or '',
        riot_id_game_name=p_data.get('riotIdGameName') or p_data.get('summonerName') or '',
        riot_id_tagline=p_data.get('riotIdTagline') or '',
        team_id=p_data.get('teamId') or 0,
        team_position=Role.from_string(p_data.get('teamPosition')),
        champion_name=p_data.get('championName') or '',
        # Game outcome
        win=bool(p_data.get('win', False)),
        kills=p_data.get('kills') or 0,
        deaths=p_data.get('deaths') or 0,
        assists=p_data.get('assists') or 0,
        # Vision
        vision_score=p_data.get('visionScore') or 0,
        # Challenges
        kill_participation=_optional_float(challenges.get('killParticipation')),
        team_damage_percentage=_optional_float(challenges.get('teamDamagePercentage')),
    )


def _optional_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
