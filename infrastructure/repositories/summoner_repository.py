"""Summoner repository implementation."""
import logging
from typing import List, Optional

from domain.entities import Account, LeagueEntry, Summoner
from domain.enums import QueueType, Rank, Region
from domain.exceptions import DuoInsightsError, RiotAPIError
from domain.interfaces import ISummonerRepository
from infrastructure.api import RiotAPIClient

logger = logging.getLogger(__name__)


class SummonerRepository(ISummonerRepository):
    """Repository for account and summoner data using Riot API."""

    def __init__(self, api_client: RiotAPIClient):
        """
        Initialize summoner repository.

        Args:
            api_client: Riot API client instance
        """
        self.api_client = api_client

    async def get_account(self, region: Region, game_name: str, tag_line: str) -> Account:
        """
        Resolve ``game_name#tag_line`` to an account.

        Raises:
            RiotAPIError: 404 when the Riot ID does not exist, or a response without a puuid.
        """
        data = await self.api_client.get_account_by_riot_id(region, game_name, tag_line)
        if not data or not data.get('puuid'):
            raise RiotAPIError(404, data)

        return Account(
            puuid=data['puuid'],
            game_name=data.get('gameName') or game_name,
            tag_line=data.get('tagLine') or tag_line,
        )

    async def get_summoner(self, region: Region, puuid: str) -> Optional[Summoner]:
        """
        Get summoner profile plus ranked entries.

        Returns:
            Summoner entity or None if the platform returned nothing
        """
        summoner_data = await self.api_client.get_summoner_by_puuid(region, puuid)
        if not summoner_data:
            return None

        return Summoner(
            puuid=summoner_data.get('puuid', puuid),
            profile_icon_id=summoner_data.get('profileIconId', 0),
            summoner_level=summoner_data.get('summonerLevel', 0),
            league_entries=tuple(await self.get_league_entries(region, puuid)),
        )

    async def get_league_entries(self, region: Region, puuid: str) -> List[LeagueEntry]:
        """Ranked entries for the two tracked queues; an unavailable league API yields none."""
        try:
            entries = await self.api_client.get_league_entries_by_puuid(region, puuid)
        except DuoInsightsError as e:
            logger.warning(f"League entries unavailable for {puuid[:8]}...: {e}")
            return []

        tracked = {q.api_queue_name for q in QueueType.ranked_queues()}
        result = []
        for entry in entries:
            queue_type = entry.get('queueType')
            if queue_type not in tracked:
                continue
            result.append(LeagueEntry(
                queue_type=queue_type,
                tier=Rank.from_string(entry.get('tier')),
                division=entry.get('rank', ''),
                league_points=entry.get('leaguePoints', 0),
                wins=entry.get('wins', 0),
                losses=entry.get('losses', 0),
            ))
        return result
