"""Repository interfaces for data access."""
from abc import ABC, abstractmethod
from typing import Any, Optional, List
from ..entities import Account, Match, Summoner
from ..enums import Region


class IMatchRepository(ABC):
    """Interface for match data."""

    @abstractmethod
    async def get_match_ids(self, region: Region, puuid: str, count: int) -> List[str]:
        """Get the most recent ranked match IDs for a player, newest first."""
        pass

    @abstractmethod
    async def get_raw_match(self, region: Region, match_id: str) -> dict:
        """Get one match body exactly as the API returned it."""
        pass


class ISummonerRepository(ABC):
    """Interface for account and summoner data."""

    @abstractmethod
    async def get_account(self, region: Region, game_name: str, tag_line: str) -> Account:
        """Resolve a Riot ID to its account."""
        pass

    @abstractmethod
    async def get_summoner(self, region: Region, puuid: str) -> Optional[Summoner]:
        """Get level, icon and ranked standing for a puuid."""
        pass


class IBlobStore(ABC):
    """Flat, namespaced JSON store (``jobs/<id>.json``, ``matches/<id>.json``)."""

    backend: str = "abstract"

    @abstractmethod
    async def write_json(self, key: str, data: Any) -> None:
        pass

    @abstractmethod
    async def read_json(self, key: str) -> Optional[Any]:
        """Return the stored value or None when the key does not exist."""
        pass

    @abstractmethod
    async def list_keys(self, prefix: str) -> List[str]:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        pass
