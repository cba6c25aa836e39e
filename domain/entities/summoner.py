"""Account and summoner entities."""
from dataclasses import dataclass, field
from typing import Optional
from ..enums import Rank


@dataclass(frozen=True)
class Account:
    """Riot account: the stable puuid behind a ``name#tag`` Riot ID."""

    puuid: str
    game_name: str
    tag_line: str


@dataclass(frozen=True)
class LeagueEntry:
    """Ranked standing in one queue."""

    queue_type: str  # "RANKED_SOLO_5x5" or "RANKED_FLEX_SR"
    tier: Optional[Rank]
    division: str
    league_points: int = 0
    wins: int = 0
    losses: int = 0

    def to_dict(self) -> dict:
        return {
            'tier': self.tier.value if self.tier else None,
            'rank': self.division,
            'lp': self.league_points,
            'wins': self.wins,
            'losses': self.losses,
        }


@dataclass(frozen=True)
class Summoner:
    """League profile for a puuid on one platform."""

    puuid: str
    profile_icon_id: int
    summoner_level: int
    league_entries: tuple[LeagueEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'profile_icon_id': self.profile_icon_id,
            'summoner_level': self.summoner_level,
            'rank': {e.queue_type: e.to_dict() for e in self.league_entries},
        }
