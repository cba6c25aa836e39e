"""Participant entity representing a player in a match."""
from dataclasses import dataclass
from typing import Optional
from ..enums import Role


@dataclass(frozen=True)
class Participant:
    """One competitor's line in a match record."""

    # Identity
    puuid: str
    riot_id_game_name: str
    riot_id_tagline: str

    # Match context
    team_id: int  # 100 = blue, 200 = red
    team_position: Role
    champion_name: str

    # Match outcome
    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    vision_score: int = 0

    # From the ``challenges`` block; missing on some older or remade games
    kill_participation: Optional[float] = None
    team_damage_percentage: Optional[float] = None

    @property
    def display_name(self) -> str:
        return self.riot_id_game_name or "Unknown"
