"""Rank tier enumeration."""
from enum import Enum
from typing import Optional


class Rank(Enum):
    """League of Legends rank tiers, lowest first."""

    IRON = "IRON"
    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    PLATINUM = "PLATINUM"
    EMERALD = "EMERALD"
    DIAMOND = "DIAMOND"
    MASTER = "MASTER"
    GRANDMASTER = "GRANDMASTER"
    CHALLENGER = "CHALLENGER"

    @classmethod
    def from_string(cls, rank_str: str | None) -> Optional['Rank']:
        if not rank_str:
            return None
        try:
            return cls[rank_str.strip().upper()]
        except KeyError:
            return None
