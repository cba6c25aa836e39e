"""Infrastructure repositories module."""
from .match_repository import MatchRepository, parse_match, parse_matches
from .summoner_repository import SummonerRepository

__all__ = [
    'MatchRepository',
    'SummonerRepository',
    'parse_match',
    'parse_matches',
]
