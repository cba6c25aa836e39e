"""Domain interfaces."""
from .repository import IBlobStore, IMatchRepository, ISummonerRepository
from .insights import IInsightsGenerator

__all__ = [
    'IBlobStore',
    'IMatchRepository',
    'ISummonerRepository',
    'IInsightsGenerator',
]
