"""Domain layer - Business entities, enums, interfaces and exceptions."""
from .entities import Account, Job, JobParams, JobResult, Match, Participant, Summoner
from .enums import JobStatus, QueueType, Rank, Region, Role
from .interfaces import IBlobStore, IInsightsGenerator, IMatchRepository, ISummonerRepository

__all__ = [
    # Entities
    'Account',
    'Job',
    'JobParams',
    'JobResult',
    'Match',
    'Participant',
    'Summoner',
    # Enums
    'JobStatus',
    'QueueType',
    'Rank',
    'Region',
    'Role',
    # Interfaces
    'IBlobStore',
    'IInsightsGenerator',
    'IMatchRepository',
    'ISummonerRepository',
]
