"""Infrastructure layer - API client, repositories and storage."""
from .api import RiotAPIClient, ConcurrencyLimiter, BackoffPolicy
from .repositories import MatchRepository, SummonerRepository
from .storage import InMemoryBlobStore, SQLiteBlobStore, create_blob_store

__all__ = [
    'RiotAPIClient',
    'ConcurrencyLimiter',
    'BackoffPolicy',
    'MatchRepository',
    'SummonerRepository',
    'InMemoryBlobStore',
    'SQLiteBlobStore',
    'create_blob_store',
]
