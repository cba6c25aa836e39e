"""Infrastructure API module."""
from .riot_client import RiotAPIClient
from .rate_limiter import ConcurrencyLimiter
from .retry import BackoffPolicy

__all__ = [
    'RiotAPIClient',
    'ConcurrencyLimiter',
    'BackoffPolicy',
]
