"""Domain enumerations."""
from .region import Region
from .queue_type import QueueType
from .rank import Rank
from .role import Role
from .job_status import JobStatus

__all__ = [
    'Region',
    'QueueType',
    'Rank',
    'Role',
    'JobStatus',
]
