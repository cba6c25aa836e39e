"""Queue type enumeration for ranked matches."""
from enum import Enum
from typing import Optional


class QueueType(Enum):
    """Ranked queue types in League of Legends.

    Only these two queues feed the summaries; everything else a player
    queues into (normals, ARAM, Arena) is filtered out after fetching.
    """

    RANKED_SOLO_5x5 = 420  # Solo/Duo Queue
    RANKED_FLEX_SR = 440   # Flex 5v5 Queue

    @property
    def queue_id(self) -> int:
        return self.value

    @property
    def api_queue_name(self) -> str:
        """Queue name used by league-v4 entries (``queueType`` field)."""
        return self.name

    @classmethod
    def ranked_queues(cls) -> list['QueueType']:
        return [cls.RANKED_SOLO_5x5, cls.RANKED_FLEX_SR]

    @classmethod
    def ranked_queue_ids(cls) -> list[int]:
        return [q.queue_id for q in cls.ranked_queues()]

    @classmethod
    def from_queue_id(cls, queue_id: int) -> Optional['QueueType']:
        try:
            return cls(queue_id)
        except ValueError:
            return None

    @classmethod
    def is_ranked(cls, queue_id: int) -> bool:
        return cls.from_queue_id(queue_id) is not None
