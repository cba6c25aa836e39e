"""In-process blob store."""
import copy
from typing import Any, Dict, List, Optional

from domain.interfaces import IBlobStore


class InMemoryBlobStore(IBlobStore):
    """Dict-backed store for tests and ``DATA_BACKEND=memory`` runs.

    Values are deep-copied on the way in and out so callers never share
    mutable state with the store.
    """

    backend = "memory"

    def __init__(self) -> None:
        self._blobs: Dict[str, Any] = {}

    async def write_json(self, key: str, data: Any) -> None:
        self._blobs[key] = copy.deepcopy(data)

    async def read_json(self, key: str) -> Optional[Any]:
        if key not in self._blobs:
            return None
        return copy.deepcopy(self._blobs[key])

    async def list_keys(self, prefix: str) -> List[str]:
        return sorted(k for k in self._blobs if k.startswith(prefix))

    async def delete(self, key: str) -> None:
        self._blobs.pop(key, None)

    def close(self) -> None:
        self._blobs.clear()
