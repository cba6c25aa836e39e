"""Blob store backends."""
import logging
from pathlib import Path
from typing import Optional

from config import settings
from domain.interfaces import IBlobStore
from .memory_store import InMemoryBlobStore
from .sqlite_store import SQLiteBlobStore

logger = logging.getLogger(__name__)

DB_FILE_NAME = 'duo_insights.db'


def create_blob_store(backend: Optional[str] = None, db_path: Optional[Path] = None) -> IBlobStore:
    """Build the store named by ``backend`` (default ``settings.DATA_BACKEND``)."""
    backend = (backend or settings.DATA_BACKEND).strip().lower()
    if backend == 'memory':
        return InMemoryBlobStore()
    if backend == 'sqlite':
        path = db_path or settings.DB_DIR / DB_FILE_NAME
        logger.debug(f"Using SQLite blob store at {path}")
        return SQLiteBlobStore(path)
    raise ValueError(f"Unknown data backend '{backend}'")


__all__ = [
    'InMemoryBlobStore',
    'SQLiteBlobStore',
    'create_blob_store',
]
