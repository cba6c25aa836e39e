"""SQLite-backed blob store."""
import asyncio
import json
import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any, List, Optional

from domain.interfaces import IBlobStore

logger = logging.getLogger(__name__)


class SQLiteBlobStore(IBlobStore):
    """JSON documents in one ``blobs`` table keyed by their namespaced path.

    Every call runs on a worker thread and holds a thread lock around the
    single connection, so one store can outlive several event loops (the
    interactive menu runs each command under its own ``asyncio.run``).
    """

    backend = "sqlite"

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA synchronous=NORMAL")
        self._create_tables()

    def _create_tables(self) -> None:
        cur = self._conn.cursor()
        cur.execute(
            "CREATE TABLE IF NOT EXISTS blobs (key TEXT PRIMARY KEY, body TEXT NOT NULL, updated_at TEXT DEFAULT CURRENT_TIMESTAMP)"
        )
        self._conn.commit()

    # ── sync bodies, run via asyncio.to_thread ─────────────────────────────

    def _write(self, key: str, body: str) -> None:
        with self._lock:
            self._conn.execute(
                "INSERT INTO blobs(key, body) VALUES(?, ?) "
                "ON CONFLICT(key) DO UPDATE SET body=excluded.body, updated_at=CURRENT_TIMESTAMP",
                (key, body),
            )
            self._conn.commit()

    def _read(self, key: str) -> Optional[str]:
        with self._lock:
            row = self._conn.execute("SELECT body FROM blobs WHERE key = ?", (key,)).fetchone()
        return row[0] if row else None

    def _list(self, prefix: str) -> List[str]:
        escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        with self._lock:
            rows = self._conn.execute(
                "SELECT key FROM blobs WHERE key LIKE ? ESCAPE '\\' ORDER BY key", (escaped + "%",)
            ).fetchall()
        # LIKE folds ASCII case
        return [r[0] for r in rows if r[0].startswith(prefix)]

    def _delete(self, key: str) -> None:
        with self._lock:
            self._conn.execute("DELETE FROM blobs WHERE key = ?", (key,))
            self._conn.commit()

    # ── IBlobStore ─────────────────────────────────────────────────────────

    async def write_json(self, key: str, data: Any) -> None:
        body = json.dumps(data, ensure_ascii=False)
        await asyncio.to_thread(self._write, key, body)

    async def read_json(self, key: str) -> Optional[Any]:
        body = await asyncio.to_thread(self._read, key)
        if body is None:
            return None
        return json.loads(body)

    async def list_keys(self, prefix: str) -> List[str]:
        return await asyncio.to_thread(self._list, prefix)

    async def delete(self, key: str) -> None:
        await asyncio.to_thread(self._delete, key)

    def close(self) -> None:
        with self._lock:
            try:
                self._conn.close()
            except sqlite3.Error as e:
                logger.warning(f"Error closing {self.db_path.name}: {e}")
