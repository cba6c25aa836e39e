from __future__ import annotations

from datetime import datetime
from typing import Optional

from core.logging import get_logger
from domain.interfaces import IBlobStore
from infrastructure import create_blob_store
from application.services import JobManager


class JobsCommand:
    """Lists stored jobs, newest first."""

    def __init__(self, store: Optional[IBlobStore] = None) -> None:
        self._store = store
        self.log = get_logger(__name__, service="jobs-cli")

    async def run(self) -> int:
        jobs = await JobManager(self._store or create_blob_store()).list_jobs()
        if not jobs:
            print("No jobs yet.")
            return 0
        print(f"\n{'created':<20} {'status':<9} {'player':<28} {'server':<6} id")
        for job in jobs:
            created = datetime.fromtimestamp(job.created_at / 1000).strftime("%Y-%m-%d %H:%M:%S")
            p = job.params
            print(f"{created:<20} {job.status.value:<9} {p.game_name + '#' + p.tag_line:<28} {p.region.friendly:<6} {job.id}")
            if job.error:
                print(f"{'':<30}{job.error}")
        self.log.debug(lambda: f"listed {len(jobs)} jobs")
        return 0
