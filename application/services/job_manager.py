"""Job lifecycle on top of a blob store."""
import logging
import time
import uuid
from dataclasses import replace
from typing import Any, Callable, List, Optional, Union

from domain.entities import Job, JobParams, JobResult
from domain.enums import JobStatus, Region
from domain.exceptions import InvalidJobTransitionError, JobNotFoundError
from domain.interfaces import IBlobStore

logger = logging.getLogger(__name__)

JOB_PREFIX = "jobs/"


def now_ms() -> int:
    return int(time.time() * 1000)


def job_key(job_id: str) -> str:
    return f"{JOB_PREFIX}{job_id}.json"


class JobManager:
    """
    Single writer for job records (``jobs/<id>.json``).

    Every update is read-modify-write against the store; concurrent writers
    to the same job are not coordinated and the last write wins.
    """

    def __init__(self, store: IBlobStore, clock: Callable[[], int] = now_ms):
        self.store = store
        self._clock = clock

    async def create_job(self, params: JobParams) -> str:
        """Persist a new queued job and return its id."""
        ts = self._clock()
        job = Job(
            id=uuid.uuid4().hex,
            status=JobStatus.QUEUED,
            params=params,
            created_at=ts,
            updated_at=ts,
            progress=0,
            progress_message="Queued",
        )
        await self._save(job)
        logger.info(f"Created job {job.id} for {params.game_name}#{params.tag_line} ({params.region.friendly})")
        return job.id

    async def get_job(self, job_id: str) -> Optional[Job]:
        data = await self.store.read_json(job_key(job_id))
        if data is None:
            return None
        return Job.from_dict(data)

    async def update_job(self, job_id: str, **changes: Any) -> Job:
        """
        Merge ``changes`` into the stored job and bump ``updated_at``.

        Status changes go through the transition table.

        Raises:
            JobNotFoundError: unknown ``job_id``
            InvalidJobTransitionError: ``status`` change not allowed
        """
        job = await self._require(job_id)
        target = changes.get('status')
        if target is not None and target != job.status and not job.status.can_transition_to(target):
            raise InvalidJobTransitionError(job_id, job.status.value, target.value)

        updated = replace(job, **{**changes, "updated_at": self._clock()})
        await self._save(updated)
        return updated

    async def mark_running(self, job_id: str) -> Job:
        job = await self._require(job_id)
        self._check_transition(job, JobStatus.RUNNING)
        return await self.update_job(
            job_id,
            status=JobStatus.RUNNING,
            started_at=self._clock(),
            progress=0,
            progress_message="Starting data fetch...",
        )

    async def mark_complete(self, job_id: str, result: JobResult) -> Job:
        job = await self._require(job_id)
        self._check_transition(job, JobStatus.COMPLETE)
        return await self.update_job(
            job_id,
            status=JobStatus.COMPLETE,
            result=result,
            progress=100,
            progress_message="Complete",
            completed_at=self._clock(),
        )

    async def mark_error(self, job_id: str, error: Union[BaseException, str]) -> Job:
        job = await self._require(job_id)
        self._check_transition(job, JobStatus.ERROR)
        message = str(error) or type(error).__name__
        return await self.update_job(
            job_id,
            status=JobStatus.ERROR,
            error=message,
            progress_message="Failed",
            completed_at=self._clock(),
        )

    async def list_jobs(self) -> List[Job]:
        """All jobs, newest first."""
        jobs = []
        for key in await self.store.list_keys(JOB_PREFIX):
            data = await self.store.read_json(key)
            if data is not None:
                jobs.append(Job.from_dict(data))
        jobs.sort(key=lambda j: j.created_at, reverse=True)
        return jobs

    async def find_recent_complete(self, puuid: str, region: Region) -> Optional[Job]:
        """Most recently completed job whose result belongs to ``puuid`` in ``region``."""
        best: Optional[Job] = None
        for job in await self.list_jobs():
            if job.status != JobStatus.COMPLETE or job.result is None:
                continue
            if job.result.puuid != puuid or job.params.region != region:
                continue
            if best is None or (job.completed_at or 0) > (best.completed_at or 0):
                best = job
        return best

    async def _require(self, job_id: str) -> Job:
        job = await self.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job

    @staticmethod
    def _check_transition(job: Job, target: JobStatus) -> None:
        if not job.status.can_transition_to(target):
            raise InvalidJobTransitionError(job.id, job.status.value, target.value)

    async def _save(self, job: Job) -> None:
        await self.store.write_json(job_key(job.id), job.to_dict())
