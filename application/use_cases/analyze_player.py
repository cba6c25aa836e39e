"""Use cases for starting an analysis job and reading it back."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Union

from config import settings
from domain.entities import Job, JobParams
from domain.enums import JobStatus, Region
from domain.exceptions import (
    JobNotCompleteError,
    JobNotFoundError,
    UnsupportedRegionError,
    ValidationError,
)
from application.services.job_manager import JobManager
from application.services.job_runner import JobRunner

logger = logging.getLogger(__name__)


def resolve_region(region: Union[Region, str, None]) -> Region:
    if isinstance(region, Region):
        return region
    try:
        return Region.from_string(region or "")
    except ValueError:
        raise UnsupportedRegionError(str(region)) from None


def clamp_limit(limit: Optional[Any]) -> int:
    if limit is None:
        return settings.DEFAULT_MATCH_LIMIT
    try:
        value = int(limit)
    except (TypeError, ValueError):
        raise ValidationError(f"limit must be an integer, got {limit!r}") from None
    return min(max(value, 1), settings.MAX_MATCH_LIMIT)


class StartAnalysisUseCase:
    """
    Validates a Riot ID, creates a queued job and hands it to the runner.

    Returns as soon as the job is scheduled; poll with GetJobStatusUseCase.
    """

    def __init__(self, jobs: JobManager, runner: JobRunner):
        self.jobs = jobs
        self.runner = runner

    async def execute(
        self,
        game_name: str,
        tag_line: str,
        region: Union[Region, str],
        limit: Optional[int] = None,
    ) -> str:
        game_name = (game_name or "").strip()
        tag_line = (tag_line or "").strip().lstrip('#')
        if not game_name or not tag_line:
            raise ValidationError("Missing required fields: game_name, tag_line")

        params = JobParams(
            game_name=game_name,
            tag_line=tag_line,
            region=resolve_region(region),
            limit=clamp_limit(limit),
        )
        job_id = await self.jobs.create_job(params)
        self.runner.submit(job_id)
        return job_id


class GetJobStatusUseCase:
    def __init__(self, jobs: JobManager):
        self.jobs = jobs

    async def execute(self, job_id: str) -> Dict[str, Any]:
        job = await self._load(job_id)
        complete = job.status == JobStatus.COMPLETE
        return {
            'job_id': job.id,
            'status': job.status.value,
            'progress': 100 if complete else job.progress,
            'message': "Complete" if complete else (job.progress_message or ""),
            'error': job.error,
            'puuid': job.result.puuid if job.result else None,
            'created_at': job.created_at,
            'updated_at': job.updated_at,
        }

    async def _load(self, job_id: str) -> Job:
        job = await self.jobs.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        return job


class GetJobResultUseCase:
    def __init__(self, jobs: JobManager):
        self.jobs = jobs

    async def execute(self, job_id: str) -> Dict[str, Any]:
        """The player summary of a completed job."""
        job = await self.jobs.get_job(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        if job.status != JobStatus.COMPLETE or job.result is None:
            raise JobNotCompleteError(job_id, job.status.value)
        return job.result.summary
