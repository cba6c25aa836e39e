"""Use case for the duo synergy summary."""
from __future__ import annotations

import logging
from typing import Union

from domain.entities import DuoSummary
from domain.enums import Region
from domain.exceptions import NoCachedDataError, ValidationError
from domain.interfaces import IBlobStore
from infrastructure.repositories import parse_matches
from application.services.duo_aggregator import build_duo_summary
from application.services.job_manager import JobManager
from .analyze_player import resolve_region

logger = logging.getLogger(__name__)


class GetDuoSummaryUseCase:
    """
    Builds a DuoSummary from the matches cached by A's latest completed job.

    No upstream calls are made; B only needs to appear in A's history.
    """

    def __init__(self, jobs: JobManager, store: IBlobStore):
        self.jobs = jobs
        self.store = store

    async def execute(self, puuid_a: str, puuid_b: str, region: Union[Region, str]) -> DuoSummary:
        if not puuid_a or not puuid_b:
            raise ValidationError("Missing required fields: puuid_a, puuid_b")
        region = resolve_region(region)

        job = await self.jobs.find_recent_complete(puuid_a, region)
        if job is None or job.result is None:
            raise NoCachedDataError(puuid_a, region.friendly)

        raw = await self.store.read_json(job.result.matches_key)
        if raw is None:
            logger.warning(f"Job {job.id} is complete but {job.result.matches_key} is missing")
            raise NoCachedDataError(puuid_a, region.friendly)

        matches = parse_matches(raw)
        logger.info(f"Duo summary for {puuid_a[:8]}... + {puuid_b[:8]}... from job {job.id} ({len(matches)} matches)")
        return build_duo_summary(matches, puuid_a, puuid_b, region)
