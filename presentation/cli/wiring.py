"""Builds the object graph the CLI commands run against."""
from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from config import settings
from domain.interfaces import IBlobStore
from infrastructure import MatchRepository, RiotAPIClient, SummonerRepository, create_blob_store
from application.services import InsightsService, JobManager, JobProcessor, JobRunner
from application.use_cases import (
    GetDuoSummaryUseCase,
    GetJobResultUseCase,
    GetJobStatusUseCase,
    StartAnalysisUseCase,
)


@dataclass
class AppServices:
    store: IBlobStore
    jobs: JobManager
    runner: JobRunner
    insights: InsightsService
    start_analysis: StartAnalysisUseCase
    job_status: GetJobStatusUseCase
    job_result: GetJobResultUseCase
    duo_summary: GetDuoSummaryUseCase


def build_services(api: RiotAPIClient, store: IBlobStore) -> AppServices:
    """One client, so every job in this process shares its concurrency limit."""
    jobs = JobManager(store)
    processor = JobProcessor(jobs, store, SummonerRepository(api), MatchRepository(api))
    runner = JobRunner(processor)
    return AppServices(
        store=store,
        jobs=jobs,
        runner=runner,
        insights=InsightsService(),
        start_analysis=StartAnalysisUseCase(jobs, runner),
        job_status=GetJobStatusUseCase(jobs),
        job_result=GetJobResultUseCase(jobs),
        duo_summary=GetDuoSummaryUseCase(jobs, store),
    )


@asynccontextmanager
async def open_services(store: Optional[IBlobStore] = None) -> AsyncIterator[AppServices]:
    """Validate settings, open the Riot client and wait for submitted jobs on exit."""
    settings.validate()
    settings.create_directories()
    store = store or create_blob_store()
    async with RiotAPIClient(settings.RIOT_API_KEY) as api:
        services = build_services(api, store)
        try:
            yield services
        finally:
            await services.runner.wait_all()
