"""Unit tests for the application use cases."""
import pytest

from application.services import JobManager
from application.services.job_processor import matches_key
from application.use_cases import (
    GetDuoSummaryUseCase,
    GetJobResultUseCase,
    GetJobStatusUseCase,
    StartAnalysisUseCase,
)
from application.use_cases.analyze_player import clamp_limit, resolve_region
from config import settings
from domain.entities import JobParams, JobResult
from domain.enums import JobStatus, Region
from domain.exceptions import (
    JobNotCompleteError,
    JobNotFoundError,
    NoCachedDataError,
    UnsupportedRegionError,
    ValidationError,
)


class RecordingRunner:
    """Stands in for JobRunner; keeps submitted ids instead of scheduling."""

    def __init__(self):
        self.submitted = []

    def submit(self, job_id):
        self.submitted.append(job_id)


@pytest.fixture
def jobs(store, clock):
    return JobManager(store, clock=clock)


async def completed_job(jobs, store, raws, puuid="a", region=Region.EUW1):
    job_id = await jobs.create_job(JobParams(game_name="A", tag_line="EUW", region=region, limit=20))
    await jobs.mark_running(job_id)
    await store.write_json(matches_key(job_id), raws)
    await jobs.mark_complete(job_id, JobResult(
        puuid=puuid,
        summary={"puuid": puuid},
        matches_key=matches_key(job_id),
        match_count=len(raws),
    ))
    return job_id


class TestInputNormalisation:
    @pytest.mark.parametrize("value, expected", [
        ("EUW", Region.EUW1),
        ("euw1", Region.EUW1),
        (" kr ", Region.KR),
        (Region.NA1, Region.NA1),
    ])
    def test_resolve_region(self, value, expected):
        assert resolve_region(value) is expected

    @pytest.mark.parametrize("value", ["mars", "", None])
    def test_unsupported_region(self, value):
        with pytest.raises(UnsupportedRegionError):
            resolve_region(value)

    def test_unsupported_region_is_validation_error(self):
        with pytest.raises(ValidationError):
            resolve_region("xx9")

    @pytest.mark.parametrize("value, expected", [
        (None, settings.DEFAULT_MATCH_LIMIT),
        (0, 1),
        (-5, 1),
        (30, 30),
        ("40", 40),
        (500, settings.MAX_MATCH_LIMIT),
    ])
    def test_clamp_limit(self, value, expected):
        assert clamp_limit(value) == expected

    def test_non_numeric_limit(self):
        with pytest.raises(ValidationError):
            clamp_limit("lots")


class TestStartAnalysis:
    @pytest.mark.asyncio
    async def test_creates_queued_job_and_submits(self, jobs):
        runner = RecordingRunner()

        job_id = await StartAnalysisUseCase(jobs, runner).execute("  Faker ", "#KR1", "KR", limit=250)

        assert runner.submitted == [job_id]
        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.QUEUED
        assert job.params.game_name == "Faker"
        assert job.params.tag_line == "KR1"
        assert job.params.region is Region.KR
        assert job.params.limit == 100

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, tag", [("", "EUW"), ("Name", ""), ("   ", "#")])
    async def test_missing_fields(self, jobs, name, tag):
        runner = RecordingRunner()

        with pytest.raises(ValidationError, match="Missing required fields"):
            await StartAnalysisUseCase(jobs, runner).execute(name, tag, "EUW")

        assert runner.submitted == []
        assert await jobs.list_jobs() == []

    @pytest.mark.asyncio
    async def test_bad_region_creates_nothing(self, jobs):
        with pytest.raises(UnsupportedRegionError):
            await StartAnalysisUseCase(jobs, RecordingRunner()).execute("Name", "TAG", "atlantis")

        assert await jobs.list_jobs() == []


class TestJobStatusAndResult:
    @pytest.mark.asyncio
    async def test_status_of_running_job(self, jobs):
        job_id = await jobs.create_job(JobParams("A", "EUW", Region.EUW1, 20))
        await jobs.mark_running(job_id)
        await jobs.update_job(job_id, progress=35, progress_message="Fetching matches: 7/20")

        status = await GetJobStatusUseCase(jobs).execute(job_id)

        assert status["status"] == "running"
        assert status["progress"] == 35
        assert status["message"] == "Fetching matches: 7/20"
        assert status["puuid"] is None

    @pytest.mark.asyncio
    async def test_status_of_complete_job(self, jobs, store):
        job_id = await completed_job(jobs, store, [])

        status = await GetJobStatusUseCase(jobs).execute(job_id)

        assert status["status"] == "complete"
        assert status["progress"] == 100
        assert status["message"] == "Complete"
        assert status["puuid"] == "a"

    @pytest.mark.asyncio
    async def test_unknown_job(self, jobs):
        with pytest.raises(JobNotFoundError):
            await GetJobStatusUseCase(jobs).execute("nope")
        with pytest.raises(JobNotFoundError):
            await GetJobResultUseCase(jobs).execute("nope")

    @pytest.mark.asyncio
    async def test_result_requires_complete(self, jobs):
        job_id = await jobs.create_job(JobParams("A", "EUW", Region.EUW1, 20))

        with pytest.raises(JobNotCompleteError) as exc_info:
            await GetJobResultUseCase(jobs).execute(job_id)

        assert exc_info.value.status == "queued"

    @pytest.mark.asyncio
    async def test_result_returns_summary(self, jobs, store):
        job_id = await completed_job(jobs, store, [])

        assert await GetJobResultUseCase(jobs).execute(job_id) == {"puuid": "a"}


class TestDuoSummaryUseCase:
    @pytest.mark.asyncio
    async def test_no_completed_job(self, jobs, store):
        with pytest.raises(NoCachedDataError) as exc_info:
            await GetDuoSummaryUseCase(jobs, store).execute("a", "b", "EUW")

        assert exc_info.value.region == "EUW"

    @pytest.mark.asyncio
    async def test_missing_match_blob(self, jobs, store):
        job_id = await completed_job(jobs, store, [])
        await store.delete(matches_key(job_id))

        with pytest.raises(NoCachedDataError):
            await GetDuoSummaryUseCase(jobs, store).execute("a", "b", Region.EUW1)

    @pytest.mark.asyncio
    async def test_missing_puuid(self, jobs, store):
        with pytest.raises(ValidationError):
            await GetDuoSummaryUseCase(jobs, store).execute("a", "", "EUW")

    @pytest.mark.asyncio
    async def test_builds_from_cached_matches(self, jobs, store, make_match, make_participant):
        raws = [
            make_match(f"EUW1_{i}", [make_participant("a", win=i < 2), make_participant("b")])
            for i in range(3)
        ]
        await completed_job(jobs, store, raws)

        summary = await GetDuoSummaryUseCase(jobs, store).execute("a", "b", "euw1")

        assert summary.sample_size == 3
        assert summary.wins == 2
        assert summary.region == "EUW"

    @pytest.mark.asyncio
    async def test_other_region_has_no_data(self, jobs, store, make_match, make_participant):
        await completed_job(jobs, store, [make_match("EUW1_1", [make_participant("a"), make_participant("b")])])

        with pytest.raises(NoCachedDataError):
            await GetDuoSummaryUseCase(jobs, store).execute("a", "b", "NA")
