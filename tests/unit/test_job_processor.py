"""Unit tests for JobProcessor with fake repositories."""
from typing import Dict, List, Optional

import httpx
import pytest

from application.services import JobManager, JobProcessor
from application.services.job_processor import matches_key
from domain.entities import Account, JobParams, Summoner
from domain.enums import JobStatus, Region
from domain.exceptions import RetriesExhaustedError, RiotAPIError
from domain.interfaces import IMatchRepository, ISummonerRepository
from infrastructure.storage import InMemoryBlobStore


class FakeSummonerRepository(ISummonerRepository):
    def __init__(self, account_error: Optional[Exception] = None, summoner_error: Optional[Exception] = None):
        self.account_error = account_error
        self.summoner_error = summoner_error

    async def get_account(self, region, game_name, tag_line):
        if self.account_error:
            raise self.account_error
        return Account(puuid="me", game_name=game_name, tag_line=tag_line)

    async def get_summoner(self, region, puuid):
        if self.summoner_error:
            raise self.summoner_error
        return Summoner(puuid=puuid, profile_icon_id=1, summoner_level=100)


class FakeMatchRepository(IMatchRepository):
    def __init__(self, bodies: Dict[str, dict], failing: tuple = ()):
        self.bodies = bodies
        self.failing = set(failing)
        self.requested_count: Optional[int] = None

    async def get_match_ids(self, region, puuid, count):
        self.requested_count = count
        return list(self.bodies)[:count]

    async def get_raw_match(self, region, match_id):
        if match_id in self.failing:
            raise RetriesExhaustedError(7, 503)
        return self.bodies[match_id]


class ProgressRecordingStore(InMemoryBlobStore):
    """Remembers every progress value written to a job record."""

    def __init__(self):
        super().__init__()
        self.progress: List[int] = []

    async def write_json(self, key, data):
        if key.startswith("jobs/"):
            self.progress.append(data["progress"])
        await super().write_json(key, data)


@pytest.fixture
def history(make_match, make_participant):
    """Builds ``n`` solo-queue bodies keyed by id; every ``non_ranked_every``-th is ARAM."""

    def build(n: int, *, non_ranked_every: int = 0) -> Dict[str, dict]:
        bodies = {}
        for i in range(n):
            queue = 450 if non_ranked_every and i % non_ranked_every == 0 else 420
            match_id = f"EUW1_{i}"
            bodies[match_id] = make_match(match_id, [make_participant("me", win=i % 2 == 0)], queue_id=queue)
        return bodies

    return build


async def start(jobs: JobManager, limit: int = 50) -> str:
    return await jobs.create_job(JobParams(game_name="Me", tag_line="EUW", region=Region.EUW1, limit=limit))


class TestJobProcessor:
    """Test suite for JobProcessor."""

    @pytest.fixture
    def recording_store(self):
        return ProgressRecordingStore()

    @pytest.fixture
    def jobs(self, recording_store, clock):
        return JobManager(recording_store, clock=clock)

    @pytest.mark.asyncio
    async def test_partial_fetch_failures_still_complete(self, jobs, recording_store, history):
        bodies = history(50, non_ranked_every=10)
        failing = ("EUW1_3", "EUW1_17", "EUW1_42")
        match_repo = FakeMatchRepository(bodies, failing)
        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), match_repo)
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.COMPLETE
        assert job.progress == 100
        assert job.result.failed_fetches == 3
        assert job.result.fetched_count == 47
        # EUW1_0, 10, 20, 30, 40 are ARAM
        assert job.result.match_count == 42
        assert match_repo.requested_count == 50

        stored = await recording_store.read_json(matches_key(job_id))
        assert len(stored) == 42
        assert all(m["info"]["queueId"] == 420 for m in stored)
        assert job.result.summary["meta"]["sample_size"] == 42

    @pytest.mark.asyncio
    async def test_progress_never_decreases(self, jobs, recording_store, history):
        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), FakeMatchRepository(history(20)))
        job_id = await start(jobs)

        await processor.process(job_id)

        written = recording_store.progress
        assert written == sorted(written)
        assert written[-1] == 100
        job = await jobs.get_job(job_id)
        assert job.progress_message == "Complete"

    @pytest.mark.asyncio
    async def test_unknown_account_marks_error(self, jobs, recording_store, history):
        summoners = FakeSummonerRepository(account_error=RiotAPIError(404, {"status": {"status_code": 404}}))
        processor = JobProcessor(jobs, recording_store, summoners, FakeMatchRepository(history(5)))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.ERROR
        assert "404" in job.error
        assert job.result is None
        assert await recording_store.read_json(matches_key(job_id)) is None

    @pytest.mark.asyncio
    async def test_summoner_failure_is_not_fatal(self, jobs, recording_store, history):
        summoners = FakeSummonerRepository(summoner_error=RetriesExhaustedError(7, 429))
        processor = JobProcessor(jobs, recording_store, summoners, FakeMatchRepository(history(3)))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.COMPLETE
        assert job.result.summary["profile"]["summoner_level"] is None

    @pytest.mark.asyncio
    async def test_match_id_failure_marks_error(self, jobs, recording_store):
        class BrokenIds(FakeMatchRepository):
            async def get_match_ids(self, region, puuid, count):
                raise RetriesExhaustedError(7, 503)

        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), BrokenIds({}))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.ERROR
        assert "Exhausted retries" in job.error

    @pytest.mark.asyncio
    async def test_no_matches_completes_with_empty_summary(self, jobs, recording_store):
        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), FakeMatchRepository({}))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.COMPLETE
        assert job.result.match_count == 0
        assert await recording_store.read_json(matches_key(job_id)) == []

    @pytest.mark.asyncio
    async def test_missing_job_does_not_raise(self, jobs, recording_store):
        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), FakeMatchRepository({}))

        await processor.process("does-not-exist")

        assert await jobs.get_job("does-not-exist") is None

    @pytest.mark.asyncio
    async def test_any_per_match_exception_is_skipped(self, jobs, recording_store, history):
        class UndecodableMatch(FakeMatchRepository):
            async def get_raw_match(self, region, match_id):
                if match_id == "EUW1_4":
                    raise httpx.DecodingError("bad gzip body")
                return await super().get_raw_match(region, match_id)

        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), UndecodableMatch(history(10)))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.COMPLETE
        assert job.result.failed_fetches == 1
        assert job.result.match_count == 9

    @pytest.mark.asyncio
    async def test_non_object_body_counts_as_failed_fetch(self, jobs, recording_store, history):
        bodies = history(10)
        bodies["EUW1_7"] = []
        processor = JobProcessor(jobs, recording_store, FakeSummonerRepository(), FakeMatchRepository(bodies))
        job_id = await start(jobs)

        await processor.process(job_id)

        job = await jobs.get_job(job_id)
        assert job.status is JobStatus.COMPLETE
        assert job.result.failed_fetches == 1
        assert job.result.fetched_count == 9
        assert job.result.match_count == 9
        assert len(await recording_store.read_json(matches_key(job_id))) == 9
