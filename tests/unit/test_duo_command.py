"""Unit tests for DuoCommand with an in-memory store."""
import pytest

from application.services import JobManager, InsightsService
from application.services.job_processor import matches_key
from domain.entities import JobParams, JobResult
from domain.enums import Region
from domain.interfaces import IInsightsGenerator
from presentation.cli import DuoCommand


class CannedGenerator(IInsightsGenerator):
    def __init__(self):
        self.duo_calls = 0

    async def player_insights(self, summary):
        return "player tips"

    async def duo_insights(self, summary, names=None):
        self.duo_calls += 1
        return f"duo tips over {summary['sample_size']} games"


async def cache_duo_games(store, make_match, make_participant):
    jobs = JobManager(store)
    raws = [
        make_match(f"EUW1_{i}", [make_participant("a"), make_participant("b", position="JUNGLE")])
        for i in range(3)
    ]
    job_id = await jobs.create_job(JobParams(game_name="A", tag_line="EUW", region=Region.EUW1, limit=20))
    await jobs.mark_running(job_id)
    await store.write_json(matches_key(job_id), raws)
    await jobs.mark_complete(job_id, JobResult(
        puuid="a", summary={"puuid": "a"}, matches_key=matches_key(job_id), match_count=len(raws),
    ))
    return store


@pytest.fixture
def seed(store, make_match, make_participant):
    async def build():
        return await cache_duo_games(store, make_match, make_participant)

    return build


class TestDuoCommand:
    @pytest.mark.asyncio
    async def test_uses_injected_insights_service(self, seed, capsys):
        cached_store = await seed()
        generator = CannedGenerator()
        command = DuoCommand(cached_store, insights=InsightsService(generator, enabled=True))

        code = await command.run("a", "b", "EUW1", insights=True)

        out = capsys.readouterr().out
        assert code == 0
        assert generator.duo_calls == 1
        assert "duo tips over 3 games" in out
        assert "Together: 3W / 0L over 3 games" in out

    @pytest.mark.asyncio
    async def test_insights_not_requested(self, seed):
        cached_store = await seed()
        generator = CannedGenerator()
        command = DuoCommand(cached_store, insights=InsightsService(generator, enabled=True))

        assert await command.run("a", "b", "EUW1") == 0
        assert generator.duo_calls == 0

    @pytest.mark.asyncio
    async def test_no_cached_data(self, store, capsys):
        code = await DuoCommand(store).run("a", "b", "EUW1")

        assert code == 3
