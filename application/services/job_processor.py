"""Drives one analysis job from queued to complete or error."""
import asyncio
from typing import List, Optional, Tuple

from core.logging import context, get_logger, traceable
from domain.entities import JobResult, Summoner
from domain.enums import QueueType, Region
from domain.exceptions import DuoInsightsError
from domain.interfaces import IBlobStore, IMatchRepository, ISummonerRepository
from infrastructure.repositories import parse_matches
from .job_manager import JobManager
from .player_aggregator import build_player_summary

MATCH_PREFIX = "matches/"


def matches_key(job_id: str) -> str:
    return f"{MATCH_PREFIX}{job_id}.json"


class JobProcessor:
    """
    Fetches account, profile and match history for a job's Riot ID, builds
    the player summary and stores the ranked match bodies for duo queries.

    ``process`` never raises: every failure after the job exists ends up in
    the job's ``error`` field.
    """

    def __init__(
        self,
        jobs: JobManager,
        store: IBlobStore,
        summoner_repo: ISummonerRepository,
        match_repo: IMatchRepository,
    ):
        self.jobs = jobs
        self.store = store
        self.summoner_repo = summoner_repo
        self.match_repo = match_repo
        self._log = get_logger(__name__, service="jobs")

    async def process(self, job_id: str) -> None:
        with context(job_id=job_id):
            try:
                await self._run(job_id)
            except Exception as e:
                self._log.exception(f"Job failed: {e}")
                try:
                    await self.jobs.mark_error(job_id, e)
                except Exception as mark_err:
                    self._log.error(f"Could not record failure for job {job_id}: {mark_err}")

    async def _run(self, job_id: str) -> None:
        job = await self.jobs.mark_running(job_id)
        params = job.params
        region = params.region
        self._log.info(f"Processing {params.game_name}#{params.tag_line} ({region.friendly}), limit={params.limit}")

        # Fatal: without a puuid there is nothing to fetch
        account = await self.summoner_repo.get_account(region, params.game_name, params.tag_line)

        summoner = await self._optional_summoner(region, account.puuid)

        match_ids = await self.match_repo.get_match_ids(region, account.puuid, params.limit)
        self._log.info(f"Found {len(match_ids)} match ids")

        raw_matches, failed = await self._fetch_matches(job_id, region, match_ids)

        ranked_ids = set(QueueType.ranked_queue_ids())
        ranked_raw = [m for m in raw_matches if _queue_id(m) in ranked_ids]
        self._log.debug(lambda: f"{len(ranked_raw)} ranked of {len(raw_matches)} fetched")

        summary = build_player_summary(
            parse_matches(ranked_raw),
            puuid=account.puuid,
            game_name=account.game_name,
            tag_line=account.tag_line,
            region=region,
            summoner=summoner,
        )

        key = matches_key(job_id)
        await self.store.write_json(key, ranked_raw)

        await self.jobs.mark_complete(job_id, JobResult(
            puuid=account.puuid,
            summary=summary.to_dict(),
            matches_key=key,
            match_count=len(ranked_raw),
            fetched_count=len(raw_matches),
            failed_fetches=failed,
        ))
        self._log.success(f"Job complete: {len(ranked_raw)} ranked matches, {failed} failed fetches")

    async def _optional_summoner(self, region: Region, puuid: str) -> Optional[Summoner]:
        try:
            return await self.summoner_repo.get_summoner(region, puuid)
        except (DuoInsightsError, ValueError) as e:
            self._log.warning(f"Summoner profile unavailable, continuing without rank: {e}")
            return None

    @traceable
    async def _fetch_matches(self, job_id: str, region: Region, match_ids: List[str]) -> Tuple[List[dict], int]:
        """
        Fetch every match body concurrently; the shared client bounds how many
        are in flight.

        Returns:
            (bodies in ``match_ids`` order, number of failed fetches)
        """
        total = len(match_ids)
        completed = 0
        failed = 0
        lock = asyncio.Lock()

        async def fetch(match_id: str) -> Optional[dict]:
            nonlocal completed, failed
            body: Optional[dict] = None
            try:
                body = await self.match_repo.get_raw_match(region, match_id)
            except Exception as e:
                self._log.warning(f"Skipping match {match_id}: {e!r}")
            if body is not None and not isinstance(body, dict):
                self._log.warning(f"Skipping match {match_id}: unexpected {type(body).__name__} body")
                body = None
            async with lock:
                completed += 1
                if body is None:
                    failed += 1
                await self.jobs.update_job(
                    job_id,
                    progress=round(completed / total * 100),
                    progress_message=f"Fetching matches: {completed}/{total}",
                )
            return body

        results = await asyncio.gather(*(fetch(mid) for mid in match_ids))
        return [r for r in results if r is not None], failed


def _queue_id(raw: dict) -> Optional[int]:
    info = raw.get('info')
    return info.get('queueId') if isinstance(info, dict) else None
