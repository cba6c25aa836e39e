from __future__ import annotations

from typing import Any, Dict, List, Optional

from core.logging import get_logger
from domain.entities import Job
from domain.enums import JobStatus
from domain.exceptions import DuoInsightsError, NoCachedDataError, ValidationError
from domain.interfaces import IBlobStore
from infrastructure import create_blob_store
from application.services import InsightsService, JobManager
from application.use_cases import GetDuoSummaryUseCase


class DuoCommand:
    """Duo synergy from a previously analysed player's cached matches. No Riot calls."""

    def __init__(self, store: Optional[IBlobStore] = None, insights: Optional[InsightsService] = None) -> None:
        self._store = store
        self._insights = insights or InsightsService()
        self.log = get_logger(__name__, service="duo-cli")

    def _pick_job(self, jobs: List[Job]) -> Optional[Job]:
        done = [j for j in jobs if j.status == JobStatus.COMPLETE and j.result]
        if not done:
            print("No completed analyses yet. Run an analysis first.")
            return None
        print("\nAnalysed players:")
        for i, job in enumerate(done, start=1):
            p = job.params
            print(f"{i:2d}) {p.game_name}#{p.tag_line} [{p.region.friendly}] {job.result.match_count} matches")
        sel = input("Select player (0 to cancel): ").strip()
        if not sel.isdigit() or not 1 <= int(sel) <= len(done):
            return None
        return done[int(sel) - 1]

    @staticmethod
    def _pick_teammate(job: Job) -> Optional[str]:
        mates = job.result.summary.get("frequent_teammates", [])
        if not mates:
            print("No frequent teammates in this analysis.")
            return None
        for i, t in enumerate(mates, start=1):
            print(f"{i:2d}) {t['summoner_name']:<24} {t['games_together']:>3} games")
        sel = input("Select teammate (0 to cancel): ").strip()
        if not sel.isdigit() or not 1 <= int(sel) <= len(mates):
            return None
        return mates[int(sel) - 1]["puuid"]

    async def run(
        self,
        puuid_a: Optional[str] = None,
        puuid_b: Optional[str] = None,
        region: Optional[str] = None,
        insights: bool = False,
    ) -> int:
        store = self._store or create_blob_store()
        jobs = JobManager(store)
        names: Dict[str, str] = {}

        if not puuid_a:
            job = self._pick_job(await jobs.list_jobs())
            if job is None:
                return 0
            puuid_b = self._pick_teammate(job)
            if puuid_b is None:
                return 0
            puuid_a, region = job.result.puuid, job.params.region.value
            names = _names_from(job)

        try:
            duo = await GetDuoSummaryUseCase(jobs, store).execute(puuid_a, puuid_b or "", region or "")
        except NoCachedDataError as e:
            print(str(e))
            return 3
        except ValidationError as e:
            print(f"Invalid input: {e}")
            return 2
        except DuoInsightsError as e:
            print(f"Error: {e}")
            return 1

        summary = duo.to_dict()
        print_duo_summary(summary, names)
        if insights:
            print("\nInsights:")
            print(await self._insights.duo_insights(summary, names or None))
        self.log.info(f"duo-summary sample={duo.sample_size}")
        return 0


def _names_from(job: Job) -> Dict[str, str]:
    names = {job.result.puuid: f"{job.params.game_name}#{job.params.tag_line}"}
    for t in job.result.summary.get("frequent_teammates", []):
        names[t["puuid"]] = t["summoner_name"]
    return names


def print_duo_summary(summary: Dict[str, Any], names: Optional[Dict[str, str]] = None) -> None:
    names = names or {}
    key = summary["duo_key"]
    a = names.get(key["puuid_a"], key["puuid_a"][:8])
    b = names.get(key["puuid_b"], key["puuid_b"][:8])

    print("\n" + "=" * 57)
    print(f"DUO: {a} + {b}  [{key['region']}]")
    print("=" * 57)
    if summary.get("message"):
        print(summary["message"])
        return

    games, wins = summary["sample_size"], summary["wins"]
    print(f"Together: {wins}W / {games - wins}L over {games} games")
    if summary.get("low_sample"):
        print("(low sample, fewer than 5 games together)")

    for queue_id, q in summary.get("queue_breakdown", {}).items():
        print(f"  queue {queue_id}: {q['games']} games, {q['wins']} wins")

    print("\nRole pairs:")
    for r in summary.get("role_pairs", []):
        print(f"  {' + '.join(r['pair']):<22} {r['games']:>3} games {r['wins']:>3} wins")

    print("\nChampion pairs:")
    for c in summary.get("champion_pairs_top", []):
        print(f"  {' + '.join(c['pair']):<28} {c['games']:>3} games {c['wins']:>3} wins")

    syn = summary.get("synergy") or {}
    print("\nSynergy:")
    print(f"  combined K+A per game: {syn.get('avg_combined_ka')}")
    print(f"  vision: {syn.get('avg_vision_score_a')} / {syn.get('avg_vision_score_b')}")

    tex = summary.get("game_texture") or {}
    side = tex.get("side_preference") or {}
    print(f"\nAvg game: {tex.get('avg_game_duration_min')} min  blue {side.get('blue', 0)} / red {side.get('red', 0)}")
