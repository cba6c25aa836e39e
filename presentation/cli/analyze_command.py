from __future__ import annotations

import asyncio
from typing import Any, Dict, Optional, Tuple

from config import settings
from core.logging import get_logger
from domain.enums import JobStatus, Region
from domain.exceptions import DuoInsightsError, ValidationError
from domain.interfaces import IBlobStore
from presentation.cli.wiring import AppServices, open_services


def split_riot_id(value: str) -> Tuple[str, str]:
    """``"Name#TAG"`` -> ``("Name", "TAG")``; the tag is empty when there is no ``#``."""
    name, _, tag = (value or "").strip().rpartition("#")
    if not name:
        return tag.strip(), ""
    return name.strip(), tag.strip()


class AnalyzeCommand:
    """Starts an analysis job, follows its progress and prints the player summary."""

    def __init__(self, store: Optional[IBlobStore] = None) -> None:
        self._store = store
        self._log = get_logger(__name__, service="analyze-cli")

    def _print_banner(self, game_name: str, tag_line: str, region: Region, limit: int) -> None:
        print("\n" + "=" * 57)
        print("PLAYER ANALYSIS")
        print("=" * 57)
        print(f"Player: {game_name}#{tag_line}")
        print(f"Server: {region.friendly}")
        print(f"Matches: up to {limit} ranked")
        print("=" * 57 + "\n")

    @staticmethod
    def _render_progress(status: Dict[str, Any]) -> None:
        width = 30
        pct = max(0, min(100, int(status.get("progress") or 0)))
        filled = int(width * pct / 100)
        bar = "█" * filled + "-" * (width - filled)
        message = status.get("message") or ""
        print(f"\r|{bar}| {pct:3d}% {message:<32}", end="", flush=True)

    async def _follow(self, services: AppServices, job_id: str) -> Dict[str, Any]:
        last = None
        while True:
            status = await services.job_status.execute(job_id)
            snapshot = (status["progress"], status["message"])
            if snapshot != last:
                self._render_progress(status)
                last = snapshot
            if JobStatus(status["status"]).is_terminal:
                print("")
                return status
            await asyncio.sleep(settings.POLL_INTERVAL_S)

    def _ask(self) -> Tuple[str, str, Optional[str]]:
        riot_id = input("Riot ID (Name#TAG): ").strip()
        game_name, tag_line = split_riot_id(riot_id)
        region = input(f"Server [{', '.join(r.friendly for r in Region.all_regions())}]: ").strip()
        return game_name, tag_line, region or None

    async def run(
        self,
        game_name: Optional[str] = None,
        tag_line: Optional[str] = None,
        region: Optional[str] = None,
        limit: Optional[int] = None,
        insights: bool = False,
    ) -> int:
        if not game_name:
            game_name, tag_line, region = self._ask()

        try:
            async with open_services(self._store) as services:
                job_id = await services.start_analysis.execute(game_name, tag_line, region or "", limit)
                job = await services.jobs.get_job(job_id)
                self._print_banner(job.params.game_name, job.params.tag_line, job.params.region, job.params.limit)
                self._log.info(f"job-started {job_id}")

                status = await self._follow(services, job_id)
                if status["status"] == "error":
                    print(f"\nAnalysis failed: {status['error']}")
                    self._log.warning(f"job-failed {job_id}")
                    return 1

                summary = await services.job_result.execute(job_id)
                print_player_summary(summary)
                if insights:
                    print("\nInsights:")
                    print(await services.insights.player_insights(summary))
                print(f"\nJob id: {job_id}")
                self._log.success(f"job-complete {job_id}")
                return 0
        except ValidationError as e:
            print(f"Invalid input: {e}")
            return 2
        except DuoInsightsError as e:
            print(f"Error: {e}")
            return 1
        except ValueError as e:
            # settings.validate(): missing key or bad backend
            print(f"Configuration error: {e}")
            return 2


def print_player_summary(summary: Dict[str, Any]) -> None:
    riot_id = summary.get("riot_id") or {}
    profile = summary.get("profile") or {}
    recent = profile.get("recent_winrate") or {}
    matches, wins = recent.get("matches", 0), recent.get("wins", 0)
    wr = f"{wins / matches * 100:.1f}%" if matches else "n/a"

    print("\n" + "=" * 57)
    print(f"{riot_id.get('game_name')}#{riot_id.get('tag_line')}  [{summary.get('region')}]")
    print("=" * 57)
    if profile.get("summoner_level") is not None:
        print(f"Level: {profile['summoner_level']}")
    for queue, entry in (profile.get("rank") or {}).items():
        print(f"{queue}: {entry.get('tier')} {entry.get('rank')} {entry.get('lp')} LP ({entry.get('wins')}W/{entry.get('losses')}L)")
    print(f"Recent: {wins}W / {matches - wins}L ({wr}) over {matches} ranked games")

    print("\nTop champions:")
    for c in summary.get("top_champions", []):
        print(f"  {c['champion']:<16} {c['games']:>3} games  {c['wins']:>3} wins")

    print("\nRoles:")
    for r in summary.get("roles", []):
        print(f"  {r['role']:<10} {r['games']:>3}")

    play = summary.get("playstyle") or {}
    kp = play.get("avg_kill_participation")
    dmg = play.get("avg_team_damage_share")
    print("\nPlaystyle:")
    print(f"  KDA {play.get('avg_kda')}  vision {play.get('avg_vision_score')}")
    print(f"  kill participation {f'{kp:.0%}' if kp is not None else 'n/a'}  damage share {f'{dmg:.0%}' if dmg is not None else 'n/a'}")

    mates = summary.get("frequent_teammates", [])
    if mates:
        print("\nFrequent teammates:")
        for i, t in enumerate(mates, start=1):
            name = f"{t['summoner_name']}#{t['tag_line']}" if t.get("tag_line") else t["summoner_name"]
            print(f"  {i:2d}) {name:<24} {t['games_together']:>3} games  {t['wins_together']:>3} wins  {t['puuid']}")
