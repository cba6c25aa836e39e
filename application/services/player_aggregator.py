"""Individual profile built from a player's ranked matches."""
import time
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from core.logging import traceable
from domain.entities import (
    ChampionStat,
    Match,
    PlayerSummary,
    Playstyle,
    Profile,
    RecentWinrate,
    RoleStat,
    Summoner,
    SummaryMeta,
    Teammate,
)
from domain.enums import QueueType, Region
from .stats import MeanAccumulator, most_common, pair_key, ranked, rounded

TOP_CHAMPIONS = 10
TOP_TEAMMATES = 10
TOP_ROLE_PAIRS = 2
TOP_CHAMPION_PAIRS = 3


@dataclass
class _TeammateTally:
    puuid: str
    summoner_name: str
    tag_line: str
    games: int = 0
    wins: int = 0
    last_played_at: int = 0
    role_pairs: Counter = field(default_factory=Counter)
    champion_pairs: Counter = field(default_factory=Counter)


@traceable
def build_player_summary(
    matches: List[Match],
    puuid: str,
    game_name: str,
    tag_line: str,
    region: Region,
    summoner: Optional[Summoner] = None,
    generated_at: Optional[int] = None,
) -> PlayerSummary:
    """
    Aggregate ``matches`` (already filtered to ranked queues) for ``puuid``.

    Matches the player does not appear in are ignored by every section
    except the sample size.
    """
    champion_games: Counter = Counter()
    champion_wins: Counter = Counter()
    role_games: Counter = Counter()
    teammates: Dict[str, _TeammateTally] = {}

    wins = 0
    kills = deaths = assists = vision = 0
    played = 0
    kill_participation = MeanAccumulator()
    damage_share = MeanAccumulator()

    for match in matches:
        player = match.participant_for(puuid)
        if player is None:
            continue

        played += 1
        if player.win:
            wins += 1
            champion_wins[player.champion_name] += 1
        champion_games[player.champion_name] += 1
        role_games[player.team_position.value] += 1

        kills += player.kills
        deaths += player.deaths
        assists += player.assists
        vision += player.vision_score
        kill_participation.add(player.kill_participation)
        damage_share.add(player.team_damage_percentage)

        for mate in match.teammates_of(puuid):
            tally = teammates.get(mate.puuid)
            if tally is None:
                tally = teammates[mate.puuid] = _TeammateTally(
                    puuid=mate.puuid,
                    summoner_name=mate.display_name,
                    tag_line=mate.riot_id_tagline,
                )
            tally.games += 1
            # The target's outcome, which is the same for the whole team
            if player.win:
                tally.wins += 1
            tally.last_played_at = max(tally.last_played_at, match.played_at)
            tally.role_pairs[pair_key(player.team_position.value, mate.team_position.value)] += 1
            tally.champion_pairs[pair_key(player.champion_name, mate.champion_name)] += 1

    top_champions = tuple(
        ChampionStat(champion=name, games=games, wins=won)
        for name, games, won in ranked(champion_games, champion_wins, TOP_CHAMPIONS)
    )
    roles = tuple(
        RoleStat(role=role, games=games)
        for role, games in sorted(role_games.items(), key=lambda kv: (-kv[1], kv[0]))
    )

    top_mates = sorted(teammates.values(), key=lambda t: (-t.games, -t.wins, t.puuid))[:TOP_TEAMMATES]
    frequent_teammates = tuple(
        Teammate(
            puuid=t.puuid,
            summoner_name=t.summoner_name,
            tag_line=t.tag_line,
            games_together=t.games,
            wins_together=t.wins,
            last_played_at=t.last_played_at,
            top_role_pairs=tuple(most_common(t.role_pairs, TOP_ROLE_PAIRS)),
            top_champion_pairs=tuple(most_common(t.champion_pairs, TOP_CHAMPION_PAIRS)),
        )
        for t in top_mates
    )

    playstyle = Playstyle(
        avg_kda=round((kills + assists) / max(deaths, 1), 2),
        avg_kill_participation=rounded(kill_participation.mean),
        avg_vision_score=round(vision / played, 2) if played else 0.0,
        avg_team_damage_share=rounded(damage_share.mean),
        total_kills=kills,
        total_deaths=deaths,
        total_assists=assists,
        total_vision_score=vision,
    )

    profile = Profile(
        recent_winrate=RecentWinrate(matches=len(matches), wins=wins),
        summoner_level=summoner.summoner_level if summoner else None,
        profile_icon_id=summoner.profile_icon_id if summoner else None,
        rank=summoner.to_dict()['rank'] if summoner else {},
    )

    return PlayerSummary(
        game_name=game_name,
        tag_line=tag_line,
        region=region.friendly,
        puuid=puuid,
        profile=profile,
        top_champions=top_champions,
        roles=roles,
        frequent_teammates=frequent_teammates,
        playstyle=playstyle,
        meta=SummaryMeta(
            sample_size=len(matches),
            generated_at=generated_at if generated_at is not None else int(time.time() * 1000),
            queue_filter=tuple(QueueType.ranked_queue_ids()),
        ),
    )