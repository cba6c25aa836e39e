"""Duo synergy profile built from the matches two players shared a team in."""
import time
from collections import Counter
from typing import List, Optional

from core.logging import traceable
from domain.entities import (
    BLUE_SIDE,
    DuoSummary,
    GameTexture,
    Match,
    PairStat,
    PatchStat,
    QueueStat,
    Synergy,
)
from domain.enums import QueueType, Region
from .stats import LOW_SAMPLE_THRESHOLD, MeanAccumulator, pair_key, ranked, rounded

TOP_CHAMPION_PAIRS = 10
NO_SHARED_MATCHES = "No matches found playing together"


def duo_matches(matches: List[Match], puuid_a: str, puuid_b: str) -> List[Match]:
    """Matches where both players appear on the same team."""
    shared = []
    for match in matches:
        a = match.participant_for(puuid_a)
        b = match.participant_for(puuid_b)
        if a is not None and b is not None and a.team_id == b.team_id:
            shared.append(match)
    return shared


@traceable
def build_duo_summary(
    matches: List[Match],
    puuid_a: str,
    puuid_b: str,
    region: Region,
    generated_at: Optional[int] = None,
) -> DuoSummary:
    """Aggregate the shared-team subset of ``matches``; wins follow player A."""
    generated_at = generated_at if generated_at is not None else int(time.time() * 1000)
    queue_filter = tuple(QueueType.ranked_queue_ids())
    shared = duo_matches(matches, puuid_a, puuid_b)

    if not shared:
        return DuoSummary(
            puuid_a=puuid_a,
            puuid_b=puuid_b,
            region=region.friendly,
            sample_size=0,
            wins=0,
            low_sample=True,
            generated_at=generated_at,
            queue_filter=queue_filter,
            message=NO_SHARED_MATCHES,
        )

    wins = 0
    queue_games: Counter = Counter()
    queue_wins: Counter = Counter()
    role_games: Counter = Counter()
    role_wins: Counter = Counter()
    champ_games: Counter = Counter()
    champ_wins: Counter = Counter()
    patch_games: Counter = Counter()
    patch_wins: Counter = Counter()

    combined_ka = 0
    duration_s = 0
    blue = red = 0
    vision_a = vision_b = 0
    kp_a, kp_b = MeanAccumulator(), MeanAccumulator()
    dmg_a, dmg_b = MeanAccumulator(), MeanAccumulator()

    for match in shared:
        a = match.participant_for(puuid_a)
        b = match.participant_for(puuid_b)
        won = a.win

        role = pair_key(a.team_position.value, b.team_position.value)
        champs = pair_key(a.champion_name, b.champion_name)
        patch = match.patch_version

        queue_games[match.queue_id] += 1
        role_games[role] += 1
        champ_games[champs] += 1
        if patch:
            patch_games[patch] += 1
        if won:
            wins += 1
            queue_wins[match.queue_id] += 1
            role_wins[role] += 1
            champ_wins[champs] += 1
            if patch:
                patch_wins[patch] += 1

        combined_ka += a.kills + a.assists + b.kills + b.assists
        vision_a += a.vision_score
        vision_b += b.vision_score
        kp_a.add(a.kill_participation)
        kp_b.add(b.kill_participation)
        dmg_a.add(a.team_damage_percentage)
        dmg_b.add(b.team_damage_percentage)

        duration_s += match.game_duration
        if a.team_id == BLUE_SIDE:
            blue += 1
        else:
            red += 1

    sample = len(shared)

    synergy = Synergy(
        avg_combined_ka=round(combined_ka / sample, 1),
        avg_kill_participation_a=rounded(kp_a.mean),
        avg_kill_participation_b=rounded(kp_b.mean),
        avg_team_damage_pct_a=rounded(dmg_a.mean),
        avg_team_damage_pct_b=rounded(dmg_b.mean),
        avg_vision_score_a=round(vision_a / sample, 1),
        avg_vision_score_b=round(vision_b / sample, 1),
    )

    texture = GameTexture(
        avg_game_duration_min=round(duration_s / sample / 60, 1),
        blue_side_games=blue,
        red_side_games=red,
        by_patch=tuple(PatchStat(patch=p, games=g, wins=w) for p, g, w in ranked(patch_games, patch_wins)),
    )

    return DuoSummary(
        puuid_a=puuid_a,
        puuid_b=puuid_b,
        region=region.friendly,
        sample_size=sample,
        wins=wins,
        low_sample=sample < LOW_SAMPLE_THRESHOLD,
        generated_at=generated_at,
        queue_filter=queue_filter,
        queue_breakdown=tuple(
            QueueStat(queue_id=q, games=queue_games[q], wins=queue_wins[q]) for q in sorted(queue_games)
        ),
        role_pairs=tuple(PairStat(pair=k, games=g, wins=w) for k, g, w in ranked(role_games, role_wins)),
        champion_pairs_top=tuple(
            PairStat(pair=k, games=g, wins=w) for k, g, w in ranked(champ_games, champ_wins, TOP_CHAMPION_PAIRS)
        ),
        synergy=synergy,
        game_texture=texture,
    )