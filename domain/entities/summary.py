"""Derived summaries: the individual profile and the duo synergy profile.

Both are immutable snapshots built by the aggregators and serialised with
``to_dict`` before they are persisted or handed to the insights generator.
Optional averages stay ``None`` when no match supplied the underlying field.
"""
from dataclasses import dataclass, field
from typing import Optional

Pair = tuple[str, str]


# ── Player ──────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RecentWinrate:
    matches: int
    wins: int

    def to_dict(self) -> dict:
        return {'matches': self.matches, 'wins': self.wins}


@dataclass(frozen=True)
class Profile:
    recent_winrate: RecentWinrate
    summoner_level: Optional[int] = None
    profile_icon_id: Optional[int] = None
    rank: dict[str, dict] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            'summoner_level': self.summoner_level,
            'profile_icon_id': self.profile_icon_id,
            'rank': self.rank,
            'recent_winrate': self.recent_winrate.to_dict(),
        }


@dataclass(frozen=True)
class ChampionStat:
    champion: str
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'champion': self.champion, 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class RoleStat:
    role: str
    games: int

    def to_dict(self) -> dict:
        return {'role': self.role, 'games': self.games}


@dataclass(frozen=True)
class Teammate:
    puuid: str
    summoner_name: str
    tag_line: str
    games_together: int
    wins_together: int
    last_played_at: int
    top_role_pairs: tuple[Pair, ...] = ()
    top_champion_pairs: tuple[Pair, ...] = ()

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'summoner_name': self.summoner_name,
            'tag_line': self.tag_line,
            'games_together': self.games_together,
            'wins_together': self.wins_together,
            'last_played_at': self.last_played_at,
            'top_role_pairs': [list(p) for p in self.top_role_pairs],
            'top_champion_pairs': [list(p) for p in self.top_champion_pairs],
        }


@dataclass(frozen=True)
class Playstyle:
    avg_kda: float
    avg_kill_participation: Optional[float]
    avg_vision_score: float
    avg_team_damage_share: Optional[float]
    total_kills: int
    total_deaths: int
    total_assists: int
    total_vision_score: int

    def to_dict(self) -> dict:
        return {
            'avg_kda': self.avg_kda,
            'avg_kill_participation': self.avg_kill_participation,
            'avg_vision_score': self.avg_vision_score,
            'avg_team_damage_share': self.avg_team_damage_share,
            'totals': {
                'kills': self.total_kills,
                'deaths': self.total_deaths,
                'assists': self.total_assists,
                'vision_score': self.total_vision_score,
            },
        }


@dataclass(frozen=True)
class SummaryMeta:
    sample_size: int
    generated_at: int
    queue_filter: tuple[int, ...]

    def to_dict(self) -> dict:
        return {
            'sample_size': self.sample_size,
            'generated_at': self.generated_at,
            'queue_filter': list(self.queue_filter),
        }


@dataclass(frozen=True)
class PlayerSummary:
    game_name: str
    tag_line: str
    region: str
    puuid: str
    profile: Profile
    top_champions: tuple[ChampionStat, ...]
    roles: tuple[RoleStat, ...]
    frequent_teammates: tuple[Teammate, ...]
    playstyle: Playstyle
    meta: SummaryMeta

    def to_dict(self) -> dict:
        return {
            'riot_id': {'game_name': self.game_name, 'tag_line': self.tag_line},
            'region': self.region,
            'puuid': self.puuid,
            'profile': self.profile.to_dict(),
            'top_champions': [c.to_dict() for c in self.top_champions],
            'roles': [r.to_dict() for r in self.roles],
            'frequent_teammates': [t.to_dict() for t in self.frequent_teammates],
            'playstyle': self.playstyle.to_dict(),
            'meta': self.meta.to_dict(),
        }


# ── Duo ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class QueueStat:
    queue_id: int
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'queue_id': self.queue_id, 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class PairStat:
    pair: Pair
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'pair': list(self.pair), 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class PatchStat:
    patch: str
    games: int
    wins: int

    def to_dict(self) -> dict:
        return {'patch': self.patch, 'games': self.games, 'wins': self.wins}


@dataclass(frozen=True)
class Synergy:
    avg_combined_ka: float
    avg_kill_participation_a: Optional[float]
    avg_kill_participation_b: Optional[float]
    avg_team_damage_pct_a: Optional[float]
    avg_team_damage_pct_b: Optional[float]
    avg_vision_score_a: float
    avg_vision_score_b: float

    def to_dict(self) -> dict:
        return {
            'avg_combined_ka': self.avg_combined_ka,
            'avg_kill_participation_a': self.avg_kill_participation_a,
            'avg_kill_participation_b': self.avg_kill_participation_b,
            'avg_team_damage_pct_a': self.avg_team_damage_pct_a,
            'avg_team_damage_pct_b': self.avg_team_damage_pct_b,
            'avg_vision_score_a': self.avg_vision_score_a,
            'avg_vision_score_b': self.avg_vision_score_b,
        }


@dataclass(frozen=True)
class GameTexture:
    avg_game_duration_min: float
    blue_side_games: int
    red_side_games: int
    by_patch: tuple[PatchStat, ...] = ()

    def to_dict(self) -> dict:
        return {
            'avg_game_duration_min': self.avg_game_duration_min,
            'side_preference': {'blue': self.blue_side_games, 'red': self.red_side_games},
            'by_patch': [p.to_dict() for p in self.by_patch],
        }


@dataclass(frozen=True)
class DuoSummary:
    puuid_a: str
    puuid_b: str
    region: str
    sample_size: int
    wins: int
    low_sample: bool
    generated_at: int
    queue_filter: tuple[int, ...]
    queue_breakdown: tuple[QueueStat, ...] = ()
    role_pairs: tuple[PairStat, ...] = ()
    champion_pairs_top: tuple[PairStat, ...] = ()
    synergy: Optional[Synergy] = None
    game_texture: Optional[GameTexture] = None
    message: Optional[str] = None

    @property
    def losses(self) -> int:
        return self.sample_size - self.wins

    def to_dict(self) -> dict:
        return {
            'duo_key': {'puuid_a': self.puuid_a, 'puuid_b': self.puuid_b, 'region': self.region},
            'sample_size': self.sample_size,
            'wins': self.wins,
            'queue_breakdown': {str(q.queue_id): {'games': q.games, 'wins': q.wins} for q in self.queue_breakdown},
            'role_pairs': [p.to_dict() for p in self.role_pairs],
            'champion_pairs_top': [p.to_dict() for p in self.champion_pairs_top],
            'synergy': self.synergy.to_dict() if self.synergy else None,
            'game_texture': self.game_texture.to_dict() if self.game_texture else None,
            'low_sample': self.low_sample,
            'message': self.message,
            'meta': {'queue_filter': list(self.queue_filter), 'generated_at': self.generated_at},
        }
