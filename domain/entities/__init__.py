"""Domain entities."""
from .participant import Participant
from .match import Match, BLUE_SIDE
from .summoner import Account, LeagueEntry, Summoner
from .job import Job, JobParams, JobResult
from .summary import (
    ChampionStat,
    DuoSummary,
    GameTexture,
    PairStat,
    PatchStat,
    PlayerSummary,
    Playstyle,
    Profile,
    QueueStat,
    RecentWinrate,
    RoleStat,
    SummaryMeta,
    Synergy,
    Teammate,
)

__all__ = [
    'Participant',
    'Match',
    'BLUE_SIDE',
    'Account',
    'LeagueEntry',
    'Summoner',
    'Job',
    'JobParams',
    'JobResult',
    'ChampionStat',
    'DuoSummary',
    'GameTexture',
    'PairStat',
    'PatchStat',
    'PlayerSummary',
    'Playstyle',
    'Profile',
    'QueueStat',
    'RecentWinrate',
    'RoleStat',
    'SummaryMeta',
    'Synergy',
    'Teammate',
]
