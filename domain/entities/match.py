"""Match entity representing a complete match."""
from dataclasses import dataclass, field
from typing import Optional
from .participant import Participant
from ..enums import QueueType

BLUE_SIDE = 100


@dataclass(frozen=True)
class Match:
    """A completed game as returned by match-v5, reduced to what the summaries read."""

    match_id: str
    queue_id: int

    # Timing
    game_creation: int       # Unix timestamp milliseconds
    game_end_timestamp: int  # Unix timestamp milliseconds
    game_duration: int       # Seconds

    game_version: str

    participants: tuple[Participant, ...] = field(default_factory=tuple)

    @property
    def game_duration_minutes(self) -> float:
        return self.game_duration / 60.0

    @property
    def patch_version(self) -> str:
        """Major.minor part of the game version (``14.3.555.1234`` → ``14.3``)."""
        parts = self.game_version.split('.')
        if len(parts) >= 2:
            return f"{parts[0]}.{parts[1]}"
        return self.game_version

    @property
    def is_ranked(self) -> bool:
        return QueueType.is_ranked(self.queue_id)

    @property
    def played_at(self) -> int:
        """Best available timestamp for "when was this played"."""
        return self.game_creation or self.game_end_timestamp or 0

    def participant_for(self, puuid: str) -> Optional[Participant]:
        return next((p for p in self.participants if p.puuid == puuid), None)

    def teammates_of(self, puuid: str) -> list[Participant]:
        """Same-team participants excluding ``puuid`` itself."""
        player = self.participant_for(puuid)
        if player is None:
            return []
        return [p for p in self.participants if p.team_id == player.team_id and p.puuid != puuid]
