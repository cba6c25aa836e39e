"""Job entity tracking one asynchronous player analysis."""
from dataclasses import dataclass
from typing import Any, Optional
from ..enums import JobStatus, Region


@dataclass(frozen=True)
class JobParams:
    """What the caller asked for."""

    game_name: str
    tag_line: str
    region: Region
    limit: int

    def to_dict(self) -> dict:
        return {
            'game_name': self.game_name,
            'tag_line': self.tag_line,
            'region': self.region.value,
            'limit': self.limit,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'JobParams':
        return cls(
            game_name=data['game_name'],
            tag_line=data['tag_line'],
            region=Region(data['region']),
            limit=int(data['limit']),
        )


@dataclass(frozen=True)
class JobResult:
    """Output of a completed job: the summary plus a handle to the raw matches."""

    puuid: str
    summary: dict[str, Any]
    matches_key: str
    match_count: int
    fetched_count: int = 0
    failed_fetches: int = 0

    def to_dict(self) -> dict:
        return {
            'puuid': self.puuid,
            'summary': self.summary,
            'matches_key': self.matches_key,
            'match_count': self.match_count,
            'fetched_count': self.fetched_count,
            'failed_fetches': self.failed_fetches,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'JobResult':
        return cls(
            puuid=data['puuid'],
            summary=data.get('summary') or {},
            matches_key=data['matches_key'],
            match_count=int(data.get('match_count', 0)),
            fetched_count=int(data.get('fetched_count', 0)),
            failed_fetches=int(data.get('failed_fetches', 0)),
        )


@dataclass(frozen=True)
class Job:
    """A persisted job record. Timestamps are Unix milliseconds."""

    id: str
    status: JobStatus
    params: JobParams
    created_at: int
    updated_at: int
    progress: int = 0
    progress_message: Optional[str] = None
    result: Optional[JobResult] = None
    error: Optional[str] = None
    started_at: Optional[int] = None
    completed_at: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'status': self.status.value,
            'params': self.params.to_dict(),
            'progress': self.progress,
            'progress_message': self.progress_message,
            'result': self.result.to_dict() if self.result else None,
            'error': self.error,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
            'started_at': self.started_at,
            'completed_at': self.completed_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Job':
        result = data.get('result')
        return cls(
            id=data['id'],
            status=JobStatus(data['status']),
            params=JobParams.from_dict(data['params']),
            progress=int(data.get('progress') or 0),
            progress_message=data.get('progress_message'),
            result=JobResult.from_dict(result) if result else None,
            error=data.get('error'),
            created_at=int(data['created_at']),
            updated_at=int(data['updated_at']),
            started_at=data.get('started_at'),
            completed_at=data.get('completed_at'),
        )
