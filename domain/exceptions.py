"""Domain exceptions.

Everything raised on purpose by this package derives from DuoInsightsError so
callers at the edges (CLI, use cases) can tell expected failures from bugs.
"""
from typing import Any, Optional


class DuoInsightsError(Exception):
    """Base class for expected failures."""


class ValidationError(DuoInsightsError):
    """Caller input rejected before any job is created."""


class UnsupportedRegionError(ValidationError):
    def __init__(self, region: str) -> None:
        super().__init__(f"Unsupported region '{region}'")
        self.region = region


class RiotAPIError(DuoInsightsError):
    """Non-retryable HTTP status from the Riot API (any 4xx other than 429)."""

    def __init__(self, status_code: int, body: Any = None, url: Optional[str] = None) -> None:
        super().__init__(f"Riot request failed ({status_code})")
        self.status_code = status_code
        self.body = body
        self.url = url

    @property
    def code(self) -> str:
        return f"RIOT_{self.status_code}"

    @property
    def not_found(self) -> bool:
        return self.status_code == 404


class RetriesExhaustedError(DuoInsightsError):
    """Every attempt hit 429, 5xx or a transport failure."""

    def __init__(self, attempts: int, last_status: Optional[int] = None) -> None:
        detail = f"last status {last_status}" if last_status is not None else "network failure"
        super().__init__(f"Exhausted retries after {attempts} attempts ({detail})")
        self.attempts = attempts
        self.last_status = last_status


class JobNotFoundError(DuoInsightsError):
    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job {job_id} not found")
        self.job_id = job_id


class JobNotCompleteError(DuoInsightsError):
    def __init__(self, job_id: str, status: str) -> None:
        super().__init__(f"Job {job_id} is not complete (status={status})")
        self.job_id = job_id
        self.status = status


class InvalidJobTransitionError(DuoInsightsError):
    def __init__(self, job_id: str, current: str, target: str) -> None:
        super().__init__(f"Job {job_id} cannot move from {current} to {target}")
        self.job_id = job_id
        self.current = current
        self.target = target


class NoCachedDataError(DuoInsightsError):
    """No completed analysis exists to answer a duo query."""

    def __init__(self, puuid: str, region: str) -> None:
        super().__init__(f"No recent data for player {puuid[:8]}... in {region}. Fetch the player first.")
        self.puuid = puuid
        self.region = region
