"""Job status enumeration."""
from enum import Enum


class JobStatus(Enum):
    """Lifecycle of an analysis job: queued → running → complete | error."""

    QUEUED = "queued"
    RUNNING = "running"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.COMPLETE, JobStatus.ERROR)

    def can_transition_to(self, target: 'JobStatus') -> bool:
        return target in _ALLOWED[self]


_ALLOWED = {
    JobStatus.QUEUED: {JobStatus.RUNNING},
    JobStatus.RUNNING: {JobStatus.COMPLETE, JobStatus.ERROR},
    JobStatus.COMPLETE: set(),
    JobStatus.ERROR: set(),
}
