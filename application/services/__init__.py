"""Application services root exports."""
from .job_manager import JobManager
from .job_processor import JobProcessor
from .job_runner import JobRunner
from .insights import INSIGHTS_DISABLED, InsightsService
from .player_aggregator import build_player_summary
from .duo_aggregator import build_duo_summary

__all__ = [
    "JobManager",
    "JobProcessor",
    "JobRunner",
    "InsightsService",
    "INSIGHTS_DISABLED",
    "build_player_summary",
    "build_duo_summary",
]
