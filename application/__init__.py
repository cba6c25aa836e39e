"""Application layer - Services and use cases."""
from .services import JobManager, JobProcessor, JobRunner, InsightsService
from .use_cases import (
    GetDuoSummaryUseCase,
    GetJobResultUseCase,
    GetJobStatusUseCase,
    StartAnalysisUseCase,
)

__all__ = [
    'JobManager',
    'JobProcessor',
    'JobRunner',
    'InsightsService',
    'StartAnalysisUseCase',
    'GetJobStatusUseCase',
    'GetJobResultUseCase',
    'GetDuoSummaryUseCase',
]
