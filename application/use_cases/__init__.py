"""Application use cases."""
from .analyze_player import GetJobResultUseCase, GetJobStatusUseCase, StartAnalysisUseCase
from .duo_summary import GetDuoSummaryUseCase

__all__ = [
    'StartAnalysisUseCase',
    'GetJobStatusUseCase',
    'GetJobResultUseCase',
    'GetDuoSummaryUseCase',
]
