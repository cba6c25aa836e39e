"""Presentation CLI exports."""
from .analyze_command import AnalyzeCommand
from .duo_command import DuoCommand
from .jobs_command import JobsCommand

__all__ = [
    "AnalyzeCommand",
    "DuoCommand",
    "JobsCommand",
]
