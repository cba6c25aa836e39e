"""Presentation layer - User interfaces."""
from .cli import AnalyzeCommand, DuoCommand, JobsCommand

__all__ = [
    "AnalyzeCommand",
    "DuoCommand",
    "JobsCommand",
]
