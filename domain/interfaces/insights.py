"""Text-generation collaborator interface."""
from abc import ABC, abstractmethod
from typing import Optional


class IInsightsGenerator(ABC):
    """Produces free-form coaching text from a serialised summary."""

    @abstractmethod
    async def player_insights(self, summary: dict) -> str:
        pass

    @abstractmethod
    async def duo_insights(self, summary: dict, names: Optional[dict[str, str]] = None) -> str:
        pass
