"""Free-text coaching insights behind a feature flag."""
import logging
from typing import Optional, Union

from config import settings
from domain.entities import DuoSummary, PlayerSummary
from domain.interfaces import IInsightsGenerator

logger = logging.getLogger(__name__)

INSIGHTS_DISABLED = "AI insights are disabled in this environment."


class InsightsService:
    """
    Forwards summaries to an ``IInsightsGenerator``.

    With ``ENABLE_INSIGHTS`` off, or no generator configured, every call
    returns ``INSIGHTS_DISABLED`` without touching the generator.
    """

    def __init__(self, generator: Optional[IInsightsGenerator] = None, enabled: Optional[bool] = None):
        self.generator = generator
        self._enabled = settings.ENABLE_INSIGHTS if enabled is None else enabled

    @property
    def enabled(self) -> bool:
        return self._enabled and self.generator is not None

    async def player_insights(self, summary: Union[PlayerSummary, dict]) -> str:
        if not self.enabled:
            return INSIGHTS_DISABLED
        data = summary.to_dict() if isinstance(summary, PlayerSummary) else summary
        logger.debug(f"Requesting player insights for {data.get('puuid', '?')[:8]}...")
        return await self.generator.player_insights(data)

    async def duo_insights(self, summary: Union[DuoSummary, dict], names: Optional[dict[str, str]] = None) -> str:
        if not self.enabled:
            return INSIGHTS_DISABLED
        data = summary.to_dict() if isinstance(summary, DuoSummary) else summary
        return await self.generator.duo_insights(data, names)
